import pytest

from number_converter import create_app


@pytest.fixture
def app():
    """Fresh application with its own converter state."""
    return create_app({"TESTING": True, "DEFAULT_BIT_WIDTH": 8, "DEFAULT_MODE": "dec"})


@pytest.fixture
def client(app):
    return app.test_client()
