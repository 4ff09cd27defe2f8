"""Tests for declared dependencies."""

import re
from pathlib import Path

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def _declared():
    text = PYPROJECT.read_text()
    block = re.search(r"^dependencies = \[(.*?)\]", text, re.S | re.M).group(1)
    return {re.match(r"[A-Za-z0-9_.-]+", d.strip().strip('"')).group(0).lower()
            for d in block.split(",") if d.strip()}


class TestDependencies:
    """Every third-party import is declared in pyproject.toml."""

    def test_runtime_imports_declared(self):
        assert {"flask", "flask-cors", "pydantic", "werkzeug"} <= _declared()
