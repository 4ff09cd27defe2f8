"""
Request body models for the JSON API.

Raw JSON fields are coerced here so that the state and converter only ever
see plain str/int values.
"""

import math
import re
from typing import Literal, Optional

from pydantic import BaseModel, field_validator

Mode = Literal["dec", "hex", "bin"]

LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


class NumberPayload(BaseModel):
    """Body of POST /api/number."""

    value: str
    mode: Optional[str] = None

    @field_validator("value", mode="before")
    @classmethod
    def stringify_value(cls, v):
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        if isinstance(v, (int, float)):
            return str(v)
        if isinstance(v, str):
            return v
        raise ValueError("value must be a string or a number")

    @field_validator("mode", mode="before")
    @classmethod
    def stringify_mode(cls, v):
        # Falsy modes fall back to the current one; any other non-string
        # becomes a name no mode matches, which parses as decimal.
        if isinstance(v, str) or v is None:
            return v
        if v is False or (isinstance(v, (int, float)) and v == 0):
            return None
        return repr(v)


class ModePayload(BaseModel):
    """Body of POST /api/mode."""

    mode: Mode


class BitWidthPayload(BaseModel):
    """Body of POST /api/bitwidth. Only the leading integer is read."""

    width: int

    @field_validator("width", mode="before")
    @classmethod
    def leading_integer(cls, v):
        if isinstance(v, bool):
            raise ValueError("width must be a number")
        if isinstance(v, int):
            return v
        if isinstance(v, float):
            if not math.isfinite(v):
                raise ValueError("width must be finite")
            return int(v)
        if isinstance(v, str):
            match = LEADING_INT_RE.match(v)
            if match:
                return int(match.group(1))
        raise ValueError("width must be an integer")
