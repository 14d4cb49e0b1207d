"""Numeric codec for Alertmanager annotations.

Alertmanager stringifies every annotation value, so a component id of 5
arrives as ``"5"``. ``NumericString`` parses it back at the model boundary.
"""

from __future__ import annotations

import re
from typing import Annotated

from pydantic import BeforeValidator

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_numeric(value: object) -> int:
    """Parse an annotation that carries an integer, usually as a string.

    Accepts real ints (but not bools) and strings holding an optionally
    signed decimal integer. Raises ValueError for anything else.
    """
    if isinstance(value, bool):
        raise ValueError("expected a numeric string, got a boolean")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_RE.fullmatch(value):
        return int(value)
    raise ValueError(f"expected a numeric string, got {value!r}")


NumericString = Annotated[int, BeforeValidator(parse_numeric)]
