"""
Value normalization for script operands.

- Timestamps are written as integer epoch milliseconds; naive datetimes
  are read as UTC and plain dates as midnight UTC.
- Equality values are rendered as Groovy literals without being changed.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from math import isfinite
from typing import Any

from gremlin_script.core.exceptions import ErrorKind, GremlinScriptError

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def _unsupported(value: Any, target: str) -> GremlinScriptError:
    return GremlinScriptError(
        ErrorKind.UNSUPPORTED_VALUE,
        f"Unsupported {target} value of type {type(value).__name__}",
        detail={"value_type": type(value).__name__, "target": target},
    )


def time_to_milliseconds(value: Any) -> int:
    """Convert a date-like or already numeric value to epoch milliseconds.

    Args:
        value: datetime, date, int or whole-number float (milliseconds)

    Returns:
        Milliseconds since the Unix epoch

    Raises:
        GremlinScriptError: UNSUPPORTED_VALUE for any other type
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return (value - _EPOCH) // _ONE_MILLISECOND
    if isinstance(value, date):
        return time_to_milliseconds(datetime.combine(value, time(), tzinfo=timezone.utc))
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise _unsupported(value, "time")


def to_primitive_long(value: Any) -> int:
    """Convert a range bound to a primitive integer.

    Accepts anything ``time_to_milliseconds`` accepts.
    """
    if isinstance(value, bool):
        raise _unsupported(value, "long")
    if isinstance(value, (int, date)) or (isinstance(value, float) and value.is_integer()):
        return time_to_milliseconds(value)
    raise _unsupported(value, "long")


_ESCAPES = {
    ord("\\"): "\\\\",
    ord("'"): "\\'",
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
    ord("\b"): "\\b",
    ord("\f"): "\\f",
}
# Remaining C0 controls and DEL have no short escape
for _code in [*range(0x20), 0x7F]:
    _ESCAPES.setdefault(_code, f"\\u{_code:04x}")


def quote(text: str) -> str:
    """Render a string as a single-quoted Groovy literal."""
    return f"'{text.translate(_ESCAPES)}'"


def to_literal(value: Any) -> str:
    """Render an equality operand as a script literal.

    Args:
        value: str, bool, int, float, datetime or date

    Returns:
        Literal text, e.g. ``'Alice'``, ``true``, ``42``

    Raises:
        GremlinScriptError: UNSUPPORTED_VALUE for None and other types
    """
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return quote(value)
    if isinstance(value, int) or (isinstance(value, float) and isfinite(value)):
        return repr(value)
    if isinstance(value, date):
        return str(time_to_milliseconds(value))
    raise _unsupported(value, "literal")

