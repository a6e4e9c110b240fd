"""
Conversion of loosely typed interval values into ``timedelta``.

Accepted forms: ``timedelta``, int/float seconds, ISO-8601 durations
(``"PT1M30S"``), clock strings (``"01:30:00"``) and short phrases such as
``"10s"``, ``"5 minutes"`` or ``"1 hour 30 minutes"``. Zero is reported as
``None`` so callers can treat it as "not set".
"""

import re
from datetime import timedelta
from typing import Dict, Optional, Union

from pydantic import TypeAdapter, ValidationError

from ..exceptions import InvalidOptionError

Interval = Union[timedelta, int, float, str]

_ADAPTER = TypeAdapter(timedelta)

_UNITS = {
    "ms": "milliseconds",
    "millisecond": "milliseconds",
    "milliseconds": "milliseconds",
    "": "seconds",
    "s": "seconds",
    "sec": "seconds",
    "secs": "seconds",
    "second": "seconds",
    "seconds": "seconds",
    "m": "minutes",
    "min": "minutes",
    "mins": "minutes",
    "minute": "minutes",
    "minutes": "minutes",
    "h": "hours",
    "hr": "hours",
    "hrs": "hours",
    "hour": "hours",
    "hours": "hours",
    "d": "days",
    "day": "days",
    "days": "days",
    "w": "weeks",
    "week": "weeks",
    "weeks": "weeks",
}

# One "<amount> <unit>" token; every match consumes at least one digit
_TOKEN = re.compile(r"\s*(\d+(?:\.\d+)?)\s*([a-z]*)\s*")


def _parse_phrase(text: str) -> Optional[Dict[str, float]]:
    """Split a phrase into timedelta keyword arguments, None if it is not one."""
    if not text:
        return None
    parts: Dict[str, float] = {}
    pos = 0
    while pos < len(text):
        match = _TOKEN.match(text, pos)
        if match is None:
            return None
        amount, unit = match.groups()
        key = _UNITS.get(unit)
        if key is None:
            return None
        parts[key] = parts.get(key, 0.0) + float(amount)
        pos = match.end()
    return parts


def to_timedelta(value: Optional[Interval], name: str = "interval") -> Optional[timedelta]:
    """
    Convert ``value`` to a ``timedelta``.

    Args:
        value: The interval in any of the accepted forms, or None
        name: Option name used in error messages

    Returns:
        The interval, or None when ``value`` is None or zero

    Raises:
        InvalidOptionError: If the value cannot be parsed or is negative
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidOptionError(f"{name} must be an interval, got {value!r}")

    parts = _parse_phrase(value.strip().lower()) if isinstance(value, str) else None
    try:
        if parts is not None:
            result = timedelta(**parts)
        else:
            result = _ADAPTER.validate_python(value)
    except (ValidationError, OverflowError) as e:
        raise InvalidOptionError(f"{name} is not a valid interval: {value!r}") from e

    if result < timedelta(0):
        raise InvalidOptionError(f"{name} must not be negative, got {value!r}")
    return result or None
