"""
Jsxify utilities shared across the package.

Contains functions used by multiple modules to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from datetime import MAXYEAR, MINYEAR, date, datetime, timezone
from decimal import Decimal
from typing import Any

# Leap years repeat every 400 years, so shifting by a cycle keeps month and day valid
_GREGORIAN_CYCLE = 400


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the class name of an object or a class.

    Returns class name whether given an instance or the class itself.
    For example, both `class_name(10)` and `class_name(int)` return 'int'.

    Parameters:
        obj (Any): An object or a class.
        fully_qualified (bool): If true, returns the fully qualified name for non-builtin classes.

    Returns:
        str: The class name.

    Examples:
        >>> class_name(10)
        'int'

        >>> class C: ...
        >>> class_name(C())
        'C'
    """
    cls = obj if isinstance(obj, type) else obj.__class__

    if fully_qualified and cls.__module__ != "builtins":
        return cls.__module__ + "." + cls.__name__
    return cls.__name__


def safe_str(obj: Any) -> str:
    """
    Defensive str() call - handle broken __str__ methods gracefully
    """
    try:
        return str(obj)
    except Exception as e:
        # Fallback for broken __str__: show type and exception info
        return f"<{class_name(obj)} object (str failed: {class_name(e)})>"


def spacer(times: int, tab_stop: int) -> str:
    """Return the indentation for the given nesting level."""
    if times <= 0:
        return ""
    return " " * (times * tab_stop)


def is_number(obj: Any) -> bool:
    """Check for numeric values rendered as numbers (bool excluded)."""
    return isinstance(obj, (int, float, Decimal)) and not isinstance(obj, bool)


def number_literal(number: int | float | Decimal) -> str:
    """
    Return the source literal of a number.

    NaN and infinities use their JavaScript spelling. Finite numbers keep the Python spelling
    from str(), so 1.0, 1e-05 and Decimal("1E+2") render unchanged.

    Examples:
        >>> number_literal(float("-inf"))
        '-Infinity'
        >>> number_literal(2.5)
        '2.5'
        >>> number_literal(1e16)
        '1e+16'
    """
    if isinstance(number, Decimal):
        if number.is_nan():
            return "NaN"
        if number.is_infinite():
            return "-Infinity" if number.is_signed() else "Infinity"
    elif isinstance(number, float):
        if math.isnan(number):
            return "NaN"
        if math.isinf(number):
            return "-Infinity" if number < 0 else "Infinity"
    try:
        return str(number)
    except ValueError:
        # int past the interpreter limit for decimal conversion
        return safe_str(number)


def is_invalid_date(value: date) -> bool:
    """Check for not-a-time values, which compare unequal to themselves."""
    try:
        return bool(value != value)
    except Exception:
        return True


def iso_string(value: date) -> str:
    """
    Return value as a UTC ISO-8601 timestamp with millisecond precision.

    Naive datetimes are taken as UTC, plain dates as UTC midnight. Aware datetimes whose
    UTC time falls outside the datetime range still convert: years past 9999 use the
    signed six-digit form.

    Examples:
        >>> iso_string(date(1970, 1, 1))
        '1970-01-01T00:00:00.000Z'

        >>> iso_string(datetime.max.replace(tzinfo=timezone(timedelta(hours=-5))))
        '+010000-01-01T04:59:59.999Z'
    """
    shift = 0
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        else:
            if value.year == MINYEAR:
                shift = _GREGORIAN_CYCLE
            elif value.year == MAXYEAR:
                shift = -_GREGORIAN_CYCLE
            value = value.replace(year=value.year + shift).astimezone(timezone.utc)
    else:
        value = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    year = value.year - shift
    year_text = f"{year:04d}" if 0 <= year <= 9999 else f"{year:+07d}"
    return (
        f"{year_text}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f".{value.microsecond // 1000:03d}Z"
    )
