"""
Object literal stringification for dicts and lists found in prop values.

Produces JavaScript object-literal text, tab-indented, with sorted keys:

    >>> print(stringify({"b": [1, 2], "a": "x"}))
    {
    	a: 'x',
    	b: [
    		1,
    		2
    	]
    }

Containers already being stringified on the current path render as "[Circular]".
"""

# Standard library -----------------------------------------------------------------------------------------------------

import re
from datetime import date
from typing import Any, Callable

# Third-party ----------------------------------------------------------------------------------------------------------

import structlog

# Local ----------------------------------------------------------------------------------------------------------------

from .elements import is_array, is_plain_object
from .sentinels import UNDEFINED, Symbol
from .utils import is_invalid_date, is_number, iso_string, number_literal, safe_str

logger = structlog.get_logger(__name__)

CIRCULAR = '"[Circular]"'

Transform = Callable[[Any], str | None]

_IDENTIFIER = re.compile(r"[a-z$_][$\w]*", re.IGNORECASE)


# Methods --------------------------------------------------------------------------------------------------------------


def stringify(
    value: Any,
    *,
    transform: Transform | None = None,
    indent: str = "\t",
    sort_keys: bool = True,
) -> str:
    """
    Stringify value as an object literal.

    Args:
        value: Any value; dicts and lists/tuples are expanded recursively.
        transform: Hook called for every nested value. A str result replaces the
            default rendering, None keeps it.
        indent: Indentation unit for nested lines.
        sort_keys: Sort dict keys by their string form.

    Returns:
        Multi-line object literal text.
    """
    return _stringify(value, transform, indent, sort_keys, level=0, path=set())


def quote(text: str) -> str:
    """Single-quote text, escaping backslashes, quotes and line breaks."""
    escaped = (
        text.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f"'{escaped}'"


# Private Methods ------------------------------------------------------------------------------------------------------


def _stringify(
    value: Any,
    transform: Transform | None,
    indent: str,
    sort_keys: bool,
    level: int,
    path: set[int],
) -> str:
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        return number_literal(value)
    if isinstance(value, str):
        return quote(value)
    if isinstance(value, Symbol):
        return str(value)
    if isinstance(value, date):
        if is_invalid_date(value):
            return "new Date(NaN)"
        return f"new Date('{iso_string(value)}')"

    if not (is_plain_object(value) or is_array(value)):
        return safe_str(value)

    if id(value) in path:
        logger.debug("Circular reference in prop value.", value_type=type(value).__name__)
        return CIRCULAR

    if len(value) == 0:
        return "{}" if is_plain_object(value) else "[]"

    if is_plain_object(value):
        items = list(value.items())
        if sort_keys:
            items.sort(key=lambda item: safe_str(item[0]))
        entries = [(_key(k), v) for k, v in items]
        open_, close = "{", "}"
    else:
        entries = [(None, v) for v in value]
        open_, close = "[", "]"

    path.add(id(value))
    try:
        lines = []
        for key, item in entries:
            rendered = transform(item) if transform is not None else None
            if rendered is None:
                rendered = _stringify(item, transform, indent, sort_keys, level + 1, path)
            prefix = f"{key}: " if key is not None else ""
            lines.append(indent * (level + 1) + prefix + rendered)
    finally:
        path.discard(id(value))

    return open_ + "\n" + ",\n".join(lines) + "\n" + indent * level + close


def _key(key: Any) -> str:
    name = safe_str(key)
    if _IDENTIFIER.fullmatch(name):
        return name
    return quote(name)
