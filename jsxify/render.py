"""
Jsxify public entry point: render an element tree as JSX source text.

    >>> el = create_element("div", {"className": "box"}, create_element("span", None, "hi"))
    >>> print(to_jsx(el))
    <div className="box">
      <span>
        hi
      </span>
    </div>
"""

# Standard library -----------------------------------------------------------------------------------------------------

from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------

from .formatters import fmt_tree_node
from .options import JsxOptions, get_options
from .parser import parse_element


# Methods --------------------------------------------------------------------------------------------------------------


def to_jsx(element: Any, *, opts: JsxOptions | None = None, **overrides: Any) -> str:
    """
    Render element as multi-line JSX.

    Args:
        element: Root Element. Text and numbers are accepted and rendered as is.
        opts: Rendering options. Module-level options from `get_options()` if None.
        **overrides: JsxOptions fields merged into the options for this call only.

    Returns:
        JSX source text, without a trailing newline.

    Raises:
        ValueError: If element is falsy (None, empty string, 0, False).
        TypeError: If element is not an Element, text, or number, or an override is
            not a JsxOptions field.
    """
    if not element:
        raise ValueError("Expected an Element")

    opts = opts if opts is not None else get_options()
    if overrides:
        opts = opts.merge(**overrides)

    return fmt_tree_node(parse_element(element, opts), False, 0, opts)
