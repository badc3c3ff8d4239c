"""
JSX formatters for prop values and parsed element trees.

fmt_prop_value() renders any Python value as a JSX attribute value: quoted text for strings,
braced expressions for everything else. It never raises; values it does not recognize fall
through to a braced str() conversion.

The sibling formatters render the rest of the tree:
    fmt_function: callables (masked as `noRefCheck` unless functions are shown)
    fmt_complex: dicts and lists as object/array literals
    fmt_tree_node: parsed nodes (text, numbers, elements, fragments)
    fmt_element_node, fmt_fragment_node, fmt_prop: tags and their attributes
"""

# Standard library -----------------------------------------------------------------------------------------------------

import inspect
import re
import textwrap
from datetime import date
from typing import Any, Callable, Tuple

# Third-party ----------------------------------------------------------------------------------------------------------

import structlog

# Local ----------------------------------------------------------------------------------------------------------------

from .elements import (
    WrapperKind,
    classify_wrapper,
    is_array,
    is_element,
    is_plain_object,
    typeof_tag,
    wrapper_target,
)
from .options import JsxOptions, get_options
from .parser import is_parseable, parse_element
from .sentinels import Symbol
from .stringify import stringify
from .tree import ElementNode, FragmentNode, NumberNode, StringNode, TreeNode
from .utils import is_invalid_date, is_number, iso_string, number_literal, safe_str, spacer

logger = structlog.get_logger(__name__)

NO_REF_CHECK = "function noRefCheck() {}"

FRAGMENT_SHORT_NAME = ""
FRAGMENT_EXPLICIT_NAME = "Fragment"

_JSX_STOP_CHARS = ("<", ">", "{", "}")
_KEY_AND_REF = ("key", "ref")

_SYMBOL_WRAPPER = re.compile(r"Symbol\((.*)\)", re.DOTALL)


# Methods --------------------------------------------------------------------------------------------------------------


def fmt_prop_value(
    value: Any,
    inline: bool = False,
    level: int = 0,
    opts: JsxOptions | None = None,
) -> str:
    """Format a prop value as a JSX attribute value.

    Dispatches on the runtime kind of value, first match wins. The order matters:
    wrapper markers and dates are also objects and must not reach the composite branch.

    Args:
        value: Any Python object.
        inline: Render nested structures on a single line.
        level: Current nesting level, used for indentation of multi-line output.
        opts: Rendering options. Module-level options from `get_options()` if None.

    Returns:
        `"text"` for strings, `{expression}` for every other value.

    Dispatch Logic:
        - int, float, Decimal → `{42}`
        - str → `"text"` with `"` escaped as `&quot;`
        - Symbol → `{Symbol('desc')}` or `{Symbol()}`
        - callable → `{` fmt_function() `}`
        - Element → `{` nested JSX rendered inline `}`
        - memo/forward_ref marker → `{ComponentName}`, unwrapping nested markers
        - date, datetime → `{new Date("1970-01-01T00:00:00.000Z")}` or `{new Date(NaN)}`
        - dict, list, tuple → `{` fmt_complex() `}`
        - anything else → `{` str(value) `}`, with true/false/null for bools and None

    Examples:
        >>> fmt_prop_value(42)
        '{42}'

        >>> fmt_prop_value('say "hi"')
        '"say &quot;hi&quot;"'

        >>> fmt_prop_value(Symbol("tag"))
        "{Symbol('tag')}"

        >>> fmt_prop_value(None)
        '{null}'
    """
    opts = opts if opts is not None else get_options()

    # Priority 1: Numbers (bool is an int subclass, handled by the fallback)
    if is_number(value):
        return "{" + number_literal(value) + "}"

    # Priority 2: Text
    if isinstance(value, str):
        return f'"{_escape_quotes(value)}"'

    # Priority 3: Unique symbols
    if isinstance(value, Symbol):
        description = _SYMBOL_WRAPPER.sub(r"\1", str(value))
        if not description:
            return "{Symbol()}"
        return "{Symbol('" + description + "')}"

    # Priority 4: Functions, methods, classes and other callables
    if callable(value):
        return "{" + fmt_function(value, opts) + "}"

    # Priority 5: Nested elements render as inline JSX
    if is_element(value):
        rendered = _fmt_element_inline(value, level, opts)
        if rendered is not None:
            return "{" + rendered + "}"
        return "{" + _generic_str(value) + "}"

    # Priority 6: memo / forward_ref markers
    if classify_wrapper(value) in (WrapperKind.MEMO, WrapperKind.FORWARD_REF):
        target = wrapper_target(value)
        if typeof_tag(target) is not None:
            return fmt_prop_value(target, inline, level, opts)
        name = value.get("display_name") or _component_name(target) or "Component"
        return "{" + safe_str(name) + "}"

    # Priority 7: Dates
    if isinstance(value, date):
        if is_invalid_date(value):
            return "{new Date(NaN)}"
        return '{new Date("' + iso_string(value) + '")}'

    # Priority 8: Plain objects and arrays
    if is_plain_object(value) or is_array(value):
        return "{" + fmt_complex(value, inline, level, opts) + "}"

    # Priority 9: Everything else
    return "{" + _generic_str(value) + "}"


def fmt_function(fn: Callable, opts: JsxOptions | None = None) -> str:
    """
    Format a callable.

    Unless `show_functions` is set or a custom `function_value` renderer is configured,
    every function renders as the `function noRefCheck() {}` placeholder, which keeps
    snapshots stable across function identities.
    """
    opts = opts if opts is not None else get_options()

    if opts.function_value is not None:
        return opts.function_value(fn)
    if not opts.show_functions:
        return NO_REF_CHECK
    return default_function_value(fn)


def default_function_value(fn: Callable) -> str:
    """Function source with each line stripped and joined, or a named stub when no source exists."""
    source = _function_source(fn)
    if source is None:
        return _function_stub(fn)
    return "".join(line.strip() for line in source.splitlines())


def preserve_function_line_breaks(fn: Callable) -> str:
    """Function source as written, dedented. Use as `function_value` to keep line breaks."""
    source = _function_source(fn)
    if source is None:
        return _function_stub(fn)
    return textwrap.dedent(source).rstrip("\n")


def fmt_complex(
    value: dict | list | tuple,
    inline: bool = False,
    level: int = 0,
    opts: JsxOptions | None = None,
) -> str:
    """Format a dict, list or tuple as an object/array literal.

    Keys are sorted. Nested elements render as inline JSX and nested callables go
    through fmt_function(). Inline mode collapses the literal to a single line,
    block mode indents continuation lines to level + 1.

    Examples:
        >>> fmt_complex({"b": 2, "a": [1, "x"]}, inline=True)
        "{a: [1, 'x'], b: 2}"
    """
    opts = opts if opts is not None else get_options()

    def transform(item: Any) -> str | None:
        if is_element(item):
            return _fmt_element_inline(item, level, opts)
        if callable(item):
            return fmt_function(item, opts)
        return None

    out = stringify(value, transform=transform)

    if inline:
        out = re.sub(r"\s+", " ", out)
        return out.replace("{ ", "{").replace(" }", "}").replace("[ ", "[").replace(" ]", "]")

    out = out.replace("\t", spacer(1, opts.tab_stop))
    return re.sub(r"\n(?=.)", "\n" + spacer(level + 1, opts.tab_stop), out)


def fmt_tree_node(node: TreeNode, inline: bool, level: int, opts: JsxOptions) -> str:
    """
    Format a parsed tree node.

    Raises:
        TypeError: If node is not a tree node.
    """
    if isinstance(node, NumberNode):
        return number_literal(node.value)

    if isinstance(node, StringNode):
        if not node.value:
            return ""
        return _preserve_edge_spaces(_escape_text(node.value))

    if isinstance(node, ElementNode):
        return fmt_element_node(node, inline, level, opts)

    if isinstance(node, FragmentNode):
        return fmt_fragment_node(node, inline, level, opts)

    raise TypeError(f"Unknown tree node type {type(node).__name__!r}")


def fmt_element_node(node: ElementNode, inline: bool, level: int, opts: JsxOptions) -> str:
    """Format an element tag with its attributes and children."""
    name = node.display_name
    tab_stop = opts.tab_stop

    out_inline_attr = f"<{name}"
    out_multiline_attr = f"<{name}"
    contains_multiline_attr = False

    attributes = _sort_prop_names(_visible_prop_names(node, opts), opts.sort_props)
    for attribute in attributes:
        attr_inline, attr_multiline, is_multiline = fmt_prop(
            attribute,
            attribute in node.props,
            node.props.get(attribute),
            attribute in node.default_props,
            node.default_props.get(attribute),
            inline,
            level,
            opts,
        )
        contains_multiline_attr = contains_multiline_attr or is_multiline
        out_inline_attr += attr_inline
        out_multiline_attr += attr_multiline

    out_multiline_attr += "\n" + spacer(level, tab_stop)

    if _should_render_multiline_attr(attributes, out_inline_attr, contains_multiline_attr, inline, level, opts):
        out = out_multiline_attr
    else:
        out = out_inline_attr

    if node.children:
        new_level = level + 1
        separator = "" if inline else "\n" + spacer(new_level, tab_stop)

        out += ">"
        out += separator
        out += separator.join(
            fmt_tree_node(child, inline, new_level, opts) for child in _merge_plain_strings(node.children)
        )
        if not inline:
            out += "\n" + spacer(level, tab_stop)
        out += f"</{name}>"
    else:
        if not _is_inline_attr_too_long(attributes, out_inline_attr, level, opts):
            out += " "
        out += "/>"

    return out


def fmt_fragment_node(node: FragmentNode, inline: bool, level: int, opts: JsxOptions) -> str:
    """Format a fragment, as `<>...</>` when short syntax applies, else as `<Fragment>`."""
    if opts.use_fragment_short_syntax and node.children and not node.key:
        name = FRAGMENT_SHORT_NAME
    else:
        name = FRAGMENT_EXPLICIT_NAME

    props = {"key": node.key} if node.key else {}
    element = ElementNode(display_name=name, props=props, default_props={}, children=list(node.children))
    return fmt_element_node(element, inline, level, opts)


def fmt_prop(
    name: str,
    has_value: bool,
    value: Any,
    has_default: bool,
    default: Any,
    inline: bool,
    level: int,
    opts: JsxOptions,
) -> Tuple[str, str, bool]:
    """
    Format one attribute, both for an inline and a multi-line tag.

    Returns:
        (inline text, multi-line text, whether the formatted value spans several lines).

    Raises:
        ValueError: If the prop has neither a value nor a default.
    """
    if not has_value and not has_default:
        raise ValueError(f"The prop {name!r} has no value and no default: could not be formatted")

    used_value = value if has_value else default
    formatted = fmt_prop_value(used_value, inline, level, opts)
    is_multiline = "\n" in formatted

    if opts.use_boolean_shorthand and formatted == "{false}" and not has_default:
        return "", "", is_multiline

    attribute = name if opts.use_boolean_shorthand and formatted == "{true}" else f"{name}={formatted}"
    return " " + attribute, "\n" + spacer(level + 1, opts.tab_stop) + attribute, is_multiline


# Private Methods ------------------------------------------------------------------------------------------------------


def _escape_quotes(s: str) -> str:
    return s.replace('"', "&quot;")


def _escape_text(s: str) -> str:
    """Wrap text containing JSX syntax characters in a template literal expression."""
    if any(char in s for char in _JSX_STOP_CHARS):
        return "{`" + s + "`}"
    return s


def _preserve_edge_spaces(s: str) -> str:
    """Keep leading and trailing whitespace visible, JSX trims it otherwise."""
    if s.endswith(" "):
        s = re.sub(r"^(.*?)(\s+)$", r"\1{'\2'}", s)
    if s.startswith(" "):
        s = re.sub(r"^(\s+)(.*)$", r"{'\1'}\2", s)
    return s


def _generic_str(value: Any) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    return safe_str(value)


def _component_name(target: Any) -> str | None:
    name = getattr(target, "__name__", None)
    if name == "<lambda>":
        return None
    return name


def _fmt_element_inline(element: Any, level: int, opts: JsxOptions) -> str | None:
    """Render an element nested in a prop value, or None if it cannot be parsed."""
    if not is_parseable(element):
        logger.debug("Nested element could not be parsed.", element_type=type(element).__name__)
        return None
    return fmt_tree_node(parse_element(element, opts), True, level, opts)


def _function_source(fn: Callable) -> str | None:
    try:
        return inspect.getsource(fn)
    except (OSError, TypeError):
        return None


def _function_stub(fn: Callable) -> str:
    name = _component_name(fn) or ""
    return f"function {name}() {{}}"


def _visible_prop_names(node: ElementNode, opts: JsxOptions) -> list[str]:
    names = [name for name in node.props if opts.keeps_prop(node.props, name)]

    if not opts.show_default_props:
        return [
            name
            for name in names
            if not (name in node.default_props and _same_value(node.props[name], node.default_props[name]))
        ]

    names += [
        name
        for name in node.default_props
        if name not in names and opts.keeps_prop(node.default_props, name)
    ]
    return names


def _same_value(a: Any, b: Any) -> bool:
    if a is b:
        return True
    try:
        return bool(a == b)
    except (TypeError, ValueError):
        # Ambiguous comparisons (array-likes) count as different
        return False


def _sort_prop_names(names: list[str], sort_props: bool) -> list[str]:
    """Order attributes: key, ref, then user props (sorted if requested)."""
    user_props = [name for name in names if name not in _KEY_AND_REF]
    if sort_props:
        user_props = sorted(user_props)
    return [name for name in _KEY_AND_REF if name in names] + user_props


def _merge_plain_strings(children: list[TreeNode]) -> list[TreeNode]:
    """Merge adjacent text and number nodes into a single text node."""
    merged: list[TreeNode] = []
    for child in children:
        previous = merged[-1] if merged else None
        if isinstance(previous, (StringNode, NumberNode)) and isinstance(child, (StringNode, NumberNode)):
            merged[-1] = StringNode(_node_text(previous) + _node_text(child))
        else:
            merged.append(child)
    return merged


def _node_text(node: StringNode | NumberNode) -> str:
    if isinstance(node, NumberNode):
        return number_literal(node.value)
    return node.value


def _is_inline_attr_too_long(attributes: list[str], inline_attr: str, level: int, opts: JsxOptions) -> bool:
    if not opts.max_inline_attributes_length:
        return len(attributes) > 1
    return len(spacer(level, opts.tab_stop)) + len(inline_attr) > opts.max_inline_attributes_length


def _should_render_multiline_attr(
    attributes: list[str],
    inline_attr: str,
    contains_multiline_attr: bool,
    inline: bool,
    level: int,
    opts: JsxOptions,
) -> bool:
    return (_is_inline_attr_too_long(attributes, inline_attr, level, opts) or contains_multiline_attr) and not inline
