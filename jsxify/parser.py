"""
Element parser: turns Elements into tree nodes for the renderer.
"""

# Standard library -----------------------------------------------------------------------------------------------------

from typing import Any, Iterator

# Third-party ----------------------------------------------------------------------------------------------------------

import structlog

# Local ----------------------------------------------------------------------------------------------------------------

from .elements import (
    Element,
    Fragment,
    WrapperKind,
    classify_wrapper,
    is_element,
)
from .options import JsxOptions
from .sentinels import UNDEFINED
from .tree import ElementNode, FragmentNode, NumberNode, StringNode, TreeNode
from .utils import is_number

logger = structlog.get_logger(__name__)


# Methods --------------------------------------------------------------------------------------------------------------


def parse_element(element: Any, opts: JsxOptions) -> TreeNode:
    """
    Parse an Element, or a text/number child, into a tree node.

    Args:
        element: An Element, a str, or a number.
        opts: Rendering options; `display_name` and `filter_props` apply here.

    Returns:
        StringNode or NumberNode for text and numbers, FragmentNode for Fragment
        elements, ElementNode otherwise.

    Raises:
        TypeError: If element is neither an Element, a str, nor a number.

    Examples:
        >>> parse_element(create_element("b", None, "hi"), JsxOptions())
        ElementNode(display_name='b', props={}, default_props={}, children=[StringNode(value='hi')])
    """
    if isinstance(element, str):
        return StringNode(element)

    if is_number(element):
        return NumberNode(element)

    if not is_element(element):
        raise TypeError(f"Expected an Element, got {type(element).__name__}")

    children = [parse_element(child, opts) for child in _meaningful_children(element.children)]

    if element.type is Fragment:
        return FragmentNode(key=element.key, children=children)

    props = {
        name: value
        for name, value in element.props.items()
        if name != "children" and opts.keeps_prop(element.props, name)
    }
    if element.ref is not None:
        props["ref"] = element.ref
    # Keys starting with "." are auto-generated
    if isinstance(element.key, str) and not element.key.startswith("."):
        props["key"] = element.key

    default_props = {
        name: value
        for name, value in _default_props(element.type).items()
        if name != "children"
    }

    return ElementNode(
        display_name=display_name(element, opts),
        props=props,
        default_props=default_props,
        children=children,
    )


def is_parseable(element: Any) -> bool:
    """Check that parse_element() accepts element and every child below it."""
    if isinstance(element, str) or is_number(element):
        return True
    if not is_element(element):
        return False
    return all(is_parseable(child) for child in _meaningful_children(element.children))


def display_name(element: Element, opts: JsxOptions) -> str:
    """Resolve the tag name written for element."""
    if opts.display_name is not None:
        return opts.display_name(element)
    return _type_name(element.type)


# Private Methods ------------------------------------------------------------------------------------------------------


def _type_name(type_: Any) -> str:
    if isinstance(type_, str):
        return type_

    if type_ is Fragment:
        return "Fragment"

    kind = classify_wrapper(type_)
    if kind is WrapperKind.FORWARD_REF or kind is WrapperKind.MEMO:
        if type_.get("display_name"):
            return type_["display_name"]
        label = "ForwardRef" if kind is WrapperKind.FORWARD_REF else "Memo"
        inner = type_.get("render") if kind is WrapperKind.FORWARD_REF else type_.get("type")
        inner_name = _type_name(inner) if inner is not None else ""
        if not inner_name or inner_name == "Anonymous":
            return label
        return f"{label}({inner_name})"

    if callable(type_):
        return _function_name(type_) or "Anonymous"

    logger.debug("Unknown element type.", element_type=type(type_).__name__)
    return "UnknownElementType"


def _function_name(fn: Any) -> str:
    name = getattr(fn, "display_name", None) or getattr(fn, "__name__", None) or ""
    if name == "<lambda>":
        return ""
    return name


def _default_props(type_: Any) -> dict[str, Any]:
    if isinstance(type_, dict):
        defaults = type_.get("default_props")
    else:
        defaults = getattr(type_, "default_props", None)
    return dict(defaults) if defaults else {}


def _meaningful_children(children: Any) -> Iterator[Any]:
    """Flatten nested child lists, dropping children that render nothing."""
    if isinstance(children, (list, tuple)):
        for child in children:
            yield from _meaningful_children(child)
        return

    if (
        children is None
        or children is UNDEFINED
        or isinstance(children, bool)
        or (isinstance(children, str) and not children)
    ):
        if children is not None:
            logger.debug("Skipped empty child.", child=repr(children))
        return

    yield children
