"""
Element model: the UI component tree that jsxify renders.

An Element pairs a type (a tag string, a component callable, a Fragment, or a wrapped
component marker) with its props. Children live in props["children"], key and ref are kept
apart from the props, as in JSX.

Wrapped-component markers are plain dicts tagged with TYPEOF_KEY, produced by `memo()`
and `forward_ref()`. Their detection is explicit: `classify_wrapper()` returns a WrapperKind.
"""

# Standard library -----------------------------------------------------------------------------------------------------

from dataclasses import dataclass, field
from enum import StrEnum, unique
from typing import Any, Callable, Final

# Local ----------------------------------------------------------------------------------------------------------------

from .sentinels import Symbol

TYPEOF_KEY: Final[str] = "$$typeof"

ELEMENT_TAG: Final[Symbol] = Symbol.for_key("jsxify.element")
FORWARD_REF_TAG: Final[Symbol] = Symbol.for_key("jsxify.forward_ref")
MEMO_TAG: Final[Symbol] = Symbol.for_key("jsxify.memo")

Fragment: Final[Symbol] = Symbol.for_key("jsxify.fragment")


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class WrapperKind(StrEnum):
    """Classification of a value with respect to the wrapped-component marker convention."""

    PLAIN = "plain"
    MEMO = "memo"
    FORWARD_REF = "forward_ref"
    OTHER = "other"


@dataclass(frozen=True, eq=False)
class Element:
    """
    A node of the UI component tree.

    Attributes:
        type: Tag name (str), component callable, `Fragment`, or a wrapper marker dict.
        props: Attribute values; `props["children"]` holds the element children, if any.
        key: Optional reconciliation key.
        ref: Optional reference object.
    """

    type: Any
    props: dict[str, Any] = field(default_factory=dict)
    key: str | None = None
    ref: Any = None

    @property
    def children(self) -> Any:
        return self.props.get("children")


# Methods --------------------------------------------------------------------------------------------------------------


def create_element(
    type_: Any,
    props: dict[str, Any] | None = None,
    *children: Any,
    key: Any = None,
    ref: Any = None,
) -> Element:
    """
    Create an Element, JSX-style.

    Positional children override props["children"]: a single child is stored as is,
    several children as a list. The key is stored as a string.

    Examples:
        >>> el = create_element("div", {"id": "root"}, "hello")
        >>> el.props
        {'id': 'root', 'children': 'hello'}

        >>> create_element("ul", None, "a", "b").children
        ['a', 'b']
    """
    props = dict(props or {})
    if len(children) == 1:
        props["children"] = children[0]
    elif len(children) > 1:
        props["children"] = list(children)

    return Element(
        type=type_,
        props=props,
        key=None if key is None else str(key),
        ref=ref,
    )


def memo(component: Any, display_name: str | None = None) -> dict[str, Any]:
    """Return a memoization wrapper marker around component."""
    marker = {TYPEOF_KEY: MEMO_TAG, "type": component}
    if display_name is not None:
        marker["display_name"] = display_name
    return marker


def forward_ref(render: Callable, display_name: str | None = None) -> dict[str, Any]:
    """Return a ref-forwarding wrapper marker around a render function."""
    marker = {TYPEOF_KEY: FORWARD_REF_TAG, "render": render}
    if display_name is not None:
        marker["display_name"] = display_name
    return marker


def is_element(obj: Any) -> bool:
    """Check whether obj is a renderable Element."""
    return isinstance(obj, Element)


def is_plain_object(obj: Any) -> bool:
    """Check whether obj is a plain key-value map."""
    return isinstance(obj, dict)


def is_array(obj: Any) -> bool:
    """Check whether obj is an ordered sequence rendered as an array literal."""
    return isinstance(obj, (list, tuple))


def typeof_tag(obj: Any) -> Any:
    """
    Return the internal type tag carried by obj, or None.

    Elements carry ELEMENT_TAG, plain objects carry whatever is stored under TYPEOF_KEY.
    """
    if isinstance(obj, Element):
        return ELEMENT_TAG
    if is_plain_object(obj):
        return obj.get(TYPEOF_KEY)
    return None


def classify_wrapper(obj: Any) -> WrapperKind:
    """
    Classify obj against the wrapped-component marker convention.

    Returns:
        WrapperKind.MEMO or WrapperKind.FORWARD_REF for tagged plain objects,
        WrapperKind.PLAIN for any other plain object, WrapperKind.OTHER otherwise.
    """
    if not is_plain_object(obj):
        return WrapperKind.OTHER

    tag = obj.get(TYPEOF_KEY)
    if tag is MEMO_TAG:
        return WrapperKind.MEMO
    if tag is FORWARD_REF_TAG:
        return WrapperKind.FORWARD_REF
    return WrapperKind.PLAIN


def wrapper_target(marker: dict[str, Any]) -> Any:
    """Return the wrapped target of a marker: `render` for ref-forwarding, `type` for memoization."""
    return marker.get("render") or marker.get("type")
