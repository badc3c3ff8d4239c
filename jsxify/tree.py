"""
Tree nodes: the parsed, renderer-facing representation of an element tree.
"""

# Standard library -----------------------------------------------------------------------------------------------------

from dataclasses import dataclass, field
from typing import Any


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class StringNode:
    value: str


@dataclass(frozen=True)
class NumberNode:
    value: int | float


@dataclass(frozen=True)
class ElementNode:
    """
    A parsed element.

    Attributes:
        display_name: Tag name written in the output.
        props: Visible props, including `key` and `ref` when set.
        default_props: Default props declared by the element type.
        children: Parsed child nodes.
    """

    display_name: str
    props: dict[str, Any] = field(default_factory=dict)
    default_props: dict[str, Any] = field(default_factory=dict)
    children: list["TreeNode"] = field(default_factory=list)


@dataclass(frozen=True)
class FragmentNode:
    key: str | None = None
    children: list["TreeNode"] = field(default_factory=list)


TreeNode = StringNode | NumberNode | ElementNode | FragmentNode
