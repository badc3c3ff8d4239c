"""
Sentinel objects and unique symbols for values that have no native Python counterpart.

Element props may carry values that exist in the JSX world but not in Python: an explicit
"undefined" distinct from None, and unique symbols. This module provides both.
All sentinels and symbols use identity checks (using 'is') rather than equality checks.

Sentinels:
    UNDEFINED: Marks a prop that is present but holds no value (renders as `undefined`)

Symbols:
    Symbol: Unique token with an optional description, rendered as `Symbol('desc')`
    Symbol.for_key: Registry lookup returning the same Symbol for the same key

Example:
    >>> tag = Symbol("tag")
    >>> tag is Symbol("tag")
    False
    >>> Symbol.for_key("shared") is Symbol.for_key("shared")
    True
    >>> str(tag)
    'Symbol(tag)'
"""

from typing import Any, Final

__all__ = [
    'UNDEFINED',
    'UndefinedType',
    'Symbol',
]


# Base Sentinel --------------------------------------------------------------------------------------------------------

class _SentinelBase:
    """
    Base class for all sentinel objects.

    Sentinels are singleton objects optimized for identity checks.
    They provide clean representations and consistent behavior.
    """
    __slots__ = ('_name',)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        """Returns a clean string representation for debugging."""
        return f'<{self._name}>'

    def __eq__(self, other: Any) -> bool:
        """Ensures identity-based comparison."""
        return self is other

    def __hash__(self) -> int:
        """Returns a hash based on object identity."""
        return id(self)

    def __bool__(self) -> bool:
        """Returns False by default (sentinels are typically falsy)."""
        return False

    def __reduce__(self) -> tuple:
        """Ensures proper behavior during pickling."""
        return (self.__class__, (self._name,))


# Sentinel Types -----------------------------------------------------------------------------------------------------

class UndefinedType(_SentinelBase):
    """
    Sentinel type for UNDEFINED.

    Represents a prop that was passed without a value, as opposed to one explicitly set to None.
    """
    _instance: 'UndefinedType | None' = None

    def __new__(cls) -> 'UndefinedType':
        """Ensures singleton behavior."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if not hasattr(self, '_name'):
            super().__init__("UNDEFINED")

    def __str__(self) -> str:
        return "undefined"

    def __reduce__(self) -> tuple:
        """Ensure pickling returns the singleton instance."""
        return (self.__class__, ())


# Symbols ------------------------------------------------------------------------------------------------------------

class Symbol:
    """
    Unique token with an optional description.

    Two symbols are never equal unless they are the same object, even with equal descriptions.
    Use `Symbol.for_key()` to obtain a process-wide shared symbol for a key.
    """
    __slots__ = ('_description', '__weakref__')

    _registry: dict[str, 'Symbol'] = {}

    def __init__(self, description: str | None = None) -> None:
        self._description = description

    @classmethod
    def for_key(cls, key: str) -> 'Symbol':
        """Return the registered symbol for key, creating it on first use."""
        symbol = cls._registry.get(key)
        if symbol is None:
            symbol = cls._registry[key] = cls(key)
        return symbol

    @property
    def description(self) -> str | None:
        return self._description

    def __str__(self) -> str:
        return f"Symbol({self._description or ''})"

    def __repr__(self) -> str:
        return str(self)

    def __eq__(self, other: Any) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)


# Sentinel Objects -----------------------------------------------------------------------------------------------------

UNDEFINED: Final[UndefinedType] = UndefinedType()
"""
Sentinel representing a prop present without a value.

Use with identity check: `if value is UNDEFINED:`
"""
