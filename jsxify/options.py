"""
Configuration for JSX rendering.

JsxOptions is an immutable bundle threaded through every formatter. Instances are created
directly, from presets, or by merging overrides into an existing instance:

    >>> opts = JsxOptions.debug().merge(tab_stop=4)

Module-level defaults are managed with `configure()` and read back with `get_options()`.
"""

# Standard library -----------------------------------------------------------------------------------------------------

from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Literal

Preset = Literal["compact", "debug", "default", "snapshot"]

PropFilter = tuple[str, ...] | Callable[[Any, str], bool]


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class JsxOptions:
    """
    Rendering options for element trees and prop values.

    Attributes:
        filter_props: Prop names to hide, or a predicate `(value, name) -> keep`.
        show_default_props: Render default props that were not passed explicitly, and keep
            explicit props equal to their default.
        show_functions: Render function source instead of a `noRefCheck` placeholder.
        function_value: Custom function renderer; takes the function, returns its text.
        tab_stop: Spaces per indentation level.
        use_boolean_shorthand: Render `{true}` props as bare names, drop `{false}` props
            that have no default.
        use_fragment_short_syntax: Render unkeyed, non-empty fragments as `<>...</>`.
        sort_props: Sort attributes alphabetically. `key` and `ref` always come first.
        max_inline_attributes_length: Break attributes over several lines once the inline tag
            exceeds this width. When None, break as soon as there is more than one attribute.
        display_name: Custom tag-name resolver, takes the Element.

    Examples:
        >>> opts = JsxOptions(tab_stop=4).merge(sort_props=False)
        >>> opts.tab_stop, opts.sort_props
        (4, False)
    """

    filter_props: PropFilter = ()
    show_default_props: bool = True
    show_functions: bool = False
    function_value: Callable[[Callable], str] | None = None
    tab_stop: int = 2
    use_boolean_shorthand: bool = True
    use_fragment_short_syntax: bool = True
    sort_props: bool = True
    max_inline_attributes_length: int | None = None
    display_name: Callable[[Any], str] | None = None

    def __post_init__(self):
        if not callable(self.filter_props):
            if isinstance(self.filter_props, str):
                raise ValueError("filter_props must be a collection of names or a callable, got str")
            # Normalize any iterable of names to a hashable tuple
            object.__setattr__(self, "filter_props", tuple(self.filter_props))

        if not isinstance(self.tab_stop, int) or isinstance(self.tab_stop, bool) or self.tab_stop < 0:
            raise ValueError(f"tab_stop must be a non-negative int, got {self.tab_stop!r}")

        if self.max_inline_attributes_length is not None and self.max_inline_attributes_length <= 0:
            raise ValueError(
                f"max_inline_attributes_length must be positive or None, got {self.max_inline_attributes_length!r}"
            )

        for name in ("function_value", "display_name"):
            value = getattr(self, name)
            if value is not None and not callable(value):
                raise ValueError(f"{name} must be callable or None, got {type(value).__name__}")

    # Presets ----------------------------------------------------------------------------------------------------------

    @classmethod
    def compact(cls) -> "JsxOptions":
        """Keep tags on one line as long as they fit in 120 columns."""
        return cls(max_inline_attributes_length=120)

    @classmethod
    def debug(cls) -> "JsxOptions":
        """Show everything: function source and default props, props in declaration order."""
        return cls(show_functions=True, show_default_props=True, sort_props=False)

    @classmethod
    def snapshot(cls) -> "JsxOptions":
        """Stable output for snapshot tests: sorted props, defaults hidden, functions masked."""
        return cls(show_default_props=False, show_functions=False, sort_props=True)

    @classmethod
    def preset(cls, name: Preset) -> "JsxOptions":
        if name == "default":
            return cls()
        if name in ("compact", "debug", "snapshot"):
            return getattr(cls, name)()
        raise ValueError(f"unknown preset {name!r}, expected one of: compact, debug, default, snapshot")

    # Methods ----------------------------------------------------------------------------------------------------------

    def merge(self, **kwargs: Any) -> "JsxOptions":
        """
        Return a copy with the given fields replaced.

        Raises:
            TypeError: If a keyword is not a JsxOptions field.
        """
        known = {f.name for f in fields(self)}
        unknown = set(kwargs) - known
        if unknown:
            raise TypeError(f"unknown JsxOptions field(s): {', '.join(sorted(unknown))}")
        return replace(self, **kwargs)

    def keeps_prop(self, props: dict[str, Any], name: str) -> bool:
        """Apply filter_props to a single prop of props."""
        if callable(self.filter_props):
            return bool(self.filter_props(props.get(name), name))
        return name not in self.filter_props


# Module configuration -------------------------------------------------------------------------------------------------

_options: JsxOptions = JsxOptions()


def configure(preset: Preset | None = None, **overrides: Any) -> JsxOptions:
    """
    Set module-level default options.

    A preset replaces the current configuration before overrides are merged in.
    Without a preset, overrides are merged into the current configuration.

    Returns:
        The new module-level options.
    """
    global _options
    base = JsxOptions.preset(preset) if preset is not None else _options
    _options = base.merge(**overrides)
    return _options


def get_options() -> JsxOptions:
    """Return the module-level default options."""
    return _options


def reset_options() -> JsxOptions:
    """Restore the built-in default options."""
    global _options
    _options = JsxOptions()
    return _options
