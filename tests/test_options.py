#
# Jsxify - Options Tests
#

# Third party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from jsxify.options import JsxOptions, configure, get_options, reset_options


# Tests ----------------------------------------------------------------------------------------------------------------

class TestJsxOptions:
    def test_defaults(self):
        opts = JsxOptions()
        assert opts.filter_props == ()
        assert opts.show_default_props is True
        assert opts.show_functions is False
        assert opts.tab_stop == 2
        assert opts.use_boolean_shorthand is True
        assert opts.use_fragment_short_syntax is True
        assert opts.sort_props is True
        assert opts.max_inline_attributes_length is None

    def test_filter_props_normalized(self):
        assert JsxOptions(filter_props=["a", "b"]).filter_props == ("a", "b")

    @pytest.mark.parametrize(
        "kwargs",
        [
            pytest.param({"filter_props": "abc"}, id="filter_str"),
            pytest.param({"tab_stop": -1}, id="negative_tab"),
            pytest.param({"tab_stop": True}, id="bool_tab"),
            pytest.param({"max_inline_attributes_length": 0}, id="zero_max"),
            pytest.param({"function_value": "x"}, id="function_value"),
            pytest.param({"display_name": 1}, id="display_name"),
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            JsxOptions(**kwargs)

    def test_merge(self):
        opts = JsxOptions().merge(tab_stop=4)
        assert opts.tab_stop == 4
        assert opts.merge(tab_stop=2) == JsxOptions()

    def test_merge_unknown(self):
        with pytest.raises(TypeError, match="unknown JsxOptions field"):
            JsxOptions().merge(indent=2)

    def test_merge_validates(self):
        with pytest.raises(ValueError):
            JsxOptions().merge(tab_stop=-2)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            JsxOptions().tab_stop = 3

    @pytest.mark.parametrize(
        "name, expected",
        [
            pytest.param("default", JsxOptions(), id="default"),
            pytest.param("compact", JsxOptions.compact(), id="compact"),
            pytest.param("debug", JsxOptions.debug(), id="debug"),
            pytest.param("snapshot", JsxOptions.snapshot(), id="snapshot"),
        ],
    )
    def test_presets(self, name, expected):
        assert JsxOptions.preset(name) == expected

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="unknown preset"):
            JsxOptions.preset("pretty")

    @pytest.mark.parametrize(
        "filter_props, name, expected",
        [
            pytest.param(("a",), "a", False, id="names_hidden"),
            pytest.param(("a",), "b", True, id="names_kept"),
            pytest.param(lambda value, name: value != 1, "a", False, id="predicate_hidden"),
            pytest.param(lambda value, name: value != 1, "b", True, id="predicate_kept"),
        ],
    )
    def test_keeps_prop(self, filter_props, name, expected):
        opts = JsxOptions(filter_props=filter_props)
        assert opts.keeps_prop({"a": 1, "b": 2}, name) is expected


class TestConfigure:
    def test_preset(self):
        configure(preset="debug")
        assert get_options() == JsxOptions.debug()

    def test_incremental(self):
        """Without a preset, overrides merge into the current configuration."""
        configure(preset="snapshot", tab_stop=4)
        configure(sort_props=False)
        assert get_options() == JsxOptions.snapshot().merge(tab_stop=4, sort_props=False)

    def test_reset(self):
        configure(tab_stop=8)
        assert reset_options() == JsxOptions()
        assert get_options() == JsxOptions()
