#
# Jsxify - Render Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from datetime import datetime, timezone

# Third party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from jsxify.elements import Fragment, create_element, forward_ref, memo
from jsxify.options import JsxOptions, configure
from jsxify.render import to_jsx
from jsxify.sentinels import Symbol


# Tests ----------------------------------------------------------------------------------------------------------------

def Button(props):
    return None


def Label(props):
    return None


Label.default_props = {"size": "md"}


def on_click(event):
    return None


class TestToJsx:
    def test_simple_tree(self):
        el = create_element("div", {"className": "box"}, create_element("span", None, "hi"))
        assert to_jsx(el) == '<div className="box">\n  <span>\n    hi\n  </span>\n</div>'

    def test_text_root(self):
        assert to_jsx("hello") == "hello"

    def test_number_root(self):
        assert to_jsx(12) == "12"

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param(None, id="none"),
            pytest.param("", id="empty_str"),
            pytest.param(0, id="zero"),
        ],
    )
    def test_falsy_rejected(self, value):
        with pytest.raises(ValueError, match="Expected an Element"):
            to_jsx(value)

    def test_non_element_rejected(self):
        with pytest.raises(TypeError, match="Expected an Element"):
            to_jsx(object())

    def test_prop_kinds(self):
        el = create_element(
            Button,
            {
                "disabled": True,
                "hidden": False,
                "onClick": on_click,
                "label": 'Say "hi"',
                "count": 3,
                "tag": Symbol("t"),
                "created": datetime(1970, 1, 1, tzinfo=timezone.utc),
                "as": forward_ref(memo(Label)),
            },
        )
        assert to_jsx(el) == (
            "<Button\n"
            "  as={Label}\n"
            "  count={3}\n"
            '  created={new Date("1970-01-01T00:00:00.000Z")}\n'
            "  disabled\n"
            '  label="Say &quot;hi&quot;"\n'
            "  onClick={function noRefCheck() {}}\n"
            "  tag={Symbol('t')}\n"
            "/>"
        )

    def test_element_prop_rendered_inline(self):
        el = create_element(Button, {"icon": create_element("svg", {"width": 10})})
        assert to_jsx(el) == "<Button icon={<svg width={10} />} />"

    def test_default_props(self):
        el = create_element(Label, {"text": "x"})
        assert to_jsx(el) == '<Label\n  size="md"\n  text="x"\n/>'
        assert to_jsx(el, show_default_props=False) == '<Label text="x" />'

    def test_fragment_root(self):
        el = create_element(Fragment, None, create_element("a"), create_element("b"))
        assert to_jsx(el) == "<>\n  <a />\n  <b />\n</>"

    def test_nested_children_indent(self):
        el = create_element("ul", None, create_element("li", None, create_element("b", None, "x")))
        assert to_jsx(el, tab_stop=4) == "<ul>\n    <li>\n        <b>\n            x\n        </b>\n    </li>\n</ul>"

    def test_complex_prop_block(self):
        el = create_element("div", {"style": {"margin": 0, "color": "red"}})
        assert to_jsx(el) == "<div\n  style={{\n    color: 'red',\n    margin: 0\n  }}\n />"

    def test_explicit_opts(self):
        el = create_element(Button, {"onClick": on_click})
        opts = JsxOptions(function_value=lambda fn: fn.__name__)
        assert to_jsx(el, opts=opts) == "<Button onClick={on_click} />"

    def test_module_configuration(self):
        configure(function_value=lambda fn: "fn")
        el = create_element(Button, {"onClick": on_click})
        assert to_jsx(el) == "<Button onClick={fn} />"

    def test_override_does_not_touch_module_options(self):
        el = create_element(Button, {"a": 1, "b": 2})
        assert to_jsx(el, max_inline_attributes_length=80) == "<Button a={1} b={2} />"
        assert to_jsx(el) == "<Button\n  a={1}\n  b={2}\n/>"
