#
# Jsxify - Sentinels Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import pickle

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from jsxify.sentinels import UNDEFINED, Symbol, UndefinedType


# Tests ----------------------------------------------------------------------------------------------------------------

class TestUndefined:
    def test_singleton_identity(self):
        assert UNDEFINED is UndefinedType()

    def test_repr_and_str(self):
        assert repr(UNDEFINED) == "<UNDEFINED>"
        assert str(UNDEFINED) == "undefined"

    def test_falsy(self):
        assert not UNDEFINED

    def test_pickle_roundtrip(self):
        assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED

    def test_not_equal_to_none(self):
        assert UNDEFINED != None  # noqa: E711


class TestSymbol:
    def test_unique(self):
        assert Symbol("a") != Symbol("a")

    def test_registry(self):
        assert Symbol.for_key("shared") is Symbol.for_key("shared")
        assert Symbol.for_key("shared") is not Symbol.for_key("other")

    @pytest.mark.parametrize(
        "symbol, expected",
        [
            pytest.param(Symbol(), "Symbol()", id="none"),
            pytest.param(Symbol(""), "Symbol()", id="empty"),
            pytest.param(Symbol("desc"), "Symbol(desc)", id="desc"),
        ],
    )
    def test_str(self, symbol, expected):
        assert str(symbol) == expected

    def test_description(self):
        assert Symbol("d").description == "d"
        assert Symbol().description is None

    def test_hashable(self):
        s = Symbol("k")
        assert {s: 1}[s] == 1
