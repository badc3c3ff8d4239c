#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from jsxify.options import JsxOptions, reset_options


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def default_options():
    """Run every test against the built-in module options."""
    reset_options()
    yield
    reset_options()


@pytest.fixture
def opts() -> JsxOptions:
    return JsxOptions()
