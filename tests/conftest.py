#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from tagnum.num import Num


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture(params=["input", "output"])
def make_number(request):
    """Factory for INPUT or OUTPUT numbers; tests using it run once per tag."""
    if request.param == "input":
        return Num.from_input
    return Num.from_output


@pytest.fixture
def absent() -> Num:
    return Num.absent()
