#
# TagNum - Display Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import math

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from tagnum.display import DisplayConf, display_num, display_ratio
from tagnum.errors import RatioNotFoundError
from tagnum.num import Num
from tagnum.parse import parse_num
from tagnum.prefixes import MetricPrefixTable


# Tests ----------------------------------------------------------------------------------------------------------------

class TestDisplayNum:

    @pytest.mark.parametrize('value, sig_figs, expected', [
        pytest.param(1e-9, 3, "1.00n", id='nano'),
        pytest.param(1500.0, 3, "1.50k", id='kilo'),
        pytest.param(-1500.0, 3, "-1.50k", id='negative_kilo'),
        pytest.param(1234.0, 3, "1.23k", id='kilo_rounded'),
        pytest.param(4.7e-6, 3, "4.70µ", id='micro'),
        pytest.param(2.2e6, 2, "2.2M", id='mega'),
        pytest.param(0.5, 3, "500m", id='milli_three_integer_figures'),
        pytest.param(47e9, 3, "47.0G", id='giga'),
        pytest.param(12.5, 3, "12.5", id='no_prefix'),
        pytest.param(999.0, 3, "999", id='below_kilo'),
        pytest.param(1234.0, 0, "1k", id='zero_sig_figs'),
        pytest.param(123456.0, 2, "123k", id='more_integer_than_sig_figs'),
        pytest.param(1e18, 3, "1000000000000000000", id='above_peta_unscaled'),
        pytest.param(1e-18, 3, "0.00", id='below_femto_unscaled'),
    ])
    def test_display(self, value, sig_figs, expected):
        assert display_num(Num.from_input(value), sig_figs) == expected

    @pytest.mark.parametrize('sig_figs, expected', [
        pytest.param(1, "0", id='one'),
        pytest.param(3, "0.00", id='three'),
        pytest.param(5, "0.0000", id='five'),
    ])
    def test_zero(self, sig_figs, expected):
        """Zero matches no prefix and shows significant_figures - 1 decimals."""
        assert display_num(Num.from_output(0.0), sig_figs) == expected

    @pytest.mark.parametrize('value, expected', [
        pytest.param(math.nan, "NaN", id='nan'),
        pytest.param(math.inf, "inf", id='inf'),
        pytest.param(-math.inf, "-inf", id='neg_inf'),
    ])
    def test_non_finite(self, value, expected):
        assert display_num(Num.from_output(value), 3) == expected

    def test_nan_parses_back(self):
        """NaN from sqrt of a negative keeps its value through display and parse."""
        text = display_num(Num.from_output(-4.0).sqrt(), 3)
        num = parse_num(text)
        assert text == "NaN"
        assert num.is_number
        assert math.isnan(num.value)

    def test_absent(self, absent):
        assert display_num(absent, 3) == ""

    def test_default_significant_figures(self, make_number):
        assert DisplayConf.SIGNIFICANT_FIGURES == 3
        assert display_num(make_number(1500.0)) == "1.50k"

    def test_tag_does_not_affect_format(self):
        assert display_num(Num.from_input(1500.0), 4) == display_num(Num.from_output(1500.0), 4)

    def test_custom_prefixes(self):
        prefixes = MetricPrefixTable([("K", 3)])
        assert display_num(Num.from_input(1500.0), 3, prefixes=prefixes) == "1.50K"
        assert display_num(Num.from_input(1.5e6), 3, prefixes=prefixes) == "1500000"

    @pytest.mark.parametrize('sig_figs, error', [
        pytest.param(-1, ValueError, id='negative'),
        pytest.param(2.0, TypeError, id='float'),
        pytest.param(True, TypeError, id='bool'),
        pytest.param("3", TypeError, id='str'),
    ])
    def test_invalid_significant_figures(self, sig_figs, error):
        with pytest.raises(error):
            display_num(Num.from_input(1.0), sig_figs)

    def test_invalid_significant_figures_absent(self, absent):
        with pytest.raises(ValueError):
            display_num(absent, -1)


class TestDisplayRatio:

    @pytest.mark.parametrize('value, expected', [
        pytest.param(3.0, "1:3", id='integer'),
        pytest.param(0.5, "2:1", id='half'),
        pytest.param(1 / 3, "3:1", id='third'),
        pytest.param(2.5, "2:5", id='two_and_half'),
        pytest.param(0.75, "4:3", id='three_quarters'),
        pytest.param(0.1, "10:1", id='tenth_accumulated'),
        pytest.param(0.0, "1:0", id='zero'),
        pytest.param(-0.5, "2:-1", id='negative'),
        pytest.param(math.pi, "113:355", id='pi_convergent'),
    ])
    def test_display_ratio(self, make_number, value, expected):
        assert display_ratio(make_number(value)) == expected

    def test_absent(self, absent):
        assert display_ratio(absent) == ""

    def test_iteration_cap_raises(self):
        """An irrational value terminates with an error once the cap is hit."""
        with pytest.raises(RatioNotFoundError) as exc_info:
            display_ratio(Num.from_output(math.pi), max_iterations=5)
        assert exc_info.value.value == math.pi
        assert exc_info.value.iterations == 5

    def test_iteration_cap_boundary(self):
        assert display_ratio(Num.from_output(math.pi), max_iterations=113) == "113:355"
        with pytest.raises(RatioNotFoundError):
            display_ratio(Num.from_output(math.pi), max_iterations=112)

    def test_iteration_cap_empty(self):
        assert display_ratio(Num.from_output(math.sqrt(2)), max_iterations=10, on_error="empty") == ""

    def test_iteration_cap_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="tagnum.display"):
            display_ratio(Num.from_output(math.e), max_iterations=3, on_error="empty")
        assert "Ratio search failed" in caplog.text

    def test_default_cap_terminates(self):
        """Within the default tolerance any finite value finds a ratio under the default cap."""
        result = display_ratio(Num.from_output(math.sqrt(2) / 1000))
        denominator, numerator = result.split(":")
        assert 1 <= int(denominator) <= DisplayConf.RATIO_MAX_ITERATIONS
        assert int(numerator) >= 0

    @pytest.mark.parametrize('value', [math.nan, math.inf, -math.inf])
    def test_non_finite(self, value):
        with pytest.raises(RatioNotFoundError):
            display_ratio(Num.from_output(value))
        assert display_ratio(Num.from_output(value), on_error="empty") == ""

    def test_tolerance(self):
        assert display_ratio(Num.from_output(0.333), tolerance=0.01) == "3:1"

    @pytest.mark.parametrize('kwargs', [
        pytest.param({"max_iterations": 0}, id='zero_iterations'),
        pytest.param({"max_iterations": 1.5}, id='float_iterations'),
        pytest.param({"tolerance": 0.0}, id='zero_tolerance'),
        pytest.param({"tolerance": 0.5}, id='half_tolerance'),
        pytest.param({"on_error": "ignore"}, id='on_error'),
    ])
    def test_invalid_arguments(self, kwargs):
        with pytest.raises(ValueError):
            display_ratio(Num.from_output(0.5), **kwargs)
