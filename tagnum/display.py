"""
Display formatting for tagged numbers: metric-prefixed numbers and "a:b" ratios.

The strings produced here are re-parsed by tagnum.parse, so their format is a contract:

    <digits>.<fractional digits><prefix char or nothing>    e.g. "1.50k", "-2.0µ", "0.00"
    <integer>:<integer>                                     e.g. "3:1", "2:-1"
"""

# Standard library -----------------------------------------------------------------------------------------------------
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import RatioNotFoundError
from .prefixes import METRIC_PREFIXES, MetricPrefixTable

if TYPE_CHECKING:
    from .num import Num

logger = logging.getLogger(__name__)


# @formatter:off

class DisplayConf:
    """
    Default configuration constants for Num display.

    Attributes:
        SIGNIFICANT_FIGURES (int)  : Significant figures used by str(num)
        RATIO_TOLERANCE (float)    : Max distance from an integer accepted by the ratio search
        RATIO_MAX_ITERATIONS (int) : Largest denominator tried by the ratio search
        RATIO_SEPARATOR (str)      : Separator between denominator and numerator, also used by parsing
    """
    SIGNIFICANT_FIGURES = 3
    RATIO_TOLERANCE = 1e-4
    RATIO_MAX_ITERATIONS = 100_000
    RATIO_SEPARATOR = ":"

# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def display_num(
        num: Num,
        significant_figures: int = DisplayConf.SIGNIFICANT_FIGURES,
        *,
        prefixes: MetricPrefixTable = METRIC_PREFIXES,
) -> str:
    """
    Format a Num with a metric prefix and the given number of significant figures.

    The first prefix in table order that scales |value| into [1, 1000) is applied. Digits
    after the decimal point are `significant_figures` minus the digits before it, never
    negative. Values matching no prefix (zero, values in [1, 1000) or outside the table range)
    are shown unscaled and without a prefix character. NaN is shown as "NaN" so that it
    parses back.

    Args:
        num: Number to format.
        significant_figures: Non-negative count of significant figures.
        prefixes: Metric prefix table to scale with.

    Returns:
        Formatted number, or an empty string for an absent Num.

    Raises:
        TypeError: If significant_figures is not an int.
        ValueError: If significant_figures is negative.

    Examples:
        >>> display_num(Num.from_input(1500.0), 3)
        '1.50k'
        >>> display_num(Num.from_input(1e-9), 3)
        '1.00n'
        >>> display_num(Num.from_input(0.0), 3)
        '0.00'
        >>> display_num(Num.absent(), 3)
        ''
    """
    if not isinstance(significant_figures, int) or isinstance(significant_figures, bool):
        raise TypeError(f"significant_figures must be int, got {type(significant_figures)}")
    if significant_figures < 0:
        raise ValueError(f"significant_figures must be >= 0, got {significant_figures}")

    if not num.is_number:
        return ""

    value = num.unwrap()
    if math.isnan(value):
        # "nan" would re-parse with a nano suffix
        return "NaN"

    prefix = prefixes.scale_for(abs(value))

    if prefix is not None:
        value /= prefix.factor
        suffix = prefix.display_char
    else:
        suffix = ""

    fractional_figures = max(significant_figures - _integer_figures(value), 0)
    return f"{value:.{fractional_figures}f}{suffix}"


def display_ratio(
        num: Num,
        *,
        max_iterations: int = DisplayConf.RATIO_MAX_ITERATIONS,
        tolerance: float = DisplayConf.RATIO_TOLERANCE,
        on_error: Literal["raise", "empty"] = "raise",
) -> str:
    """
    Format a Num as the ratio "a:b" with b/a equal to its value.

    Searches for the smallest multiple a·v that lies within `tolerance` of an integer b,
    trying a = 1, 2, ... up to `max_iterations`. Multiples are accumulated by repeated
    addition. Negative values are searched by magnitude and keep their sign in b.

    Args:
        num: Number to format.
        max_iterations: Largest denominator tried before giving up.
        tolerance: Max distance from an integer, in (0, 0.5).
        on_error: Behavior when no ratio is found or the value is not finite:

            - "raise": Raise RatioNotFoundError (default)
            - "empty": Return an empty string, same as for an absent Num

    Returns:
        Ratio string, or an empty string for an absent Num.

    Raises:
        RatioNotFoundError: If the search fails and on_error="raise".
        ValueError: If max_iterations, tolerance or on_error are invalid.

    Examples:
        >>> display_ratio(Num.from_output(1 / 3))
        '3:1'
        >>> display_ratio(Num.from_output(2.5))
        '2:5'
        >>> display_ratio(Num.from_output(math.pi))
        '113:355'
    """
    if not isinstance(max_iterations, int) or isinstance(max_iterations, bool) or max_iterations < 1:
        raise ValueError(f"max_iterations must be a positive integer, got {max_iterations!r}")
    if not 0 < tolerance < 0.5:
        raise ValueError(f"tolerance must be in (0, 0.5), got {tolerance!r}")
    if on_error not in ("raise", "empty"):
        raise ValueError(f"on_error must be 'raise' or 'empty', got {on_error!r}")

    if not num.is_number:
        return ""

    value = num.unwrap()
    found = _ratio_denominator(value, max_iterations, tolerance)

    if found is None:
        logger.warning("Ratio search failed for %r after %d iterations", value, max_iterations)
        if on_error == "empty":
            return ""
        raise RatioNotFoundError(value, max_iterations)

    denominator, accumulated = found
    return f"{denominator}{DisplayConf.RATIO_SEPARATOR}{round(accumulated)}"


# Private Methods ------------------------------------------------------------------------------------------------------

def _integer_figures(value: float) -> int:
    """Digits left of the decimal point, at least 1; zero and non-finite values count as 1."""
    if value == 0 or not math.isfinite(value):
        return 1
    return max(math.floor(math.log10(abs(value))) + 1, 1)


def _ratio_denominator(value: float, max_iterations: int, tolerance: float) -> tuple[int, float] | None:
    """Return (a, a·v) for the smallest a with a·v near an integer, or None if not found."""
    if not math.isfinite(value):
        return None

    denominator = 1
    accumulated = value
    while tolerance < math.modf(abs(accumulated))[0] < 1 - tolerance:
        if denominator >= max_iterations:
            return None
        denominator += 1
        accumulated += value
    return denominator, accumulated
