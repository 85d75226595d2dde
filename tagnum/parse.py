"""
Parse tagged numbers from user text: plain numbers with an optional metric prefix and "a:b" ratios.

Malformed text yields an ABSENT Num, never an exception.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import re

# Local ----------------------------------------------------------------------------------------------------------------
from .display import DisplayConf
from .num import Num
from .prefixes import METRIC_PREFIXES, MetricPrefixTable

logger = logging.getLogger(__name__)


# @formatter:off

class ParseConf:
    """
    Default configuration constants for Num parsing.

    Attributes:
        DECIMAL_SEPARATORS (dict) : Characters accepted as decimal separators, mapped to '.'
    """
    DECIMAL_SEPARATORS = {",": "."}

# @formatter:on

# Optional sign, then digits with an optional fraction and exponent, or inf/infinity/nan.
# Unlike float() this rejects surrounding whitespace, '_' separators and non-ASCII digits.
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


# Methods --------------------------------------------------------------------------------------------------------------

def parse_num(text: str, *, prefixes: MetricPrefixTable = METRIC_PREFIXES) -> Num:
    """
    Parse an INPUT Num from text with an optional trailing metric prefix.

    Commas are read as decimal points. The prefix table is scanned in order and the first
    prefix character found at the end of the text is stripped and applied as a factor.

    Args:
        text: Text such as "42", "5,5k", "1.5u", "-2e3", "470n".
        prefixes: Metric prefix table to match suffixes against.

    Returns:
        INPUT Num with the scaled value, or an ABSENT Num if the text is not a number.

    Raises:
        TypeError: If text is not a str.

    Examples:
        >>> parse_num("5,5k")
        Num(tag=<NumTag.INPUT: 'input'>, value=5500.0)
        >>> parse_num("abc").is_absent
        True
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text)}")

    text = _normalize_decimal(text)
    factor = 1.0

    prefix = prefixes.match_suffix(text)
    if prefix is not None:
        text = text[:-1]
        factor = prefix.factor

    value = _parse_float(text)
    if value is None:
        return Num.absent()
    return Num.from_input(value * factor)


def parse_ratio(text: str, *, prefixes: MetricPrefixTable = METRIC_PREFIXES) -> Num:
    """
    Parse a ratio "a:b" into a Num holding b/a.

    Both parts are parsed with parse_num(), so they may carry metric prefixes and decimal commas.
    The result is the tagged division b / a: ABSENT if either part is not a number.

    Args:
        text: Ratio text such as "1:3" or "2,5:1k".
        prefixes: Metric prefix table to match suffixes against.

    Returns:
        INPUT Num holding b/a, or an ABSENT Num.

    Raises:
        TypeError: If text is not a str.

    Examples:
        >>> parse_ratio("1:3").value
        3.0
        >>> parse_ratio("1:2:3").is_absent
        True
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text)}")

    parts = _normalize_decimal(text).split(DisplayConf.RATIO_SEPARATOR)
    if len(parts) != 2:
        logger.debug("Rejected ratio %r: expected 2 parts, got %d", text, len(parts))
        return Num.absent()

    denominator = parse_num(parts[0], prefixes=prefixes)
    numerator = parse_num(parts[1], prefixes=prefixes)
    return numerator / denominator


# Private Methods ------------------------------------------------------------------------------------------------------

def _normalize_decimal(text: str) -> str:
    for separator, replacement in ParseConf.DECIMAL_SEPARATORS.items():
        text = text.replace(separator, replacement)
    return text


def _parse_float(text: str) -> float | None:
    if not _FLOAT_PATTERN.fullmatch(text):
        logger.debug("Rejected number %r", text)
        return None
    return float(text)
