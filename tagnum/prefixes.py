"""
Metric (SI) prefix table shared by number display and parsing.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class MetricPrefix:
    """
    A metric prefix: one or more accepted characters and a power-of-ten exponent.

    The first character of `symbol` is the one used for display, all of them are accepted
    when parsing. Micro is the only multi-character symbol: "µu" displays as 'µ' (U+00B5)
    and parses from either 'µ' or ASCII 'u'.
    """

    symbol: str
    exponent: int

    def __post_init__(self):
        if not isinstance(self.symbol, str) or not self.symbol:
            raise ValueError(f"symbol must be a non-empty string, got: {self.symbol!r}")
        if not isinstance(self.exponent, int) or isinstance(self.exponent, bool):
            raise TypeError(f"exponent must be int, got {type(self.exponent)}")

    @property
    def display_char(self) -> str:
        """Character appended to a formatted number, e.g. 'k' or 'µ'."""
        return self.symbol[0]

    @property
    def factor(self) -> float:
        """
        Scale factor 10^exponent.

        Built from a float literal so that, for instance, the nano factor equals `1e-9` exactly.
        """
        return float(f"1e{self.exponent}")

    @property
    def upper_bound(self) -> float:
        """Exclusive upper magnitude for this prefix, 1000 × factor."""
        return float(f"1e{self.exponent + 3}")


class MetricPrefixTable(Mapping[int, MetricPrefix]):
    """
    An ordered, read-only table of metric prefixes keyed by exponent.

    - Forward direction (exponent -> prefix) implements the stdlib Mapping protocol.
    - Reverse direction (character -> prefix) available via get_by_char() and match_suffix().
    - Iteration follows table order, which is the scan order for both display and parsing.
    - Enforces uniqueness of exponents and of every accepted character.
    """

    def __init__(self, entries: Iterable[tuple[str, int]]) -> None:
        self._forward_map: dict[int, MetricPrefix] = {}
        self._char_map: dict[str, MetricPrefix] = {}

        for symbol, exponent in entries:
            prefix = MetricPrefix(symbol, exponent)
            if exponent in self._forward_map:
                raise ValueError(
                    f"Exponent {exponent} already exists (maps to {self._forward_map[exponent].symbol!r})"
                )
            for char in symbol:
                if char in self._char_map:
                    raise ValueError(
                        f"Character {char!r} already exists (used by {self._char_map[char].symbol!r})"
                    )
                self._char_map[char] = prefix
            self._forward_map[exponent] = prefix

    # ----- Mapping required methods -----

    def __getitem__(self, exponent: int) -> MetricPrefix:
        return self._forward_map[exponent]

    def __iter__(self) -> Iterator[int]:
        return iter(self._forward_map)

    def __len__(self) -> int:
        return len(self._forward_map)

    # ----- Lookups -----

    def get_by_char(self, char: str) -> MetricPrefix | None:
        """Lookup prefix by any of its accepted characters."""
        return self._char_map.get(char)

    def scale_for(self, magnitude: float) -> MetricPrefix | None:
        """
        Return the first prefix in table order whose factor brings magnitude into [1, 1000).

        Returns None when no prefix matches: zero, values outside the table range,
        values already in [1, 1000) and non-finite values.

        Examples:
            >>> METRIC_PREFIXES.scale_for(1500.0).symbol
            'k'
            >>> METRIC_PREFIXES.scale_for(0.0) is None
            True
        """
        for prefix in self._forward_map.values():
            if prefix.factor <= magnitude < prefix.upper_bound:
                return prefix
        return None

    def match_suffix(self, text: str) -> MetricPrefix | None:
        """
        Return the first prefix in table order, one of whose characters ends the text.

        Characters are tried in symbol order within an entry; the first match wins.
        """
        for prefix in self._forward_map.values():
            for char in prefix.symbol:
                if text.endswith(char):
                    return prefix
        return None

    def __repr__(self) -> str:
        pairs = [(p.symbol, p.exponent) for p in self._forward_map.values()]
        return f"MetricPrefixTable({pairs!r})"


# @formatter:off
METRIC_PREFIXES = MetricPrefixTable([
    ("f", -15), ("p", -12), ("n", -9), ("µu", -6), ("m", -3),
    ("k", 3), ("M", 6), ("G", 9), ("T", 12), ("P", 15),
])
# @formatter:on
