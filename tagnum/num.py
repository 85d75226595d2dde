"""
Tagged numbers for calculator-style applications.

A Num is a float that remembers where it came from: typed by the user (INPUT), produced
by a computation (OUTPUT), or ABSENT when there is no value at all. ABSENT is a regular,
inspectable state, not an error.

Example:
    >>> width = Num.parse("4,7k")
    >>> area = Num.from_output(2.0) * width
    >>> area.is_output, area.display(3)
    (True, '9.40k')
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Callable, Literal, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .display import DisplayConf, display_num, display_ratio
from .errors import AbsentValueError


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class NumTag(StrEnum):
    """
    Provenance of a Num.

    Attributes:
        INPUT (str)  : Value typed in by the user
        OUTPUT (str) : Value produced by computation
        ABSENT (str) : No value
    """
    INPUT = "input"
    OUTPUT = "output"
    ABSENT = "absent"


@dataclass(frozen=True, slots=True)
class Num:
    """
    Immutable tagged number.

    For most use cases, prefer the factory class methods:
    - Num.from_input() for values typed by the user
    - Num.from_output() for computed values
    - Num.absent() for no value
    - Num.parse() and Num.parse_ratio() for text

    Arithmetic with another Num or a raw int/float keeps the left operand's tag. The result
    is ABSENT when either Num operand is ABSENT.
    """

    tag: NumTag
    value: float | None = None

    def __post_init__(self):
        if not isinstance(self.tag, NumTag):
            raise TypeError(f"tag must be NumTag, got {type(self.tag)}")

        match self.tag:
            case NumTag.INPUT | NumTag.OUTPUT:
                if self.value is None:
                    raise ValueError(f"{self.tag.name} Num requires a value")
                if not _is_scalar(self.value):
                    raise TypeError(f"The 'value' must be int | float: {type(self.value)}.")
                object.__setattr__(self, 'value', _to_float(self.value))
            case NumTag.ABSENT:
                if self.value is not None:
                    raise ValueError(f"ABSENT Num takes no value, got {self.value!r}")
            case _:
                raise AssertionError(f"Unhandled tag: {self.tag!r}")

    # ----- Factories -----

    @classmethod
    def from_input(cls, value: int | float) -> Self:
        """Number typed in by the user."""
        return cls(NumTag.INPUT, value)

    @classmethod
    def from_output(cls, value: int | float) -> Self:
        """Number produced by a computation."""
        return cls(NumTag.OUTPUT, value)

    @classmethod
    def absent(cls) -> Self:
        """No number."""
        return cls(NumTag.ABSENT)

    @staticmethod
    def parse(text: str) -> "Num":
        """
        Parse an INPUT Num from text such as "5,5k" or "1.2e3"; ABSENT if unparsable.

        See Also:
            tagnum.parse.parse_num
        """
        from .parse import parse_num
        return parse_num(text)

    @staticmethod
    def parse_ratio(text: str) -> "Num":
        """
        Parse a ratio "a:b" into a Num holding b/a; ABSENT if unparsable.

        See Also:
            tagnum.parse.parse_ratio
        """
        from .parse import parse_ratio
        return parse_ratio(text)

    # ----- Predicates -----

    @property
    def is_input(self) -> bool:
        return self.tag is NumTag.INPUT

    @property
    def is_output(self) -> bool:
        return self.tag is NumTag.OUTPUT

    @property
    def is_absent(self) -> bool:
        return self.tag is NumTag.ABSENT

    @property
    def is_number(self) -> bool:
        """True for INPUT or OUTPUT."""
        return self.tag is not NumTag.ABSENT

    # ----- Extraction -----

    def to_optional(self) -> float | None:
        """Return the value, or None if ABSENT."""
        return self.value

    def unwrap(self) -> float:
        """
        Return the value.

        Raises:
            AbsentValueError: If the Num is ABSENT. Calling unwrap() without checking
                `is_number` first is a caller bug.
        """
        if self.value is None:
            raise AbsentValueError("Cannot unwrap an ABSENT Num")
        return self.value

    # ----- Math -----

    def sqrt(self) -> Self:
        """
        Square root keeping the tag; ABSENT stays ABSENT.

        Negative values give NaN rather than raising.
        """
        return self._map(_sqrt)

    # ----- Text -----

    def display(self, significant_figures: int = DisplayConf.SIGNIFICANT_FIGURES) -> str:
        """Format with a metric prefix, e.g. "1.50k"; empty string if ABSENT."""
        return display_num(self, significant_figures)

    def display_ratio(
            self,
            *,
            max_iterations: int = DisplayConf.RATIO_MAX_ITERATIONS,
            tolerance: float = DisplayConf.RATIO_TOLERANCE,
            on_error: Literal["raise", "empty"] = "raise",
    ) -> str:
        """
        Format as a ratio "a:b" with b/a equal to the value; empty string if ABSENT.

        See Also:
            tagnum.display.display_ratio
        """
        return display_ratio(self, max_iterations=max_iterations, tolerance=tolerance, on_error=on_error)

    def __str__(self) -> str:
        return self.display()

    def __float__(self) -> float:
        return self.unwrap()

    # ----- Arithmetic -----

    def __add__(self, other: "Num | int | float") -> Self:
        return self._combine(other, operator.add)

    def __sub__(self, other: "Num | int | float") -> Self:
        return self._combine(other, operator.sub)

    def __mul__(self, other: "Num | int | float") -> Self:
        return self._combine(other, operator.mul)

    def __truediv__(self, other: "Num | int | float") -> Self:
        return self._combine(other, _ieee_div)

    def _combine(self, other, op: Callable[[float, float], float]):
        if isinstance(other, Num):
            if other.is_absent:
                return Num.absent()
            rhs = other.value
        elif _is_scalar(other):
            rhs = _to_float(other)
        else:
            return NotImplemented

        return self._map(lambda v: op(v, rhs))

    def _map(self, fn: Callable[[float], float]) -> Self:
        match self.tag:
            case NumTag.INPUT | NumTag.OUTPUT:
                return type(self)(self.tag, fn(self.value))
            case NumTag.ABSENT:
                return self
            case _:
                raise AssertionError(f"Unhandled tag: {self.tag!r}")


# Private Methods ------------------------------------------------------------------------------------------------------

def _is_scalar(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_float(value: int | float) -> float:
    # ints beyond the float range saturate to infinity, as float arithmetic overflows
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _sqrt(value: float) -> float:
    # math.sqrt raises on negatives; NaN passes through
    if value < 0:
        return math.nan
    return math.sqrt(value)


def _ieee_div(a: float, b: float) -> float:
    """Division with IEEE 754 results for a zero divisor instead of ZeroDivisionError."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)
