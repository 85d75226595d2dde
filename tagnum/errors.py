"""
Exceptions for tagged number misuse.

Malformed user text never raises: parsing returns an absent Num instead. The exceptions
below signal caller defects or a ratio search that gave up.
"""


class AbsentValueError(ValueError):
    """Raised when the payload of an absent Num is requested; check `is_number` first."""


class RatioNotFoundError(ValueError):
    """
    Raised when no integer ratio is found for a value within the iteration cap.

    Attributes:
        value: The value that was searched.
        iterations: Number of multiples tried before giving up.
    """

    def __init__(self, value: float, iterations: int):
        self.value = value
        self.iterations = iterations
        super().__init__(f"No ratio found for {value!r} within {iterations} iterations")
