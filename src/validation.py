"""Text-box input checks for the hours and minutes fields."""

from dataclasses import dataclass
from typing import Optional

OUT_OF_RANGE_MESSAGE = "Input must be a number between 0 and 24."

HOURS_UPPER_LIMIT = 24
MINUTES_UPPER_LIMIT = 60


class InputValidationError(ValueError):
    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


@dataclass(frozen=True)
class Validation:
    error: Optional[InputValidationError] = None

    @property
    def is_ok(self):
        return self.error is None

    @classmethod
    def success(cls):
        return cls()

    @classmethod
    def failure(cls, error):
        return cls(error)


def _parse_unsigned(text: str) -> int:
    # ASCII digits only, so "-1", " 7" and "1_0" are all rejected
    if not text.isascii() or not text.isdigit():
        raise InputValidationError(OUT_OF_RANGE_MESSAGE)
    return int(text)


def validate_partial_input(text: str, upper_limit: int) -> Validation:
    """Check a text box's contents after each keystroke.

    An empty box is always fine so the user can clear it while typing.
    """
    if not text:
        return Validation.success()
    try:
        number = _parse_unsigned(text)
    except InputValidationError as e:
        return Validation.failure(e)
    if number <= upper_limit:
        return Validation.success()
    return Validation.failure(InputValidationError(OUT_OF_RANGE_MESSAGE))


def parse_value(text: str) -> int:
    """Final parse of a committed text box; an empty box means 0."""
    if not text:
        return 0
    return _parse_unsigned(text)
