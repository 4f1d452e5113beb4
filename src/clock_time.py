from dataclasses import dataclass

from validation import InputValidationError, OUT_OF_RANGE_MESSAGE

HOURS_PER_DAY = 24
MINUTES_PER_HOUR = 60


@dataclass
class Time:
    """Hours (0-23) and minutes (0-59) shown by the clock face."""
    hours: int = 12
    minutes: int = 0

    def __str__(self):
        return f"{self.hours:02d}:{self.minutes:02d}"


def parse_time(text: str) -> Time:
    """Parse ``HH:MM`` into a Time, raising ValueError when malformed."""
    hours, sep, minutes = text.strip().partition(":")
    if not sep or not hours.isdigit() or not minutes.isdigit():
        raise ValueError(f"time must look like HH:MM, got {text!r}")
    h, m = int(hours), int(minutes)
    if h >= HOURS_PER_DAY or m >= MINUTES_PER_HOUR:
        raise ValueError(f"time out of range: {text!r}")
    return Time(h, m)


def increment_hours(time: Time) -> None:
    time.hours = (time.hours + 1) % HOURS_PER_DAY


def decrement_hours(time: Time) -> None:
    time.hours = (time.hours - 1 + HOURS_PER_DAY) % HOURS_PER_DAY


def increment_minutes(time: Time) -> None:
    time.minutes = (time.minutes + 1) % MINUTES_PER_HOUR
    if time.minutes == 0:
        increment_hours(time)


def decrement_minutes(time: Time) -> None:
    time.minutes = (time.minutes - 1 + MINUTES_PER_HOUR) % MINUTES_PER_HOUR
    if time.minutes == MINUTES_PER_HOUR - 1:
        decrement_hours(time)


def set_hours(time: Time, value: int) -> None:
    """Store a committed hours value; out-of-range values leave ``time`` as is."""
    if not 0 <= value < HOURS_PER_DAY:
        raise InputValidationError(OUT_OF_RANGE_MESSAGE)
    time.hours = value


def set_minutes(time: Time, value: int) -> None:
    if not 0 <= value < MINUTES_PER_HOUR:
        raise InputValidationError(OUT_OF_RANGE_MESSAGE)
    time.minutes = value
