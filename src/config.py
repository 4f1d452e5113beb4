import os
from pathlib import Path
from typing import Optional

from clock_time import Time, parse_time

DEFAULT_REFERENCE_SIZE = 1400
DEFAULT_WINDOW_SCALE = 0.6
DEFAULT_INITIAL_TIME = "12:00"


def _env_int(env_var: str, *, default: int, minimum: Optional[int] = None) -> int:
    """Return the integer value of ``env_var`` with optional bounds checking."""
    value = os.environ.get(env_var)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be an integer") from exc
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    return parsed


def _env_float(
    env_var: str,
    *,
    default: float,
    minimum: Optional[float] = None,
    maximum: Optional[float] = None,
) -> float:
    value = os.environ.get(env_var)
    if value is None:
        return default
    try:
        parsed = float(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be a float") from exc
    if minimum is not None and parsed <= minimum:
        raise ValueError(f"{env_var} must be greater than {minimum}")
    if maximum is not None and parsed > maximum:
        raise ValueError(f"{env_var} must be at most {maximum}")
    return parsed


def _env_str(env_var: str, *, default: str) -> str:
    value = os.environ.get(env_var)
    if value is None or not value.strip():
        return default
    return value.strip()


class Configuration:
    """Settings read from the environment each time they are asked for."""

    @classmethod
    def reference_size(cls) -> int:
        return _env_int("CLOCK_REFERENCE_SIZE", default=DEFAULT_REFERENCE_SIZE, minimum=100)

    @classmethod
    def window_scale(cls) -> float:
        return _env_float("CLOCK_WINDOW_SCALE", default=DEFAULT_WINDOW_SCALE, minimum=0.0, maximum=1.0)

    @classmethod
    def window_size(cls) -> int:
        return round(cls.reference_size() * cls.window_scale())

    @classmethod
    def canvas_size(cls) -> float:
        return cls.reference_size() / 2

    @classmethod
    def initial_time(cls) -> Time:
        text = _env_str("CLOCK_INITIAL_TIME", default=DEFAULT_INITIAL_TIME)
        try:
            return parse_time(text)
        except ValueError as exc:
            raise ValueError(f"CLOCK_INITIAL_TIME must be HH:MM within 00:00-23:59, got {text!r}") from exc

    @classmethod
    def log_level(cls) -> str:
        return _env_str("LOG_LEVEL", default="INFO").upper()

    @classmethod
    def log_dir(cls) -> Optional[Path]:
        value = os.environ.get("CLOCK_LOG_DIR")
        if not value:
            return None
        return Path(value).expanduser()
