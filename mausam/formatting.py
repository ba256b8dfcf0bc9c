import math
import numbers


def as_number(value) -> float | None:
    """Return value as a finite float, or None for missing/non-numeric input."""
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, numbers.Real):
        return None
    value = float(value)
    if not math.isfinite(value):
        return None
    return value


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; readings round .5 upwards.
    return int(math.floor(value + 0.5))


def format_reading(value, unit: str) -> str:
    number = as_number(value)
    if number is None:
        return f"-- {unit}"
    return f"{round_half_up(number)} {unit}"
