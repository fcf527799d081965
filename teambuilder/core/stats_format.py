"""Display formatting for unit stats."""

import math


def round_half_away(value: float) -> int:
    """Round to the nearest int, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    if value == 0:
        return 0
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def format_percent(value: float) -> str:
    """Convert a ratio (0.25) to a rounded percentage string (25%)."""
    return f"{round_half_away(value * 100)}%"


def format_attack_speed(value: float) -> str:
    """Always two decimals (e.g. 0.80)."""
    return f"{value:.2f}"


def format_int_list(values: list[int], sep: str = "/") -> str:
    """Join ints with ``sep`` (e.g. 50/75/113); "N/A" when empty."""
    if not values:
        return "N/A"
    if not sep:
        sep = "/"
    return sep.join(str(v) for v in values)


def format_mana(initial: int, mana: int) -> str:
    """Starting / total mana, or "0" for manaless units."""
    if initial == 0 and mana == 0:
        return "0"
    return f"{initial}/{mana}"
