"""Serving scaling with quarter-rounded display fractions."""

import math

from drinkplanner.normalize.measurements import (
    Amount,
    NumericAmount,
    QualitativeAmount,
    parse_number,
)

DEFAULT_MIN_SERVINGS = 1
DEFAULT_MAX_SERVINGS = 6

# Quarters remainder -> display glyph
QUARTER_GLYPHS: dict[int, str] = {0: "", 1: "¼", 2: "½", 3: "¾"}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties towards positive infinity."""
    return math.floor(value + 0.5)


def to_nice_fraction(value: float) -> str:
    """
    Format a quantity as a whole number plus a quarter glyph.

    Examples:
        0.5 -> "½"
        1.5 -> "1 ½"
        2.1 -> "2"
    """
    rounded = round_half_up(value * 4) / 4
    whole = math.trunc(rounded)
    glyph = QUARTER_GLYPHS.get(round_half_up((rounded - whole) * 4), "")

    if not whole and glyph:
        return glyph
    if whole and glyph:
        return f"{whole} {glyph}"
    return str(whole)


def is_displayable(value: float) -> bool:
    """Check that a quantity survives quarter rounding without overflowing."""
    return math.isfinite(value * 4)


def scale_amount(base: Amount | float | str | None, servings: float) -> str:
    """
    Scale a base amount by a serving count for display.

    Amounts that do not read as a whole number come back unchanged, so
    "a pinch" stays "a pinch" at any serving count. This is stricter than
    a prefix parse: ranges like "2-3" are not scaled by their first number.
    Quantities too large to round are shown unscaled as well.
    """
    if isinstance(base, NumericAmount):
        value: float | None = base.value
        fallback = str(base.value)
    elif isinstance(base, QualitativeAmount):
        value = parse_number(base.text.strip())
        fallback = base.text
    elif isinstance(base, str):
        value = parse_number(base.strip())
        fallback = base
    else:
        fallback = str(base)
        try:
            value = float(base)
        except (TypeError, ValueError, OverflowError):
            return fallback

    if value is None:
        return fallback

    try:
        scaled = value * servings
    except (TypeError, OverflowError):
        return fallback

    if not is_displayable(scaled):
        return fallback

    return to_nice_fraction(scaled)


def clamp_servings(
    servings: int,
    minimum: int = DEFAULT_MIN_SERVINGS,
    maximum: int = DEFAULT_MAX_SERVINGS,
) -> int:
    """Restrict a serving count to the inclusive range [minimum, maximum]."""
    return max(minimum, min(maximum, servings))
