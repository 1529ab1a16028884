"""Ingredient line parsing into structured measurements."""

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Union

from drinkplanner.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# Constants
# =============================================================================

# Unit sentinel for lines without a dimensional unit
ITEM_UNIT = "item"

OPTIONAL_MARKER = "(optional)"
OPTIONAL_NOTE = "optional"

# Unicode vulgar fractions that appear as leading amounts
FRACTION_GLYPHS: dict[str, float] = {
    "½": 0.5,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "¼": 0.25,
    "¾": 0.75,
    "⅛": 0.125,
}

_OF_PATTERN = re.compile(r"\sof\s", re.IGNORECASE)


# =============================================================================
# Amount Types
# =============================================================================


@dataclass(frozen=True)
class NumericAmount:
    """A quantity that can be scaled and converted."""

    value: float


@dataclass(frozen=True)
class QualitativeAmount:
    """A descriptive quantity ("a", "2-3", "splash") kept verbatim."""

    text: str

    def __str__(self) -> str:
        return self.text


Amount = Union[NumericAmount, QualitativeAmount]


@dataclass(frozen=True)
class Measurement:
    """One normalized ingredient line."""

    amount: Amount
    unit: str
    item: str
    note: str | None = None

    @property
    def is_numeric(self) -> bool:
        """Check whether the amount can be scaled."""
        return isinstance(self.amount, NumericAmount)

    @property
    def is_optional(self) -> bool:
        return self.note == OPTIONAL_NOTE

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict, omitting the note when unset."""
        amount: float | str
        if isinstance(self.amount, NumericAmount):
            amount = self.amount.value
        else:
            amount = self.amount.text

        data: dict[str, Any] = {"amount": amount, "unit": self.unit, "item": self.item}
        if self.note is not None:
            data["note"] = self.note
        return data


# =============================================================================
# Parsing Functions
# =============================================================================


def parse_number(token: str) -> float | None:
    """
    Parse a token as a finite number.

    Returns None for anything that is not a plain number, including
    ranges like "2-3", "nan" and "inf".
    """
    if not token or "_" in token:
        return None
    try:
        value = float(token)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def resolve_amount(token: str) -> Amount:
    """
    Resolve a leading token into an amount.

    Fraction glyphs win over numeric parsing; anything else is kept
    verbatim as a qualitative amount.
    """
    if token in FRACTION_GLYPHS:
        return NumericAmount(FRACTION_GLYPHS[token])

    value = parse_number(token)
    if value is None:
        logger.debug(f"Keeping non-numeric amount {token!r} as text")
        return QualitativeAmount(token)

    return NumericAmount(value)


def parse_ingredient(text: str, descriptors: Iterable[str] = ()) -> Measurement:
    """
    Parse a free-text ingredient line into a Measurement.

    Handles formats like:
    - "8 oz cold brew concentrate"
    - "½ tsp honey"
    - "1 cup of sugar" (the first " of " is dropped)
    - "2 tbsp chocolate syrup (optional)"
    - "Ice" (single token, becomes 1 item)

    Args:
        text: The raw ingredient line.
        descriptors: Words that look like units but describe the item
            ("fresh", "frozen", "ceremonial"). Matched case-insensitively.

    Returns:
        Measurement. Never raises; unparseable input degrades to text.
    """
    trimmed = (text or "").strip()
    parts = _OF_PATTERN.sub(" ", trimmed, count=1).split()

    if len(parts) < 2:
        return Measurement(amount=QualitativeAmount("1"), unit=ITEM_UNIT, item=trimmed)

    amount = resolve_amount(parts[0])
    unit = parts[1]
    item = " ".join(parts[2:])

    descriptor_set = {word.lower() for word in descriptors}
    if unit.lower() in descriptor_set:
        item = " ".join(filter(None, [unit, item]))
        unit = ITEM_UNIT

    if OPTIONAL_MARKER in item:
        item = " ".join(item.replace(OPTIONAL_MARKER, " ", 1).split())
        return Measurement(amount=amount, unit=unit, item=item, note=OPTIONAL_NOTE)

    return Measurement(amount=amount, unit=unit, item=item)


def parse_ingredients(
    lines: Iterable[str | Measurement],
    descriptors: Iterable[str] = (),
) -> list[Measurement]:
    """
    Parse a recipe's ingredient list.

    Entries that are already Measurements are kept as they are.
    """
    descriptor_set = frozenset(word.lower() for word in descriptors)
    measurements: list[Measurement] = []

    for line in lines:
        if isinstance(line, Measurement):
            measurements.append(line)
        else:
            measurements.append(parse_ingredient(line, descriptor_set))

    return measurements
