"""Render measurements into display lines, copy text and share previews."""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from drinkplanner.normalize.measurements import Measurement, NumericAmount
from drinkplanner.normalize.metric import to_metric
from drinkplanner.normalize.scaling import round_half_up, scale_amount

NUTRITION_FIELDS = ("calories", "protein", "carbs", "fat", "fiber")

SHARE_PREVIEW_LINES = 4


@dataclass(frozen=True)
class IngredientLine:
    """A single ingredient as shown in a recipe kit."""

    amount: str
    unit: str
    item: str
    note: str | None = None

    @property
    def display_quantity(self) -> str:
        return f"{self.amount} {self.unit}"

    @property
    def display(self) -> str:
        return " ".join(filter(None, [self.display_quantity, self.item]))

    def to_text(self) -> str:
        """Format as a bulleted recipe line."""
        text = f"- {self.display}"
        if self.note:
            text += f" — {self.note}"
        return text


def _format_number(value: float) -> str:
    if float(value).is_integer() and abs(value) < 1e15:
        return str(int(value))
    return f"{value:g}"


def render_ingredient(
    measurement: Measurement,
    servings: int,
    metric: bool = False,
) -> IngredientLine:
    """
    Render one measurement for a serving count and display mode.

    Metric mode converts the scaled absolute amount and shows whole
    numbers; US mode shows quarter fractions. Qualitative amounts are
    shown as written in both modes.
    """
    amount = measurement.amount

    if metric and isinstance(amount, NumericAmount):
        converted = to_metric(measurement.unit, amount.value * servings)
        return IngredientLine(
            amount=_format_number(converted.amount),
            unit=converted.unit,
            item=measurement.item,
            note=measurement.note,
        )

    return IngredientLine(
        amount=scale_amount(amount, servings),
        unit=measurement.unit,
        item=measurement.item,
        note=measurement.note,
    )


def render_ingredients(
    measurements: Sequence[Measurement],
    servings: int,
    metric: bool = False,
) -> list[IngredientLine]:
    return [render_ingredient(m, servings, metric) for m in measurements]


def scale_nutrition(
    nutrition: Mapping[str, float | None] | None,
    servings: int,
) -> dict[str, int | None]:
    """
    Scale per-serving macros by the serving count.

    Missing or zero values stay None, as do products too large to round.
    """
    nutrition = nutrition or {}
    multiplier = servings or 1

    scaled: dict[str, int | None] = {}
    for name in NUTRITION_FIELDS:
        value = nutrition.get(name)
        if value and math.isfinite(value * multiplier):
            scaled[name] = round_half_up(value * multiplier)
        else:
            scaled[name] = None
    return scaled


def format_recipe_text(
    name: str,
    lines: Sequence[IngredientLine],
    servings: int,
    notes: str = "",
) -> str:
    """Build the plain-text recipe used by the copy action."""
    body = "\n".join(line.to_text() for line in lines)
    return f"{name} (serves {servings})\n{body}\n\nNotes: {notes or '-'}"


def format_share_preview(name: str, lines: Sequence[IngredientLine], servings: int) -> str:
    """Build a short share text from the first few ingredients."""
    preview = " · ".join(line.display for line in lines[:SHARE_PREVIEW_LINES])
    text = f"{name} — serves {servings}\n{preview}"
    if len(lines) > SHARE_PREVIEW_LINES:
        text += f" …plus {len(lines) - SHARE_PREVIEW_LINES} more"
    return text
