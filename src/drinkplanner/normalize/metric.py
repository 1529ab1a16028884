"""US volume to metric conversion for display."""

import math
from dataclasses import dataclass

from drinkplanner.normalize.scaling import round_half_up

# unit -> (factor, display unit)
METRIC_CONVERSIONS: dict[str, tuple[float, str]] = {
    "cup": (240.0, "ml"),
    "oz": (30.0, "ml"),
    "tbsp": (15.0, "ml"),
    "tsp": (5.0, "ml"),
    # Bitters stay in dashes
    "dash": (1.0, "dash"),
}


@dataclass(frozen=True)
class MetricAmount:
    """Converted amount ready for display."""

    amount: float
    unit: str

    def __str__(self) -> str:
        amount = self.amount
        if isinstance(amount, float) and amount.is_integer():
            amount = int(amount)
        return f"{amount} {self.unit}"


def to_metric(unit: str, amount: float) -> MetricAmount:
    """
    Convert an already serving-scaled amount to metric.

    Known units are rounded to whole numbers. Anything else, including
    the "item" sentinel, is returned unchanged, as is an amount that is
    not a number or would overflow once converted.
    """
    conversion = METRIC_CONVERSIONS.get(unit)
    if conversion is None:
        return MetricAmount(amount=amount, unit=unit)

    factor, metric_unit = conversion
    try:
        converted = amount * factor
        displayable = math.isfinite(converted)
    except (TypeError, OverflowError):
        displayable = False

    if not displayable:
        return MetricAmount(amount=amount, unit=unit)

    return MetricAmount(amount=round_half_up(converted), unit=metric_unit)
