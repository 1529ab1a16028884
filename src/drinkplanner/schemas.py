"""Common data schemas for the API."""

from pydantic import BaseModel, Field

from drinkplanner.kit.render import IngredientLine
from drinkplanner.normalize.measurements import Measurement


class MeasurementSchema(BaseModel):
    """A parsed ingredient line."""

    amount: float | str
    unit: str
    item: str
    note: str | None = None

    @classmethod
    def from_measurement(cls, measurement: Measurement) -> "MeasurementSchema":
        return cls(**measurement.to_dict())


class IngredientLineSchema(BaseModel):
    """An ingredient rendered for a serving count and display mode."""

    amount: str
    unit: str
    item: str
    note: str | None = None

    @classmethod
    def from_line(cls, line: IngredientLine) -> "IngredientLineSchema":
        return cls(amount=line.amount, unit=line.unit, item=line.item, note=line.note)


class Nutrition(BaseModel):
    """Per-serving macros."""

    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None


class ScaledNutrition(BaseModel):
    """Macros scaled to the serving count."""

    calories: int | None = None
    protein: int | None = None
    carbs: int | None = None
    fat: int | None = None
    fiber: int | None = None


class DescriptorSource(BaseModel):
    """Where the parser's descriptor words come from."""

    page: str | None = Field(None, description="Page family with a built-in vocabulary")
    descriptors: list[str] = Field(
        default_factory=list, description="Extra descriptor words for this request"
    )
