"""Normalize free-text ingredient lines into scalable measurements."""

from drinkplanner.normalize.measurements import (
    FRACTION_GLYPHS,
    ITEM_UNIT,
    Amount,
    Measurement,
    NumericAmount,
    QualitativeAmount,
    parse_ingredient,
    parse_ingredients,
)
from drinkplanner.normalize.metric import MetricAmount, to_metric
from drinkplanner.normalize.scaling import clamp_servings, scale_amount, to_nice_fraction
from drinkplanner.normalize.vocabularies import (
    UnknownVocabularyError,
    get_descriptors,
    list_pages,
)

__all__ = [
    "FRACTION_GLYPHS",
    "ITEM_UNIT",
    "Amount",
    "Measurement",
    "MetricAmount",
    "NumericAmount",
    "QualitativeAmount",
    "UnknownVocabularyError",
    "clamp_servings",
    "get_descriptors",
    "list_pages",
    "parse_ingredient",
    "parse_ingredients",
    "scale_amount",
    "to_metric",
    "to_nice_fraction",
]
