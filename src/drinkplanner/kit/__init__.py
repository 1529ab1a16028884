"""Recipe kit: per-recipe view state and display rendering."""

from drinkplanner.kit.render import (
    IngredientLine,
    format_recipe_text,
    format_share_preview,
    render_ingredient,
    render_ingredients,
    scale_nutrition,
)
from drinkplanner.kit.state import RecipeKitState

__all__ = [
    "IngredientLine",
    "RecipeKitState",
    "format_recipe_text",
    "format_share_preview",
    "render_ingredient",
    "render_ingredients",
    "scale_nutrition",
]
