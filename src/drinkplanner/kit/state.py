"""Per-recipe kit state: servings, US/Metric toggle and notes."""

from dataclasses import dataclass, field

from drinkplanner.config import get_settings
from drinkplanner.logging_config import get_logger
from drinkplanner.normalize.scaling import clamp_servings

logger = get_logger(__name__)


@dataclass
class RecipeKitState:
    """
    Keyed view state for recipe kits.

    Every recipe id has its own serving count, display mode and notes.
    Nothing here is persisted; a fresh instance starts in US mode at the
    default serving count.
    """

    min_servings: int = field(default_factory=lambda: get_settings().servings_min)
    max_servings: int = field(default_factory=lambda: get_settings().servings_max)
    default_servings: int = field(default_factory=lambda: get_settings().default_servings)

    _servings: dict[str, int] = field(default_factory=dict, repr=False)
    _metric: dict[str, bool] = field(default_factory=dict, repr=False)
    _notes: dict[str, str] = field(default_factory=dict, repr=False)

    def _clamp(self, servings: int) -> int:
        return clamp_servings(servings, self.min_servings, self.max_servings)

    def servings(self, recipe_id: str, default: int | None = None) -> int:
        """Get the serving count for a recipe."""
        if recipe_id in self._servings:
            return self._servings[recipe_id]
        return self._clamp(default or self.default_servings)

    def set_servings(self, recipe_id: str, servings: int) -> int:
        self._servings[recipe_id] = self._clamp(servings)
        return self._servings[recipe_id]

    def bump_servings(self, recipe_id: str, delta: int, default: int | None = None) -> int:
        """Increment or decrement servings, staying within bounds."""
        current = self.servings(recipe_id, default)
        updated = self.set_servings(recipe_id, current + delta)
        logger.debug(f"Servings for {recipe_id}: {current} -> {updated}")
        return updated

    def reset_servings(self, recipe_id: str) -> int:
        self._servings.pop(recipe_id, None)
        return self.servings(recipe_id)

    def is_metric(self, recipe_id: str) -> bool:
        return self._metric.get(recipe_id, False)

    def set_metric(self, recipe_id: str, metric: bool) -> bool:
        self._metric[recipe_id] = metric
        return metric

    def toggle_metric(self, recipe_id: str) -> bool:
        """Switch between US and Metric display for a recipe."""
        return self.set_metric(recipe_id, not self.is_metric(recipe_id))

    def notes(self, recipe_id: str) -> str:
        return self._notes.get(recipe_id, "")

    def set_notes(self, recipe_id: str, notes: str) -> None:
        self._notes[recipe_id] = notes
