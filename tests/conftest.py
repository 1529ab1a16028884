"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from drinkplanner.kit.state import RecipeKitState
from drinkplanner.main import app
from drinkplanner.normalize.vocabularies import get_descriptors

# =============================================================================
# Recipe Fixtures
# =============================================================================


@pytest.fixture
def old_fashioned_lines():
    """Ingredient lines for a classic cocktail."""
    return [
        "2 oz Bourbon or Rye whiskey",
        "1 sugar cube",
        "2-3 dashes Angostura bitters",
        "Orange peel",
        "Ice",
    ]


@pytest.fixture
def matcha_latte_lines():
    """Ingredient lines for a matcha latte."""
    return [
        "1 tsp matcha powder",
        "2 tbsp hot water",
        "8 oz milk",
        "1 tsp honey (optional)",
    ]


@pytest.fixture
def cocktail_descriptors():
    return get_descriptors("cocktails")


@pytest.fixture
def kit_state():
    """Recipe kit state with the default 1-6 serving bounds."""
    return RecipeKitState(min_servings=1, max_servings=6, default_servings=1)


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def client():
    """Test client for the FastAPI app."""
    return TestClient(app)
