"""Descriptor vocabularies for each drink page family.

A descriptor is a word that sits where a unit would ("1 fresh lime",
"1 tsp ceremonial matcha") but describes the item instead. Each page
family supplies its own set to the parser.
"""

from collections.abc import Mapping

_SMOOTHIE = frozenset(
    {"low-fat", "frozen", "unsweetened", "natural", "vanilla", "plain", "fresh"}
)
_CLASSIC_COCKTAIL = frozenset({"fresh", "large", "sugar", "simple", "sweet", "dry"})

DESCRIPTOR_VOCABULARIES: Mapping[str, frozenset[str]] = {
    # Caffeinated
    "cold-brew": frozenset({"cold", "fresh", "brewed", "chilled", "ice-cold"}),
    "iced-coffee": frozenset(
        {"cold", "iced", "fresh", "brewed", "strong", "double", "vanilla", "chocolate"}
    ),
    "specialty-coffee": frozenset(
        {"cold", "specialty", "fresh", "brewed", "strong", "double", "vanilla", "chocolate"}
    ),
    "espresso": frozenset({"fresh", "hot", "cold", "steamed", "foamed"}),
    "matcha": frozenset({"ceremonial", "culinary", "fresh", "hot", "cold", "iced"}),
    "tea": frozenset({"hot", "green", "black", "herbal", "white", "oolong", "fresh", "brewed"}),
    # Potent potables
    "cocktails": _CLASSIC_COCKTAIL,
    "martinis": _CLASSIC_COCKTAIL,
    "daiquiri": frozenset({"fresh", "large", "simple", "rich", "dry"}),
    "vodka": frozenset(
        {"fresh", "lime", "lemon", "ginger", "tomato", "cranberry", "pineapple", "coffee", "triple"}
    ),
    "scotch-irish-whiskey": frozenset(
        {"blended", "highland", "islay", "irish", "fresh", "sweet", "honey"}
    ),
    "whiskey-bourbon": frozenset(
        {"fresh", "large", "premium", "angostura", "maraschino", "simple", "sugar"}
    ),
    "seasonal": frozenset(
        {"bourbon", "fresh", "vodka", "vanilla", "blanco", "hot", "heavy", "lightly"}
    ),
    "rum": frozenset({"fresh", "white", "dark", "gold", "aged", "light"}),
    "tequila-mezcal": frozenset({"fresh", "blanco", "reposado", "añejo", "vanilla"}),
    "mocktails": frozenset({"fresh", "whole", "large", "sugar", "white"}),
    # Smoothies
    "smoothies": _SMOOTHIE,
    "dessert-smoothies": _SMOOTHIE - {"fresh"},
    "protein-shakes": _SMOOTHIE | {"unflavored"},
}


class UnknownVocabularyError(KeyError):
    """Raised when no descriptor vocabulary exists for a page."""

    def __init__(self, page: str):
        super().__init__(page)
        self.page = page

    def __str__(self) -> str:
        return f"No descriptor vocabulary for page '{self.page}'"


def get_descriptors(page: str) -> frozenset[str]:
    """Get the descriptor vocabulary for a page family."""
    try:
        return DESCRIPTOR_VOCABULARIES[page]
    except KeyError:
        raise UnknownVocabularyError(page) from None


def list_pages() -> list[str]:
    """List page families with a descriptor vocabulary."""
    return sorted(DESCRIPTOR_VOCABULARIES)
