"""Unit tests for ingredient line parsing."""

import dataclasses

import pytest

from drinkplanner.normalize.measurements import (
    ITEM_UNIT,
    Measurement,
    NumericAmount,
    QualitativeAmount,
    parse_ingredient,
    parse_ingredients,
    parse_number,
    resolve_amount,
)
from drinkplanner.normalize.vocabularies import (
    UnknownVocabularyError,
    get_descriptors,
    list_pages,
)

# =============================================================================
# Amount Resolution Tests
# =============================================================================


class TestResolveAmount:
    """Tests for resolve_amount and parse_number."""

    def test_fraction_glyphs(self):
        """Test that vulgar fraction glyphs resolve to decimals."""
        assert resolve_amount("½") == NumericAmount(0.5)
        assert resolve_amount("¼") == NumericAmount(0.25)
        assert resolve_amount("¾") == NumericAmount(0.75)
        assert resolve_amount("⅛") == NumericAmount(0.125)
        assert resolve_amount("⅓").value == pytest.approx(1 / 3)
        assert resolve_amount("⅔").value == pytest.approx(2 / 3)

    def test_numbers(self):
        """Test integers and decimals."""
        assert resolve_amount("8") == NumericAmount(8.0)
        assert resolve_amount("1.5") == NumericAmount(1.5)

    def test_non_numeric_kept_verbatim(self):
        """Test that words and ranges stay as text."""
        assert resolve_amount("2-3") == QualitativeAmount("2-3")
        assert resolve_amount("Splash") == QualitativeAmount("Splash")
        assert resolve_amount("1/2") == QualitativeAmount("1/2")

    def test_non_finite_rejected(self):
        """Test that nan and inf are not treated as numbers."""
        assert parse_number("nan") is None
        assert parse_number("inf") is None
        assert parse_number("1_000") is None
        assert parse_number("") is None


# =============================================================================
# Parser Tests
# =============================================================================


class TestParseIngredient:
    """Tests for parse_ingredient."""

    def test_basic_line(self):
        """Test amount, unit and multi-word item."""
        result = parse_ingredient("8 oz cold brew concentrate")
        assert result.amount == NumericAmount(8.0)
        assert result.is_numeric
        assert result.unit == "oz"
        assert result.item == "cold brew concentrate"
        assert result.note is None

    def test_fraction_glyph_line(self):
        """Test a line led by a fraction glyph."""
        result = parse_ingredient("½ tsp honey")
        assert result.amount.value == 0.5
        assert result.unit == "tsp"
        assert result.item == "honey"

    def test_of_is_dropped(self):
        """Test that "1 cup of sugar" reads like "1 cup sugar"."""
        result = parse_ingredient("1 cup of sugar")
        assert result.unit == "cup"
        assert result.item == "sugar"

    def test_of_is_case_insensitive(self):
        result = parse_ingredient("1 cup OF milk")
        assert result.item == "milk"

    def test_optional_note(self):
        """Test that (optional) is stripped into a note."""
        result = parse_ingredient("2 tbsp chocolate syrup (optional)")
        assert result.note == "optional"
        assert result.item == "chocolate syrup"
        assert result.is_optional

    def test_optional_in_middle(self):
        """Test that whitespace around a mid-line marker collapses."""
        result = parse_ingredient("1 tsp honey (optional) or agave")
        assert result.item == "honey or agave"
        assert result.note == "optional"

    def test_single_token(self):
        """Test that a single word becomes one item."""
        result = parse_ingredient("Ice")
        assert result.amount == QualitativeAmount("1")
        assert result.unit == ITEM_UNIT
        assert result.item == "Ice"
        assert result.to_dict() == {"amount": "1", "unit": "item", "item": "Ice"}

    def test_single_token_is_trimmed(self):
        result = parse_ingredient("  Ice  ")
        assert result.item == "Ice"

    def test_qualitative_amount(self):
        """Test that a range stays as text."""
        result = parse_ingredient("2-3 dashes Angostura bitters")
        assert result.amount == QualitativeAmount("2-3")
        assert not result.is_numeric
        assert result.unit == "dashes"
        assert result.item == "Angostura bitters"

    def test_two_tokens_has_empty_item(self):
        result = parse_ingredient("1 cup")
        assert result.unit == "cup"
        assert result.item == ""


class TestDescriptorCorrection:
    """Tests for descriptor words that sit in the unit position."""

    def test_descriptor_folds_into_item(self, cocktail_descriptors):
        """Test that a descriptor is not treated as a unit."""
        result = parse_ingredient("1 sugar cube", cocktail_descriptors)
        assert result.unit == ITEM_UNIT
        assert result.item == "sugar cube"

    def test_descriptor_match_ignores_case(self):
        result = parse_ingredient("1 Fresh lime wedge", {"fresh"})
        assert result.unit == ITEM_UNIT
        assert result.item == "Fresh lime wedge"

    def test_descriptor_alone(self):
        result = parse_ingredient("1 fresh", ["fresh"])
        assert result.unit == ITEM_UNIT
        assert result.item == "fresh"

    def test_descriptor_with_optional(self):
        result = parse_ingredient("2 frozen strawberries (optional)", get_descriptors("smoothies"))
        assert result.unit == ITEM_UNIT
        assert result.item == "frozen strawberries"
        assert result.note == "optional"

    @pytest.mark.parametrize(
        "text",
        ["1 fresh mint sprig", "2 FROZEN bananas", "1 vanilla bean", "3 plain ice cubes"],
    )
    def test_sentinel_and_prefix(self, text):
        """Test that the descriptor always leads the item."""
        descriptors = get_descriptors("smoothies")
        result = parse_ingredient(text, descriptors)
        assert result.unit == ITEM_UNIT
        assert result.item.lower().startswith(text.split()[1].lower())

    def test_vocabularies_are_per_page(self):
        """Test that a word is a descriptor on one page but not another."""
        text = "2 ceremonial grade matcha"
        assert parse_ingredient(text, get_descriptors("matcha")).unit == ITEM_UNIT
        assert parse_ingredient(text, get_descriptors("cocktails")).unit == "ceremonial"

    def test_no_descriptors_by_default(self):
        result = parse_ingredient("1 fresh lime")
        assert result.unit == "fresh"


class TestParserRobustness:
    """Tests that parsing never raises."""

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "\t\n", "½", "(optional)", "🍹🍹 🍋", "nan nan nan", "1 of of of", "∞ ∞"],
    )
    def test_never_raises(self, text):
        result = parse_ingredient(text)
        assert isinstance(result, Measurement)
        assert isinstance(result.unit, str)
        assert isinstance(result.item, str)

    def test_empty_string(self):
        result = parse_ingredient("")
        assert result.amount == QualitativeAmount("1")
        assert result.unit == ITEM_UNIT
        assert result.item == ""

    def test_measurement_is_immutable(self):
        result = parse_ingredient("1 cup milk")
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.unit = "ml"


class TestParseIngredients:
    """Tests for parse_ingredients."""

    def test_parses_list(self, old_fashioned_lines, cocktail_descriptors):
        results = parse_ingredients(old_fashioned_lines, cocktail_descriptors)
        assert len(results) == 5
        assert results[0].unit == "oz"
        assert results[1].unit == ITEM_UNIT
        assert results[4].item == "Ice"

    def test_keeps_existing_measurements(self):
        existing = Measurement(NumericAmount(1.0), "scoop", "whey protein")
        results = parse_ingredients([existing, "8 oz milk"])
        assert results[0] is existing
        assert results[1].item == "milk"


# =============================================================================
# Vocabulary Tests
# =============================================================================


class TestVocabularies:
    """Tests for descriptor vocabulary lookup."""

    def test_known_page(self):
        assert "ceremonial" in get_descriptors("matcha")
        assert "frozen" in get_descriptors("smoothies")

    def test_unknown_page(self):
        with pytest.raises(UnknownVocabularyError) as exc_info:
            get_descriptors("milkshakes")
        assert "milkshakes" in str(exc_info.value)

    def test_unknown_page_is_key_error(self):
        with pytest.raises(KeyError):
            get_descriptors("milkshakes")

    def test_list_pages_sorted(self):
        pages = list_pages()
        assert pages == sorted(pages)
        assert "cold-brew" in pages
