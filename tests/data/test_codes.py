"""Tests for the market code and generation type catalogs."""

import pytest

from streacs_app.data.codes import (
    MARKET_CODE_DEFINITIONS,
    NO_DATA_COLOR,
    NO_DATA_LABEL,
    GenerationType,
    MarketCode,
    MarketTier,
    generation_type_label,
    get_definition,
    liberalization_score,
    market_color,
    market_label,
)


class TestMarketCode:
    """Test market code parsing and tiers."""

    def test_parse_known_codes(self):
        """Every catalog string parses to its enum member."""
        for code in MarketCode:
            assert MarketCode.parse(code.value) is code
            assert MarketCode.parse(code) is code

    @pytest.mark.parametrize("raw", [None, "", "none", "5a", "3A", 3, ["1a"], {"code": "1a"}])
    def test_parse_unknown_returns_none(self, raw):
        """Unrecognized values parse to None rather than raising."""
        assert MarketCode.parse(raw) is None

    def test_tiers(self):
        """Code prefixes map onto the four liberalization tiers."""
        assert MarketCode.VIU_STATE.tier is MarketTier.VERTICALLY_INTEGRATED
        assert MarketCode.SBM_WITHOUT_GENERATION.tier is MarketTier.SINGLE_BUYER
        assert MarketCode.WHOLESALE_BID_BASED.tier is MarketTier.WHOLESALE
        assert MarketCode.RETAIL_FULL.tier is MarketTier.RETAIL

    def test_catalog_covers_every_code_once(self):
        """The definition catalog lists all ten codes in ascending order."""
        codes = [definition.code for definition in MARKET_CODE_DEFINITIONS]
        assert codes == list(MarketCode)
        assert len(codes) == 10

    def test_catalog_types_match_tiers(self):
        for definition in MARKET_CODE_DEFINITIONS:
            assert definition.type is definition.code.tier

    def test_get_definition(self):
        definition = get_definition("3b")
        assert definition is not None
        assert definition.label == "Bid-based Power Exchange"
        assert get_definition("9z") is None


class TestPresentationMappings:
    """Test color, label and score lookups."""

    def test_every_code_has_color_label_score(self):
        """No code falls through to the fallback arm."""
        for code in MarketCode:
            assert market_color(code) != NO_DATA_COLOR
            assert market_label(code) != NO_DATA_LABEL
            assert 1 <= liberalization_score(code) <= 9

    @pytest.mark.parametrize("code", [None, "", "none", "x", 42])
    def test_fallbacks(self, code):
        """Missing and unknown codes resolve to gray, "No data" and score 0."""
        assert market_color(code) == "#cccccc"
        assert market_label(code) == "No data"
        assert liberalization_score(code) == 0

    def test_scores_non_decreasing_in_code_order(self):
        """Scores never drop as codes become more liberalized."""
        scores = [liberalization_score(code) for code in MarketCode]
        assert scores == sorted(scores)
        assert scores == [1, 2, 3, 4, 5, 6, 6, 7, 8, 9]

    def test_scores_respect_tier_order(self):
        """Every code of a higher tier scores at least as high as any lower tier code."""
        tiers = list(MarketTier)
        for code_a in MarketCode:
            for code_b in MarketCode:
                if tiers.index(code_a.tier) < tiers.index(code_b.tier):
                    assert liberalization_score(code_a) <= liberalization_score(code_b)

    def test_string_codes(self):
        assert market_color("1a") == "#d73027"
        assert market_label("3a") == "Wholesale - Bilateral"
        assert liberalization_score("4b") == 9


class TestGenerationType:
    """Test IPP generation type labels."""

    @pytest.mark.parametrize("raw,label", [
        ("4", "Gas"),
        (1, "Hydro"),
        ("0", "None"),
        ("7", "Biomass/Biogas/Waste"),
        (GenerationType.BATTERY, "Battery"),
    ])
    def test_known_types(self, raw, label):
        assert generation_type_label(raw) == label

    @pytest.mark.parametrize("raw", [None, "", "10", "gas", True])
    def test_unknown_types(self, raw):
        assert generation_type_label(raw) == "Unknown"
