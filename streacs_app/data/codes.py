"""
Market structure and generation type catalogs.

Market codes form a closed enumeration. Every presentation concern (color,
label, liberalization score) is an exhaustive mapping over the enumeration
plus one fallback for missing or unrecognized codes, so any value produced
by the indexes resolves to a defined result.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class MarketTier(str, Enum):
    """Liberalization tiers, least to most liberalized."""
    VERTICALLY_INTEGRATED = "Vertically Integrated Utility (VIU)"
    SINGLE_BUYER = "Single Buyer Model"
    WHOLESALE = "Wholesale Competition"
    RETAIL = "Retail Competition"


class MarketCode(str, Enum):
    """Wholesale market structure classification codes."""
    VIU_STATE = "1a"
    VIU_PRIVATE = "1b"
    SBM_WITH_GENERATION = "2a"
    SBM_WITHOUT_GENERATION = "2b"
    WHOLESALE_BILATERAL = "3a"
    WHOLESALE_POOL = "3b"
    WHOLESALE_COST_BASED = "3c"
    WHOLESALE_BID_BASED = "3d"
    RETAIL_PARTIAL = "4a"
    RETAIL_FULL = "4b"

    @classmethod
    def parse(cls, value: object) -> Optional["MarketCode"]:
        """Return the code for a raw value, None if unrecognized."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip())
        except ValueError:
            return None

    @property
    def tier(self) -> MarketTier:
        return _TIERS[self.value[0]]


_TIERS = {
    "1": MarketTier.VERTICALLY_INTEGRATED,
    "2": MarketTier.SINGLE_BUYER,
    "3": MarketTier.WHOLESALE,
    "4": MarketTier.RETAIL,
}


@dataclass(frozen=True)
class MarketCodeDefinition:
    """Catalog entry describing one market code."""
    code: MarketCode
    type: MarketTier
    label: str
    description: str


MARKET_CODE_DEFINITIONS: tuple[MarketCodeDefinition, ...] = (
    MarketCodeDefinition(
        MarketCode.VIU_STATE, MarketTier.VERTICALLY_INTEGRATED, "VIU State-owned",
        "One state-owned company controls generation, transmission, and distribution",
    ),
    MarketCodeDefinition(
        MarketCode.VIU_PRIVATE, MarketTier.VERTICALLY_INTEGRATED, "VIU Private",
        "One privately-owned company controls generation, transmission, and distribution",
    ),
    MarketCodeDefinition(
        MarketCode.SBM_WITH_GENERATION, MarketTier.SINGLE_BUYER, "SBM with Generation",
        "Single buyer owns generation assets and purchases from IPPs",
    ),
    MarketCodeDefinition(
        MarketCode.SBM_WITHOUT_GENERATION, MarketTier.SINGLE_BUYER, "SBM without Generation",
        "Single buyer does not own generation, purchases from multiple generators",
    ),
    MarketCodeDefinition(
        MarketCode.WHOLESALE_BILATERAL, MarketTier.WHOLESALE, "Bilateral Trading",
        "Bilateral contracting between generators and distributors",
    ),
    MarketCodeDefinition(
        MarketCode.WHOLESALE_POOL, MarketTier.WHOLESALE, "Bid-based Power Exchange",
        "Trading through power exchange with bid-based pricing",
    ),
    MarketCodeDefinition(
        MarketCode.WHOLESALE_COST_BASED, MarketTier.WHOLESALE, "Cost-based Pool",
        "Trading through cost-based power pool",
    ),
    MarketCodeDefinition(
        MarketCode.WHOLESALE_BID_BASED, MarketTier.WHOLESALE, "Bid-based Pool",
        "Mandatory pool with bid-based pricing",
    ),
    MarketCodeDefinition(
        MarketCode.RETAIL_PARTIAL, MarketTier.RETAIL, "Partial Retail",
        "Some customer classes can choose suppliers",
    ),
    MarketCodeDefinition(
        MarketCode.RETAIL_FULL, MarketTier.RETAIL, "Full Retail",
        "All customers can choose their electricity supplier",
    ),
)

NO_DATA_COLOR = "#cccccc"
NO_DATA_LABEL = "No data"
NO_DATA_SCORE = 0

_COLORS = {
    MarketCode.VIU_STATE: "#d73027",               # Dark red
    MarketCode.VIU_PRIVATE: "#fc8d59",             # Orange
    MarketCode.SBM_WITH_GENERATION: "#fee090",     # Light yellow
    MarketCode.SBM_WITHOUT_GENERATION: "#e0f3f8",  # Light blue
    MarketCode.WHOLESALE_BILATERAL: "#91bfdb",     # Medium blue
    MarketCode.WHOLESALE_POOL: "#4575b4",          # Dark blue
    MarketCode.WHOLESALE_COST_BASED: "#74add1",    # Light blue
    MarketCode.WHOLESALE_BID_BASED: "#313695",     # Navy
    MarketCode.RETAIL_PARTIAL: "#abd9e9",          # Cyan
    MarketCode.RETAIL_FULL: "#2c7bb6",             # Deep blue
}

_LABELS = {
    MarketCode.VIU_STATE: "VIU State-owned",
    MarketCode.VIU_PRIVATE: "VIU Private",
    MarketCode.SBM_WITH_GENERATION: "SBM with Generation",
    MarketCode.SBM_WITHOUT_GENERATION: "SBM without Generation",
    MarketCode.WHOLESALE_BILATERAL: "Wholesale - Bilateral",
    MarketCode.WHOLESALE_POOL: "Wholesale - Pool",
    MarketCode.WHOLESALE_COST_BASED: "Wholesale - Cost-based",
    MarketCode.WHOLESALE_BID_BASED: "Wholesale - Bid-based",
    MarketCode.RETAIL_PARTIAL: "Retail - Partial",
    MarketCode.RETAIL_FULL: "Retail - Full",
}

# 3b and 3c share a tier position
_SCORES = {
    MarketCode.VIU_STATE: 1,
    MarketCode.VIU_PRIVATE: 2,
    MarketCode.SBM_WITH_GENERATION: 3,
    MarketCode.SBM_WITHOUT_GENERATION: 4,
    MarketCode.WHOLESALE_BILATERAL: 5,
    MarketCode.WHOLESALE_POOL: 6,
    MarketCode.WHOLESALE_COST_BASED: 6,
    MarketCode.WHOLESALE_BID_BASED: 7,
    MarketCode.RETAIL_PARTIAL: 8,
    MarketCode.RETAIL_FULL: 9,
}

CodeLike = Union[MarketCode, str, None]


def market_color(code: CodeLike) -> str:
    """Hex color for a market code; gray when missing or unrecognized."""
    parsed = MarketCode.parse(code)
    if parsed is None:
        return NO_DATA_COLOR
    return _COLORS[parsed]


def market_label(code: CodeLike) -> str:
    """Display label for a market code; "No data" when missing or unrecognized."""
    parsed = MarketCode.parse(code)
    if parsed is None:
        return NO_DATA_LABEL
    return _LABELS[parsed]


def liberalization_score(code: CodeLike) -> int:
    """Liberalization score 1-9 for a market code; 0 when missing or unrecognized."""
    parsed = MarketCode.parse(code)
    if parsed is None:
        return NO_DATA_SCORE
    return _SCORES[parsed]


def get_definition(code: CodeLike) -> Optional[MarketCodeDefinition]:
    """Catalog entry for a market code, None if unrecognized."""
    parsed = MarketCode.parse(code)
    for definition in MARKET_CODE_DEFINITIONS:
        if definition.code is parsed:
            return definition
    return None


class GenerationType(str, Enum):
    """Technology of the first operational IPP."""
    NONE = "0"
    HYDRO = "1"
    WIND = "2"
    SOLAR = "3"
    GAS = "4"
    COAL = "5"
    OIL = "6"
    BIOMASS = "7"
    GEOTHERMAL = "8"
    BATTERY = "9"

    @classmethod
    def parse(cls, value: object) -> Optional["GenerationType"]:
        """Return the type for a raw value ("4", 4), None if unrecognized."""
        if isinstance(value, cls):
            return value
        if value is None or isinstance(value, bool):
            return None
        try:
            return cls(str(value).strip())
        except ValueError:
            return None


_GENERATION_LABELS = {
    GenerationType.NONE: "None",
    GenerationType.HYDRO: "Hydro",
    GenerationType.WIND: "Wind",
    GenerationType.SOLAR: "Solar",
    GenerationType.GAS: "Gas",
    GenerationType.COAL: "Coal",
    GenerationType.OIL: "Oil",
    GenerationType.BIOMASS: "Biomass/Biogas/Waste",
    GenerationType.GEOTHERMAL: "Geothermal",
    GenerationType.BATTERY: "Battery",
}


def generation_type_label(type_code: Union[GenerationType, str, int, None]) -> str:
    """Display label for an IPP generation type; "Unknown" if unrecognized."""
    parsed = GenerationType.parse(type_code)
    if parsed is None:
        return "Unknown"
    return _GENERATION_LABELS[parsed]
