"""
Query layer consumed by the dashboard's rendering components.

Every public method answers from the immutable DataContext and returns a
defined value for unknown countries, years and codes: None, an empty list,
score 0, gray or "No data". None of them raise.
"""

from typing import Any, Iterable, Optional, Union

from .data.codes import (
    CodeLike,
    MarketCode,
    generation_type_label,
    liberalization_score,
    market_color,
    market_label,
)
from .data.loader import DataContext, DataLoader
from .data.models import (
    IPPRecord,
    MarketChange,
    RegulatorRecord,
    RenewableSharePoint,
    UnbundlingRecord,
)
from .data.names import NameNormalizer
from .logging import get_logger

logger = get_logger(__name__)

YearLike = Union[int, str, None]

# Countries listed first in the comparison picker
PRIORITY_COUNTRIES = (
    "Armenia", "Georgia",
    "Poland", "Romania",
    "Germany", "Spain", "Denmark",
    "Argentina", "Chile", "Australia",
)

NO_DATA_TOOLTIP = "No data available"


def _as_year(year: YearLike) -> Optional[int]:
    """Coerce a year from int or numeric string, None if not a year."""
    if year is None or isinstance(year, bool):
        return None
    if isinstance(year, int):
        return year
    if isinstance(year, float):
        return int(year) if year.is_integer() else None
    try:
        return int(str(year).strip())
    except ValueError:
        return None


def _is_name(value: object) -> bool:
    return isinstance(value, str) and bool(value)


class DataQueries:
    """Point and range lookups over a loaded DataContext."""

    def __init__(self, context: DataContext, normalizer: Optional[NameNormalizer] = None):
        self.context = context
        self.normalizer = normalizer or NameNormalizer()

    @classmethod
    def from_loader(cls, loader: DataLoader,
                    normalizer: Optional[NameNormalizer] = None) -> "DataQueries":
        """Build queries over a loader's context, loading it on first use."""
        return cls(loader.load_all(), normalizer)

    # Core contract

    def get_market_code(self, country: str, year: YearLike) -> Optional[MarketCode]:
        """Market code for a country-year; None means no data."""
        year = _as_year(year)
        if not _is_name(country) or year is None:
            return None
        return self.context.market_structure.code_for(country, year)

    def get_countries(self) -> list[str]:
        """All countries with market structure data, sorted."""
        return self.context.market_structure.all_countries()

    def get_vre_data(self, country: str, start_year: YearLike = None,
                     end_year: YearLike = None) -> list[RenewableSharePoint]:
        """
        Solar and wind share series for a country, inclusive year bounds.

        A bound of None leaves that side open. A bound that is not a year
        matches nothing and returns an empty list.
        """
        if not _is_name(country):
            return []
        start, end = _as_year(start_year), _as_year(end_year)
        if (start_year is not None and start is None) or (end_year is not None and end is None):
            return []
        return self.context.vre.series_for(country, start, end)

    @staticmethod
    def get_liberalization_score(code: CodeLike) -> int:
        return liberalization_score(code)

    @staticmethod
    def get_market_color(code: CodeLike) -> str:
        return market_color(code)

    @staticmethod
    def get_market_label(code: CodeLike) -> str:
        return market_label(code)

    # Country profile

    def get_vre_value(self, country: str, year: YearLike) -> Optional[float]:
        year = _as_year(year)
        if not _is_name(country) or year is None:
            return None
        return self.context.vre.value_at(country, year)

    def get_regulator(self, country: str) -> Optional[RegulatorRecord]:
        if not _is_name(country):
            return None
        return self.context.regulators.get(country)

    def has_independent_regulator(self, country: str) -> bool:
        regulator = self.get_regulator(country)
        return regulator is not None and regulator.has_independent_regulator

    def get_ipp(self, country: str) -> Optional[IPPRecord]:
        if not _is_name(country):
            return None
        return self.context.ipp.get(country)

    def get_ipp_type_label(self, country: str) -> str:
        """Label of the first IPP's generation type, "Unknown" if absent."""
        record = self.get_ipp(country)
        return generation_type_label(record.type_operational if record else None)

    def get_unbundling(self, country: str) -> Optional[UnbundlingRecord]:
        if not _is_name(country):
            return None
        return self.context.unbundling.get(country)

    def get_market_evolution(self, country: str) -> list[MarketChange]:
        """Years in which the country's market code changed, ascending."""
        if not _is_name(country):
            return []
        return self.context.market_structure.evolution_for(country)

    def get_liberalization_series(self, country: str, years: Iterable[YearLike]) -> list[int]:
        """Liberalization score per requested year; 0 where there is no data."""
        return [liberalization_score(self.get_market_code(country, year)) for year in years or ()]

    def get_suggested_countries(self) -> list[str]:
        """Priority countries that have data, then every other country sorted."""
        countries = self.get_countries()
        known = set(countries)
        available = [country for country in PRIORITY_COUNTRIES if country in known]
        remaining = [country for country in countries if country not in available]
        return available + remaining

    # World map

    def map_country_names(self) -> list[str]:
        """Country labels of the world map features; empty without a map."""
        return list(self.context.map_names)

    def map_code(self, label: str, year: YearLike) -> Optional[MarketCode]:
        """Market code for a world map label; None for excluded territories."""
        if not _is_name(label):
            return None
        country = self.normalizer.normalize(label)
        if country is None:
            return None
        return self.get_market_code(country, year)

    def map_color(self, label: str, year: YearLike) -> str:
        return market_color(self.map_code(label, year))

    def map_tooltip(self, label: str, year: YearLike) -> str:
        """Tooltip text for a world map feature."""
        if not _is_name(label):
            return NO_DATA_TOOLTIP
        if self.normalizer.is_excluded(label):
            return f"{label}\n{NO_DATA_TOOLTIP}"
        return f"{label}\n{year}: {market_label(self.map_code(label, year))}"

    def map_profile_country(self, label: str, year: YearLike) -> Optional[str]:
        """
        Dataset country to open a profile for when a map feature is selected.

        None for excluded territories and for countries with no market code
        in the given year.
        """
        if not _is_name(label):
            return None
        country = self.normalizer.normalize(label)
        if country is None:
            logger.debug("No data for territory", label=label)
            return None
        if self.get_market_code(country, year) is None:
            logger.debug("No market data", country=country, year=year)
            return None
        return country

    def source_summary(self) -> dict[str, Any]:
        """Origin and entry count of every named source."""
        return {
            name: {"origin": outcome.origin.value, "entries": outcome.entries}
            for name, outcome in self.context.outcomes.items()
        }
