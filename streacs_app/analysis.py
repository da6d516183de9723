"""
Armenia case study and cross-country comparison views.

Builds the series the case study and comparison charts plot, from a
DataQueries instance. No rendering happens here.
"""

from dataclasses import dataclass
from typing import Any, Optional

from .config.defaults import ScenarioParams
from .data.codes import MarketCode
from .data.fallbacks import ARMENIA_MILESTONES
from .data.models import Milestone
from .logging import get_logger
from .query import DataQueries
from .scenarios.projection import ScenarioPoint, build_vre_scenarios

logger = get_logger(__name__)

CASE_STUDY_COUNTRY = "Armenia"
COMPARISON_YEAR = 2024
MIN_COMPARISON_COUNTRIES = 2
MAX_COMPARISON_COUNTRIES = 10


@dataclass(frozen=True)
class CombinedPoint:
    """VRE share and liberalization score for one year."""
    year: int
    vre_share: float
    liberalization_score: int


@dataclass(frozen=True)
class ComparisonRow:
    """One country's bar in the comparison charts."""
    country: str
    code: Optional[MarketCode]
    score: int
    color: str
    label: str
    vre_share: float  # 0 when there is no data for the year


class SelectionError(ValueError):
    """Raised when a comparison selection is outside the allowed size."""
    pass


class ArmeniaCaseStudy:
    """Series for the Armenia case study section."""

    def __init__(self, queries: DataQueries, country: str = CASE_STUDY_COUNTRY):
        self.queries = queries
        self.country = country

    @classmethod
    def from_config(cls, queries: DataQueries,
                    config: Optional[dict[str, Any]] = None) -> "ArmeniaCaseStudy":
        """Case study for the scenario country named in the config."""
        params = (config or {}).get("scenarios", {})
        return cls(queries, params.get("country", ScenarioParams().country))

    def vre_growth(self, start_year: int = 2015) -> list[tuple[int, float]]:
        """(year, share) pairs from start_year onward."""
        return [
            (point.year, point.share_percent)
            for point in self.queries.get_vre_data(self.country, start_year)
        ]

    def combined_series(self, start_year: int = 2000) -> list[CombinedPoint]:
        """VRE share alongside the liberalization score for each VRE year."""
        points = self.queries.get_vre_data(self.country, start_year)
        scores = self.queries.get_liberalization_series(
            self.country, [point.year for point in points])
        return [
            CombinedPoint(point.year, point.share_percent, score)
            for point, score in zip(points, scores)
        ]

    def milestones(self) -> tuple[Milestone, ...]:
        return ARMENIA_MILESTONES

    def scenarios(self, config: Optional[dict[str, Any]] = None,
                  history_start: int = 2018) -> dict[str, Any]:
        """Historical series plus projected scenarios on a shared year axis."""
        history = self.vre_growth(history_start)
        projections: dict[str, list[ScenarioPoint]] = build_vre_scenarios(config)

        future_years = sorted({p.year for points in projections.values() for p in points})
        return {
            "years": [year for year, _ in history] + future_years,
            "historical": [share for _, share in history],
            "projections": {
                name: [p.value for p in points] for name, points in projections.items()
            },
        }


class CountryComparison:
    """Liberalization and VRE comparison across selected countries."""

    def __init__(self, queries: DataQueries,
                 selected: Optional[list[str]] = None,
                 max_countries: int = MAX_COMPARISON_COUNTRIES):
        self.queries = queries
        self.max_countries = max_countries
        self.selected: list[str] = list(selected or [CASE_STUDY_COUNTRY])

    def select(self, country: str) -> None:
        """
        Add a country to the selection.

        Raises:
            SelectionError: If the selection is already full
        """
        if country in self.selected:
            return
        if len(self.selected) >= self.max_countries:
            raise SelectionError(f"Maximum {self.max_countries} countries can be selected")
        self.selected.append(country)

    def deselect(self, country: str) -> None:
        self.selected = [c for c in self.selected if c != country]

    def rows(self, year: int = COMPARISON_YEAR) -> list[ComparisonRow]:
        """
        Comparison rows for the current selection.

        Raises:
            SelectionError: If fewer than two countries are selected
        """
        if len(self.selected) < MIN_COMPARISON_COUNTRIES:
            raise SelectionError(
                f"Please select at least {MIN_COMPARISON_COUNTRIES} countries to compare")

        rows = []
        for country in self.selected:
            code = self.queries.get_market_code(country, year)
            vre_share = self.queries.get_vre_value(country, year)
            rows.append(ComparisonRow(
                country=country,
                code=code,
                score=self.queries.get_liberalization_score(code),
                color=self.queries.get_market_color(code),
                label=self.queries.get_market_label(code),
                vre_share=vre_share if vre_share is not None else 0.0,
            ))

        logger.debug("Comparison built", countries=self.selected, year=year)
        return rows
