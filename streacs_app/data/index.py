"""
Country/year indexes over the parsed datasets.

Lookups never fill gaps: a year missing from a country's record is "no
data", not the code of a neighbouring year.
"""

from bisect import bisect_left, bisect_right
from typing import Iterable, Optional

from .codes import MarketCode, market_label
from .models import CountryMarketRecord, MarketChange, RenewableSharePoint


class MarketStructureIndex:
    """Market code lookup by (country, year)."""

    def __init__(self, records: Optional[dict[str, CountryMarketRecord]] = None):
        self._records = dict(records or {})
        self._countries = sorted(set(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, country: object) -> bool:
        return country in self._records

    def code_for(self, country: str, year: int) -> Optional[MarketCode]:
        """Market code for a country-year, None if there is no data."""
        record = self._records.get(country)
        if record is None:
            return None
        return record.years.get(year)

    def all_countries(self) -> list[str]:
        """Every country with a market structure record, sorted."""
        return list(self._countries)

    def record_for(self, country: str) -> Optional[CountryMarketRecord]:
        return self._records.get(country)

    def region_for(self, country: str) -> Optional[str]:
        record = self._records.get(country)
        return record.region if record else None

    def evolution_for(self, country: str) -> list[MarketChange]:
        """
        Years in which a country's market code changed.

        The first recorded year is always included. A gap does not count as
        a change; the next recorded year is compared with the last code seen.
        """
        record = self._records.get(country)
        if record is None:
            return []

        changes = []
        previous = None
        for year in sorted(record.years):
            code = record.years[year]
            if code != previous:
                changes.append(MarketChange(year=year, code=code, label=market_label(code)))
                previous = code
        return changes


class RenewableShareIndex:
    """Solar and wind share series per country, ascending by year."""

    def __init__(self, points: Optional[Iterable[RenewableSharePoint]] = None):
        series: dict[str, list[RenewableSharePoint]] = {}
        for point in points or ():
            series.setdefault(point.country, []).append(point)

        self._series = {
            country: sorted(country_points, key=lambda p: p.year)
            for country, country_points in series.items()
        }
        self._years = {
            country: [p.year for p in country_points]
            for country, country_points in self._series.items()
        }

    def __len__(self) -> int:
        return sum(len(points) for points in self._series.values())

    def countries(self) -> list[str]:
        return sorted(self._series)

    def series_for(self, country: str,
                   start_year: Optional[int] = None,
                   end_year: Optional[int] = None) -> list[RenewableSharePoint]:
        """
        Points for a country within optional inclusive year bounds.

        Args:
            country: Exact country name
            start_year: Lowest year to include, unbounded if None
            end_year: Highest year to include, unbounded if None

        Returns:
            Points ascending by year; empty for unknown countries
        """
        points = self._series.get(country)
        if not points:
            return []

        years = self._years[country]
        lo = 0 if start_year is None else bisect_left(years, start_year)
        hi = len(years) if end_year is None else bisect_right(years, end_year)
        return points[lo:hi]

    def value_at(self, country: str, year: int) -> Optional[float]:
        """Share for an exact country-year, None if absent."""
        points = self.series_for(country, year, year)
        return points[0].share_percent if points else None
