"""
Canonical data models for the loaded datasets.

This module defines immutable data structures that represent the sources
after parsing from their raw JSON documents.
"""

from dataclasses import dataclass, field
from typing import Optional

from .codes import GenerationType, MarketCode

# Sentinel some regulator documents use for "no independent regulator"
NO_REGULATOR_SENTINEL = "None"


@dataclass(frozen=True)
class CountryMarketRecord:
    """Market structure history of one country."""
    country: str
    region: Optional[str]
    years: dict[int, MarketCode] = field(default_factory=dict)  # Sparse, no gap filling


@dataclass(frozen=True)
class RegulatorRecord:
    """Electricity sector regulator of one country."""
    country: str
    name: Optional[str]
    year_established: Optional[str]
    website: Optional[str] = None
    notes: Optional[str] = None

    @property
    def has_independent_regulator(self) -> bool:
        """False when the establishment year is missing or the "None" sentinel."""
        return bool(self.year_established) and self.year_established != NO_REGULATOR_SENTINEL


@dataclass(frozen=True)
class IPPRecord:
    """Independent power producer entry for one country."""
    country: str
    year_first_ipp: Optional[str]
    year_first_private_ipp: Optional[str]
    type_operational: Optional[GenerationType]
    notes: Optional[str] = None


@dataclass(frozen=True)
class UnbundlingRecord:
    """Transmission and distribution unbundling status of one country."""
    country: str
    transmission: str
    distribution: str
    notes: Optional[str] = None


@dataclass(frozen=True)
class RenewableSharePoint:
    """Solar and wind share of electricity production for a country-year."""
    country: str
    year: int
    share_percent: float


@dataclass(frozen=True)
class MarketChange:
    """A year in which a country's market code differs from the year before."""
    year: int
    code: MarketCode
    label: str


@dataclass(frozen=True)
class Milestone:
    """Dated event on a country's reform timeline."""
    year: int
    event: str
