"""
Built-in fallback datasets.

Used when a source document cannot be fetched or parsed. They cover a small
set of countries with illustrative values and have the same raw shape as
the documents they replace, so they pass through the same parsers.
"""

from typing import Any, Optional

from .models import Milestone


def fill_years(start_year: int, end_year: int, code: str,
               overrides: Optional[dict[str, str]] = None) -> dict[str, str]:
    """Year map with `code` for every year in range, then `overrides` applied."""
    overrides = overrides or {}
    years = {str(year): code for year in range(start_year, end_year + 1)}
    years.update(overrides)
    return years


def market_structure_fallback() -> dict[str, Any]:
    """Raw market structure document for Armenia, Argentina and Germany."""
    return {
        "Armenia": {
            "region": "ECA",
            "years": fill_years(1989, 2001, "1a", {
                **fill_years(2002, 2022, "2b"),
                "2023": "3a",
                "2024": "3a",
            }),
        },
        "Argentina": {
            "region": "LAC",
            "years": fill_years(1989, 1991, "1a", fill_years(1992, 2024, "3c")),
        },
        "Germany": {
            "region": "ECA",
            "years": fill_years(1989, 1997, "1a", fill_years(1998, 2024, "3b")),
        },
    }


def regulators_fallback() -> dict[str, Any]:
    """Raw regulator document for the fallback countries."""
    return {
        "Armenia": {
            "name": "Public Services Regulatory Commission (PSRC)",
            "yearEstablished": "1997",
            "website": "https://www.psrc.am/contents/page/history",
            "notes": "Established on April 3, 1997 by decree of the President",
        },
        "Argentina": {
            "name": "National Electricity Regulator (ENRE)",
            "yearEstablished": "1991",
            "website": "https://www.argentina.gob.ar/enre",
            "notes": "Independent entity within the Energy Secretariat",
        },
        "Germany": {
            "name": "Federal Network Agency (BNetzA)",
            "yearEstablished": "2005",
            "website": "https://www.bundesnetzagentur.de",
            "notes": "Regulates electricity, gas, telecommunications, post and railway markets",
        },
    }


def ipp_fallback() -> dict[str, Any]:
    """Raw IPP entry document for the fallback countries."""
    return {
        "Armenia": {
            "yearFirstIPP": "2003",
            "yearFirstPrivateIPP": "2011",
            "typeOperational": "4",
            "notes": "Hrazdan Thermal Power Plant acquired by Russian state in 2003, "
                     "sold to Tashir Group in 2011",
        },
        "Argentina": {
            "yearFirstIPP": "1992",
            "yearFirstPrivateIPP": "1992",
            "typeOperational": "1",
            "notes": "Major privatizations in 1992 when IPPs entered the country",
        },
        "Germany": {
            "yearFirstIPP": "1998",
            "yearFirstPrivateIPP": "1998",
            "typeOperational": "2",
            "notes": "Market liberalization enabled private generators",
        },
    }


# No source document exists for unbundling; this table is the only data.
UNBUNDLING = {
    "Armenia": {
        "transmission": "ISO Model since 2002",
        "distribution": "Separated",
        "notes": "Independent System Operator model - ownership remains but operation is independent",
    },
    "Germany": {
        "transmission": "Ownership Unbundling",
        "distribution": "Ownership Unbundling",
        "notes": "Full separation of transmission and distribution from generation",
    },
    "Argentina": {
        "transmission": "Ownership Unbundling since 1992",
        "distribution": "Ownership Unbundling",
        "notes": "Complete separation during privatization in early 1990s",
    },
}

ARMENIA_MILESTONES = (
    Milestone(1997, "Public Services Regulatory Commission (PSRC) established"),
    Milestone(2002, "ISO unbundling model implemented"),
    Milestone(2011, "First private IPP (gas-fired plant)"),
    Milestone(2018, "VRE penetration begins: 0.07%"),
    Milestone(2022, "Transition to wholesale market (code 3a)"),
    Milestone(2023, "Market structure upgraded to 3a"),
    Milestone(2024, "VRE reaches 10.1% (July 2024)"),
)
