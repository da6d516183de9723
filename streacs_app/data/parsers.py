"""
Parsers for the raw source documents.

This module converts decoded JSON documents into canonical records. A
document with the wrong top-level shape raises a data quality error so the
loader can fall back; individual malformed entries inside an otherwise
valid document are skipped and logged.
"""

import math
from typing import Any, Optional, Union

import orjson

from ..errors import MalformedDataError, MissingDataError, SourceParseError
from ..logging import get_logger
from .codes import GenerationType, MarketCode
from .models import (
    CountryMarketRecord,
    IPPRecord,
    RegulatorRecord,
    RenewableSharePoint,
    UnbundlingRecord,
)

logger = get_logger(__name__)

# Column name used by the Our World in Data solar and wind export
VRE_VALUE_FIELD = "Solar and wind - % electricity"


def parse_json_payload(raw_data: Union[bytes, str], source: Optional[str] = None) -> Any:
    """
    Decode a JSON document.

    Args:
        raw_data: Raw document bytes or text
        source: Source name for error context

    Returns:
        Decoded document

    Raises:
        SourceParseError: If the payload is empty or not valid JSON
    """
    if not raw_data:
        raise SourceParseError("Empty payload", source=source)

    try:
        return orjson.loads(raw_data)
    except orjson.JSONDecodeError as e:
        raise SourceParseError(f"Invalid JSON: {e}", source=source) from e


def _require_mapping(document: Any, data_type: str) -> dict[str, Any]:
    if document is None:
        raise MissingDataError(f"{data_type} document is empty", data_type=data_type)
    if not isinstance(document, dict):
        raise MalformedDataError(
            f"{data_type} document must be an object keyed by country",
            raw_data=str(document)[:100],
            expected_format="{countryName: {...}}",
        )
    return document


def _optional_text(value: Any) -> Optional[str]:
    """Strings pass through, numbers become text, empty values become None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = str(value).strip()
    return text or None


def _parse_year(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    try:
        year = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    return year


def parse_market_structure(document: Any) -> dict[str, CountryMarketRecord]:
    """
    Parse the market structure document.

    Expected format:
    {
        "Armenia": {"region": "ECA", "years": {"1989": "1a", ..., "2024": "3a"}}
    }

    Year entries with unparseable years or unrecognized codes are dropped,
    leaving a gap that reads as "no data". A country whose entry has no
    usable years is kept with an empty year map.

    Raises:
        MissingDataError: If the document is empty
        MalformedDataError: If the document is not an object
    """
    document = _require_mapping(document, "market_structure")
    records = {}

    for country, entry in document.items():
        if not isinstance(entry, dict):
            entry = {}
        raw_years = entry.get("years")
        if not isinstance(raw_years, dict):
            # Listed with no classified years
            logger.warning("Market structure entry without years", country=country)
            raw_years = {}

        years = {}
        dropped = []
        for raw_year, raw_code in raw_years.items():
            year = _parse_year(raw_year)
            code = MarketCode.parse(raw_code)
            if year is None or code is None:
                dropped.append(raw_year)
                continue
            years[year] = code

        if dropped:
            logger.debug("Dropped unrecognized market years", country=country, years=dropped)

        records[country] = CountryMarketRecord(
            country=country,
            region=_optional_text(entry.get("region")),
            years=dict(sorted(years.items())),
        )

    return records


def parse_regulators(document: Any) -> dict[str, RegulatorRecord]:
    """Parse the sector regulator document keyed by country."""
    document = _require_mapping(document, "regulators")
    records = {}

    for country, entry in document.items():
        if not isinstance(entry, dict):
            logger.warning("Skipping malformed regulator entry", country=country)
            continue
        records[country] = RegulatorRecord(
            country=country,
            name=_optional_text(entry.get("name")),
            year_established=_optional_text(entry.get("yearEstablished")),
            website=_optional_text(entry.get("website")),
            notes=_optional_text(entry.get("notes")),
        )

    return records


def parse_ipp(document: Any) -> dict[str, IPPRecord]:
    """Parse the IPP entry document keyed by country."""
    document = _require_mapping(document, "ipp")
    records = {}

    for country, entry in document.items():
        if not isinstance(entry, dict):
            logger.warning("Skipping malformed IPP entry", country=country)
            continue
        records[country] = IPPRecord(
            country=country,
            year_first_ipp=_optional_text(entry.get("yearFirstIPP")),
            year_first_private_ipp=_optional_text(entry.get("yearFirstPrivateIPP")),
            type_operational=GenerationType.parse(entry.get("typeOperational")),
            notes=_optional_text(entry.get("notes")),
        )

    return records


def parse_renewable_share(document: Any) -> list[RenewableSharePoint]:
    """
    Parse the flat solar and wind share series.

    Expected format:
    [
        {"Entity": "Armenia", "Year": 2024, "Solar and wind - % electricity": 10.1}
    ]

    Entries missing a field, with a non-numeric value or outside [0, 100]
    are skipped. A repeated (country, year) keeps the first occurrence.

    Raises:
        MissingDataError: If the document is empty
        MalformedDataError: If the document is not a list
    """
    if document is None:
        raise MissingDataError("vre document is empty", data_type="vre")
    if not isinstance(document, list):
        raise MalformedDataError(
            "vre document must be a list of records",
            raw_data=str(document)[:100],
            expected_format="[{Entity, Year, value}]",
        )

    points = []
    seen = set()
    skipped = 0

    for entry in document:
        point = _parse_share_entry(entry)
        if point is None:
            skipped += 1
            continue
        key = (point.country, point.year)
        if key in seen:
            skipped += 1
            continue
        seen.add(key)
        points.append(point)

    if skipped:
        logger.debug("Skipped renewable share entries", skipped=skipped)

    return points


def _parse_share_entry(entry: Any) -> Optional[RenewableSharePoint]:
    if not isinstance(entry, dict):
        return None

    country = entry.get("Entity")
    year = _parse_year(entry.get("Year"))
    value = entry.get(VRE_VALUE_FIELD)

    if not isinstance(country, str) or not country or year is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if math.isnan(value) or value < 0 or value > 100:
        return None

    return RenewableSharePoint(country=country, year=year, share_percent=float(value))


def parse_world_map_names(document: Any) -> list[str]:
    """
    Extract country labels from a world-atlas TopoJSON topology.

    Expected format:
    {"type": "Topology", "objects": {"countries": {"geometries": [
        {"properties": {"name": "Armenia"}, ...}
    ]}}}

    Raises:
        MissingDataError: If the document is empty
        MalformedDataError: If the countries collection is missing
    """
    if document is None:
        raise MissingDataError("world_map document is empty", data_type="world_map")

    try:
        geometries = document["objects"]["countries"]["geometries"]
    except (KeyError, TypeError) as e:
        raise MalformedDataError(
            f"Topology has no countries collection: {e}",
            expected_format="objects.countries.geometries",
        ) from e

    if not isinstance(geometries, list):
        raise MalformedDataError("countries geometries must be a list")

    names = []
    for geometry in geometries:
        properties = geometry.get("properties") if isinstance(geometry, dict) else None
        name = properties.get("name") if isinstance(properties, dict) else None
        if isinstance(name, str) and name:
            names.append(name)

    return names


def parse_unbundling(table: dict[str, dict[str, str]]) -> dict[str, UnbundlingRecord]:
    """Build unbundling records from the static table."""
    return {
        country: UnbundlingRecord(
            country=country,
            transmission=entry["transmission"],
            distribution=entry["distribution"],
            notes=entry.get("notes"),
        )
        for country, entry in table.items()
    }
