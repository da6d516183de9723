"""Pytest configuration and shared fixtures."""

import threading
from typing import Any, Dict, List

import pytest

from streacs_app.data.loader import DataContext, DataLoader
from streacs_app.errors import SourceUnavailableError
from streacs_app.query import DataQueries


class FakeFetcher:
    """Serves documents by location; exceptions in the table are raised."""

    def __init__(self, documents: Dict[str, Any], delay_event: threading.Event = None):
        self.documents = documents
        self.calls: List[str] = []
        self.delay_event = delay_event
        self._lock = threading.Lock()

    def fetch_json(self, location: str, source: str = None) -> Any:
        with self._lock:
            self.calls.append(location)
        if self.delay_event is not None:
            self.delay_event.wait(timeout=5)
        document = self.documents.get(location)
        if isinstance(document, BaseException):
            raise document
        if document is None:
            raise SourceUnavailableError(f"Not found: {location}", source=source, location=location)
        return document


@pytest.fixture
def market_structure_doc() -> Dict[str, Any]:
    """Raw market structure document with a gap and an unknown code."""
    return {
        "Armenia": {
            "region": "ECA",
            "years": {"2000": "1a", "2001": "1a", "2002": "2b", "2023": "3a", "2024": "3a"},
        },
        "Chile": {
            "region": "LAC",
            "years": {"1989": "3c", "1990": "3c", "2024": "4a"},
        },
        "Bosnia and Herzegovina": {
            "region": "ECA",
            "years": {"2024": "2b", "2025": "zz"},
        },
        "Georgia": {
            "region": "ECA",
            "years": {"2024": "3a"},
        },
    }


@pytest.fixture
def vre_doc() -> List[Dict[str, Any]]:
    """Raw solar and wind share records, deliberately unsorted."""
    field = "Solar and wind - % electricity"
    return [
        {"Entity": "Armenia", "Year": 2024, field: 10.1},
        {"Entity": "Armenia", "Year": 2014, field: 0.0},
        {"Entity": "Armenia", "Year": 2018, field: 0.07},
        {"Entity": "Armenia", "Year": 2015, field: 0.01},
        {"Entity": "Armenia", "Year": 2020, field: 1.5},
        {"Entity": "Chile", "Year": 2024, field: 35.2},
        {"Entity": "Georgia", "Year": 2023, field: 0.6},
    ]


@pytest.fixture
def topology_doc() -> Dict[str, Any]:
    """Minimal world-atlas topology."""
    return {
        "type": "Topology",
        "objects": {
            "countries": {
                "type": "GeometryCollection",
                "geometries": [
                    {"type": "Polygon", "arcs": [[0]], "properties": {"name": "Armenia"}},
                    {"type": "Polygon", "arcs": [[1]], "properties": {"name": "Bosnia and Herz."}},
                    {"type": "Polygon", "arcs": [[2]], "properties": {"name": "Antarctica"}},
                    {"type": "Polygon", "arcs": [[3]], "properties": {}},
                ],
            }
        },
        "arcs": [],
    }


@pytest.fixture
def source_config() -> Dict[str, Any]:
    """Config with short, recognisable source locations."""
    return {
        "sources": {
            "market_structure": "ms.json",
            "regulators": "reg.json",
            "ipp": "ipp.json",
            "vre": "vre.json",
            "world_map": "https://example.test/countries-110m.json",
        }
    }


@pytest.fixture
def full_fetcher(market_structure_doc, vre_doc, topology_doc) -> FakeFetcher:
    """Fetcher serving every source except regulators and IPP."""
    return FakeFetcher({
        "ms.json": market_structure_doc,
        "vre.json": vre_doc,
        "https://example.test/countries-110m.json": topology_doc,
    })


@pytest.fixture
def context(source_config, full_fetcher) -> DataContext:
    return DataLoader(source_config, fetcher=full_fetcher).load_all()


@pytest.fixture
def queries(context) -> DataQueries:
    return DataQueries(context)


@pytest.fixture
def make_fetcher():
    """Factory for fetchers serving a custom document table."""
    return FakeFetcher
