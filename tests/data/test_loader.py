"""Tests for the single-flight source loader."""

import threading
import time
from http.client import InvalidURL
from unittest.mock import patch

import pytest

from streacs_app.data.codes import MarketCode
from streacs_app.data.loader import DataContext, DataLoader, LoadState, SourceOrigin
from streacs_app.errors import SourceParseError, SourceUnavailableError


class TestLoadAll:
    """Test loading with fallbacks."""

    def test_loaded_sources(self, context):
        assert context.origin_of("market_structure") is SourceOrigin.LOADED
        assert context.origin_of("vre") is SourceOrigin.LOADED
        assert context.origin_of("world_map") is SourceOrigin.LOADED
        assert context.market_structure.code_for("Chile", 2024) is MarketCode.RETAIL_PARTIAL
        assert context.map_names == ("Armenia", "Bosnia and Herz.", "Antarctica")
        assert context.has_world_map

    def test_missing_sources_use_fallbacks(self, context):
        """Regulators and IPP are not served, so their fallbacks are used."""
        assert context.origin_of("regulators") is SourceOrigin.FALLBACK
        assert context.origin_of("ipp") is SourceOrigin.FALLBACK
        assert set(context.regulators) == {"Armenia", "Argentina", "Germany"}
        assert context.ipp["Armenia"].year_first_private_ipp == "2011"

    def test_nothing_available(self, source_config, make_fetcher):
        """With no sources at all the context holds fallbacks and empties."""
        context = DataLoader(source_config, fetcher=make_fetcher({})).load_all()

        assert context.market_structure.all_countries() == ["Argentina", "Armenia", "Germany"]
        assert context.market_structure.code_for("Armenia", 2001) is MarketCode.VIU_STATE
        assert context.market_structure.code_for("Armenia", 2002) is MarketCode.SBM_WITHOUT_GENERATION
        assert context.market_structure.code_for("Armenia", 2024) is MarketCode.WHOLESALE_BILATERAL
        assert len(context.vre) == 0
        assert context.world_map is None
        assert context.map_names == ()
        assert context.origin_of("vre") is SourceOrigin.EMPTY
        assert context.origin_of("world_map") is SourceOrigin.EMPTY

    def test_parse_failure_falls_back(self, source_config, make_fetcher):
        fetcher = make_fetcher({"ms.json": SourceParseError("Invalid JSON", source="market_structure")})
        context = DataLoader(source_config, fetcher=fetcher).load_all()

        assert context.origin_of("market_structure") is SourceOrigin.FALLBACK
        assert "Invalid JSON" in context.outcomes["market_structure"].error

    def test_malformed_document_falls_back(self, source_config, make_fetcher):
        fetcher = make_fetcher({"ms.json": ["not", "a", "mapping"], "vre.json": {"Entity": "x"}})
        context = DataLoader(source_config, fetcher=fetcher).load_all()

        assert context.origin_of("market_structure") is SourceOrigin.FALLBACK
        assert context.origin_of("vre") is SourceOrigin.EMPTY

    def test_malformed_topology_degrades(self, source_config, make_fetcher):
        fetcher = make_fetcher({"https://example.test/countries-110m.json": {"type": "Topology"}})
        context = DataLoader(source_config, fetcher=fetcher).load_all()

        assert context.world_map is None
        assert context.origin_of("world_map") is SourceOrigin.EMPTY

    def test_http_error_falls_back(self, source_config, make_fetcher):
        fetcher = make_fetcher({"ms.json": SourceUnavailableError("HTTP 404: Not Found", status_code=404)})
        context = DataLoader(source_config, fetcher=fetcher).load_all()
        assert context.origin_of("market_structure") is SourceOrigin.FALLBACK

    def test_unexpected_failure_falls_back_per_source(self, source_config, market_structure_doc,
                                                       vre_doc, topology_doc, make_fetcher):
        """An unexpected error affects only the source that raised it."""
        fetcher = make_fetcher({
            "ms.json": market_structure_doc,
            "reg.json": RuntimeError("boom"),
            "ipp.json": TypeError("bad payload"),
            "vre.json": vre_doc,
            "https://example.test/countries-110m.json": topology_doc,
        })
        loader = DataLoader(source_config, fetcher=fetcher)
        context = loader.load_all()

        assert loader.state is LoadState.READY
        assert "Chile" in context.market_structure
        assert context.origin_of("regulators") is SourceOrigin.FALLBACK
        assert context.origin_of("ipp") is SourceOrigin.FALLBACK
        assert set(context.regulators) == {"Armenia", "Argentina", "Germany"}
        assert "Armenia" in context.ipp
        # Later sources are still loaded
        assert context.origin_of("vre") is SourceOrigin.LOADED
        assert context.origin_of("world_map") is SourceOrigin.LOADED
        assert len(context.vre) == 7

    def test_unexpected_failure_in_optional_source_degrades(self, source_config, market_structure_doc,
                                                             make_fetcher):
        fetcher = make_fetcher({
            "ms.json": market_structure_doc,
            "vre.json": ValueError("unexpected"),
        })
        context = DataLoader(source_config, fetcher=fetcher).load_all()

        assert context.origin_of("vre") is SourceOrigin.EMPTY
        assert context.outcomes["vre"].error == "unexpected"
        assert context.origin_of("world_map") is SourceOrigin.EMPTY

    def test_malformed_remote_location_falls_back(self, tmp_path):
        """A location urllib rejects behaves like an unreachable source."""
        config = {"sources": {
            "base_dir": str(tmp_path),
            "market_structure": "http://bad host/ms.json",
            "regulators": 42,
            "world_map": "http://example.test:x/countries-110m.json",
        }}
        with patch("streacs_app.data.sources.urlopen", side_effect=InvalidURL("bad host")):
            context = DataLoader(config).load_all()

        assert context.origin_of("market_structure") is SourceOrigin.FALLBACK
        assert context.market_structure.all_countries() == ["Argentina", "Armenia", "Germany"]
        assert context.origin_of("regulators") is SourceOrigin.FALLBACK
        assert context.origin_of("ipp") is SourceOrigin.FALLBACK
        assert context.origin_of("vre") is SourceOrigin.EMPTY
        assert context.origin_of("world_map") is SourceOrigin.EMPTY

    def test_countries_without_years_are_listed(self, source_config, make_fetcher):
        document = {
            "Armenia": {"region": "ECA", "years": {"2024": "3a"}},
            "Kosovo": {"years": None},
            "Nauru": {"region": "EAP"},
        }
        context = DataLoader(source_config, fetcher=make_fetcher({"ms.json": document})).load_all()

        assert context.origin_of("market_structure") is SourceOrigin.LOADED
        assert context.market_structure.all_countries() == ["Armenia", "Kosovo", "Nauru"]
        assert context.market_structure.code_for("Kosovo", 2024) is None
        assert context.market_structure.evolution_for("Nauru") == []

    def test_codes_always_available(self, source_config, make_fetcher):
        context = DataLoader(source_config, fetcher=make_fetcher({})).load_all()
        assert len(context.codes) == 10

    def test_default_locations(self):
        loader = DataLoader()
        assert loader.locations["market_structure"] == "data/power-market-structure-wholesale.json"
        assert loader.locations["world_map"].startswith("https://")


class TestLoadOnce:
    """Test idempotent and concurrent loading."""

    def test_initial_state(self, source_config, make_fetcher):
        loader = DataLoader(source_config, fetcher=make_fetcher({}))
        assert loader.state is LoadState.UNINITIALIZED
        assert loader.loaded is False

    def test_second_call_returns_cached_context(self, source_config, full_fetcher):
        loader = DataLoader(source_config, fetcher=full_fetcher)

        first = loader.load_all()
        calls_after_first = len(full_fetcher.calls)
        second = loader.load_all()

        assert second is first
        assert len(full_fetcher.calls) == calls_after_first == 5
        assert loader.loaded is True

    def test_concurrent_callers_share_one_load(self, source_config, market_structure_doc, make_fetcher):
        """Callers arriving mid-load wait for, and receive, the same context."""
        release = threading.Event()
        fetcher = make_fetcher({"ms.json": market_structure_doc}, delay_event=release)
        loader = DataLoader(source_config, fetcher=fetcher)

        results = []
        results_lock = threading.Lock()

        def call_load():
            context = loader.load_all()
            with results_lock:
                results.append(context)

        threads = [threading.Thread(target=call_load) for _ in range(5)]
        for thread in threads:
            thread.start()

        deadline = time.monotonic() + 5
        while not fetcher.calls and time.monotonic() < deadline:
            time.sleep(0.01)
        assert loader.state is LoadState.LOADING

        release.set()
        for thread in threads:
            thread.join(timeout=5)

        assert len(results) == 5
        assert all(result is results[0] for result in results)
        assert len(fetcher.calls) == 5
        assert loader.state is LoadState.READY

    def test_interrupted_load_releases_waiters(self, source_config, make_fetcher):
        """An interrupt reaches the owner; later callers still get a context."""
        loader = DataLoader(source_config, fetcher=make_fetcher({"ms.json": KeyboardInterrupt()}))

        with pytest.raises(KeyboardInterrupt):
            loader.load_all()
        assert loader.state is LoadState.READY

        results = []
        thread = threading.Thread(target=lambda: results.append(loader.load_all()))
        thread.start()
        thread.join(timeout=2)

        assert not thread.is_alive()
        assert len(results) == 1
        assert results[0].market_structure.all_countries() == []
        assert len(results[0].codes) == 10

    def test_context_build_failure_does_not_raise(self, source_config, full_fetcher):
        loader = DataLoader(source_config, fetcher=full_fetcher)

        with patch.object(loader, "_build_context", side_effect=RuntimeError("broken")):
            context = loader.load_all()

        assert loader.state is LoadState.READY
        assert isinstance(context, DataContext)
        assert loader.load_all() is context


class TestDataContext:
    """Test the empty context."""

    def test_empty_context_defaults(self):
        context = DataContext()
        assert context.market_structure.all_countries() == []
        assert context.vre.series_for("Armenia") == []
        assert context.has_world_map is False
        assert context.origin_of("vre") is None
