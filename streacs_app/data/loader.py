"""
Source loader producing the immutable data context.

`DataLoader.load_all()` fetches every named source once. Callers that
arrive while the load is in flight wait on the same future and receive the
same `DataContext`. Sources that cannot be fetched or parsed are replaced by
their built-in fallback (market structure, regulators, IPP) or left empty
(VRE series, world map); nothing raises past `load_all()`.
"""

import threading
from concurrent.futures import Future
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from ..config.defaults import SourceParams
from ..errors import DataQualityError, GracefulDegradationError, SourceFailureError
from ..logging import get_loader_logger, log_source_load
from . import fallbacks
from .codes import MARKET_CODE_DEFINITIONS, MarketCodeDefinition
from .index import MarketStructureIndex, RenewableShareIndex
from .models import IPPRecord, RegulatorRecord, UnbundlingRecord
from .parsers import (
    parse_ipp,
    parse_market_structure,
    parse_regulators,
    parse_renewable_share,
    parse_unbundling,
    parse_world_map_names,
)
from .sources import SourceFetcher

logger = get_loader_logger(__name__)


class LoadState(str, Enum):
    """Lifecycle of the data loader."""
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"


class SourceOrigin(str, Enum):
    """Where a source's data came from."""
    LOADED = "loaded"
    FALLBACK = "fallback"
    EMPTY = "empty"


@dataclass(frozen=True)
class SourceOutcome:
    """Result of loading one named source."""
    source: str
    origin: SourceOrigin
    entries: int
    error: Optional[str] = None


@dataclass(frozen=True)
class DataContext:
    """All datasets of a session; read-only once built."""
    market_structure: MarketStructureIndex = field(default_factory=MarketStructureIndex)
    vre: RenewableShareIndex = field(default_factory=RenewableShareIndex)
    regulators: Mapping[str, RegulatorRecord] = field(default_factory=lambda: MappingProxyType({}))
    ipp: Mapping[str, IPPRecord] = field(default_factory=lambda: MappingProxyType({}))
    unbundling: Mapping[str, UnbundlingRecord] = field(default_factory=lambda: MappingProxyType({}))
    codes: tuple[MarketCodeDefinition, ...] = MARKET_CODE_DEFINITIONS
    world_map: Optional[dict[str, Any]] = None
    map_names: tuple[str, ...] = ()
    outcomes: Mapping[str, SourceOutcome] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def has_world_map(self) -> bool:
        return self.world_map is not None

    def origin_of(self, source: str) -> Optional[SourceOrigin]:
        outcome = self.outcomes.get(source)
        return outcome.origin if outcome else None


class DataLoader:
    """
    Loads the named sources exactly once per instance.

    The first caller of `load_all()` performs the load; concurrent callers
    block on the shared future until it completes.
    """

    def __init__(self, config: Optional[dict[str, Any]] = None,
                 fetcher: Optional[SourceFetcher] = None):
        """
        Initialize the loader.

        Args:
            config: Merged configuration dict; only the "sources" section is used
            fetcher: Source fetcher, built from the config when omitted
        """
        self.config = config or {}
        defaults = SourceParams()
        sources = self.config.get("sources", {})
        self.locations = {
            name: sources.get(name, getattr(defaults, name))
            for name in ("market_structure", "regulators", "ipp", "vre", "world_map")
        }
        self.fetcher = fetcher or SourceFetcher(
            base_dir=sources.get("base_dir", defaults.base_dir),
            timeout_seconds=sources.get("timeout_seconds", defaults.timeout_seconds),
        )

        self._lock = threading.Lock()
        self._state = LoadState.UNINITIALIZED
        self._future: Optional[Future] = None

    @property
    def state(self) -> LoadState:
        with self._lock:
            return self._state

    @property
    def loaded(self) -> bool:
        return self.state is LoadState.READY

    def load_all(self) -> DataContext:
        """
        Load every named source, or return the result of the load in progress
        or already completed.

        Returns:
            The session's DataContext; the same object for every caller

        An interrupt such as KeyboardInterrupt propagates to the owning
        caller only; callers waiting on the load receive an empty context.
        """
        with self._lock:
            owner = self._future is None
            if owner:
                self._future = Future()
                self._state = LoadState.LOADING
            future = self._future

        if owner:
            context = DataContext()
            try:
                context = self._run_load()
            except Exception:
                logger.exception("Data load failed, no data available")
            finally:
                # Waiting callers are released even if the owner is interrupted
                with self._lock:
                    self._state = LoadState.READY
                future.set_result(context)

        return future.result()

    def _run_load(self) -> DataContext:
        logger.info("Loading STREACS data", sources=list(self.locations))
        parts: dict[str, Any] = {"outcomes": {}}

        try:
            self._load_sources(parts)
        except Exception:
            # Keep whatever loaded so features degrade one by one
            logger.exception("Data load failed, continuing with partial data",
                             loaded=sorted(parts["outcomes"]))

        context = self._build_context(parts)
        logger.info(
            "Data load complete",
            countries=len(context.market_structure),
            vre_points=len(context.vre),
            world_map=context.has_world_map,
        )
        return context

    def _load_sources(self, parts: dict[str, Any]) -> None:
        parts["unbundling"] = parse_unbundling(fallbacks.UNBUNDLING)

        parts["market_structure"] = self._load_with_fallback(
            "market_structure", parse_market_structure,
            fallbacks.market_structure_fallback, parts["outcomes"])
        parts["regulators"] = self._load_with_fallback(
            "regulators", parse_regulators,
            fallbacks.regulators_fallback, parts["outcomes"])
        parts["ipp"] = self._load_with_fallback(
            "ipp", parse_ipp, fallbacks.ipp_fallback, parts["outcomes"])

        try:
            parts["vre"] = self._load_optional(
                "vre", parse_renewable_share, "VRE charts", parts["outcomes"])
        except GracefulDegradationError as e:
            self._record_degraded("vre", e, parts["outcomes"])

        try:
            parts["world_map"], parts["map_names"] = self._load_optional(
                "world_map", lambda doc: (doc, parse_world_map_names(doc)),
                "world map", parts["outcomes"], count=lambda result: len(result[1]))
        except GracefulDegradationError as e:
            self._record_degraded("world_map", e, parts["outcomes"])

    def _fetch_and_parse(self, source: str, parser: Callable[[Any], Any]) -> Any:
        document = self.fetcher.fetch_json(self.locations[source], source=source)
        return parser(document)

    def _load_with_fallback(self, source: str, parser: Callable[[Any], Any],
                            fallback: Callable[[], Any],
                            outcomes: dict[str, SourceOutcome]) -> Any:
        """Fetch and parse a source, substituting its built-in fallback on failure."""
        try:
            records = self._fetch_and_parse(source, parser)
        except Exception as e:
            if not isinstance(e, (SourceFailureError, DataQualityError)):
                logger.exception("Unexpected error loading source", source=source)
            records = parser(fallback())
            outcomes[source] = SourceOutcome(source, SourceOrigin.FALLBACK, len(records), str(e))
            log_source_load(logger, source, SourceOrigin.FALLBACK.value, len(records),
                            {"error": str(e), "location": self.locations[source]})
            return records

        outcomes[source] = SourceOutcome(source, SourceOrigin.LOADED, len(records))
        log_source_load(logger, source, SourceOrigin.LOADED.value, len(records))
        return records

    def _load_optional(self, source: str, parser: Callable[[Any], Any],
                       feature: str, outcomes: dict[str, SourceOutcome],
                       count: Callable[[Any], int] = len) -> Any:
        """
        Fetch and parse a source that has no fallback.

        Raises:
            GracefulDegradationError: If the source cannot be fetched or parsed
        """
        try:
            result = self._fetch_and_parse(source, parser)
        except Exception as e:
            if not isinstance(e, (SourceFailureError, DataQualityError)):
                logger.exception("Unexpected error loading source", source=source)
            raise GracefulDegradationError(
                str(e),
                degraded_functionality=feature,
                fallback_strategy="empty",
            ) from e

        entries = count(result)
        outcomes[source] = SourceOutcome(source, SourceOrigin.LOADED, entries)
        log_source_load(logger, source, SourceOrigin.LOADED.value, entries)
        return result

    def _record_degraded(self, source: str, error: GracefulDegradationError,
                         outcomes: dict[str, SourceOutcome]) -> None:
        outcomes[source] = SourceOutcome(source, SourceOrigin.EMPTY, 0, str(error))
        log_source_load(logger, source, SourceOrigin.EMPTY.value, 0, {
            "error": str(error),
            "degraded_functionality": error.degraded_functionality,
        })

    def _build_context(self, parts: dict[str, Any]) -> DataContext:
        return DataContext(
            market_structure=MarketStructureIndex(parts.get("market_structure")),
            vre=RenewableShareIndex(parts.get("vre")),
            regulators=MappingProxyType(dict(parts.get("regulators", {}))),
            ipp=MappingProxyType(dict(parts.get("ipp", {}))),
            unbundling=MappingProxyType(dict(parts.get("unbundling", {}))),
            world_map=parts.get("world_map"),
            map_names=tuple(parts.get("map_names", ())),
            outcomes=MappingProxyType(dict(parts["outcomes"])),
        )
