"""Default configuration parameters for the STREACS data layer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceParams:
    """Locations of the named data sources."""
    base_dir: str = "."                              # Relative paths resolve against this
    market_structure: str = "data/power-market-structure-wholesale.json"
    regulators: str = "data/sector-regulators.json"
    ipp: str = "data/ipp-entry.json"
    vre: str = "share-of-electricity-production-from-solar-and-wind.json"
    world_map: str = "https://cdn.jsdelivr.net/npm/world-atlas@2/countries-110m.json"
    timeout_seconds: float = 10.0                    # Per-fetch network timeout


@dataclass(frozen=True)
class TimelineParams:
    """Map timeline parameters."""
    start_year: int = 1989
    end_year: int = 2024
    play_speed_ms: int = 500                         # Milliseconds per year


@dataclass(frozen=True)
class ScenarioParams:
    """VRE projection scenario parameters."""
    country: str = "Armenia"
    current_value: float = 10.1                      # VRE share (%) in current_year
    current_year: int = 2024
    checkpoint_year: int = 2030
    horizon_year: int = 2040
    conservative_checkpoint: float = 50.0
    conservative_horizon: float = 60.0
    optimistic_checkpoint: float = 60.0
    optimistic_horizon: float = 75.0


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    sources: SourceParams
    timeline: TimelineParams
    scenarios: ScenarioParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        sources=SourceParams(),
        timeline=TimelineParams(),
        scenarios=ScenarioParams(),
    )
