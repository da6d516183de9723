"""
Two-segment linear projections of VRE share.

A scenario runs from the current value to a first target at the checkpoint
year, then on to a second target at the horizon year. Years past the
horizon continue the second segment's slope; nothing is clamped.
"""

import math
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from ..config.defaults import ScenarioParams


@dataclass(frozen=True)
class ScenarioPoint:
    """Projected value for one year."""
    year: int
    value: float


def round_half_up(value: float, digits: int = 2) -> float:
    """
    Round with halves toward positive infinity, as chart labels expect.

    NaN and infinite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _progress(year: int, start_year: int, end_year: int) -> float:
    span = end_year - start_year
    if span == 0:
        return 1.0
    return (year - start_year) / span


def project_value(year: int, current_value: float, target_t1: float, target_t2: float,
                  current_year: int, t1: int, t2: int) -> float:
    """Unrounded projection for a single year."""
    if year <= t1:
        return current_value + (target_t1 - current_value) * _progress(year, current_year, t1)
    return target_t1 + (target_t2 - target_t1) * _progress(year, t1, t2)


def project(current_value: float, target_t1: float, target_t2: float,
            current_year: int, t1: int, t2: int,
            years: Optional[Iterable[int]] = None) -> list[ScenarioPoint]:
    """
    Project a value through two checkpoints.

    Args:
        current_value: Value in current_year
        target_t1: Value reached in year t1
        target_t2: Value reached in year t2
        current_year: Year of current_value
        t1: First checkpoint year
        t2: Second checkpoint year
        years: Years to project; defaults to current_year + 1 through t2

    Returns:
        One point per requested year, in the order requested, rounded to
        two decimals. A checkpoint equal to the year before it makes that
        segment jump straight to its target.
    """
    if years is None:
        years = range(current_year + 1, t2 + 1)

    return [
        ScenarioPoint(
            year=year,
            value=round_half_up(project_value(
                year, current_value, target_t1, target_t2, current_year, t1, t2)),
        )
        for year in years
    ]


def build_vre_scenarios(config: Optional[dict[str, Any]] = None) -> dict[str, list[ScenarioPoint]]:
    """
    Conservative and optimistic VRE scenarios from the scenario config.

    Args:
        config: Merged configuration dict; only the "scenarios" section is used

    Returns:
        Mapping of scenario name to projected points
    """
    defaults = ScenarioParams()
    params = (config or {}).get("scenarios", {})

    def param(name: str) -> Any:
        return params.get(name, getattr(defaults, name))

    current_value = param("current_value")
    current_year = param("current_year")
    checkpoint = param("checkpoint_year")
    horizon = param("horizon_year")

    return {
        "conservative": project(
            current_value, param("conservative_checkpoint"), param("conservative_horizon"),
            current_year, checkpoint, horizon),
        "optimistic": project(
            current_value, param("optimistic_checkpoint"), param("optimistic_horizon"),
            current_year, checkpoint, horizon),
    }
