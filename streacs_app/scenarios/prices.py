"""Illustrative merit-order wholesale price scenarios ($/MWh)."""

from dataclasses import dataclass

PRICE_YEARS = (2024, 2025, 2026, 2027, 2028, 2029, 2030, 2035, 2040)
BASELINE_PRICE = 50.0


@dataclass(frozen=True)
class PriceScenario:
    """Wholesale price path aligned with PRICE_YEARS."""
    name: str
    label: str
    prices: tuple[float, ...]

    def as_series(self) -> list[tuple[int, float]]:
        return list(zip(PRICE_YEARS, self.prices))


PRICE_SCENARIOS = (
    PriceScenario(
        "baseline", "Baseline (no VRE growth)",
        (BASELINE_PRICE,) * len(PRICE_YEARS),
    ),
    # Prices fall 15-20% as VRE reaches 50-60%
    PriceScenario(
        "conservative", "Conservative VRE Scenario",
        (50, 49, 48, 47, 45, 43, 42.5, 41, 40),
    ),
    # Prices fall 25-30% as VRE reaches 60-75%
    PriceScenario(
        "optimistic", "Optimistic VRE Scenario",
        (50, 48, 45, 42, 39, 37.5, 37, 36, 35),
    ),
)
