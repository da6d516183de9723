"""Linear VRE projection scenarios and forecast error metrics"""

from .metrics import calculate_mae, calculate_rmse
from .projection import ScenarioPoint, build_vre_scenarios, project, round_half_up
from .prices import PRICE_SCENARIOS, PriceScenario

__all__ = [
    "PRICE_SCENARIOS",
    "PriceScenario",
    "ScenarioPoint",
    "build_vre_scenarios",
    "calculate_mae",
    "calculate_rmse",
    "project",
    "round_half_up",
]
