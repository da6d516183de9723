"""Forecast error metrics for validating projections against observations."""

import math
from typing import Optional, Sequence


def calculate_rmse(actual: Sequence[float], predicted: Sequence[float]) -> Optional[float]:
    """
    Root mean squared error.

    Returns:
        RMSE, or None if the sequences differ in length or are empty
    """
    if len(actual) != len(predicted) or not actual:
        return None
    squared_errors = [(a - p) ** 2 for a, p in zip(actual, predicted)]
    return math.sqrt(sum(squared_errors) / len(actual))


def calculate_mae(actual: Sequence[float], predicted: Sequence[float]) -> Optional[float]:
    """
    Mean absolute error.

    Returns:
        MAE, or None if the sequences differ in length or are empty
    """
    if len(actual) != len(predicted) or not actual:
        return None
    return sum(abs(a - p) for a, p in zip(actual, predicted)) / len(actual)
