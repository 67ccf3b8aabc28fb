"""
Moduł pomocniczy - wspólne nazwy kanałów i stałe dla pakietu calculations.
"""
from typing import Any, Sequence
import numpy as np
import pandas as pd

# Channel names
PRESSURE = "espresso_pressure"
FLOW = "espresso_flow"
WATER_DISPENSED = "espresso_water_dispensed"
STATE_CHANGE = "espresso_state_change"
RESISTANCE = "espresso_resistance"
RESISTANCE_WEIGHT = "espresso_resistance_weight"
CONDUCTANCE = "espresso_conductance"
CONDUCTANCE_DERIVATIVE = "espresso_conductance_derivative"

# Raw channels that are recomputed or consumed elsewhere
DATA_LABELS_TO_IGNORE = (RESISTANCE, RESISTANCE_WEIGHT, STATE_CHANGE)

GOAL_SUFFIX = "_goal"
TEMPERATURE_MARKER = "temperature"

# 9-tap Gaussian kernel, centred on the 5th tap
GAUSSIAN_KERNEL = np.array(
    [0.048297, 0.08393, 0.124548, 0.157829, 0.170793, 0.157829, 0.124548, 0.08393, 0.048297]
)


def is_temperature(label: str) -> bool:
    return TEMPERATURE_MARKER in label


def is_goal(label: str) -> bool:
    return label.endswith(GOAL_SUFFIX)


def to_float_array(values: Sequence[Any]) -> np.ndarray:
    """
    Cast raw samples to floats.

    Missing or non-numeric samples become 0.0, so a broken sample reads as
    "no signal" instead of aborting the whole shot.
    """
    numeric = pd.to_numeric(pd.Series(list(values), dtype=object), errors="coerce")
    return numeric.fillna(0.0).to_numpy(dtype=float)


def to_chart_points(series: pd.Series) -> list:
    """Convert a time-indexed Series to [[t, v], ...] with None for NaN."""
    return [
        [float(t), None if pd.isna(v) else float(v)]
        for t, v in zip(series.index, series.to_numpy())
    ]
