"""
Hydraulic channels derived from pressure and flow.

Resistance (P / F^2), conductance (F^2 / P) and the smoothed rate of change
of conductance. Every numeric edge case degrades the sample to NaN instead
of raising.
"""
import logging
from typing import Dict
import numpy as np
import pandas as pd

from modules.config import Config
from signals.preprocessing import kernel_smooth, pairwise_derivative
from .common import (
    CONDUCTANCE,
    CONDUCTANCE_DERIVATIVE,
    FLOW,
    GAUSSIAN_KERNEL,
    PRESSURE,
    RESISTANCE,
)

logger = logging.getLogger(__name__)

DERIVATIVE_PADDING = 4


def _aligned_values(pressure: pd.Series, flow: pd.Series):
    """Pressure and flow as float arrays with NaN read as 0."""
    n = len(pressure)
    p = np.nan_to_num(pressure.to_numpy(dtype=float), nan=0.0)
    f = np.zeros(n)
    f_raw = np.nan_to_num(flow.to_numpy(dtype=float)[:n], nan=0.0)
    f[: len(f_raw)] = f_raw
    return p, f


def resistance_series(pressure: pd.Series, flow: pd.Series) -> pd.Series:
    """Resistance P / F^2 on the pressure time axis.

    NaN where flow is 0 or the result exceeds MAX_RESISTANCE_VALUE.
    """
    p, f = _aligned_values(pressure, flow)
    with np.errstate(divide='ignore', invalid='ignore'):
        r = p / f**2
    r = np.where((f == 0) | (r > Config.MAX_RESISTANCE_VALUE), np.nan, r)
    return pd.Series(r, index=pressure.index, name=RESISTANCE)


def conductance_series(pressure: pd.Series, flow: pd.Series) -> pd.Series:
    """Conductance F^2 / P on the pressure time axis.

    NaN where pressure is 0 or the result exceeds MAX_RESISTANCE_VALUE.
    """
    p, f = _aligned_values(pressure, flow)
    with np.errstate(divide='ignore', invalid='ignore'):
        c = f**2 / p
    c = np.where((p == 0) | (c > Config.MAX_RESISTANCE_VALUE), np.nan, c)
    return pd.Series(c, index=pressure.index, name=CONDUCTANCE)


def conductance_derivative_series(conductance: pd.Series) -> pd.Series:
    """Gaussian-smoothed rate of change of conductance.

    1. Pairwise derivative, scaled by CONDUCTANCE_DERIVATIVE_SCALE
    2. Four trailing NaN points so the last samples can be window centres
    3. 9-tap Gaussian window, NaN counted as 0
    4. Values outside [MIN, MAX]_CONDUCTANCE_DERIVATIVE become NaN

    Returns:
        Series with len(conductance) + 3 - 8 points (empty for short shots)
    """
    derivative = pairwise_derivative(conductance, scale=Config.CONDUCTANCE_DERIVATIVE_SCALE).data
    smoothed = kernel_smooth(derivative, GAUSSIAN_KERNEL, trailing_pad=DERIVATIVE_PADDING).data

    out_of_band = (smoothed > Config.MAX_CONDUCTANCE_DERIVATIVE) | (
        smoothed < Config.MIN_CONDUCTANCE_DERIVATIVE
    )
    return smoothed.mask(out_of_band.to_numpy()).rename(CONDUCTANCE_DERIVATIVE)


def calculate_derived_channels(processed: Dict[str, pd.Series], label_suffix: str = "") -> Dict[str, pd.Series]:
    """Compute resistance, conductance and conductance derivative.

    Args:
        processed: Normalized channels (see process_shot_data)
        label_suffix: Suffix used for the channel names in `processed`

    Returns:
        Mapping of derived channel name (with suffix) -> Series; empty when
        pressure or flow is missing
    """
    pressure = processed.get(f"{PRESSURE}{label_suffix}")
    flow = processed.get(f"{FLOW}{label_suffix}")
    if pressure is None or flow is None:
        logger.debug("[Hydraulics] Pressure or flow missing, no derived channels")
        return {}

    conductance = conductance_series(pressure, flow)
    derived = {
        RESISTANCE: resistance_series(pressure, flow),
        CONDUCTANCE: conductance,
        CONDUCTANCE_DERIVATIVE: conductance_derivative_series(conductance),
    }
    return {f"{label}{label_suffix}": s.rename(f"{label}{label_suffix}") for label, s in derived.items()}
