"""
Signal Preprocessing Module

Provides standardized preprocessing functions for shot channels:
- Rate of change (pairwise derivative over time)
- Smoothing (fixed-kernel convolution)

Channels are pandas Series indexed by time in milliseconds, NaN marks a
suppressed sample.
NO UI DEPENDENCIES ALLOWED.
"""

from dataclasses import dataclass, field
from typing import Dict, Any
import numpy as np
import pandas as pd
from scipy import signal


@dataclass
class SeriesResult:
    """Result of a preprocessing operation."""
    data: pd.Series
    method: str
    parameters: Dict[str, Any] = field(default_factory=dict)


def _empty_series(name=None) -> pd.Series:
    return pd.Series(dtype=float, index=pd.Index([], dtype=float, name="time_ms"), name=name)


# ============================================================
# Derivative Functions
# ============================================================

def pairwise_derivative(series: pd.Series, scale: float = 1.0) -> SeriesResult:
    """
    Rate of change per second between consecutive samples.

    Each point is stamped with the later sample's time. A point is NaN when
    either sample is NaN or both samples share a timestamp.

    Args:
        series: Input Series indexed by time in ms
        scale: Multiplier applied to the per-second rate (default: 1.0)

    Returns:
        SeriesResult with len(series) - 1 points
    """
    if series is None or len(series) < 2:
        return SeriesResult(
            data=_empty_series(getattr(series, 'name', None)),
            method='pairwise_derivative',
            parameters={'scale': scale}
        )

    times = series.index.to_numpy(dtype=float)
    values = series.to_numpy(dtype=float)
    dt = np.diff(times) / 1000
    with np.errstate(divide='ignore', invalid='ignore'):
        rate = np.diff(values) / dt * scale
    rate[dt == 0] = np.nan

    return SeriesResult(
        data=pd.Series(rate, index=pd.Index(times[1:], name="time_ms"), name=series.name),
        method='pairwise_derivative',
        parameters={'scale': scale}
    )


# ============================================================
# Smoothing Functions
# ============================================================

def kernel_smooth(
    series: pd.Series,
    kernel: np.ndarray,
    trailing_pad: int = 0
) -> SeriesResult:
    """
    Smooth a series with a fixed weighted window.

    NaN samples count as 0 in the weighted sum; windows are not
    renormalized around gaps, so values next to a gap are pulled toward 0.

    Args:
        series: Input Series indexed by time in ms
        kernel: Window weights (odd length, centred)
        trailing_pad: NaN points appended so the last samples can be centres

    Returns:
        SeriesResult with one point per full window, stamped with the
        window centre's time
    """
    width = len(kernel)
    centre = width // 2
    values = np.concatenate([series.to_numpy(dtype=float), np.full(trailing_pad, np.nan)])
    times = np.concatenate([series.index.to_numpy(dtype=float), np.full(trailing_pad, np.nan)])

    if len(values) < width:
        return SeriesResult(
            data=_empty_series(series.name),
            method='kernel_smooth',
            parameters={'width': width, 'trailing_pad': trailing_pad}
        )

    # correlate, not convolve: flip the kernel so asymmetric weights keep their order
    smoothed = signal.convolve(
        np.nan_to_num(values, nan=0.0), kernel[::-1], mode='valid', method='direct'
    )
    centres = times[centre:centre + len(smoothed)]

    return SeriesResult(
        data=pd.Series(smoothed, index=pd.Index(centres, name="time_ms"), name=series.name),
        method='kernel_smooth',
        parameters={'width': width, 'trailing_pad': trailing_pad}
    )


__all__ = [
    'SeriesResult',
    'pairwise_derivative',
    'kernel_smooth',
]
