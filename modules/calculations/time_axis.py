"""
Time axis reconstruction for shot channels.

Machines record fewer timestamps than samples; the trailing samples get
their times by linear continuation past the last recorded timestamp.
"""
from typing import Any, Sequence
import numpy as np

from .common import to_float_array


class EmptyTimeframeError(ValueError):
    """Raised when a shot carries no timestamps at all."""


def extrapolation_step(timeframe: np.ndarray) -> float:
    """Step used past the recorded timeframe: (last + first) / count."""
    return (timeframe[-1] + timeframe[0]) / len(timeframe)


def build_time_axis(timeframe: Sequence[Any], sample_count: int) -> np.ndarray:
    """
    Build one time (in seconds) per sample index.

    Args:
        timeframe: Recorded sample times in seconds
        sample_count: Number of samples in the channel

    Returns:
        Array of `sample_count` times; indices past the timeframe are
        extrapolated with `extrapolation_step`

    Raises:
        EmptyTimeframeError: If timeframe is empty
    """
    tf = to_float_array(timeframe)
    count = len(tf)
    if count == 0:
        raise EmptyTimeframeError("Cannot build a time axis from an empty timeframe")

    if sample_count <= count:
        return tf[:sample_count].copy()

    step = extrapolation_step(tf)
    extra = np.arange(1, sample_count - count + 1, dtype=float)
    return np.concatenate([tf, tf[-1] + extra * step])
