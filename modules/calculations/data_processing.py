"""
SRP: Moduł odpowiedzialny za przetwarzanie surowych danych z ekspresu.
"""
import logging
from typing import Dict, Optional
import numpy as np
import pandas as pd

from models.shot import RawShot
from modules.config import Config
from .common import DATA_LABELS_TO_IGNORE, WATER_DISPENSED, is_temperature, to_float_array
from .time_axis import build_time_axis

logger = logging.getLogger(__name__)


def convert_temperature(
    values: np.ndarray, recorded_fahrenheit: bool, display_fahrenheit: Optional[bool]
) -> np.ndarray:
    """Convert between Celsius and Fahrenheit when the two units differ.

    Args:
        values: Temperatures in the recorded unit
        recorded_fahrenheit: True if values are in Fahrenheit
        display_fahrenheit: True if Fahrenheit is wanted (None means Celsius)

    Returns:
        Temperatures in the display unit
    """
    display_fahrenheit = bool(display_fahrenheit)
    if recorded_fahrenheit == display_fahrenheit:
        return values
    if recorded_fahrenheit:
        return (values - 32) * 5 / 9
    return values * 9 / 5 + 32


def normalize_channel(label: str, raw_values, time_ms: np.ndarray, shot: RawShot) -> pd.Series:
    """Convert one raw channel into display units on the shot time axis.

    Negative results are replaced with NaN (displayed as gaps).
    """
    values = to_float_array(raw_values)
    if label == WATER_DISPENSED:
        values = values * Config.WATER_DISPENSED_SCALE
    if is_temperature(label):
        values = convert_temperature(values, shot.is_fahrenheit, shot.prefer_fahrenheit)
    values = np.where(values < 0, np.nan, values)

    return pd.Series(values, index=pd.Index(time_ms[: len(values)], name="time_ms"), name=label)


def process_shot_data(shot: RawShot, label_suffix: str = "") -> Dict[str, pd.Series]:
    """Process raw shot data: build the time axis and normalize every channel.

    This function:
    1. Skips raw channels that are recomputed or consumed elsewhere
    2. Builds the millisecond time axis (extrapolating trailing samples)
    3. Scales water dispensed, converts temperatures, drops negatives

    Args:
        shot: Raw shot recording
        label_suffix: Appended to every output channel name

    Returns:
        Mapping of channel name -> Series indexed by time in ms, in the
        shot's channel order

    Raises:
        EmptyTimeframeError: If the shot has no timeframe
    """
    time_ms = build_time_axis(shot.timeframe, shot.sample_count) * 1000

    processed = {}
    for label, raw_values in shot.data.items():
        if label in DATA_LABELS_TO_IGNORE:
            logger.debug("[Normalize] Skipping raw channel %s", label)
            continue
        name = f"{label}{label_suffix}"
        processed[name] = normalize_channel(label, raw_values, time_ms, shot).rename(name)

    logger.debug(
        "[Normalize] %s channels, %s samples, %s timestamps",
        len(processed), shot.sample_count, len(shot.timeframe),
    )
    return processed
