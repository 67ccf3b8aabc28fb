"""
Stage Detection for Espresso Shots.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Mapping, Sequence
import numpy as np
import pandas as pd

from models.shot import RawShot, StageMarker
from modules.config import Config
from .common import STATE_CHANGE, is_goal, to_float_array

logger = logging.getLogger(__name__)


class StageStrategy(str, Enum):
    """How stage boundaries are found for a shot."""
    STATE_CHANGE = "state_change"   # machine reported its own phase changes
    GOAL_CURVES = "goal_curves"     # inferred from kinks in the goal curves


def select_strategy(data: Mapping[str, Any]) -> StageStrategy:
    if STATE_CHANGE in data:
        return StageStrategy.STATE_CHANGE
    return StageStrategy.GOAL_CURVES


def stages_from_state_change(states: Sequence[Any]) -> List[int]:
    """Indices where the machine switched to a new nonzero state.

    Samples whose integer part is 0 mean "no signal" and never count as a
    transition.
    """
    values = to_float_array(states)
    if len(values) == 0:
        return []

    indices = []
    current = values[0]
    for i, s in enumerate(values):
        if int(s) == 0 or s == current:
            continue
        indices.append(i)
        current = s
    return indices


def goal_curve_candidates(values: Sequence[Any]) -> List[int]:
    """Indices where the discrete second difference of a goal curve jumps."""
    a = to_float_array(values)
    skip = Config.STAGE_SKIP_SAMPLES
    if len(a) <= skip:
        return []

    diff2 = np.zeros(len(a))
    diff2[2:] = (a[2:] - a[1:-1]) - (a[1:-1] - a[:-2])
    hits = np.abs(diff2) > Config.STAGE_DIFF2_THRESHOLD
    hits[:skip] = False
    return np.flatnonzero(hits).tolist()


def merge_close_indices(indices: Sequence[int], min_separation: int) -> List[int]:
    """Sort, dedupe and keep indices more than `min_separation` apart.

    The first index always survives; each later one is kept only if it is
    more than `min_separation` samples after the last kept index.
    """
    ordered = sorted(set(indices))
    if not ordered:
        return []

    selected = [ordered[0]]
    for index in ordered[1:]:
        if index - selected[-1] > min_separation:
            selected.append(index)
    return selected


def detect_stages_from_data(data: Mapping[str, Sequence[Any]]) -> List[int]:
    """Fallback detection from every `*_goal` channel; empty if nothing found."""
    candidates = []
    for label, values in data.items():
        if is_goal(label):
            candidates.extend(goal_curve_candidates(values))
    return merge_close_indices(candidates, Config.STAGE_MIN_SEPARATION)


def detect_stage_indices(data: Mapping[str, Sequence[Any]]) -> List[int]:
    """Stage boundary sample indices for raw shot data."""
    strategy = select_strategy(data)
    if strategy is StageStrategy.STATE_CHANGE:
        indices = stages_from_state_change(data[STATE_CHANGE])
    else:
        indices = detect_stages_from_data(data)
    logger.info("[Stages] %s: %s boundaries", strategy.value, len(indices))
    return indices


def detect_stages(shot: RawShot, processed: Dict[str, pd.Series]) -> List[StageMarker]:
    """
    Detect stage boundaries and place them on the chart time axis.

    Timestamps come from the first normalized channel; indices beyond its
    length are dropped.

    Args:
        shot: Raw shot recording
        processed: Normalized channels in shot order

    Returns:
        StageMarker list ordered by time
    """
    if not processed:
        return []

    indices = detect_stage_indices(shot.data)
    times = next(iter(processed.values())).index
    dropped = [i for i in indices if i >= len(times)]
    if dropped:
        logger.debug("[Stages] Indices past the time axis dropped: %s", dropped)

    return [StageMarker(float(times[i])) for i in indices if i < len(times)]
