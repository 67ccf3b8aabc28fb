"""
Shot Chart Service

High-level orchestration of one chart render:
- Channel normalization and derived hydraulic channels
- Stage detection (once per instance)
- Presentation merge and serialization into main / temperature groups
- Side-by-side comparison of two shots
"""

import logging
from functools import cached_property
from typing import Any, Dict, List, Mapping, Optional

import pandas as pd

from models.shot import RawShot, ShotChartResult, StageMarker
from modules.calculations import (
    calculate_derived_channels,
    detect_stages,
    process_shot_data,
)
from modules.chart_exporters import ChartContext, for_chart, split_temperature
from modules.config import Config
from signals.validation import ValidationResult, validate_shot

logger = logging.getLogger(__name__)


class ShotChart:
    """
    Chart series and stages for a single shot.

    Usage:
        chart = ShotChart(shot, user_chart_settings)
        chart.shot_chart()         # pressure, flow, weight, resistance ...
        chart.temperature_chart()  # temperature channels
        chart.stages               # [StageMarker, ...]

    Raises:
        EmptyTimeframeError: If the shot has no timeframe (no partial chart)
    """

    def __init__(self, shot: RawShot, chart_settings: Optional[Mapping[str, Any]] = None):
        self.shot = shot
        self.chart_settings = chart_settings or {}
        self.processed_shot_data = self._prepare_chart_data()
        self._temperature_data, self._main_data = split_temperature(self.processed_shot_data)

    def _prepare_chart_data(self) -> Dict[str, pd.Series]:
        processed = process_shot_data(self.shot)
        processed.update(calculate_derived_channels(processed))
        return processed

    @property
    def context(self) -> ChartContext:
        return ChartContext(overrides=self.chart_settings, fahrenheit=self.shot.displays_fahrenheit)

    def shot_chart(self) -> List[Dict[str, Any]]:
        return for_chart(self._main_data, self.context)

    def temperature_chart(self) -> List[Dict[str, Any]]:
        return for_chart(self._temperature_data, self.context)

    @cached_property
    def stages(self) -> List[StageMarker]:
        return detect_stages(self.shot, self.processed_shot_data)

    def stage_values(self) -> List[Dict[str, float]]:
        """Stages as the renderer's plot-line records ({"value": ms})."""
        return [s.to_dict() for s in self.stages]

    @cached_property
    def validation(self) -> ValidationResult:
        return validate_shot(self.shot)

    def to_result(self) -> ShotChartResult:
        return ShotChartResult(
            main=self.shot_chart(),
            temperature=self.temperature_chart(),
            stages=list(self.stages),
        )


class ShotChartCompare(ShotChart):
    """
    Chart of a shot with a second shot drawn behind it.

    Comparison channels are named `<channel>_comparison` and reuse the base
    channel's presentation, dashed and faded. Stages come from the base
    shot only.
    """

    def __init__(
        self,
        shot: RawShot,
        comparison: RawShot,
        chart_settings: Optional[Mapping[str, Any]] = None,
    ):
        self.comparison = comparison
        super().__init__(shot, chart_settings)

    def _prepare_chart_data(self) -> Dict[str, pd.Series]:
        processed = super()._prepare_chart_data()

        suffix = Config.COMPARISON_SUFFIX
        # the comparison shot is converted to the base viewer's unit
        comparison = RawShot(
            data=self.comparison.data,
            timeframe=self.comparison.timeframe,
            is_fahrenheit=self.comparison.is_fahrenheit,
            prefer_fahrenheit=self.shot.prefer_fahrenheit,
        )
        compared = process_shot_data(comparison, label_suffix=suffix)
        compared.update(calculate_derived_channels(compared, label_suffix=suffix))
        logger.debug("[Compare] %s comparison channels", len(compared))

        processed.update(compared)
        return processed


def build_shot_chart(
    shot: RawShot,
    chart_settings: Optional[Mapping[str, Any]] = None,
    comparison: Optional[RawShot] = None,
) -> ShotChartResult:
    """Render-ready series and stages for a shot, optionally with a comparison."""
    if comparison is not None:
        chart = ShotChartCompare(shot, comparison, chart_settings)
    else:
        chart = ShotChart(shot, chart_settings)
    return chart.to_result()
