"""
SOLID: Open/Closed Principle - Serializacja serii wykresu.

Each channel becomes a renderer-agnostic record; the Plotly adapter in
`modules.plots` (or any other renderer) consumes the same records.

Usage:
    from modules.chart_exporters import ChartContext, for_chart, split_temperature

    ctx = ChartContext(overrides=user_chart_settings, fahrenheit=False)
    temperature, main = split_temperature(series_map)
    records = for_chart(main, ctx)
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple
import pandas as pd

from models.shot import ChannelPresentation
from modules.calculations.common import is_temperature, to_chart_points
from modules.chart_settings import setting_for
from modules.config import Config

logger = logging.getLogger(__name__)

SettingResolver = Callable[[str, Optional[Mapping[str, Any]], bool], Optional[Dict[str, Any]]]


# ============================================================
# SOLID: Kontener danych - zamiast wielu parametrów (ISP)
# ============================================================

@dataclass
class ChartContext:
    """Presentation inputs shared by every series of one chart.

    overrides: channel name -> partial settings from the viewer's profile
    fahrenheit: temperatures are displayed in Fahrenheit
    """
    overrides: Mapping[str, Any] = field(default_factory=dict)
    fahrenheit: bool = False
    resolver: SettingResolver = setting_for

    def presentation_for(self, label: str) -> Optional[ChannelPresentation]:
        setting = self.resolver(label, self.overrides, self.fahrenheit)
        if not setting:
            return None
        return ChannelPresentation.from_setting(setting)


def split_temperature(
    series_map: Mapping[str, pd.Series],
) -> Tuple[List[Tuple[str, pd.Series]], List[Tuple[str, pd.Series]]]:
    """Partition channels into (temperature, main), each sorted by name."""
    temperature, main = [], []
    for label, series in sorted(series_map.items()):
        (temperature if is_temperature(label) else main).append((label, series))
    return temperature, main


def serialize_series(series: pd.Series, presentation: ChannelPresentation) -> Dict[str, Any]:
    """Build the chart record for one channel."""
    return {
        "name": presentation.title,
        "data": to_chart_points(series),
        "color": presentation.color,
        "visible": not presentation.hidden,
        "dashStyle": presentation.dash_style,
        "valueDecimals": Config.VALUE_DECIMALS,
        "valueSuffix": presentation.suffix,
        "opacity": 1 if presentation.opacity is None else presentation.opacity,
        "seriesType": presentation.chart_type,
    }


def for_chart(items: List[Tuple[str, pd.Series]], ctx: ChartContext) -> List[Dict[str, Any]]:
    """Serialize channels in order, skipping those with no presentation."""
    records = []
    for label, series in items:
        presentation = ctx.presentation_for(label)
        if presentation is None:
            logger.debug("[Chart] No presentation for %s, skipped", label)
            continue
        records.append(serialize_series(series, presentation))
    return records
