"""
Espresso Shot Objects.

Input recording, presentation settings and detected stages exchanged
between the chart engine and its callers.

NO LOGIC IMPLEMENTED beyond construction and serialization.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence


# ============================================================
# RAW SHOT
# ============================================================

@dataclass(frozen=True)
class RawShot:
    """
    One recorded extraction as delivered by the upload parser.

    - data: channel name -> raw samples (insertion order is display order)
    - timeframe: sample times in seconds, may be shorter than the channels
    - is_fahrenheit: temperature channels were recorded in Fahrenheit
    - prefer_fahrenheit: viewer wants Fahrenheit (None means Celsius)
    """
    data: Mapping[str, Sequence[Any]]
    timeframe: Sequence[Any]
    is_fahrenheit: bool = False
    prefer_fahrenheit: Optional[bool] = None

    @property
    def sample_count(self) -> int:
        """Sample count of the longest channel."""
        return max((len(v) for v in self.data.values()), default=0)

    @property
    def displays_fahrenheit(self) -> bool:
        return bool(self.prefer_fahrenheit)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "RawShot":
        """Build from a JSON-like mapping (snake_case or camelCase keys)."""
        is_fahrenheit = payload.get("is_fahrenheit", payload.get("isFahrenheit", False))
        prefer = payload.get("prefer_fahrenheit", payload.get("preferFahrenheit"))
        return cls(
            data=dict(payload.get("data") or {}),
            timeframe=list(payload.get("timeframe") or []),
            is_fahrenheit=bool(is_fahrenheit),
            prefer_fahrenheit=None if prefer is None else bool(prefer),
        )


# ============================================================
# PRESENTATION
# ============================================================

@dataclass
class ChannelPresentation:
    """Resolved display settings of a single channel."""
    title: str
    color: Optional[str] = None
    suffix: str = ""
    dashed: bool = False
    hidden: bool = False
    opacity: Optional[float] = None
    series_type: Optional[str] = None

    @classmethod
    def from_setting(cls, setting: Mapping[str, Any]) -> "ChannelPresentation":
        """Build from a merged settings mapping (`type` holds the series type)."""
        return cls(
            title=setting.get("title", ""),
            color=setting.get("color"),
            suffix=setting.get("suffix") or "",
            dashed=bool(setting.get("dashed")),
            hidden=bool(setting.get("hidden")),
            opacity=setting.get("opacity"),
            series_type=setting.get("type"),
        )

    @property
    def dash_style(self) -> str:
        return "Dash" if self.dashed else "Solid"

    @property
    def chart_type(self) -> str:
        return "spline" if self.series_type == "spline" else "line"


# ============================================================
# STAGES
# ============================================================

@dataclass(frozen=True)
class StageMarker:
    """Detected phase boundary, in chart milliseconds."""
    timestamp_ms: float

    def to_dict(self) -> Dict[str, float]:
        return {"value": self.timestamp_ms}


@dataclass
class ShotChartResult:
    """Everything a renderer needs for one shot."""
    main: List[Dict[str, Any]] = field(default_factory=list)
    temperature: List[Dict[str, Any]] = field(default_factory=list)
    stages: List[StageMarker] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict for JSON export."""
        return {
            "shot_chart": self.main,
            "temperature_chart": self.temperature,
            "stages": [s.to_dict() for s in self.stages],
        }
