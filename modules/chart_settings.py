"""
Default chart presentation per channel and its merge with user overrides.

Settings are plain dicts so user overrides can be stored as JSON by the
profile collaborator; `models.shot.ChannelPresentation` is the typed view.
"""
import logging
from typing import Any, Dict, Mapping, Optional

from modules.calculations.common import is_temperature
from modules.config import Config

logger = logging.getLogger(__name__)

CHART_SETTINGS: Dict[str, Dict[str, Any]] = {
    "espresso_pressure": {"title": "Pressure", "color": "#05c793", "suffix": " bar", "type": "spline"},
    "espresso_pressure_goal": {"title": "Pressure Goal", "color": "#03634a", "suffix": " bar", "dashed": True, "type": "spline"},
    "espresso_water_dispensed": {"title": "Water Dispensed", "color": "#1fb7ea", "suffix": " ml", "hidden": True, "type": "spline"},
    "espresso_weight": {"title": "Weight", "color": "#8f6400", "suffix": " g", "hidden": True, "type": "spline"},
    "espresso_flow": {"title": "Flow", "color": "#1fb7ea", "suffix": " ml/s", "type": "spline"},
    "espresso_flow_weight": {"title": "Weight Flow", "color": "#8f6400", "suffix": " g/s", "type": "spline"},
    "espresso_flow_goal": {"title": "Flow Goal", "color": "#09485d", "suffix": " ml/s", "dashed": True, "type": "spline"},
    "espresso_resistance": {"title": "Resistance", "color": "#e5e500", "suffix": " lΩ", "hidden": True, "type": "spline"},
    "espresso_conductance": {"title": "Conductance", "color": "#0b7a75", "suffix": "", "hidden": True, "type": "spline"},
    "espresso_conductance_derivative": {"title": "Conductance Change", "color": "#7a1fa2", "suffix": "", "hidden": True, "type": "spline"},
    "espresso_temperature_basket": {"title": "Temperature Basket", "color": "#e73249", "suffix": " °C", "type": "spline"},
    "espresso_temperature_mix": {"title": "Temperature Mix", "color": "#ce123e", "suffix": " °C", "type": "spline"},
    "espresso_temperature_goal": {"title": "Temperature Goal", "color": "#960d2d", "suffix": " °C", "dashed": True, "type": "spline"},
}

FAHRENHEIT_SUFFIX = " °F"


def default_setting(label: str, fahrenheit: bool = False) -> Optional[Dict[str, Any]]:
    """Copy of the default entry, with the temperature suffix in the display unit."""
    setting = CHART_SETTINGS.get(label)
    if setting is None:
        return None
    setting = dict(setting)
    if fahrenheit and is_temperature(label):
        setting["suffix"] = FAHRENHEIT_SUFFIX
    return setting


def resolve_setting(
    label: str,
    overrides: Optional[Mapping[str, Any]] = None,
    fahrenheit: bool = False,
) -> Optional[Dict[str, Any]]:
    """
    Final display settings for a channel.

    Fields present in the user's override win over the default entry.
    Channels without a default and without an override resolve to None.

    Args:
        label: Channel name
        overrides: Channel name -> partial settings (may be None/empty)
        fahrenheit: Temperatures are displayed in Fahrenheit

    Returns:
        Merged settings dict or None if the channel should be skipped
    """
    base = default_setting(label, fahrenheit)
    override = (overrides or {}).get(label)
    if override is not None and not isinstance(override, Mapping):
        logger.warning("[ChartSettings] Ignoring malformed override for %s: %r", label, override)
        override = None
    if not override:
        return base
    return {**(base or {}), **override}


def comparison_setting(
    label: str,
    overrides: Optional[Mapping[str, Any]] = None,
    fahrenheit: bool = False,
) -> Optional[Dict[str, Any]]:
    """Settings for a comparison shot channel (`<channel>_comparison`).

    Based on the resolved setting of the base channel, drawn dashed and
    faded so it reads as the background shot.
    """
    base_label = label[: -len(Config.COMPARISON_SUFFIX)]
    setting = resolve_setting(base_label, overrides, fahrenheit)
    if setting is None:
        return None
    setting = dict(setting)
    setting["title"] = f"{setting.get('title', base_label)} (comparison)"
    setting["dashed"] = True
    setting["opacity"] = Config.COMPARISON_OPACITY
    return setting


def setting_for(
    label: str,
    overrides: Optional[Mapping[str, Any]] = None,
    fahrenheit: bool = False,
) -> Optional[Dict[str, Any]]:
    """Resolve settings for any chart channel, comparison channels included."""
    suffix = Config.COMPARISON_SUFFIX
    if suffix and label.endswith(suffix) and label not in CHART_SETTINGS:
        return comparison_setting(label, overrides, fahrenheit)
    return resolve_setting(label, overrides, fahrenheit)
