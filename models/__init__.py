"""
Models Module - Data Models

This module contains the dataclasses exchanged with the chart engine.
NO UI DEPENDENCIES ALLOWED.

Sub-modules:
- shot: Raw shot recording, channel presentation, stage markers
"""

from models.shot import (
    RawShot,
    ChannelPresentation,
    StageMarker,
    ShotChartResult,
)

__all__ = [
    'RawShot',
    'ChannelPresentation',
    'StageMarker',
    'ShotChartResult',
]
