"""
SOLID: Single Responsibility Principle - Reorganizacja obliczeń.

Ten pakiet grupuje funkcje obliczeniowe według odpowiedzialności:
- common.py: Nazwy kanałów i wspólne stałe
- time_axis.py: Oś czasu z ekstrapolacją próbek
- data_processing.py: Normalizacja kanałów (jednostki, temperatura)
- hydraulics.py: Opór, przewodność i jej pochodna
- step_detection.py: Wykrywanie etapów ekstrakcji

Import: from modules.calculations import process_shot_data
"""

from .common import (
    DATA_LABELS_TO_IGNORE,
    GAUSSIAN_KERNEL,
    is_goal,
    is_temperature,
    to_chart_points,
)

from .time_axis import (
    EmptyTimeframeError,
    build_time_axis,
    extrapolation_step,
)

from .data_processing import (
    convert_temperature,
    normalize_channel,
    process_shot_data,
)

from .hydraulics import (
    resistance_series,
    conductance_series,
    conductance_derivative_series,
    calculate_derived_channels,
)

from .step_detection import (
    StageStrategy,
    select_strategy,
    stages_from_state_change,
    goal_curve_candidates,
    merge_close_indices,
    detect_stages_from_data,
    detect_stage_indices,
    detect_stages,
)

__all__ = [
    # Common
    'DATA_LABELS_TO_IGNORE',
    'GAUSSIAN_KERNEL',
    'is_goal',
    'is_temperature',
    'to_chart_points',
    # Time axis
    'EmptyTimeframeError',
    'build_time_axis',
    'extrapolation_step',
    # Normalization
    'convert_temperature',
    'normalize_channel',
    'process_shot_data',
    # Hydraulics
    'resistance_series',
    'conductance_series',
    'conductance_derivative_series',
    'calculate_derived_channels',
    # Stages
    'StageStrategy',
    'select_strategy',
    'stages_from_state_change',
    'goal_curve_candidates',
    'merge_close_indices',
    'detect_stages_from_data',
    'detect_stage_indices',
    'detect_stages',
]
