"""
Signals Module - Signal Processing

This module contains signal processing and validation functions.
NO UI DEPENDENCIES ALLOWED.

Sub-modules:
- preprocessing: Pairwise derivative, kernel smoothing
- validation: Structural shot validation, warnings
"""

# Preprocessing module
from signals.preprocessing import (
    SeriesResult,
    pairwise_derivative,
    kernel_smooth,
)

# Validation module
from signals.validation import (
    Severity,
    ValidationWarning,
    ValidationResult,
    check_timeframe,
    check_channel_lengths,
    validate_shot,
)

__all__ = [
    # Preprocessing
    'SeriesResult',
    'pairwise_derivative',
    'kernel_smooth',
    # Validation
    'Severity',
    'ValidationWarning',
    'ValidationResult',
    'check_timeframe',
    'check_channel_lengths',
    'validate_shot',
]
