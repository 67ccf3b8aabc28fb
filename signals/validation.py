"""
Shot Validation Module

Provides structural validation for raw shot recordings:
- Empty timeframe / no channels
- Unequal channel lengths
- Timeframe longer than the channels, extrapolated sample count
- Non-monotonic timeframe

Checks shape only, never physical plausibility.
All functions return warnings instead of raising exceptions.
NO UI DEPENDENCIES ALLOWED.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional
from enum import Enum
import numpy as np

from models.shot import RawShot
from modules.calculations.common import to_float_array

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    """Severity levels for validation warnings."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationWarning:
    """A single validation warning."""
    code: str
    message: str
    severity: Severity = Severity.WARNING
    details: Optional[dict] = None

    def __str__(self) -> str:
        return f"[{self.severity.value.upper()}] [{self.code}] {self.message}"


@dataclass
class ValidationResult:
    """Complete result of shot validation."""
    is_valid: bool
    warnings: List[ValidationWarning] = field(default_factory=list)
    stats: dict = field(default_factory=dict)

    def has_errors(self) -> bool:
        """Check if any error-level warnings exist."""
        return any(w.severity == Severity.ERROR for w in self.warnings)

    def has_warnings(self) -> bool:
        """Check if any warning-level warnings exist."""
        return any(w.severity == Severity.WARNING for w in self.warnings)

    def get_messages(self) -> List[str]:
        """Get all warning messages as strings."""
        return [str(w) for w in self.warnings]


# ============================================================
# Validation Functions
# ============================================================

def check_timeframe(shot: RawShot) -> List[ValidationWarning]:
    """Timeframe presence, monotonicity and coverage of the channels."""
    count = len(shot.timeframe)
    if count == 0:
        return [ValidationWarning(
            code="EMPTY_TIMEFRAME",
            message="Shot has no timestamps, a time axis cannot be built",
            severity=Severity.ERROR
        )]

    warnings = []
    times = to_float_array(shot.timeframe)
    if count > 1 and np.any(np.diff(times) < 0):
        warnings.append(ValidationWarning(
            code="NON_MONOTONIC_TIMEFRAME",
            message="Timeframe is not ordered in time",
            details={"first_decrease": int(np.argmax(np.diff(times) < 0)) + 1}
        ))

    samples = shot.sample_count
    if samples and count > samples:
        warnings.append(ValidationWarning(
            code="TIMEFRAME_TOO_LONG",
            message=f"Timeframe has {count} timestamps for {samples} samples",
            details={"timestamps": count, "samples": samples}
        ))
    elif count < samples:
        warnings.append(ValidationWarning(
            code="EXTRAPOLATED_SAMPLES",
            message=f"{samples - count} trailing samples will use extrapolated times",
            severity=Severity.INFO,
            details={"extrapolated": samples - count}
        ))
    return warnings


def check_channel_lengths(shot: RawShot) -> List[ValidationWarning]:
    """All channels should carry the same number of samples."""
    if not shot.data:
        return [ValidationWarning(
            code="NO_CHANNELS",
            message="Shot has no data channels",
            severity=Severity.ERROR
        )]

    lengths = {label: len(values) for label, values in shot.data.items()}
    if len(set(lengths.values())) > 1:
        return [ValidationWarning(
            code="UNEQUAL_CHANNEL_LENGTHS",
            message=f"Channels differ in length ({min(lengths.values())}-{max(lengths.values())} samples)",
            details={"lengths": lengths}
        )]
    return []


def validate_shot(shot: RawShot) -> ValidationResult:
    """
    Run all structural checks on a shot.

    Args:
        shot: Raw shot recording

    Returns:
        ValidationResult; is_valid is False only for error-level issues
    """
    warnings = check_channel_lengths(shot) + check_timeframe(shot)
    for w in warnings:
        if w.severity != Severity.INFO:
            logger.warning("[Validation] %s", w)

    return ValidationResult(
        is_valid=not any(w.severity == Severity.ERROR for w in warnings),
        warnings=warnings,
        stats={
            "channels": len(shot.data),
            "samples": shot.sample_count,
            "timestamps": len(shot.timeframe),
        }
    )
