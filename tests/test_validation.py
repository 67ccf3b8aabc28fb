"""Tests for signals/validation.py — structural shot checks."""

from models.shot import RawShot
from signals.validation import Severity, validate_shot


def _codes(result):
    return [w.code for w in result.warnings]


class TestValidateShot:
    def test_clean_shot(self, simple_shot):
        result = validate_shot(simple_shot)
        assert result.is_valid
        assert result.warnings == []
        assert result.stats == {"channels": 2, "samples": 3, "timestamps": 3}

    def test_empty_timeframe_is_error(self, simple_shot):
        result = validate_shot(RawShot(data=simple_shot.data, timeframe=[]))
        assert not result.is_valid
        assert result.has_errors()
        assert "EMPTY_TIMEFRAME" in _codes(result)

    def test_no_channels_is_error(self):
        result = validate_shot(RawShot(data={}, timeframe=[0, 1]))
        assert not result.is_valid
        assert _codes(result) == ["NO_CHANNELS"]

    def test_unequal_lengths(self):
        shot = RawShot(data={"espresso_pressure": [1, 2, 3], "espresso_flow": [1, 2]}, timeframe=[0, 1, 2])
        result = validate_shot(shot)
        assert result.is_valid
        assert result.has_warnings()
        assert "UNEQUAL_CHANNEL_LENGTHS" in _codes(result)

    def test_extrapolated_samples_are_info(self, full_shot):
        result = validate_shot(full_shot)
        assert _codes(result) == ["EXTRAPOLATED_SAMPLES"]
        assert result.warnings[0].severity == Severity.INFO
        assert result.warnings[0].details == {"extrapolated": 2}

    def test_timeframe_too_long(self):
        result = validate_shot(RawShot(data={"espresso_flow": [1, 2]}, timeframe=[0, 1, 2]))
        assert "TIMEFRAME_TOO_LONG" in _codes(result)

    def test_non_monotonic(self):
        result = validate_shot(RawShot(data={"espresso_flow": [1, 2, 3]}, timeframe=[0, 2, 1]))
        assert "NON_MONOTONIC_TIMEFRAME" in _codes(result)
        assert result.warnings[0].details == {"first_decrease": 2}

    def test_messages(self, simple_shot):
        result = validate_shot(RawShot(data=simple_shot.data, timeframe=[]))
        assert result.get_messages() == [
            "[ERROR] [EMPTY_TIMEFRAME] Shot has no timestamps, a time axis cannot be built"
        ]
