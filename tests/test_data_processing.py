"""Tests for modules/calculations/data_processing.py — channel normalization."""

import numpy as np
import pytest

from models.shot import RawShot
from modules.calculations.common import to_chart_points
from modules.calculations.data_processing import convert_temperature, process_shot_data
from modules.calculations.time_axis import EmptyTimeframeError


def _values(series):
    return [v for _, v in to_chart_points(series)]


class TestConvertTemperature:
    def test_fahrenheit_to_celsius(self):
        assert convert_temperature(np.array([32.0, 212.0]), True, False).tolist() == [0.0, 100.0]

    def test_celsius_to_fahrenheit(self):
        assert convert_temperature(np.array([0.0, 100.0]), False, True).tolist() == [32.0, 212.0]

    def test_same_unit_untouched(self):
        values = np.array([93.0])
        assert convert_temperature(values, True, True) is values
        assert convert_temperature(values, False, False) is values

    def test_missing_preference_means_celsius(self):
        assert convert_temperature(np.array([32.0]), True, None).tolist() == [0.0]
        assert convert_temperature(np.array([20.0]), False, None).tolist() == [20.0]


class TestProcessShotData:
    def test_timestamps_in_milliseconds(self, simple_shot):
        processed = process_shot_data(simple_shot)
        assert processed["espresso_pressure"].index.tolist() == [0.0, 1000.0, 2000.0]

    def test_channel_order_follows_shot(self, full_shot):
        processed = process_shot_data(full_shot)
        expected = [k for k in full_shot.data if k != "espresso_resistance"]
        assert list(processed) == expected

    def test_ignored_channels_skipped(self, full_shot, state_change_shot):
        assert "espresso_resistance" not in process_shot_data(full_shot)
        assert "espresso_state_change" not in process_shot_data(state_change_shot)

    def test_extrapolated_timestamps(self, full_shot):
        times = process_shot_data(full_shot)["espresso_weight"].index
        assert times[9] == pytest.approx(4500.0)
        assert times[10] == pytest.approx(4950.0)
        assert times[11] == pytest.approx(5400.0)

    def test_water_dispensed_scaled(self):
        shot = RawShot(data={"espresso_water_dispensed": [0.0, 1.5]}, timeframe=[0, 1])
        assert _values(process_shot_data(shot)["espresso_water_dispensed"]) == [0.0, 15.0]

    def test_fahrenheit_recording_shown_in_celsius(self):
        shot = RawShot(
            data={"espresso_temperature_basket": [32]},
            timeframe=[0],
            is_fahrenheit=True,
            prefer_fahrenheit=False,
        )
        assert _values(process_shot_data(shot)["espresso_temperature_basket"]) == [0.0]

    def test_celsius_recording_shown_in_fahrenheit(self):
        shot = RawShot(
            data={"espresso_temperature_mix": [100], "espresso_pressure": [100]},
            timeframe=[0],
            prefer_fahrenheit=True,
        )
        processed = process_shot_data(shot)
        assert _values(processed["espresso_temperature_mix"]) == [212.0]
        assert _values(processed["espresso_pressure"]) == [100.0]

    def test_negative_values_become_null(self):
        shot = RawShot(data={"espresso_flow": [1.0, -0.2, 0.0]}, timeframe=[0, 1, 2])
        assert _values(process_shot_data(shot)["espresso_flow"]) == [1.0, None, 0.0]

    def test_negative_after_conversion_becomes_null(self):
        shot = RawShot(
            data={"espresso_temperature_goal": [20.0]},
            timeframe=[0],
            is_fahrenheit=True,
        )
        assert _values(process_shot_data(shot)["espresso_temperature_goal"]) == [None]

    def test_non_numeric_samples_read_as_zero(self):
        shot = RawShot(data={"espresso_weight": ["2.5", None, "abc"]}, timeframe=[0, 1, 2])
        assert _values(process_shot_data(shot)["espresso_weight"]) == [2.5, 0.0, 0.0]

    def test_label_suffix(self, simple_shot):
        processed = process_shot_data(simple_shot, label_suffix="_comparison")
        assert list(processed) == ["espresso_pressure_comparison", "espresso_flow_comparison"]
        assert processed["espresso_flow_comparison"].name == "espresso_flow_comparison"

    def test_shot_not_mutated(self, simple_shot):
        process_shot_data(simple_shot)
        assert simple_shot.data["espresso_pressure"] == [0, 9, 0]

    def test_empty_timeframe_raises(self):
        with pytest.raises(EmptyTimeframeError):
            process_shot_data(RawShot(data={"espresso_pressure": [1, 2]}, timeframe=[]))
