# Tests configuration for the shot chart engine
import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from models.shot import RawShot


@pytest.fixture
def simple_shot():
    """Three-sample shot with a single flowing sample in the middle."""
    return RawShot(
        data={
            "espresso_pressure": [0, 9, 0],
            "espresso_flow": [0, 3, 0],
        },
        timeframe=[0, 1, 2],
    )


@pytest.fixture
def state_change_shot():
    """Shot whose machine reported its own phase changes."""
    return RawShot(
        data={
            "espresso_pressure": [1.0, 2.0, 6.0, 9.0, 9.0, 8.5],
            "espresso_flow": [0.5, 1.0, 2.0, 2.0, 2.1, 2.0],
            "espresso_state_change": [0, 0, 1, 1, 2, 2],
        },
        timeframe=[0, 0.5, 1.0, 1.5, 2.0, 2.5],
    )


@pytest.fixture
def goal_shot():
    """20-sample shot with kinks in its goal curves at 10, 13 and 17."""
    n = 20
    return RawShot(
        data={
            "espresso_pressure": [float(i % 9) for i in range(n)],
            "espresso_pressure_goal": [0.0] * 10 + [5.0] * 10,
            "espresso_flow_goal": [0.0] * 13 + [2.0] * 7,
            "espresso_temperature_goal": [0.0] * 17 + [3.0] * 3,
        },
        timeframe=[i * 0.25 for i in range(n)],
    )


@pytest.fixture
def full_shot():
    """Typical shot with every chart channel, recorded in Celsius."""
    n = 12
    return RawShot(
        data={
            "espresso_pressure": [0.0, 1.0, 2.0, 4.0, 6.0, 8.0, 9.0, 9.0, 9.0, 8.5, 8.0, 7.5],
            "espresso_pressure_goal": [0.0, 2.0, 4.0, 6.0, 8.0, 9.0, 9.0, 9.0, 9.0, 9.0, 9.0, 9.0],
            "espresso_flow": [0.0, 0.5, 1.0, 1.5, 2.0, 2.0, 2.0, 2.2, 2.4, 2.5, 2.5, 2.6],
            "espresso_flow_weight": [0.0, 0.0, 0.1, 0.5, 1.0, 1.5, 1.8, 2.0, 2.1, 2.2, 2.2, 2.3],
            "espresso_weight": [0.0, 0.0, 0.1, 0.6, 1.6, 3.1, 4.9, 6.9, 9.0, 11.2, 13.4, 15.7],
            "espresso_water_dispensed": [0.0, 0.1, 0.2, 0.4, 0.6, 0.8, 1.0, 1.2, 1.4, 1.7, 2.0, 2.2],
            "espresso_temperature_basket": [92.0] * n,
            "espresso_temperature_mix": [90.0] * n,
            "espresso_temperature_goal": [93.0] * n,
            "espresso_resistance": [1.0] * n,
        },
        timeframe=[i * 0.5 for i in range(10)],
    )
