import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Config:
    # --- Derived Channels ---
    MAX_RESISTANCE_VALUE = float(os.getenv("MAX_RESISTANCE_VALUE", "19"))
    MAX_CONDUCTANCE_DERIVATIVE = float(os.getenv("MAX_CONDUCTANCE_DERIVATIVE", "19"))
    MIN_CONDUCTANCE_DERIVATIVE = float(os.getenv("MIN_CONDUCTANCE_DERIVATIVE", "-5"))
    CONDUCTANCE_DERIVATIVE_SCALE = float(os.getenv("CONDUCTANCE_DERIVATIVE_SCALE", "10"))

    # --- Channel Normalization ---
    WATER_DISPENSED_SCALE = float(os.getenv("WATER_DISPENSED_SCALE", "10"))

    # --- Stage Detection ---
    STAGE_SKIP_SAMPLES = int(os.getenv("STAGE_SKIP_SAMPLES", "5"))
    STAGE_DIFF2_THRESHOLD = float(os.getenv("STAGE_DIFF2_THRESHOLD", "0.1"))
    STAGE_MIN_SEPARATION = int(os.getenv("STAGE_MIN_SEPARATION", "5"))

    # --- Presentation ---
    VALUE_DECIMALS = int(os.getenv("VALUE_DECIMALS", "2"))
    COMPARISON_SUFFIX = os.getenv("COMPARISON_SUFFIX", "_comparison")
    COMPARISON_OPACITY = float(os.getenv("COMPARISON_OPACITY", "0.5"))

    # --- Chart Styling ---
    CHART_TEMPLATE = os.getenv("CHART_TEMPLATE", "plotly_dark")
    CHART_HEIGHT = int(os.getenv("CHART_HEIGHT", "500"))
    COLOR_STAGE = os.getenv("COLOR_STAGE", '#8b949e')
