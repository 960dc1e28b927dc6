# File: timeline_layout/core/config_manager.py
"""
Centralized configuration management for the timeline layout engine.
Loads settings from environment variables and an optional JSON file.
"""

import os
import json
from pathlib import Path
from typing import Dict, Any
from dotenv import load_dotenv

from timeline_layout.models import (
    OverlapStrategy,
    VisibleHours,
    ViewportConfigurationError,
    DEFAULT_LANE_ID,
)

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ['1', 'true', 'yes', 'on']


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from timeline_layout/core/

    CONFIG_DIR = BASE_DIR / "config"
    LOGS_DIR = BASE_DIR / "logs"

    LAYOUT_CONFIG_FILE = CONFIG_DIR / "layout.json"

    # Timeline window
    TIMEZONE = os.getenv("TIMEZONE", "UTC")
    START_HOUR = int(os.getenv("TIMELINE_START_HOUR", "0"))
    END_HOUR = int(os.getenv("TIMELINE_END_HOUR", "24"))
    HOUR_ROW_HEIGHT = float(os.getenv("TIMELINE_HOUR_HEIGHT", "60"))
    LANE_PADDING = float(os.getenv("TIMELINE_LANE_PADDING", "0"))
    OVERLAP_STRATEGY = os.getenv("TIMELINE_OVERLAP_STRATEGY", OverlapStrategy.GREEDY.value)

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_TO_FILE = _env_flag("TIMELINE_LOG_TO_FILE")

    # Current time indicator
    SHOW_NOW_INDICATOR = _env_flag("TIMELINE_SHOW_NOW_INDICATOR", "true")

    # Lane rules
    DEFAULT_LANE_ID = DEFAULT_LANE_ID
    MIN_LANES = 2
    MAX_LANES = 10

    # Date picker markers
    MAX_EVENT_DOTS = 4

    @classmethod
    def load_layout_config(cls) -> Dict[str, Any]:
        """Load optional layout overrides from JSON; missing file means no overrides."""
        if not cls.LAYOUT_CONFIG_FILE.exists():
            return {}

        with open(cls.LAYOUT_CONFIG_FILE, 'r', encoding='utf-8') as f:
            return json.load(f)

    @classmethod
    def visible_hours(cls) -> VisibleHours:
        """Visible hour window, JSON overrides taking precedence over the environment."""
        overrides = cls.load_layout_config()
        return VisibleHours(
            start=int(overrides.get('start_hour', cls.START_HOUR)),
            end=int(overrides.get('end_hour', cls.END_HOUR)),
        )

    @classmethod
    def overlap_strategy(cls) -> OverlapStrategy:
        """Configured overlap strategy."""
        raw = cls.load_layout_config().get('overlap_strategy', cls.OVERLAP_STRATEGY)
        try:
            return OverlapStrategy(str(raw).strip().lower())
        except ValueError:
            raise ViewportConfigurationError(f"Unknown overlap strategy: {raw}")

    @classmethod
    def lane_padding(cls) -> float:
        return float(cls.load_layout_config().get('lane_padding', cls.LANE_PADDING))

    @classmethod
    def validate(cls) -> bool:
        """Validate that the configured timeline settings are usable."""
        errors = []

        if not (0 <= cls.START_HOUR < cls.END_HOUR <= 24):
            errors.append(f"TIMELINE_START_HOUR/END_HOUR out of range: {cls.START_HOUR}-{cls.END_HOUR}")

        if cls.HOUR_ROW_HEIGHT <= 0:
            errors.append(f"TIMELINE_HOUR_HEIGHT must be positive: {cls.HOUR_ROW_HEIGHT}")

        if cls.LANE_PADDING < 0:
            errors.append(f"TIMELINE_LANE_PADDING cannot be negative: {cls.LANE_PADDING}")

        if cls.OVERLAP_STRATEGY not in [s.value for s in OverlapStrategy]:
            errors.append(f"Unknown TIMELINE_OVERLAP_STRATEGY: {cls.OVERLAP_STRATEGY}")

        if errors:
            for error in errors:
                print(f"Configuration Error: {error}")
            return False

        return True
