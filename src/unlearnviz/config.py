"""
Configuration & Global Constants
================================
This module serves as the central registry for constants shared by the model
and the view.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (coordinate ranges, colours, titles)
   from being scattered throughout the code.
2. Overrides: It reads the few environment variables the application honours
   (``UNLEARNVIZ_SEED``, ``UNLEARNVIZ_LOG_LEVEL``).

Exports:
    COORD_MIN, COORD_MAX (float): Range of generated point coordinates.
    POSITIVE_COLOR, NEGATIVE_COLOR (tuple): RGBA brushes of the two series.
"""
import logging
import os
from typing import Optional

# Point generation: uniform in [COORD_MIN, COORD_MAX)
COORD_MIN: float = -5.0
COORD_MAX: float = 5.0

# Chart appearance
CHART_TITLE: str = "Data Points & Decision Boundary"
X_AXIS_TITLE: str = "X Coordinate"
Y_AXIS_TITLE: str = "Y Coordinate"

POSITIVE_COLOR: tuple[int, int, int, int] = (75, 192, 192, 153)
NEGATIVE_COLOR: tuple[int, int, int, int] = (255, 99, 132, 153)
BOUNDARY_COLOR: str = '#7f7f7f'
SELECTED_PEN_COLOR: str = 'k'
SELECTED_PEN_WIDTH: float = 2.5
SYMBOL_SIZE: int = 10

# Application identity (QSettings / window title)
ORG_ID: str = "unlearnviz"
APP_ID: str = "unlearnviz"
VISIBLE_APP_NAME: str = "Data Visualization"

# Environment overrides
SEED_ENV: str = "UNLEARNVIZ_SEED"
LOG_LEVEL_ENV: str = "UNLEARNVIZ_LOG_LEVEL"


def env_int(name: str) -> Optional[int]:
    """
    Read an integer from the environment.

    Returns None if the variable is unset or empty. Raises ValueError if it is
    set to something that is not an integer.
    """
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"Environment variable {name} must be an integer, got '{raw}'.") from e


def env_log_level(name: str = LOG_LEVEL_ENV, default: int = logging.INFO) -> int:
    """Resolve a logging level name (e.g. 'DEBUG') from the environment."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    return parse_log_level(raw)


def parse_log_level(name: str) -> int:
    """Translate a level name such as 'debug' or 'WARNING' into its logging constant."""
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{name}'.")
    return level
