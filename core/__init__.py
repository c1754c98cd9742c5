"""
Core package — enumerations, configuration, and shared numeric helpers.
No model coefficients live here.
"""

from .schema import (
    UserType,
    OccupantTransition,
    SystemTransition,
    Combination,
    STATE_COLUMNS,
    all_combinations,
)
from .config import SimulationConfig
from .utils import require_columns, logistic, linear_score, draw_uniform
from .log import get_logger, configure_logging

__all__ = [
    "UserType",
    "OccupantTransition",
    "SystemTransition",
    "Combination",
    "STATE_COLUMNS",
    "all_combinations",
    "SimulationConfig",
    "require_columns",
    "logistic",
    "linear_score",
    "draw_uniform",
    "get_logger",
    "configure_logging",
]
