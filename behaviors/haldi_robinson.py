"""
Haldi & Robinson field-study models (Swiss office buildings).

Blinds closing: Haldi, F., & Robinson, D. (2008). On the behaviour and
adaptation of office occupants. Building and Environment, 43(12), 2163-2177.

Window opening/closing: Haldi, F., & Robinson, D. (2009). Interactions with
window openings by office occupants. Building and Environment, 44(12),
2378-2395.
"""

from __future__ import annotations

from core.schema import OccupantTransition as Occ
from core.schema import SystemTransition as Sys
from core.schema import UserType as User

from .base import CoefficientRule, LogisticActionModel


class HaldiRobinson2008IndoorOutdoorTemp(LogisticActionModel):
    """
    Blinds closing model driven by indoor and outdoor air temperature
    (Table 2 of the 2008 paper). Data from one Swiss office building.

    Drives: [indoor_temp, outdoor_temp]
    """

    DEFAULT_NAME = "HaldiRobinson2008IndoorOutdoorTemp"
    DRIVE_LAYOUT = ("indoor_temp", "outdoor_temp")
    DEFAULT_PARAMETERS = (
        (0.407, 0.01, -11.15),
    )
    RULES = {
        (Sys.OPEN_CLOSE, Occ.ALL_STATES, User.UNKNOWN): CoefficientRule(0),
    }


class HaldiRobinson2009Params(LogisticActionModel):
    """
    Window action model with eight driving factors (Table 3 of the 2009 paper),
    fitted on seven years of data from a Swiss office building.

    Drives, in order:
      0. indoor_temp               indoor air temperature (°C)
      1. outdoor_temp              outdoor air temperature (°C)
      2. previous_absence          1 if the preceding absence exceeded 8 hours
      3. rainfall                  1 if raining
      4. presence_duration         ongoing presence duration (minutes)
      5. daily_mean_outdoor_temp   daily mean outdoor temperature (°C)
      6. next_absence              1 if the following absence exceeds 8 hours
      7. ground_floor              1 if the office is on the ground floor

    Rows 0-2 are openings (CLOSE_OPEN) at arrival, during presence and at
    departure; rows 3-5 are closings (OPEN_CLOSE) in the same order.
    """

    DEFAULT_NAME = "HaldiRobinson2009Params"
    DRIVE_LAYOUT = (
        "indoor_temp",
        "outdoor_temp",
        "previous_absence",
        "rainfall",
        "presence_duration",
        "daily_mean_outdoor_temp",
        "next_absence",
        "ground_floor",
    )
    DEFAULT_PARAMETERS = (
        (0.308, 0.0395, 1.826, -0.43, 0, 0, 0, 0, -13.7),
        (0.263, 0.0394, 0, -0.336, -0.0009, 0, 0, 0, -11.78),
        (0, 0, 0, 0, 0, 0.1352, 0.85, 0.82, -8.72),
        (-0.286, -0.05, 0, 0, 0, 0, 0, 0, 3.95),
        (0.026, -0.0625, 0, 0, 0, 0, 0, 0, -4.14),
        (0.222, 0, 0, 0, 0, -0.0936, 1.534, -0.845, -8.68),
    )
    RULES = {
        (Sys.CLOSE_OPEN, Occ.ARRIVAL, User.UNKNOWN): CoefficientRule(0),
        (Sys.CLOSE_OPEN, Occ.PRESENCE, User.UNKNOWN): CoefficientRule(1),
        (Sys.CLOSE_OPEN, Occ.DEPARTURE, User.UNKNOWN): CoefficientRule(2),
        (Sys.OPEN_CLOSE, Occ.ARRIVAL, User.UNKNOWN): CoefficientRule(3),
        (Sys.OPEN_CLOSE, Occ.PRESENCE, User.UNKNOWN): CoefficientRule(4),
        (Sys.OPEN_CLOSE, Occ.DEPARTURE, User.UNKNOWN): CoefficientRule(5),
    }
