"""
Single-drive window models from Yun & Steemers' UK office studies.

Yun, G. Y., & Steemers, K. (2008). Time-dependent occupant behaviour models
of window control in summer. Building and Environment, 43(9), 1471-1482.

Yun, G. Y., Tuohy, P., & Steemers, K. (2009). Thermal performance of a
naturally ventilated building using a combined algorithm of probabilistic
occupant behaviour and deterministic heat and mass balance models. Energy
and Buildings, 41(5), 489-499.
"""

from __future__ import annotations

from core.schema import OccupantTransition as Occ
from core.schema import SystemTransition as Sys
from core.schema import UserType as User

from .base import CoefficientRule, DriveGate, LogisticActionModel


class YunSteemers2008IndoorTempNightVentilation(LogisticActionModel):
    """
    Indoor temperature model for a naturally ventilated office that uses
    night-time ventilation for cooling (Table 5).

    Drives: [indoor_temp]
    """

    DEFAULT_NAME = "YunSteemers2008IndoorTempNightVentilation"
    DRIVE_LAYOUT = ("indoor_temp",)
    DEFAULT_PARAMETERS = (
        (1.823, -38.622),
        (0.543, -11.264),
        (-0.017, 0.444),
    )
    RULES = {
        (Sys.CLOSE_OPEN, Occ.ARRIVAL, User.UNKNOWN): CoefficientRule(0),
        (Sys.OPEN_OPEN, Occ.DEPARTURE, User.UNKNOWN): CoefficientRule(1),
        (Sys.OPEN_CLOSE, Occ.PRESENCE, User.UNKNOWN): CoefficientRule(2),
    }


class YunSteemers2008OutdoorTempNoNightVentilation(LogisticActionModel):
    """
    Outdoor temperature model for an office without night ventilation (Table 3).
    Openings during presence are only fitted above 15 °C outdoors.

    Drives: [outdoor_temp]
    """

    DEFAULT_NAME = "YunSteemers2008OutdoorTempNoNightVentilation"
    DRIVE_LAYOUT = ("outdoor_temp",)
    DEFAULT_PARAMETERS = (
        (0.009, -0.115),
        (0.000, 0.040),
    )
    RULES = {
        (Sys.CLOSE_OPEN, Occ.PRESENCE, User.UNKNOWN): CoefficientRule(
            0, DriveGate("outdoor_temp", ">", 15.0)
        ),
        (Sys.OPEN_CLOSE, Occ.PRESENCE, User.UNKNOWN): CoefficientRule(1),
    }


class YunTuohySteemers2009IndoorTemp(LogisticActionModel):
    """
    Indoor temperature model split by user type (Table 1), from two naturally
    ventilated UK offices. Closings during presence are only fitted up to 30 °C.

    Drives: [indoor_temp]
    """

    DEFAULT_NAME = "YunTuohySteemers2009IndoorTemp"
    DRIVE_LAYOUT = ("indoor_temp",)
    DEFAULT_PARAMETERS = (
        (0.717, -14.094),
        (0.359, -7.989),
        (0.293, -7.777),
        (0.365, -11.383),
        (-0.289, 3.748),
    )
    RULES = {
        (Sys.CLOSE_OPEN, Occ.ARRIVAL, User.ACTIVE): CoefficientRule(0),
        (Sys.CLOSE_OPEN, Occ.ARRIVAL, User.MEDIUM): CoefficientRule(1),
        (Sys.CLOSE_OPEN, Occ.ARRIVAL, User.PASSIVE): CoefficientRule(2),
        (Sys.CLOSE_OPEN, Occ.PRESENCE, User.MEDIUM): CoefficientRule(3),
        (Sys.OPEN_CLOSE, Occ.PRESENCE, User.MEDIUM): CoefficientRule(
            4, DriveGate("indoor_temp", "<=", 30.0)
        ),
    }
