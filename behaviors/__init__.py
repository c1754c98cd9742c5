"""
Behavioral models — probability that an occupant acts on a window or blind.
"""

from .base import (
    ActionDriveError,
    BehaviorModel,
    CoefficientRule,
    DriveGate,
    LogisticActionModel,
)
from .haldi_robinson import HaldiRobinson2008IndoorOutdoorTemp, HaldiRobinson2009Params
from .rijal import RijalEtAl2007GlobeOutdoorTemp
from .yun_steemers import (
    YunSteemers2008IndoorTempNightVentilation,
    YunSteemers2008OutdoorTempNoNightVentilation,
    YunTuohySteemers2009IndoorTemp,
)
from .registry import MODEL_REGISTRY, available_models, get_model, register_model

__all__ = [
    "ActionDriveError",
    "BehaviorModel",
    "CoefficientRule",
    "DriveGate",
    "LogisticActionModel",
    "HaldiRobinson2008IndoorOutdoorTemp",
    "HaldiRobinson2009Params",
    "RijalEtAl2007GlobeOutdoorTemp",
    "YunSteemers2008IndoorTempNightVentilation",
    "YunSteemers2008OutdoorTempNoNightVentilation",
    "YunTuohySteemers2009IndoorTemp",
    "MODEL_REGISTRY",
    "available_models",
    "get_model",
    "register_model",
]
