"""
Name-keyed registry of the published models.
"""

from __future__ import annotations

from typing import Dict, List, Type

from .base import LogisticActionModel
from .haldi_robinson import HaldiRobinson2008IndoorOutdoorTemp, HaldiRobinson2009Params
from .rijal import RijalEtAl2007GlobeOutdoorTemp
from .yun_steemers import (
    YunSteemers2008IndoorTempNightVentilation,
    YunSteemers2008OutdoorTempNoNightVentilation,
    YunTuohySteemers2009IndoorTemp,
)

MODEL_REGISTRY: Dict[str, Type[LogisticActionModel]] = {}


def register_model(cls: Type[LogisticActionModel]) -> Type[LogisticActionModel]:
    name = cls.DEFAULT_NAME or cls.__name__
    if name in MODEL_REGISTRY:
        raise ValueError(f"Model {name!r} is already registered.")
    MODEL_REGISTRY[name] = cls
    return cls


for _cls in (
    HaldiRobinson2008IndoorOutdoorTemp,
    HaldiRobinson2009Params,
    RijalEtAl2007GlobeOutdoorTemp,
    YunSteemers2008IndoorTempNightVentilation,
    YunSteemers2008OutdoorTempNoNightVentilation,
    YunTuohySteemers2009IndoorTemp,
):
    register_model(_cls)


def available_models() -> List[str]:
    return sorted(MODEL_REGISTRY)


def get_model(name: str) -> LogisticActionModel:
    """Fresh instance of a registered model."""
    try:
        cls = MODEL_REGISTRY[name]
    except KeyError:
        raise KeyError(f"Unknown model {name!r}. Available: {available_models()}") from None
    return cls()
