"""
Rijal, H. B., Tuohy, P., Humphreys, M. A., Nicol, J. F., Samuel, A., &
Clarke, J. (2007). Using results from field surveys to predict the effect of
open windows on thermal comfort and energy use in buildings. Energy and
Buildings, 39(7), 823-836.
"""

from __future__ import annotations

from core.schema import OccupantTransition as Occ
from core.schema import SystemTransition as Sys
from core.schema import UserType as User

from .base import CoefficientRule, LogisticActionModel


class RijalEtAl2007GlobeOutdoorTemp(LogisticActionModel):
    """
    Window opening from indoor globe and outdoor air temperature
    (Eq. 4, transactional surveys). Data from 15 UK office buildings.

    Drives: [indoor_globe_temp, outdoor_temp]
    """

    DEFAULT_NAME = "RijalEtAl2007GlobeOutdoorTemp"
    DRIVE_LAYOUT = ("indoor_globe_temp", "outdoor_temp")
    DEFAULT_PARAMETERS = (
        (0.256, 0.131, -8.5),
    )
    RULES = {
        (Sys.CLOSE_OPEN, Occ.ALL_STATES, User.UNKNOWN): CoefficientRule(0),
    }
