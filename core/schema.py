"""
Transition-state enumerations and drive layouts shared by every model.

A model is addressed by the combination (system transition, occupant
transition, user type). Drive layouts name the positional inputs each
model reads.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class _ParseableEnum(Enum):
    """Enum that can be built from its name in any case."""

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        key = str(value).strip().upper().replace("-", "_").replace(" ", "_")
        key = _ALIASES.get(key, key)
        try:
            return cls[key]
        except KeyError:
            valid = ", ".join(m.name for m in cls)
            raise ValueError(f"Unknown {cls.__name__} {value!r}; expected one of: {valid}") from None


class UserType(_ParseableEnum):
    UNKNOWN = "unknown"
    ACTIVE = "active"
    MEDIUM = "medium"
    PASSIVE = "passive"


class OccupantTransition(_ParseableEnum):
    """Markov transition of occupancy over one time step."""

    ARRIVAL = "arrival"
    PRESENCE = "presence"
    DEPARTURE = "departure"
    ALL_STATES = "all_states"


class SystemTransition(_ParseableEnum):
    """Markov transition of the controlled system (window, blind)."""

    CLOSE_OPEN = "close_open"
    CLOSE_CLOSE = "close_close"
    OPEN_CLOSE = "open_close"
    OPEN_OPEN = "open_open"


# Older field data spells presence as "PRESENSE".
_ALIASES: Dict[str, str] = {
    "PRESENSE": "PRESENCE",
    "ALL": "ALL_STATES",
}

Combination = Tuple[SystemTransition, OccupantTransition, UserType]

# Column names used on drive tapes for the three states.
STATE_COLUMNS: Tuple[str, str, str] = (
    "system_transition",
    "occupant_transition",
    "user_type",
)

# Drives that are 0/1 indicators rather than measurements.
BINARY_DRIVES: Tuple[str, ...] = (
    "previous_absence",
    "next_absence",
    "rainfall",
    "ground_floor",
)

TEMPERATURE_DRIVES: Tuple[str, ...] = (
    "indoor_temp",
    "indoor_globe_temp",
    "outdoor_temp",
    "daily_mean_outdoor_temp",
)


def all_combinations() -> Tuple[Combination, ...]:
    """Every (system, occupant, user) triple, in enum declaration order."""
    return tuple(
        (s, o, u)
        for s in SystemTransition
        for o in OccupantTransition
        for u in UserType
    )
