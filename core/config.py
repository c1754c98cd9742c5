"""
Simulation configuration for batch evaluation of a model over a drive tape.
"""

from __future__ import annotations

from dataclasses import dataclass

from .schema import OccupantTransition, SystemTransition, UserType


@dataclass(frozen=True)
class SimulationConfig:
    n_paths: int = 100
    seed: int = 7

    # states used for tape rows that carry no state columns
    system_transition: SystemTransition = SystemTransition.CLOSE_OPEN
    occupant_transition: OccupantTransition = OccupantTransition.PRESENCE
    user_type: UserType = UserType.UNKNOWN

    # keep the per-step probability column next to sampled actions
    store_probabilities: bool = True

    def __post_init__(self):
        if self.n_paths < 1:
            raise ValueError(f"n_paths must be >= 1, got {self.n_paths}")
        for f, enum in (
            ("system_transition", SystemTransition),
            ("occupant_transition", OccupantTransition),
            ("user_type", UserType),
        ):
            object.__setattr__(self, f, enum.parse(getattr(self, f)))
