"""
Base classes for occupant behavior models.

A behavior model maps (user type, occupant transition, system transition,
action drives) to the probability that the occupant acts on a system, and
samples a 0/1 action from that probability.

Models are not internally synchronized: evaluation only reads model state,
but external synchronization is required if parameters are replaced while
other threads evaluate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from core.log import get_logger
from core.schema import Combination, OccupantTransition, SystemTransition, UserType
from core.utils import draw_uniform, linear_score, logistic

logger = get_logger(__name__)

_DEFAULT_RNG = np.random.default_rng()


class ActionDriveError(ValueError):
    """Drives vector does not match the layout the model expects."""


@dataclass(frozen=True)
class DriveGate:
    """Raw threshold on one drive; outside it the action probability stays 0."""

    drive: str
    op: str
    threshold: float

    _OPS = {
        ">": np.greater,
        ">=": np.greater_equal,
        "<": np.less,
        "<=": np.less_equal,
    }

    def __post_init__(self):
        if self.op not in self._OPS:
            raise ValueError(f"Unsupported gate operator {self.op!r}")

    def admits(self, values):
        return self._OPS[self.op](values, self.threshold)

    def __str__(self) -> str:
        return f"{self.drive} {self.op} {self.threshold:g}"


@dataclass(frozen=True)
class CoefficientRule:
    """Coefficient row used for one combination, with an optional gate."""

    row: int
    gate: Optional[DriveGate] = None


def _resolve(user_type, occupant_transition, system_transition) -> Combination:
    return (
        SystemTransition.parse(system_transition),
        OccupantTransition.parse(occupant_transition),
        UserType.parse(user_type),
    )


class BehaviorModel:
    """Interface for occupant action models."""

    def __init__(self, name: str, parameters):
        self._name = name
        self._parameters = None
        self.set_parameters(parameters)

    # --- name / parameters -------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = str(value)

    def get_name(self) -> str:
        return self.name

    def set_name(self, name: str) -> None:
        self.name = name

    @property
    def parameters(self) -> np.ndarray:
        return self._parameters

    @parameters.setter
    def parameters(self, value) -> None:
        self.set_parameters(value)

    def get_parameters(self) -> np.ndarray:
        return self._parameters

    def set_parameters(self, parameters) -> None:
        matrix = np.array(parameters, dtype=float, copy=True)
        self._check_parameters(matrix)
        matrix.setflags(write=False)
        self._parameters = matrix

    def _check_parameters(self, matrix: np.ndarray) -> None:
        if matrix.ndim != 2:
            raise ValueError(f"{self.name}: parameters must be a 2-D matrix, got shape {matrix.shape}")

    # --- evaluation --------------------------------------------------------

    def calculate_action_probability(
        self,
        user_type,
        occupant_transition,
        system_transition,
        drives: Sequence[float],
    ) -> float:
        raise NotImplementedError

    def predict_action(
        self,
        user_type,
        occupant_transition,
        system_transition,
        drives: Sequence[float],
        *,
        rng=None,
    ) -> int:
        """
        Bernoulli trial: 1 if a uniform draw in [0, 1) is <= the action probability.

        ``rng`` is a numpy Generator or any object with a ``random()`` method.
        """
        probability = self.calculate_action_probability(
            user_type, occupant_transition, system_transition, drives
        )
        draw = draw_uniform(rng if rng is not None else _DEFAULT_RNG)
        return 1 if draw <= probability else 0


class LogisticActionModel(BehaviorModel):
    """
    Table-driven logistic regression model.

    Subclasses declare, as class data:
      DEFAULT_NAME        registry name
      DRIVE_LAYOUT        ordered drive names; drives are read positionally
      DEFAULT_PARAMETERS  one row per rule: coefficients in layout order, then intercept
      RULES               (system, occupant, user) -> CoefficientRule

    Combinations absent from RULES, and gated rows whose gate fails,
    give probability 0.
    """

    DEFAULT_NAME: str = ""
    DRIVE_LAYOUT: Tuple[str, ...] = ()
    DEFAULT_PARAMETERS: Tuple[Tuple[float, ...], ...] = ()
    RULES: Dict[Combination, CoefficientRule] = {}

    def __init__(self, name: Optional[str] = None, parameters=None):
        super().__init__(
            name or self.DEFAULT_NAME or type(self).__name__,
            self.DEFAULT_PARAMETERS if parameters is None else parameters,
        )

    def _check_parameters(self, matrix: np.ndarray) -> None:
        super()._check_parameters(matrix)
        n_cols = len(self.DRIVE_LAYOUT) + 1
        if matrix.shape[1] != n_cols:
            raise ValueError(
                f"{self.name}: expected {n_cols} columns "
                f"({', '.join(self.DRIVE_LAYOUT)}, intercept), got {matrix.shape[1]}"
            )
        needed = max((r.row for r in self.RULES.values()), default=-1) + 1
        if matrix.shape[0] < needed:
            raise ValueError(f"{self.name}: expected at least {needed} coefficient rows, got {matrix.shape[0]}")

    def supported_combinations(self) -> Tuple[Combination, ...]:
        return tuple(self.RULES)

    def rule_for(self, user_type, occupant_transition, system_transition) -> Optional[CoefficientRule]:
        return self.RULES.get(_resolve(user_type, occupant_transition, system_transition))

    def _coerce_drives(self, drives) -> np.ndarray:
        try:
            arr = np.asarray(drives, dtype=float)
        except (TypeError, ValueError) as exc:
            raise ActionDriveError(f"{self.name}: drives must be numeric ({exc})") from exc
        if arr.ndim == 2 and 1 in arr.shape:
            arr = arr.ravel()
        if arr.ndim != 1:
            raise ActionDriveError(f"{self.name}: drives must be a 1-D vector, got shape {arr.shape}")
        return self._check_width(arr, arr.shape[0])

    def _coerce_drive_matrix(self, drives) -> np.ndarray:
        try:
            arr = np.asarray(drives, dtype=float)
        except (TypeError, ValueError) as exc:
            raise ActionDriveError(f"{self.name}: drives must be numeric ({exc})") from exc
        if arr.ndim == 1 and len(self.DRIVE_LAYOUT) == 1:
            arr = arr.reshape(-1, 1)
        if arr.ndim != 2:
            raise ActionDriveError(f"{self.name}: drive matrix must be 2-D, got shape {arr.shape}")
        return self._check_width(arr, arr.shape[1])

    def _check_width(self, arr: np.ndarray, width: int) -> np.ndarray:
        if width != len(self.DRIVE_LAYOUT):
            raise ActionDriveError(
                f"{self.name}: expected {len(self.DRIVE_LAYOUT)} drives "
                f"({', '.join(self.DRIVE_LAYOUT)}), got {width}"
            )
        if not np.all(np.isfinite(arr)):
            raise ActionDriveError(f"{self.name}: drives must be finite, got {arr.tolist()}")
        return arr

    def _gate_mask(self, rule: CoefficientRule, drives: np.ndarray):
        if rule.gate is None:
            return True
        column = self.DRIVE_LAYOUT.index(rule.gate.drive)
        return rule.gate.admits(drives[..., column])

    def calculate_action_probability(self, user_type, occupant_transition, system_transition, drives) -> float:
        x = self._coerce_drives(drives)
        rule = self.rule_for(user_type, occupant_transition, system_transition)
        if rule is None:
            logger.debug("%s: no coefficients for %s/%s/%s", self.name, system_transition, occupant_transition, user_type)
            return 0.0
        if not self._gate_mask(rule, x):
            return 0.0
        return float(logistic(linear_score(self._parameters[rule.row], x)))

    def calculate_action_probabilities(self, user_type, occupant_transition, system_transition, drives) -> np.ndarray:
        """Vectorized probability for one combination over an (n, k) drive matrix."""
        x = self._coerce_drive_matrix(drives)
        rule = self.rule_for(user_type, occupant_transition, system_transition)
        if rule is None:
            return np.zeros(x.shape[0], dtype=float)
        p = logistic(linear_score(self._parameters[rule.row], x))
        return np.where(self._gate_mask(rule, x), p, 0.0)

    def predict_actions(self, user_type, occupant_transition, system_transition, drives, *, rng=None) -> np.ndarray:
        """One Bernoulli draw per drive row."""
        p = self.calculate_action_probabilities(user_type, occupant_transition, system_transition, drives)
        draws = draw_uniform(rng if rng is not None else _DEFAULT_RNG, size=len(p))
        return (draws <= p).astype(int)

    def describe(self) -> pd.DataFrame:
        """One row per supported combination with its coefficients."""
        rows = []
        for (system, occupant, user), rule in self.RULES.items():
            row = {
                "system_transition": system.name,
                "occupant_transition": occupant.name,
                "user_type": user.name,
                "row": rule.row,
                "gate": str(rule.gate) if rule.gate else "",
            }
            coefs = self._parameters[rule.row]
            row.update(zip(self.DRIVE_LAYOUT, coefs[:-1]))
            row["intercept"] = coefs[-1]
            rows.append(row)
        return pd.DataFrame(rows)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, drives={self.DRIVE_LAYOUT})"
