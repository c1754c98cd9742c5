"""
Action simulation runner — evaluates one behavior model over a drive tape
and samples Bernoulli action paths.

A drive tape is a DataFrame with one row per time step and one column per
drive the model reads. Optional system_transition / occupant_transition /
user_type columns set the combination per row; rows without them use the
defaults in SimulationConfig.

Each path is an independent sequence of draws over the whole tape, so
n_paths paths give n_paths plausible action histories for the same drives.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
import pandas as pd

from behaviors.base import LogisticActionModel
from core.config import SimulationConfig
from core.log import get_logger
from core.schema import STATE_COLUMNS, OccupantTransition, SystemTransition, UserType
from data_prep.validators import validate_drive_tape

logger = get_logger(__name__)


def resolve_states(tape: pd.DataFrame, config: SimulationConfig) -> pd.DataFrame:
    """Per-row (system, occupant, user) enums, falling back to the config defaults."""
    defaults = {
        "system_transition": (SystemTransition, config.system_transition),
        "occupant_transition": (OccupantTransition, config.occupant_transition),
        "user_type": (UserType, config.user_type),
    }
    states = {}
    for col in STATE_COLUMNS:
        enum, default = defaults[col]
        if col in tape.columns:
            states[col] = tape[col].map(enum.parse)
        else:
            states[col] = pd.Series([default] * len(tape), index=tape.index, dtype=object)
    return pd.DataFrame(states, index=tape.index)


def compute_probabilities(
    tape: pd.DataFrame,
    model: LogisticActionModel,
    config: SimulationConfig,
) -> np.ndarray:
    """Action probability for each tape row, shape (n_rows,)."""
    drives = tape[list(model.DRIVE_LAYOUT)].to_numpy(dtype=float)
    states = resolve_states(tape, config)
    probabilities = np.zeros(len(tape), dtype=float)

    keys = list(zip(*(states[c] for c in STATE_COLUMNS)))
    positions = {}
    for i, key in enumerate(keys):
        positions.setdefault(key, []).append(i)

    for (system, occupant, user), idx in positions.items():
        logger.debug("%s: %d rows for %s/%s/%s", model.name, len(idx), system.name, occupant.name, user.name)
        idx = np.asarray(idx)
        probabilities[idx] = model.calculate_action_probabilities(user, occupant, system, drives[idx])

    return probabilities


def run_action_simulation(
    tape: pd.DataFrame,
    model: LogisticActionModel,
    config: SimulationConfig = SimulationConfig(),
    *,
    rng=None,
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Evaluate a model over a drive tape and sample config.n_paths action paths.

    Parameters
    ----------
    tape : pd.DataFrame
        Drive tape (one row per time step)
    model : LogisticActionModel
        Model whose DRIVE_LAYOUT names the tape columns to read
    config : SimulationConfig
        Path count, seed and default states
    rng : numpy.random.Generator, optional
        Overrides the generator seeded from config.seed

    Returns
    -------
    (probabilities_df, actions_df)
    probabilities_df: tape index with a "probability" column
    actions_df: long format, columns path_id, step, action (and probability
                if config.store_probabilities)
    """
    result = validate_drive_tape(tape, model.DRIVE_LAYOUT)
    if not result.is_valid:
        raise ValueError(f"Invalid drive tape for {model.name}:\n{result.summary()}")
    for w in result.warnings:
        logger.warning("%s: %s", model.name, w)

    n_steps = len(tape)
    logger.info("Simulating %s over %d steps, %d paths", model.name, n_steps, config.n_paths)

    p = compute_probabilities(tape, model, config)
    probabilities_df = pd.DataFrame({"probability": p}, index=tape.index)

    gen = rng if rng is not None else np.random.default_rng(config.seed)
    draws = gen.random((config.n_paths, n_steps))
    actions = (draws <= p[np.newaxis, :]).astype(int)

    actions_df = pd.DataFrame({
        "path_id": np.repeat(np.arange(config.n_paths), n_steps),
        "step": np.tile(np.arange(n_steps), config.n_paths),
        "action": actions.ravel(),
    })
    if config.store_probabilities:
        actions_df["probability"] = np.tile(p, config.n_paths)

    return probabilities_df, actions_df
