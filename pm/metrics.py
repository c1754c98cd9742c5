"""
Per-path action metrics and their distribution across paths.

A path's action count is a sum of independent Bernoulli draws, so its
expected value is the sum of the per-step probabilities.
"""

from __future__ import annotations

from typing import Dict, Tuple

import numpy as np
import pandas as pd

from core.utils import require_columns


def compute_path_metrics(
    actions: pd.DataFrame,
    *,
    path_col: str = "path_id",
    action_col: str = "action",
) -> pd.DataFrame:
    """
    Count actions for each path.

    Returns
    -------
    DataFrame with one row per path:
        path_id, n_steps, n_actions, action_rate
    """
    require_columns(actions, [path_col, action_col])
    grouped = actions.groupby(path_col)[action_col]
    out = pd.DataFrame({
        "n_steps": grouped.size(),
        "n_actions": grouped.sum(),
    })
    out["action_rate"] = out["n_actions"] / out["n_steps"]
    return out.reset_index()


def summarize_action_rates(
    path_metrics: pd.DataFrame,
    probabilities,
    *,
    percentiles: Tuple[float, ...] = (0.05, 0.50, 0.95),
) -> Dict[str, float]:
    """
    Compare sampled action counts with their expectation.

    Parameters
    ----------
    path_metrics : pd.DataFrame
        Output of compute_path_metrics()
    probabilities : array-like
        Per-step action probabilities the paths were drawn from
    """
    require_columns(path_metrics, ["n_actions"])
    counts = path_metrics["n_actions"].to_numpy(dtype=float)
    p = np.asarray(probabilities, dtype=float)

    summary = {
        "expected_actions": float(p.sum()),
        "mean_actions": float(counts.mean()) if len(counts) else 0.0,
        "std_actions": float(counts.std()) if len(counts) else 0.0,
    }
    for q in percentiles:
        summary[f"P{round(q * 100):02d}_actions"] = (
            float(np.percentile(counts, q * 100)) if len(counts) else 0.0
        )
    return summary
