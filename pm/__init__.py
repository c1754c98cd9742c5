"""
Outputs — per-path action metrics and summaries.
"""

from .metrics import compute_path_metrics, summarize_action_rates

__all__ = [
    "compute_path_metrics",
    "summarize_action_rates",
]
