"""
Simulation engine — batch model evaluation over drive tapes + Bernoulli action paths.
"""

from .runner import compute_probabilities, resolve_states, run_action_simulation

__all__ = ["compute_probabilities", "resolve_states", "run_action_simulation"]
