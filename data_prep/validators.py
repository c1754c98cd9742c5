"""
Data quality validation for drive tapes before they reach a model.

Catches problems early:
- Missing drive columns
- Non-numeric or missing drive values
- Unrecognized transition / user-type labels
- Indicator drives outside {0, 1} and implausible temperatures
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np
import pandas as pd

from core.schema import (
    BINARY_DRIVES,
    STATE_COLUMNS,
    TEMPERATURE_DRIVES,
    OccupantTransition,
    SystemTransition,
    UserType,
)

TEMPERATURE_BOUNDS_C = (-50.0, 60.0)

_STATE_ENUMS = dict(zip(STATE_COLUMNS, (SystemTransition, OccupantTransition, UserType)))


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a drive tape."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  - {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  - {w}")
        if not lines:
            lines.append("All checks passed.")
        return "\n".join(lines)


def validate_drive_tape(tape: pd.DataFrame, layout: Sequence[str]) -> ValidationResult:
    """
    Run all validation checks on a drive tape for a model with the given layout.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()

    # --- Schema checks ---
    missing = [c for c in layout if c not in tape.columns]
    if missing:
        result.errors.append(f"Missing drive columns: {missing}")
        return result

    if len(tape) == 0:
        result.errors.append("Tape is empty (0 rows).")
        return result

    # --- Drive values ---
    for col in layout:
        vals = pd.to_numeric(tape[col], errors="coerce")
        n_bad = int((~np.isfinite(vals.to_numpy(dtype=float))).sum())
        if n_bad > 0:
            result.errors.append(f"{n_bad} rows have null/non-numeric {col}.")
            continue

        if col in BINARY_DRIVES:
            n_off = int((~vals.isin([0, 1])).sum())
            if n_off > 0:
                result.warnings.append(f"{n_off} rows have {col} outside {{0, 1}}.")

        if col in TEMPERATURE_DRIVES:
            lo, hi = TEMPERATURE_BOUNDS_C
            n_out = int(((vals < lo) | (vals > hi)).sum())
            if n_out > 0:
                result.warnings.append(
                    f"{n_out} rows have {col} outside [{lo:g}, {hi:g}] °C — verify units."
                )

    # --- State labels ---
    for col, enum in _STATE_ENUMS.items():
        if col not in tape.columns:
            continue
        bad = sorted({str(v) for v in tape[col].dropna().unique() if not _parses(enum, v)})
        if bad:
            result.errors.append(f"Unrecognized {col} labels: {bad}")
        n_null = int(tape[col].isna().sum())
        if n_null > 0:
            result.errors.append(f"{n_null} rows have null {col}.")

    return result


def _parses(enum, value) -> bool:
    try:
        enum.parse(value)
    except ValueError:
        return False
    return True
