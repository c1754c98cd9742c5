"""
Data preparation — loading and validating drive tapes.
"""

from .loader import load_drive_csv
from .validators import ValidationResult, validate_drive_tape

__all__ = [
    "load_drive_csv",
    "ValidationResult",
    "validate_drive_tape",
]
