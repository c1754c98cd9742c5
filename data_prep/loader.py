from __future__ import annotations

import pandas as pd


def load_drive_csv(path: str, **read_csv_kwargs) -> pd.DataFrame:
    """
    Load a drive tape: one row per time step, one column per drive,
    optionally with system_transition / occupant_transition / user_type columns.
    """
    return pd.read_csv(path, **read_csv_kwargs)
