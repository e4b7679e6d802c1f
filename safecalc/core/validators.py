from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np
import pandas as pd


def is_finite_number(value: Any) -> bool:
    """
    True for real numbers (int, float, numpy scalars) that are finite.
    bool is rejected even though it subclasses int.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        return False
    try:
        return bool(np.isfinite(float(value)))
    except OverflowError:
        # int too large for a float
        return False


def is_score_sequence(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim == 1
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def read_field(record: Any, name: str) -> Any:
    """Field lookup on a mapping or attribute lookup on an object; None if absent."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def coerce_scores_numeric(df_scores: pd.DataFrame, score_cols: list[str]) -> pd.DataFrame:
    out = df_scores.copy()
    for c in score_cols:
        out[c] = pd.to_numeric(out[c], errors="coerce")
    return out
