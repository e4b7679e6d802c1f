from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from safecalc.core.errors import ValidationError
from safecalc.core.validators import coerce_scores_numeric
from safecalc.scores.average import calculate_average_score
from safecalc.users.names import get_user_full_name
from safecalc.utils.numeric import divide

logger = logging.getLogger(__name__)

TABLE_COLUMNS = ["student", "n_scores", "average_pct", "error"]


def _name_cell(value):
    # blank CSV cells arrive as NaN
    if not isinstance(value, str) and pd.isna(value):
        return ""
    return value


def average_score_table(
    df: pd.DataFrame,
    score_cols: list[str],
    total_possible: float,
    name_cols: list[str] | None = None,
    strict: bool = False
) -> pd.DataFrame:
    """
    One row per student: student, n_scores, average_pct, error

    Missing scores are dropped per row before averaging.
    name_cols, when given, is (first_name_col, last_name_col) and the
    student label becomes the formatted full name.
    With strict=False a failing row keeps average_pct=NaN and records the
    validation message in `error`; with strict=True the error propagates.
    """
    if name_cols is not None and len(name_cols) != 2:
        raise ValidationError(f"name_cols must be [first_name_col, last_name_col], got {list(name_cols)}")
    missing = [c for c in list(score_cols) + list(name_cols or []) if c not in df.columns]
    if missing:
        raise ValidationError(f"Score table is missing columns: {missing}")
    if df.shape[0] == 0:
        raise ValidationError("Score table needs at least one student row")

    X = coerce_scores_numeric(df, score_cols)

    rows = []
    for idx, part in X.iterrows():
        scores = part[score_cols].dropna().to_numpy(dtype=float)
        row = {"student": str(idx), "n_scores": int(scores.size), "average_pct": np.nan, "error": None}
        try:
            if name_cols:
                row["student"] = get_user_full_name({
                    "first_name": _name_cell(part[name_cols[0]]),
                    "last_name": _name_cell(part[name_cols[1]]),
                })
            row["average_pct"] = calculate_average_score(scores, total_possible)
        except ValidationError as e:
            if strict:
                raise
            logger.warning("Row %s skipped: %s", idx, e.message)
            row["error"] = e.message
        rows.append(row)

    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def class_average(table: pd.DataFrame) -> float:
    """Mean of the valid average_pct values of a score table."""
    if "average_pct" not in table.columns:
        raise ValidationError("Score table has no average_pct column")
    valid = pd.to_numeric(table["average_pct"], errors="coerce").dropna()
    if valid.empty:
        raise ValidationError("No valid student averages to summarise")
    return divide(float(valid.sum()), int(valid.shape[0]))
