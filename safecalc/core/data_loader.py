from __future__ import annotations
import os
import pandas as pd

from safecalc.core.errors import ValidationError


def load_score_csv(path: str) -> pd.DataFrame:
    """
    Read a score sheet (one row per student) from a .csv file.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Score sheet not found: {path}")

    ext = os.path.splitext(path)[1].lower()
    if ext != ".csv":
        raise ValidationError(f"Score sheet must be a .csv file, got '{ext or path}'")

    df = pd.read_csv(path)
    if df.empty:
        raise ValidationError(f"Score sheet has no student rows: {path}")
    return df


def select_columns(df: pd.DataFrame, score_cols: list[str], name_cols: list[str] | None) -> pd.DataFrame:
    """
    Return a dataframe containing score columns (+ name columns if provided).
    """
    if not score_cols:
        raise ValidationError("config.data.score_cols is empty. Add your score column names to configs/config.yaml")

    missing = [c for c in score_cols if c not in df.columns]
    if missing:
        raise ValidationError(f"Missing score columns in dataset: {missing}")

    cols = list(score_cols)
    for c in name_cols or []:
        if c not in df.columns:
            raise ValidationError(f"Name column '{c}' not found in dataset.")
        cols.append(c)

    return df[cols].copy()
