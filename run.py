from __future__ import annotations

import argparse
import logging
import os
import yaml
import pandas as pd

# ---------- CORE ----------
from safecalc.core.data_loader import load_score_csv, select_columns
from safecalc.core.errors import ValidationError

# ---------- SCORES ----------
from safecalc.scores.table import average_score_table, class_average


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Guarded average score calculator")
    p.add_argument("--config", default="configs/config.yaml", help="Path to YAML config")
    return p.parse_args(argv)


def _ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def main(argv=None):
    # =========================
    # 1) Load config
    # =========================
    args = parse_args(argv)
    with open(args.config, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)

    data_cfg = cfg["data"]
    run_cfg = cfg.get("run", {})
    scoring_cfg = cfg.get("scoring", {})

    logging.basicConfig(
        level=str(run_cfg.get("log_level", "INFO")).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    path = data_cfg["path"]
    score_cols = list(data_cfg.get("score_cols", []))

    name_cols = data_cfg.get("name_cols", None)
    if name_cols is not None:
        name_cols = list(name_cols)

    total_possible = scoring_cfg.get("total_possible", 100)
    strict = scoring_cfg.get("strict", False)
    if not isinstance(strict, bool):
        raise ValidationError(f"config.scoring.strict must be true or false, got {strict!r}")

    outdir = run_cfg.get("outdir", "outputs")
    tag = run_cfg.get("tag", "run")

    # =========================
    # 2) Prepare folders
    # =========================
    tables_dir = os.path.join(outdir, "tables")
    _ensure_dir(tables_dir)

    # =========================
    # 3) Load data
    # =========================
    df = load_score_csv(path)
    df_sub = select_columns(df, score_cols, name_cols)

    # =========================
    # 4) Scores
    # =========================
    table = average_score_table(
        df_sub,
        score_cols=score_cols,
        total_possible=total_possible,
        name_cols=name_cols,
        strict=strict
    )
    table_path = os.path.join(tables_dir, f"{tag}_average_scores.csv")
    table.to_csv(table_path, index=False)

    n_valid = int(table["error"].isna().sum())
    pd.DataFrame([{
        "n_students": int(table.shape[0]),
        "n_valid": n_valid,
        "n_rejected": int(table.shape[0]) - n_valid,
        "class_average_pct": class_average(table) if n_valid > 0 else None,
    }]).to_csv(os.path.join(tables_dir, f"{tag}_summary.csv"), index=False)

    print("✅ Run complete.")
    print(f"✅ Tables written to:  {tables_dir}")


if __name__ == "__main__":
    main()
