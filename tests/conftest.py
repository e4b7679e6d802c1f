"""Shared fixtures for the safecalc tests."""

from __future__ import annotations

import os
import sys

import pandas as pd
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))


@pytest.fixture
def scores_df():
    return pd.DataFrame({
        "first_name": ["Ada", " Alan ", ""],
        "last_name": ["Lovelace", " Turing ", "Nobody"],
        "q1": [80, 90, 50],
        "q2": [90, None, 60],
    })
