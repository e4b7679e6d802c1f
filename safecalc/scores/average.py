from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from safecalc.core.errors import ValidationError
from safecalc.core.validators import is_finite_number, is_score_sequence

logger = logging.getLogger(__name__)


def calculate_average_score(scores: Sequence[float], total_possible: float) -> float:
    """
    Average score as a percentage of total_possible:
      (mean(scores) / total_possible) * 100

    Every score must be a finite number in [0, total_possible].
    Raises ValidationError on the first violated constraint.
    """
    if not is_score_sequence(scores):
        raise ValidationError("Scores must be an array (list, tuple or 1-D numpy array)")
    if len(scores) == 0:
        raise ValidationError("Scores array cannot be empty")
    if not is_finite_number(total_possible):
        raise ValidationError("Total possible points must be a finite number")
    if total_possible <= 0:
        raise ValidationError("Total possible points must be greater than zero")

    for i, score in enumerate(scores):
        if not is_finite_number(score):
            raise ValidationError(f"Score at index {i} must be a finite number")
        if score < 0:
            raise ValidationError(f"Score at index {i} cannot be negative")
        if score > total_possible:
            raise ValidationError(
                f"Score at index {i} cannot exceed total possible points ({total_possible})"
            )

    arr = np.asarray(scores, dtype=float)
    with np.errstate(over="ignore", invalid="ignore"):
        average = arr.mean()
        percentage = (average / float(total_possible)) * 100

    if not np.isfinite(percentage):
        raise ValidationError("Calculated average score is not a finite number")

    logger.debug("Average of %d scores: %.4f%%", arr.size, percentage)
    return float(percentage)
