"""
Guard-clause validated score, name and division utilities.
"""

from safecalc.core.errors import ValidationError
from safecalc.scores.average import calculate_average_score
from safecalc.users.models import User
from safecalc.users.names import get_user_full_name
from safecalc.utils.numeric import divide

__all__ = [
    "ValidationError",
    "User",
    "calculate_average_score",
    "get_user_full_name",
    "divide",
]
