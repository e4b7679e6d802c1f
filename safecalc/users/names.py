from __future__ import annotations

import numbers
from typing import Any

from safecalc.core.errors import ValidationError
from safecalc.core.validators import read_field


def get_user_full_name(user: Any) -> str:
    """
    "First Last" from a user mapping or object, with surrounding whitespace trimmed.
    Raises ValidationError on a missing, non-string or blank name.
    """
    if user is None or isinstance(user, (str, bytes, numbers.Number)):
        raise ValidationError("User must be a mapping or an object with name fields")

    first_name = read_field(user, "first_name")
    if not isinstance(first_name, str):
        raise ValidationError("First name is required and must be a string")

    last_name = read_field(user, "last_name")
    if not isinstance(last_name, str):
        raise ValidationError("Last name is required and must be a string")

    first = first_name.strip()
    if not first:
        raise ValidationError("First name cannot be empty")

    last = last_name.strip()
    if not last:
        raise ValidationError("Last name cannot be empty")

    return f"{first} {last}"
