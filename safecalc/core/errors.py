from __future__ import annotations


class ValidationError(ValueError):
    """Raised when an input fails a guard clause. The message names the violated constraint."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
