# src/papertheme/exceptions.py
"""Exceptions for papertheme."""


class InvalidColorError(ValueError):
    """Raised when a string is not a usable hex color.

    Attributes:
        value: The rejected input.
    """

    def __init__(self, value: object, message: str | None = None) -> None:
        super().__init__(message or f"Invalid hex color: {value!r} (expected #rgb or #rrggbb)")
        self.value = value
