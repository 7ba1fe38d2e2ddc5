from __future__ import annotations

from universe.errors import DomainError


class GcdError(DomainError):
    """Base for every failure the GCD form can report back to the client."""


class FormDecodeError(GcdError):
    def __init__(self, message: str) -> None:
        super().__init__(
            f"Error parsing form data: {message}\n", code="form_decode_error"
        )
        self.message = message


class MissingFieldError(GcdError):
    def __init__(self, field: str = "n") -> None:
        super().__init__(
            f'No numbers ("{field}") in form data\n', code="missing_field"
        )
        self.field = field


class ParseError(GcdError):
    def __init__(self, token: str, field: str = "n") -> None:
        super().__init__(f"Bad number {field}={token}\n", code="bad_number")
        self.token = token
        self.field = field


class EmptyInputError(GcdError):
    def __init__(self) -> None:
        super().__init__("No numbers given\n", code="no_numbers")


__all__ = [
    "EmptyInputError",
    "FormDecodeError",
    "GcdError",
    "MissingFieldError",
    "ParseError",
]
