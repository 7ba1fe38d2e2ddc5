from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse


class DomainError(Exception):
    """Domain-level exception rendered as a plain-text response."""

    def __init__(
        self,
        detail: str,
        *,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        code: str | None = None,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code
        self.code = code


async def domain_error_handler(request: Request, exc: DomainError) -> PlainTextResponse:
    return PlainTextResponse(exc.detail, status_code=exc.status_code)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)


__all__ = ["DomainError", "domain_error_handler", "register_error_handlers"]
