from __future__ import annotations

import asyncio
from typing import Any, Dict, Iterable, Tuple

import structlog

logger = structlog.get_logger()


def _header_value(headers: Iterable[Tuple[bytes, bytes]], key: bytes) -> str | None:
    for header_key, header_value in headers:
        if header_key.lower() == key:
            return header_value.decode("latin-1")
    return None


async def _send_text(send: Any, status_code: int, message: str) -> None:
    await send(
        {
            "type": "http.response.start",
            "status": status_code,
            "headers": [(b"content-type", b"text/plain; charset=utf-8")],
        }
    )
    await send({"type": "http.response.body", "body": message.encode("utf-8")})


class _RequestTooLarge(Exception):
    pass


class RequestLimitsMiddleware:
    def __init__(
        self,
        app: Any,
        *,
        max_body: int | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        self.app = app
        self.max_body = max_body
        self.timeout_seconds = timeout_seconds

    async def __call__(self, scope: Dict[str, Any], receive: Any, send: Any) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        max_body = self.max_body
        timeout_seconds = self.timeout_seconds
        if max_body is None and timeout_seconds is None:
            await self.app(scope, receive, send)
            return

        path = scope.get("path", "")
        content_length = _header_value(scope.get("headers", []), b"content-length")
        if max_body is not None and content_length and content_length.isdigit():
            if int(content_length) > max_body:
                logger.warning("payload_too_large", path=path, length=int(content_length))
                await _send_text(send, 413, "Payload too large")
                return

        response_started = False
        too_large = False
        body_bytes = 0

        async def receive_wrapper() -> Dict[str, Any]:
            nonlocal body_bytes, too_large
            message = await receive()
            if message.get("type") == "http.request":
                body = message.get("body", b"")
                if body:
                    body_bytes += len(body)
                    if max_body is not None and body_bytes > max_body:
                        too_large = True
                        raise _RequestTooLarge()
            return message

        async def send_wrapper(message: Dict[str, Any]) -> None:
            nonlocal response_started
            # The wrapped app may try to answer the overflow with its own 500.
            if too_large:
                return
            if message.get("type") == "http.response.start":
                response_started = True
            await send(message)

        try:
            if timeout_seconds is not None:
                await asyncio.wait_for(
                    self.app(scope, receive_wrapper, send_wrapper),
                    timeout=timeout_seconds,
                )
            else:
                await self.app(scope, receive_wrapper, send_wrapper)
        except _RequestTooLarge:
            logger.warning("payload_too_large", path=path, length=body_bytes)
            if not response_started:
                await _send_text(send, 413, "Payload too large")
        except asyncio.TimeoutError:
            logger.warning("request_timeout", path=path, timeout=timeout_seconds)
            if not response_started:
                await _send_text(send, 504, "Request timed out")
