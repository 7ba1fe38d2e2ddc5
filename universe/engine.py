from __future__ import annotations

from importlib import import_module
from pathlib import Path
from typing import Any

import structlog
from fastapi import FastAPI

from universe import settings
from universe.limits import RequestLimitsMiddleware
from universe.registry import MODULES_PATH, load_modules
from universe.telemetry import RequestLogMiddleware

logger = structlog.get_logger()


def import_attr(path: str) -> Any:
    if ":" not in path:
        raise ValueError(f"Invalid entrypoint '{path}'. Expected module:attr.")
    module_path, attr = path.split(":", 1)
    module = import_module(module_path)
    return getattr(module, attr)


def build_app(
    *,
    modules_path: Path = MODULES_PATH,
    max_body: int | None = None,
    timeout_seconds: float | None = None,
) -> FastAPI:
    app = FastAPI(title="GCD Server", docs_url=None, redoc_url=None, openapi_url=None)

    modules = load_modules(modules_path)
    # Longest mounts first so "/" does not shadow the others.
    ordered = sorted(modules.values(), key=lambda meta: len(meta["mount"]), reverse=True)
    for meta in ordered:
        if not meta.get("public", True):
            continue
        api_entry = (meta.get("entrypoints") or {}).get("api")
        if not api_entry:
            continue
        subapp = import_attr(api_entry)
        app.mount(meta["mount"], subapp)
        logger.debug("module_mounted", module=meta["name"], mount=meta["mount"])

    if max_body is None:
        max_body = settings.max_body_bytes()
    if timeout_seconds is None:
        timeout_seconds = settings.request_timeout_seconds()

    app.add_middleware(
        RequestLimitsMiddleware, max_body=max_body, timeout_seconds=timeout_seconds
    )
    app.add_middleware(RequestLogMiddleware)
    return app
