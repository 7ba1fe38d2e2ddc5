from __future__ import annotations

import argparse
from typing import Sequence

import uvicorn

from universe import settings
from universe.engine import build_app
from universe.logger import setup_logger


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the GCD calculator.")
    parser.add_argument("--host", default=settings.server_host(), help="Bind host")
    parser.add_argument(
        "--port", type=int, default=settings.server_port(), help="Bind port"
    )
    parser.add_argument(
        "--log-level", default=settings.log_level(), help="debug, info, warning, error"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    logger = setup_logger(args.log_level, json=settings.log_json())

    app = build_app()
    logger.info(f"Serving on http://{args.host}:{args.port}...")
    uvicorn.run(
        app,
        host=args.host,
        port=args.port,
        log_level=args.log_level,
        access_log=False,
    )
