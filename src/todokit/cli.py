"""Command-line entry point that serves the todo API with uvicorn."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from todokit.app import create_app
from todokit.core.api.utilities import run_app
from todokit.core.config import Settings
from todokit.core.logging import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser; unset flags fall back to TODOKIT_* settings."""
    parser = argparse.ArgumentParser(prog="todokit", description="Serve the todo REST API.")
    parser.add_argument("--host", help="Interface to bind")
    parser.add_argument("--port", type=int, help="Port to listen on")
    parser.add_argument("--database-url", help="SQLAlchemy async database URL")
    parser.add_argument("--store-timeout", type=float, help="Seconds to wait for a single store call")
    parser.add_argument("--log-level", help="Log level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--log-format", choices=["console", "json"], help="Log renderer")
    parser.add_argument("--request-logging", action="store_true", default=None, help="Log every request")
    return parser


def load_settings(argv: Sequence[str] | None = None) -> Settings:
    """Merge command-line flags over environment settings."""
    args = build_parser().parse_args(argv)
    overrides = {key: value for key, value in vars(args).items() if value is not None}
    return Settings(**overrides)


def main(argv: Sequence[str] | None = None) -> None:
    """Run the service."""
    settings = load_settings(argv)
    configure_logging(level=settings.log_level, log_format=settings.log_format)
    logger.info("service.starting", host=settings.host, port=settings.port)
    run_app(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level)


if __name__ == "__main__":
    main()
