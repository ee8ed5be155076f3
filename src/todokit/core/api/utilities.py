"""Utilities for serving FastAPI applications."""

from __future__ import annotations

from typing import Any

import uvicorn
from fastapi import FastAPI


def run_app(
    app: FastAPI | str,
    *,
    host: str = "127.0.0.1",
    port: int = 5000,
    reload: bool = False,
    log_level: str = "info",
    **uvicorn_kwargs: Any,
) -> None:
    """Run a FastAPI app (instance or "module:attr" import string) with uvicorn."""
    if reload and not isinstance(app, str):
        raise ValueError("reload=True requires the app as an import string, e.g. 'myservice.main:app'")

    # Logging is configured by the app itself
    uvicorn.run(app, host=host, port=port, reload=reload, log_level=log_level.lower(), log_config=None, **uvicorn_kwargs)
