#!/usr/bin/env python3
"""
Luminous Shop Entry Point
- Works under both Gunicorn (WSGI import: `gunicorn run:app`) and python CLI.
- Logging is initialized exactly once per process.
- Flask's app logger is aligned with the root logger.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Tuple

from dotenv import load_dotenv
from flask import request

# Load env before any other imports that might read it
load_dotenv()

from luminous_shop import create_app  # noqa: E402
from luminous_shop.logging_setup import setup_logging  # noqa: E402

_LOGGING_INITIALIZED = False  # process-level guard


def init_logging() -> int:
    """Idempotent: won't add duplicate handlers if called multiple times."""
    global _LOGGING_INITIALIZED
    if not _LOGGING_INITIALIZED:
        setup_logging()
        _LOGGING_INITIALIZED = True
    return logging.getLogger().level


def validate_environment(strict: bool) -> None:
    """
    The catalog file is the one hard requirement.
    - strict=True: exit when it is missing (CLI path).
    - strict=False: warn only (WSGI path) so /health can report the problem.
    """
    path = os.getenv("CATALOG_PATH")
    if path and not os.path.exists(path):
        msg = f"CATALOG_PATH points to a missing file: {path}"
        if strict:
            print("Error:", msg)
            sys.exit(1)
        logging.getLogger(__name__).warning(msg)


def create_application(strict_env: bool = False):
    validate_environment(strict=strict_env)
    level = init_logging()

    app = create_app()

    # Make Flask's app.logger flow into the root handlers
    if app.logger.handlers:
        app.logger.handlers.clear()
    app.logger.propagate = True
    app.logger.setLevel(level)

    @app.before_request
    def _log_request():
        app.logger.debug("→ %s %s", request.method, request.full_path)

    return app


def _resolve_server_config() -> Tuple[str, int, bool]:
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "10000"))

    flask_debug = os.getenv("FLASK_DEBUG", "").lower()
    if flask_debug in ("1", "true", "yes", "on"):
        debug = True
    elif flask_debug in ("0", "false", "no", "off"):
        debug = False
    else:
        debug = os.getenv("APP_ENV", "development").lower() == "development"

    return host, port, debug


def main() -> None:
    app = create_application(strict_env=True)
    host, port, debug = _resolve_server_config()

    print("Luminous Shop Starting")
    print("=" * 60)
    print(f"Server:       http://{host}:{port}")
    print(f"Health check: http://{host}:{port}/health")
    print(f"Products:     http://{host}:{port}/api/products?q=shampoo")
    print(f"Environment:  {os.getenv('APP_ENV', 'development')}")
    print(f"Debug mode:   {debug}")
    print("=" * 60)

    try:
        app.run(host=host, port=port, debug=debug, use_reloader=False, threaded=True)
    except KeyboardInterrupt:
        print("\nShutting down gracefully...")


if __name__ == "__main__":
    main()
else:
    # WSGI entrypoint for Gunicorn
    app = create_application(strict_env=False)
