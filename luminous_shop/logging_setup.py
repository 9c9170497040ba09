from __future__ import annotations

import logging, os, sys

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level_name: str | None = None) -> int:
    level = getattr(logging, (level_name or os.getenv("LOG_LEVEL", "INFO")).upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)
    sh = logging.StreamHandler(sys.stdout)
    sh.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(sh)

    # Tidy / tune levels regardless of backend
    logging.captureWarnings(True)
    logging.getLogger("werkzeug").setLevel(logging.WARNING)

    for name in (
        "luminous_shop",                  # whole package
        "luminous_shop.search",           # query decisions (DEBUG shows per-query traces)
        "luminous_shop.catalog",          # load / reload
        "gunicorn.error",                 # optional: align gunicorn severity
        "gunicorn.access",
    ):
        logging.getLogger(name).setLevel(level)

    return level
