# internify/core/logging.py
import logging
import sys

from internify.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False

def setup_logging(level: str | None = None) -> None:
    """Configura o logger raiz uma única vez (stdout) e alinha os loggers do uvicorn."""
    global _configured
    lvl = (level or settings.LOG_LEVEL or "INFO").upper()
    root = logging.getLogger()
    root.setLevel(lvl)

    if not _configured:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        _configured = True

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        lg = logging.getLogger(name)
        lg.handlers.clear()
        lg.propagate = True

    # SQL só em DEBUG
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if lvl == "DEBUG" else logging.WARNING)
