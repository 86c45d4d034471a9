import logging
import sys

from rsswipe.config import LOG_LEVEL

_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configura o logger raiz uma única vez (idempotente)."""
    root = logging.getLogger()
    if any(getattr(h, "_rsswipe", False) for h in root.handlers):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._rsswipe = True
    root.addHandler(handler)
    root.setLevel(level.upper())
