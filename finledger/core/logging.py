import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(level: str = "INFO") -> None:
    """Install one stdout handler on the root logger.

    Safe to call more than once: later calls only change the level.
    """
    global _handler

    root = logging.getLogger()
    root.setLevel(level)

    if _handler is None or _handler not in root.handlers:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_handler)
    _handler.setLevel(level)

    # SQL echo is controlled by the engine, keep the pool quiet.
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
