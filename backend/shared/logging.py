"""
Process-wide logging setup.

Modules log through ``logging.getLogger(__name__)``; entry points call
``configure_logging`` once at startup.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger with the given level name."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # httpx logs every Supabase request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
