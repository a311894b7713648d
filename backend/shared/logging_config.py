"""
Process-wide logging setup.

Modules log through ``logging.getLogger(__name__)``; the logger name is the
context label printed with every record.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"

_configured = False


def configure_logging(level: str = "INFO", log_file: str = "") -> None:
    """
    Configure the root logger once per process.

    Args:
        level: Level name for the root logger (e.g. "INFO", "DEBUG")
        log_file: Optional path of a file that receives a copy of every record
    """
    global _configured

    root = logging.getLogger()
    root.setLevel(level.upper())

    if _configured:
        return

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    _configured = True
    logging.getLogger(__name__).debug("Logging configured at %s", level.upper())
