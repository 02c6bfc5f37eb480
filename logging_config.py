"""
logging_config.py — Logging setup
=================================
One call from the entry point wires the root logger; every other
module just does logging.getLogger(__name__).
"""
import logging
import sys
from typing import List, Optional, Union


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Replace the root logger's handlers with a stdout handler and, when
    log_file is given, a file handler.  String levels are matched by name;
    an unknown name means INFO.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        # overwritten per run
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.getLogger(__name__).info("Logging initialised at %s", logging.getLevelName(level))
