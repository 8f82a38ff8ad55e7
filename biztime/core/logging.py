"""
Logging configuration for the API.

Every module logs through ``logging.getLogger(__name__)``; this sets the
root format and level once at startup. SQL statement logging rides on the
``sqlalchemy.engine`` logger rather than ``create_engine(echo=True)``, so
queries come out in the same format as everything else.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO", sql_echo: bool = False) -> None:
    """Configure root logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        sql_echo: Log every SQL statement the store runs.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # Route handlers already log outcomes; access lines only on problems
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if sql_echo else logging.WARNING
    )
