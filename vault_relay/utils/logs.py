import logging
from typing import Optional

import structlog


def configure_logging(log_file: Optional[str] = None, level: str = "INFO") -> None:
    """Route :mod:`structlog` through the standard library's logging.

    Log records are written to `log_file`, appending to it, if given, and to
    stderr otherwise.
    """
    if log_file:
        logging.basicConfig(filename=log_file, filemode="a+", level=level)
    else:
        logging.basicConfig(level=level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
