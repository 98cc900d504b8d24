"""Console logging setup.

The library only emits records through ``logging.getLogger(__name__)`` loggers
below ``record_validate``. Applications call ``setup_logging()`` to see them in
color without touching their own handlers.
"""

import logging
from typing import Optional

import colorlog

PACKAGE_LOGGER = "record_validate"

LOG_FORMAT = "%(asctime)s:%(levelname)s:%(name)s:%(funcName)s:%(lineno)d: %(message)s"
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def setup_logging(
    verbose: bool = False,
    warnings_only: bool = False,
    errors_only: bool = False,
    logger_name: Optional[str] = PACKAGE_LOGGER,
) -> logging.Logger:
    """Attach a colored console handler to the validator's logger.

    The runner logs one DEBUG line per validated record or frame, so
    ``verbose=True`` is needed to see them.

    Args:
        verbose: Log DEBUG records.
        warnings_only: Log WARNING and above.
        errors_only: Log ERROR and above. Takes precedence over the other flags.
        logger_name: Logger to configure. The default configures only this
            package's logger and stops it propagating, leaving the root handlers
            alone. ``None`` configures the root logger instead.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(logger_name)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    stream_handler = colorlog.StreamHandler()
    stream_handler.setFormatter(
        colorlog.ColoredFormatter(f"%(log_color)s{LOG_FORMAT}", log_colors=LOG_COLORS)
    )
    logger.addHandler(stream_handler)
    if logger_name is not None:
        logger.propagate = False

    if errors_only:
        logger.setLevel(logging.ERROR)
    elif warnings_only:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
