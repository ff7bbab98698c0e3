"""
Service logging.

One named logger per service, shared by the app, the seeding code and the
command line scripts.
"""

import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def init_logger(service_name, level='INFO'):
    """Configure and return the logger for this service."""
    logger = logging.getLogger(service_name)

    # Unknown level names fall back to INFO
    try:
        logger.setLevel(level.upper() if isinstance(level, str) else level)
    except (TypeError, ValueError):
        logger.setLevel(logging.INFO)
        logger.warning(f"Unknown log level {level!r}, using INFO")

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
