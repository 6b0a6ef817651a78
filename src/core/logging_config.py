"""
Logging setup for the Invoice Intake API.
"""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once; later calls only adjust the level."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
