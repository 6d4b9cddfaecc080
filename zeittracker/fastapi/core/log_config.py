import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO"):
    """Configure root logging once for the whole process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
