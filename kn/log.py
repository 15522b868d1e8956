import logging
import sys


def setup_logging(verbose: bool = False) -> None:
    """Configure the kn logger to write to stderr."""
    log_format = "%(asctime)s %(levelname)-4s [%(name)s] : %(message)s"

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(log_format, datefmt="%Y-%m-%d %H:%M:%S"))

    kn_logger = logging.getLogger("kn")
    kn_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    kn_logger.handlers.clear()
    kn_logger.addHandler(handler)
    kn_logger.propagate = False

    # Keep urllib3 request logs in step with --verbose
    logging.getLogger("urllib3").setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )
