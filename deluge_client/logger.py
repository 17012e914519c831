import sys

from loguru import logger

from .config import Config


def configure_logging(verbose=None):
    """
    Install the file sink, and a console sink when verbose.

    The library never calls this itself; applications (and the CLI) opt in.
    """
    if verbose is None:
        verbose = Config.VERBOSE

    logger.remove()

    # Log to a file
    logger.add(
        Config.LOG_PATH,
        rotation=Config.LOG_ROTATION,
        retention=Config.LOG_RETENTION,
        level=Config.LOG_LEVEL,
    )

    # Log to console
    if verbose:
        logger.add(
            sys.stderr,
            level=Config.LOG_LEVEL,
        )


__all__ = ["logger", "configure_logging"]
