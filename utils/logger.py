"""Logging setup for the CLI and the API server."""

import logging
import sys

# HTTP client libraries log every connection at DEBUG/INFO
QUIET_LOGGERS = ("urllib3", "httpx", "httpcore")


def setup_logger(log_level: str = "INFO", name: str = "repo_explorer") -> logging.Logger:
    """
    Set up and configure application logger.

    Logs go to stdout in a single-line format. Below DEBUG verbosity the
    HTTP client libraries are held at WARNING so each upstream search
    doesn't add connection noise; at DEBUG they log alongside our own
    rate-limit lines.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        name: Logger name (default: repo_explorer)

    Returns:
        logging.Logger: Configured logger instance
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stdout,
        force=True,  # uvicorn and earlier calls may have configured logging
    )

    library_level = numeric_level if numeric_level <= logging.DEBUG else max(numeric_level, logging.WARNING)
    for library in QUIET_LOGGERS:
        logging.getLogger(library).setLevel(library_level)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    return logger
