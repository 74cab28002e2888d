"""
Logger configuration.

Routes every log record to stdout with ISO timestamps and keeps the AWS
SDK's own request chatter at WARNING.

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# SDK loggers that log every HTTP exchange at INFO/DEBUG
QUIET_LOGGERS = ("boto3", "botocore", "urllib3")


def configure_logging(level: str | int = logging.INFO) -> None:
    """
    Install a single stdout handler on the root logger.

    Safe to call repeatedly: handlers from earlier calls are replaced.

    Args:
        level: Root log level, as a name ("debug", "INFO") or logging constant
    """
    if isinstance(level, str):
        level = level.upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
