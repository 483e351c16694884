import logging
import os
import sys

from pythonjsonlogger.json import JsonFormatter

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"


def setup_logging(level: str | None = None):
    """
    Configures structured JSON logging for the transcript service.

    Installs a single stdout handler with a JSON formatter (timestamp, level,
    logger name, message, trace_id and span_id) on the root logger and routes
    the uvicorn loggers through the same handler so request logs share the
    format. The level comes from the argument, then ``LOG_LEVEL``, then INFO.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    formatter = JsonFormatter(LOG_FORMAT)
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(log_level)
        u_logger.handlers = []
        u_logger.addHandler(stream_handler)
        u_logger.propagate = False

    return root_logger
