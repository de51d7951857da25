import logging
import sys

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "smart-minutes"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
_SERVER_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """
    Configures structured JSON logging for the service.

    Every record is written to stdout as one JSON object carrying timestamp,
    level, logger name, message, the ddtrace trace_id/span_id and the service
    name. The uvicorn loggers are routed through the same handler so request
    logs and pipeline logs share one format. Calling it again replaces the
    handler instead of stacking a second one.

    Args:
        level: Log level name or number applied to the root and uvicorn loggers.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = jsonlogger.JsonFormatter(
        _LOG_FORMAT, static_fields={"service": SERVICE_NAME}
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [stream_handler]

    for logger_name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(logger_name)
        server_logger.setLevel(level)
        server_logger.handlers = [stream_handler]
        server_logger.propagate = False

    return root_logger
