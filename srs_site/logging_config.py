import logging
import structlog


def configure_logging(level="INFO") -> None:
    """Configure stdlib logging and structlog for the whole site.

    Events are rendered as JSON lines with an ISO timestamp and log level,
    so request handlers can bind context (request_id, user_id) and emit
    key/value events.
    """
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format="%(message)s")
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
