import logging

import structlog

SERVICE_NAME = "labor-hours"


def add_service(_logger, _method_name: str, event_dict: dict) -> dict:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def configure_logging(level: str = "INFO") -> None:
    """Render hours events as JSON lines through the stdlib root logger."""
    level = level.upper()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_service,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        # stdout carries command output; records go to the stderr handler below
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
    logging.basicConfig(level=level)


def get_logger(name: str, **context) -> structlog.BoundLogger:
    # Initial values keep the proxy lazy, so module-level loggers pick up configure_logging
    return structlog.get_logger(name, component=name.rsplit(".", 1)[-1], **context)
