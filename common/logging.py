"""
common.logging
~~~~~~~~~~~~~~
structlog configuration shared by the Django settings modules.

``build_logging_config`` returns a ``dictConfig`` mapping whose console
handler renders through :class:`structlog.stdlib.ProcessorFormatter`, so
records from both stdlib loggers and structlog loggers come out in the same
format.  ``configure_structlog`` wires structlog itself into stdlib logging.
"""
from __future__ import annotations

import structlog

#: Top-level packages that get their own logger entry.
PROJECT_LOGGERS = ("apps", "common", "web")


def build_logging_config(
    *,
    level: str = "INFO",
    project_level: str = "DEBUG",
    renderer=None,
) -> dict:
    renderer = renderer or structlog.processors.JSONRenderer()
    project_logger = {
        "handlers": ["console"],
        "level": project_level,
        "propagate": False,
    }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json_formatter": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processor": renderer,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json_formatter",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
        "loggers": {
            "django": {
                "handlers": ["console"],
                "level": "INFO",
                "propagate": False,
            },
            **{name: dict(project_logger) for name in PROJECT_LOGGERS},
        },
    }


def configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
