"""Logging configuration and structured organization event logging."""

import logging
from logging.config import dictConfig
from typing import Any

logger = logging.getLogger(__name__)


def _dict_config(level: str) -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s:%(name)s:%(message)s",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "default",
                "stream": "ext://sys.stdout",
            }
        },
        "root": {"level": level, "handlers": ["console"]},
    }


def configure_logging(level: str = "INFO") -> None:
    """Configure application-wide logging once.

    Returns early if the root logger already has handlers (reloaders, pytest).
    """
    if logging.getLogger().handlers:
        return
    dictConfig(_dict_config(level.upper()))


class StructuredOrgLogger:
    """Structured logger for organization operations."""

    def log_outcome(
        self,
        operation: str,
        outcome: str,
        *,
        organization_id: str | None = None,
        creator_email: str | None = None,
        reason: str | None = None,
    ) -> None:
        """Log an operation outcome with structured data."""
        log_data: dict[str, Any] = {
            "operation": operation,
            "outcome": outcome,
        }

        if organization_id:
            log_data["organization_id"] = organization_id
        if creator_email:
            log_data["creator_email"] = creator_email
        if reason:
            log_data["reason"] = reason

        log_msg = f"Organization {operation}: {outcome}"

        if outcome == "success":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
