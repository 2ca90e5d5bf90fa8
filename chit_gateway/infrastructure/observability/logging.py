"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter

from chit_gateway.config import settings


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_preview(
    request_id: str,
    regime: str,
    members_count: int,
    duration_ms: float,
) -> None:
    """Log structured schedule preview outcome"""
    logging.info(
        "Schedule preview computed",
        extra={
            "request_id": request_id,
            "step": "preview_complete",
            "regime": regime,
            "members_count": members_count,
            "duration_ms": duration_ms,
        },
    )


def log_chit_created(
    request_id: str,
    chit_id: str,
    regime: str,
    members_count: int,
) -> None:
    """Log chit creation for audit and analysis"""
    logging.info(
        "Chit created",
        extra={
            "request_id": request_id,
            "step": "chit_created",
            "chit_id": chit_id,
            "regime": regime,
            "members_count": members_count,
        },
    )
