"""Logowanie warstwy HTTP (JSON w produkcji, tekst w dev).

Core billingu nic nie loguje, tylko zwraca wartości albo rzuca DomainError.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from pythonjsonlogger.json import JsonFormatter

from netbill.app.config import Settings, get_settings
from netbill.shared.request_context import get_request_context

_HANDLER_NAME = "netbill"


class RequestJsonFormatter(JsonFormatter):
    def __init__(self, *args: Any, env_name: str = "dev", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._env_name = env_name

    def add_fields(self, log_record: dict[str, Any], record: logging.LogRecord, message_dict: dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["environment"] = self._env_name

        ctx = get_request_context()
        if ctx.request_id:
            log_record["request_id"] = ctx.request_id
        if ctx.path:
            log_record["path"] = ctx.path


def setup_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()

    root_logger = logging.getLogger()
    if any(h.get_name() == _HANDLER_NAME for h in root_logger.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)

    if settings.log_as_json:
        formatter: logging.Formatter = RequestJsonFormatter(
            "%(asctime)s %(name)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            env_name=settings.env_name,
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
    root_logger.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
