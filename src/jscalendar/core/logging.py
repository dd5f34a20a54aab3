"""JSONロギングの共通ヘルパー。"""

from __future__ import annotations

import json
import logging
import traceback
from typing import Any

from jscalendar.core.errors import JSCalendarError

_LOGGER = logging.getLogger("jscalendar")


def log_codec(*, operation: str, target: str, status: str = "OK", **extra: Any) -> None:
    payload = {
        "level": "INFO",
        "operation": operation,
        "target": target,
        "status": status,
        **extra,
    }
    _LOGGER.info(json.dumps(payload, ensure_ascii=False, default=str))


def log_skipped_pointer(*, operation: str, pointer: str, reason: str) -> None:
    payload = {
        "level": "WARNING",
        "operation": operation,
        "pointer": pointer,
        "reason": reason,
    }
    _LOGGER.warning(json.dumps(payload, ensure_ascii=False))


def log_codec_error(*, operation: str, target: str, error: Any) -> None:
    payload = {
        "level": "ERROR",
        "operation": operation,
        "target": target,
        "error_json": _to_error_json(error),
        "traceback": traceback.format_exc(),
    }
    _LOGGER.error(json.dumps(payload, ensure_ascii=False))


def _to_error_json(error: Any) -> str:
    if isinstance(error, (dict, list)):
        return json.dumps(error, ensure_ascii=False, default=str)
    if isinstance(error, JSCalendarError):
        detail = {
            "type": type(error).__name__,
            "message": str(error),
            "reason": getattr(error, "reason", None),
            "value": getattr(error, "value", None),
        }
        return json.dumps(detail, ensure_ascii=False, default=str)
    return json.dumps({"message": str(error)}, ensure_ascii=False)
