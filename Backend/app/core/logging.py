# Backend/app/core/logging.py
from __future__ import annotations

import logging
import sys
from typing import Any, Dict
from datetime import datetime, timezone

import structlog

from app.core.request_id import get_request_id


# -------- Processors ---------------------------------------------------------

def _add_ts(_: Any, __: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    # ISO 8601 UTC timestamp, kort & sorteerbaar
    event_dict.setdefault("ts", datetime.now(timezone.utc).isoformat(timespec="milliseconds"))
    return event_dict

def _add_level(_: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    # structlog geeft de methodenaam door (info/warning/...), die gebruiken we als level
    level = event_dict.get("level") or method_name or "info"
    if level == "warn":
        level = "warning"
    event_dict["level"] = str(level).lower()
    return event_dict

def _add_service(service_name: str):
    def _inner(_: Any, __: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict
    return _inner

def _add_request_id(_: Any, __: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    rid = get_request_id()
    if rid:
        event_dict.setdefault("request_id", rid)
    return event_dict


# -------- Public API ---------------------------------------------------------

_logger: structlog.BoundLogger | None = None

def _stderr_logger(*_: Any) -> structlog.PrintLogger:
    # sys.stderr op aanroepmoment, niet bij configuratie
    return structlog.PrintLogger(sys.stderr)

def _coerce_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO

def configure_logging(
    service_name: str = "posts-api",
    *,
    level: int | str = logging.INFO,
    json_output: bool = True,
) -> None:
    """
    Configureer één globale structlog stack voor de API.

    ``json_output=False`` schakelt over naar de console renderer voor lokaal werk.
    """
    global _logger

    numeric_level = _coerce_level(level)

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        stream=sys.stderr,
        force=True,  # overschrijd eerdere configs
    )

    renderer: Any
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    processors = [
        _add_ts,
        _add_level,
        _add_service(service_name),
        _add_request_id,
        structlog.processors.format_exc_info,
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )

    _logger = structlog.get_logger()

def get_logger() -> structlog.BoundLogger:
    global _logger
    if _logger is None:
        configure_logging()  # sane default
    return _logger

# Een makkelijk te importeren alias
logger = get_logger()
