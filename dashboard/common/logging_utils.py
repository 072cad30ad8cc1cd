"""Central logging utilities for the Data Summary Dashboard.

Goals:
- Single place to configure logging for the pipeline entry point and scripts.
- Provide structured JSON logging option (format="json") and colored human-readable output (default).
- Respect environment variables when no explicit value is passed:
    LOG_LEVEL=INFO|DEBUG|... (default: INFO)
    LOG_FORMAT=console|json (default: console)
    LOG_NO_COLOR=1 to disable color output even on console format.
    LOG_TIMEZONE=utc|local (default: local)
- Allow reusable per-module loggers via get_logger(name) without re-configuring root handlers.

Usage:
    from dashboard.common.logging_utils import configure_logging, get_logger
    configure_logging(service="collector")  # idempotent
    logger = get_logger(__name__)
    logger.info("Hello")

Calling configure_logging() multiple times is safe – subsequent calls become no-ops unless
`force=True` is passed.
"""
from __future__ import annotations

import json
import logging
import os
import sys
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

_CONFIG_LOCK = threading.Lock()
_ALREADY_CONFIGURED = False

# Attributes every LogRecord carries; everything else came in via `extra=`
_RESERVED_ATTRS = {
    "args", "name", "msg", "levelno", "levelname", "pathname", "filename", "module",
    "exc_info", "exc_text", "lineno", "funcName", "created", "msecs", "relativeCreated",
    "thread", "threadName", "processName", "process", "stack_info", "taskName",
}

# --------------------------------------------------------------------------------------
# Formatters
# --------------------------------------------------------------------------------------

class ColorFormatter(logging.Formatter):
    COLORS = {
        "DEBUG": "\x1b[38;5;245m",  # grey
        "INFO": "\x1b[38;5;39m",  # blue
        "WARNING": "\x1b[38;5;214m",  # orange
        "ERROR": "\x1b[38;5;196m",  # red
        "CRITICAL": "\x1b[48;5;196m\x1b[38;5;231m",  # white on red
    }
    RESET = "\x1b[0m"

    def __init__(self, tz_local: bool):
        super().__init__()
        self.tz_local = tz_local

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        level_color = self.COLORS.get(record.levelname, "")
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        if self.tz_local:
            ts = ts.astimezone()
        ts_str = ts.strftime("%Y-%m-%d %H:%M:%S")
        base = f"{ts_str} | {record.levelname:<8} | {record.name} | {record.getMessage()}"
        if record.exc_info:
            base += "\n" + self.formatException(record.exc_info)
        if level_color:
            return f"{level_color}{base}{self.RESET}"
        return base


class JsonFormatter(logging.Formatter):
    def __init__(self, tz_local: bool):
        super().__init__()
        self.tz_local = tz_local

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        if self.tz_local:
            ts = ts.astimezone()
        payload: Dict[str, Any] = {
            "ts": ts.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        for k, v in record.__dict__.items():
            if k in _RESERVED_ATTRS or k in payload or k.startswith("_"):
                continue
            try:
                json.dumps({k: v})
                payload[k] = v
            except (TypeError, ValueError):
                payload[k] = repr(v)
        return json.dumps(payload, ensure_ascii=False)


def _plain_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# --------------------------------------------------------------------------------------
# Public API
# --------------------------------------------------------------------------------------

def configure_logging(
    service: str | None = None,
    *,
    level: str | None = None,
    log_format: str | None = None,
    log_file: str | None = None,
    force: bool = False,
) -> None:
    """Configure root logging once.

    Parameters
    ----------
    service: Optional logical service/app name (added as 'service' field in JSON mode)
    level: Log level name; falls back to LOG_LEVEL, then INFO.
    log_format: "console" or "json"; falls back to LOG_FORMAT, then console.
    log_file: Optional path of a log file that receives the same records (plain format).
    force: If True, reconfigure even if already configured.
    """
    global _ALREADY_CONFIGURED
    with _CONFIG_LOCK:
        if _ALREADY_CONFIGURED and not force:
            return

        log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
        fmt = (log_format or os.getenv("LOG_FORMAT", "console")).lower()
        tz_mode = os.getenv("LOG_TIMEZONE", "local").lower()
        no_color = os.getenv("LOG_NO_COLOR") == "1"

        tz_local = tz_mode != "utc"

        # Clear existing handlers if reconfiguring
        root = logging.getLogger()
        for h in list(root.handlers):
            root.removeHandler(h)

        if fmt == "json":
            formatter: logging.Formatter = JsonFormatter(tz_local=tz_local)
        elif sys.stderr.isatty() and not no_color:
            formatter = ColorFormatter(tz_local=tz_local)
        else:
            formatter = _plain_formatter()

        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root.addHandler(handler)

        if log_file:
            path = Path(log_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path, encoding="utf-8")
            file_handler.setFormatter(
                JsonFormatter(tz_local=tz_local) if fmt == "json" else _plain_formatter()
            )
            root.addHandler(file_handler)

        root.setLevel(getattr(logging, log_level, logging.INFO))

        _ServiceLoggerAdapter.BASE_SERVICE = service

        _ALREADY_CONFIGURED = True


def get_logger(name: str) -> logging.Logger | logging.LoggerAdapter:
    base = logging.getLogger(name)
    # If a service context exists, wrap in adapter; else return raw logger
    base_service = _ServiceLoggerAdapter.BASE_SERVICE
    if base_service:
        return _ServiceLoggerAdapter(base, {"service": base_service})
    return base


class _ServiceLoggerAdapter(logging.LoggerAdapter):
    # Set by configure_logging if service specified
    BASE_SERVICE: Optional[str] = None

    def process(self, msg: Any, kwargs: Dict[str, Any]):  # noqa: D401
        extra = kwargs.get("extra") or {}
        if "service" not in extra and self.extra.get("service"):
            extra["service"] = self.extra["service"]
        kwargs["extra"] = extra
        return msg, kwargs


__all__ = [
    "configure_logging",
    "get_logger",
    "ColorFormatter",
    "JsonFormatter",
]
