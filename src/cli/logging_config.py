"""structlog setup for the til CLI.

Everything goes through stdlib logging so board and service loggers share one
handler on stderr, plus an optional JSON file log.
"""

import logging
import re
import sys
from pathlib import Path
from typing import Optional

import structlog

# Supabase credentials must never reach a log line
_CREDENTIAL_PATTERNS = [
    (re.compile(r"(Bearer\s+)[a-zA-Z0-9_.-]{20,}"), r"\1REDACTED"),
    (re.compile(r"eyJ[a-zA-Z0-9_-]{10,}\.[a-zA-Z0-9_-]{10,}\.[a-zA-Z0-9_-]+"), "REDACTED_JWT"),
    (re.compile(r"(api[_-]?key['\"]?\s*[:=]\s*['\"]?)[a-zA-Z0-9_.-]{10,}"), r"\1REDACTED"),
]


def _redact_credentials(_, __, event_dict: dict) -> dict:
    """Mask bearer tokens, JWTs and api_key values in string fields."""
    for key, value in event_dict.items():
        if isinstance(value, str):
            for pattern, replacement in _CREDENTIAL_PATTERNS:
                value = pattern.sub(replacement, value)
            event_dict[key] = value
    return event_dict


def _formatter(json_mode: bool) -> structlog.stdlib.ProcessorFormatter:
    renderer = (
        structlog.processors.JSONRenderer() if json_mode else structlog.dev.ConsoleRenderer()
    )
    return structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )


def setup_logging(
    json_mode: bool = False, level: str = "INFO", log_file: Optional[Path] = None
) -> None:
    """Route structlog through the root logger.

    stderr gets console output, or JSON lines when ``json_mode`` is set, at
    ``level`` (unknown names fall back to INFO). A ``log_file`` additionally
    records every DEBUG event as JSON.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _redact_credentials,
    ]

    structlog.configure(
        processors=[
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter(json_mode))
    handler.setLevel(log_level)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_formatter(json_mode=True))
        root.addHandler(file_handler)
        root.setLevel(logging.DEBUG)
