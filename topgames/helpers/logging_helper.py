"""
Logging helpers: identity/role tagging and per-context log prefixes.

Module names follow a suffix convention (``_svc``, ``_wf``, ``_comp``, ...).
``TopgamesLogFilter`` turns that suffix into readable tags so a log line reads
``[Layout Tier] [Service] Tier changed: MEDIUM -> LARGE`` instead of the full
dotted logger name.
"""

from __future__ import annotations

import contextvars
import logging
import sys
from typing import Any

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(topgames_identity_tag)s %(topgames_role_tag)s %(context_str)s%(message)s"

# Suffix -> role tag
ROLE_SUFFIXES: dict[str, str] = {
    "_svc": "[Service]",
    "_wf": "[Workflow]",
    "_comp": "[Component]",
    "_helper": "[Helper]",
    "_dto": "[DTO]",
    "_if": "[Interface]",
}

_log_context: contextvars.ContextVar[dict[str, Any] | None] = contextvars.ContextVar(
    "topgames_log_context", default=None
)


def set_log_context(**values: Any) -> None:
    """Add key/value pairs rendered as ``[k=v ...]`` in front of every message."""
    current = dict(_log_context.get() or {})
    current.update(values)
    _log_context.set(current)


def clear_log_context() -> None:
    """Drop all context values for the current context."""
    _log_context.set(None)


def _derive_tags(name: str) -> tuple[str, str]:
    """Return (identity_tag, role_tag) for a logger name."""
    module = name.rsplit(".", 1)[-1]
    for suffix, role in ROLE_SUFFIXES.items():
        if module.endswith(suffix):
            stem = module[: -len(suffix)]
            if not stem:
                break
            identity = " ".join(part.capitalize() for part in stem.split("_") if part)
            return f"[{identity}]", role
    return name, ""


class TopgamesLogFilter(logging.Filter):
    """Attach identity/role tags and context prefix to log records.

    Never suppresses a record. Tag derivation failures fall back to the raw
    logger name.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            identity, role = _derive_tags(str(record.name or ""))
        except Exception:
            identity, role = str(getattr(record, "name", "")), ""
        record.topgames_identity_tag = identity
        record.topgames_role_tag = role

        context = _log_context.get() or {}
        if context:
            pairs = " ".join(f"{key}={value}" for key, value in context.items())
            record.context_str = f"[{pairs}] "
        else:
            record.context_str = ""
        return True


def configure_logging(level: str | int = "INFO") -> None:
    """Configure root logging once for the whole process."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(TopgamesLogFilter())

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    # force=True replaces handlers installed by earlier calls
    logging.basicConfig(level=level, handlers=[handler], force=True)
    logger.debug("Logging configured at level %s", logging.getLevelName(level))
