"""
Structured logging for translation diagnostics.

Contract for lookup fallbacks and data problems:
- component
- operation
- outcome
- language_key (optional)
- reason (optional)

Do not log interpolation parameters, they may carry user data.
"""
from typing import Optional

from logging import Logger


def log_event(
    logger: Logger,
    *,
    component: str,
    operation: str,
    outcome: str,
    language_key: Optional[str] = None,
    reason: Optional[str] = None,
    level: str = "info",
    message: Optional[str] = None,
) -> None:
    """
    Emit structured log event.

    Args:
        logger: Logger instance
        component: Component name (e.g., "resolver", "interpolator", "dictionary")
        operation: Operation name (e.g., "lookup", "interpolate", "validate")
        outcome: Outcome (e.g., "untranslated", "missing_language", "unresolved_placeholder")
        language_key: Language the event concerns (omitted if None)
        reason: Short explanation (optional)
        level: Log level ("info", "warning", "error", "critical", "debug")
        message: Optional override message (defaults to component/operation/outcome)
    """
    extra: dict = {
        "component": component,
        "operation": operation,
        "outcome": outcome,
    }
    if language_key is not None:
        extra["language_key"] = language_key
    if reason is not None:
        extra["reason"] = reason

    msg = message or f"{component} {operation} outcome={outcome}"
    log_method = getattr(logger, level.lower(), logger.info)
    log_method(msg, extra=extra)
