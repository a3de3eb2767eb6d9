"""
Diagnostics sinks for translation warnings.

The resolver and the interpolator never print: they call ``warn(message)`` on
an injected sink, tagged with an outcome ("missing_language", "untranslated",
"unresolved_placeholder", "mustache_syntax") and the language it concerns.
LoggingDiagnostics is the default; tests pass a mock.
"""

import logging
from typing import Any, Dict, List, Optional, Protocol

from gettext_runtime.core.structured_logger import log_event

logger = logging.getLogger("gettext_runtime")


class Diagnostics(Protocol):
    def warn(self, message: str, *, outcome: str = "fallback",
             language_key: Optional[str] = None, reason: Optional[str] = None) -> None:
        ...


class LoggingDiagnostics:
    """Send warnings to the ``gettext_runtime`` logger as structured events."""

    def __init__(self, target: Optional[logging.Logger] = None, component: str = "i18n"):
        self._logger = target or logger
        self._component = component

    def warn(self, message: str, *, outcome: str = "fallback",
             language_key: Optional[str] = None, reason: Optional[str] = None) -> None:
        log_event(
            self._logger,
            component=self._component,
            operation="translate",
            outcome=outcome,
            language_key=language_key,
            reason=reason,
            level="warning",
            message=message,
        )


class CollectingDiagnostics:
    """Keep warnings in memory, for callers that report them in bulk."""

    def __init__(self):
        self.messages: List[str] = []
        self.events: List[Dict[str, Any]] = []

    def warn(self, message: str, *, outcome: str = "fallback",
             language_key: Optional[str] = None, reason: Optional[str] = None) -> None:
        self.messages.append(message)
        self.events.append({
            "message": message,
            "outcome": outcome,
            "language_key": language_key,
            "reason": reason,
        })
