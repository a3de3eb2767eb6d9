"""
Placeholder interpolation for translated strings.

Placeholders use the ``%{ expr }`` syntax of easygettext templates. ``expr``
is a parameter name or a path into it: ``user.name``, ``items[0]``.
"""

import html
import re
from typing import Any, Mapping, Optional

from gettext_runtime.core.i18n.diagnostics import Diagnostics, LoggingDiagnostics

INTERPOLATION_RE = re.compile(r"%\{((?:.|\n)+?)\}")
MUSTACHE_SYNTAX_RE = re.compile(r"\{\{((?:.|\n)+?)\}\}")
EVALUATION_RE = re.compile(r"[\[\].]{1,2}")

_MISSING = object()


def _get_path(parameters: Mapping[str, Any], expression: str):
    value: Any = parameters
    for part in (p for p in EVALUATION_RE.split(expression) if p):
        if isinstance(value, Mapping):
            value = value.get(part, _MISSING)
        elif isinstance(value, (list, tuple)) and part.lstrip("-").isdigit():
            try:
                value = value[int(part)]
            except IndexError:
                value = _MISSING
        elif part.startswith("_"):
            # Private and dunder attributes are not reachable from a template
            value = _MISSING
        else:
            value = getattr(value, part, _MISSING)
        if value is _MISSING or value is None:
            return _MISSING
    return value


class Interpolator:
    """
    Substitute ``%{ name }`` placeholders with caller-supplied values.

    Values are HTML-escaped unless ``escape`` is False. Text outside
    placeholders is returned untouched.
    """

    def __init__(self, diagnostics: Optional[Diagnostics] = None, silent: bool = False):
        self.diagnostics = diagnostics or LoggingDiagnostics()
        self.silent = silent

    def apply(self, text: str, parameters: Optional[Mapping[str, Any]] = None, escape: bool = True,
              silent: bool = False, language_key: Optional[str] = None) -> str:
        """
        ``silent`` mutes warnings for this call only, on top of the
        interpolator's own flag. ``language_key`` is reported with them.
        """
        if parameters is None:
            return text

        def warn(message: str, outcome: str) -> None:
            if not (self.silent or silent):
                self.diagnostics.warn(message, outcome=outcome, language_key=language_key)

        if MUSTACHE_SYNTAX_RE.search(text):
            warn(f'Mustache syntax cannot be used with gettext. Please use "%{{}}" instead of "{{{{}}}}" in: {text}', "mustache_syntax")

        def substitute(match) -> str:
            expression = match.group(1).strip()
            value = _get_path(parameters, expression)
            if value is _MISSING:
                warn(f"Cannot evaluate expression: {expression}", "unresolved_placeholder")
                value = expression
            rendered = str(value)
            return html.escape(rendered, quote=True) if escape else rendered

        return INTERPOLATION_RE.sub(substitute, text)


default_interpolator = Interpolator()


def interpolate(text: str, parameters: Optional[Mapping[str, Any]] = None, escape: bool = True) -> str:
    return default_interpolator.apply(text, parameters, escape)
