"""
Translation resolution.

Picks the right translated string for a msgid out of the compiled dictionary
(locale fallback, context, plural form) and interpolates parameters into it.

Missing languages and keys never raise: the untranslated msgid (or the
default plural) is returned and a warning goes to the diagnostics sink.
Malformed plural data always raises.
"""

import logging
from typing import Any, Mapping, Optional

from gettext_runtime.core.i18n.diagnostics import Diagnostics, LoggingDiagnostics
from gettext_runtime.core.i18n.interpolate import Interpolator
from gettext_runtime.core.i18n.plurals import PluralSelector, default_selector, language_family
from gettext_runtime.core.i18n.types import (
    ContextEntry,
    LanguageSettings,
    LookupRequest,
    PlainEntry,
    PluralEntry,
    TranslationTable,
)
from gettext_runtime.services.translation.exceptions import (
    MalformedPluralDataError,
    TranslationDataError,
)

logger = logging.getLogger(__name__)


def find_table(settings: LanguageSettings, language_key: str) -> Optional[TranslationTable]:
    """
    gettext-compile abbreviates ``ll_CC`` main dialects to ``ll`` (``de`` for
    ``de_DE``), so try the full key first, then the family code, which may be
    three letters long.
    """
    table = settings.dictionary.get(language_key)
    if table is None:
        table = settings.dictionary.get(language_family(language_key))
    return table


class TranslationResolver:
    """Resolve LookupRequests against LanguageSettings."""

    def __init__(
        self,
        selector: PluralSelector = default_selector,
        interpolator: Optional[Interpolator] = None,
        diagnostics: Optional[Diagnostics] = None,
    ):
        self.selector = selector
        self.diagnostics = diagnostics or LoggingDiagnostics()
        self.interpolator = interpolator or Interpolator(self.diagnostics)

    def resolve(self, settings: LanguageSettings, request: LookupRequest) -> str:
        language_key = request.language_key
        if language_key is None:
            language_key = settings.current

        msgid = request.msgid
        if not msgid:
            return ""

        count = request.count
        context = request.context
        silent = settings.is_silent_for(language_key)

        def interp(text: str) -> str:
            return self.interpolator.apply(
                text, request.parameters, not request.disable_escaping,
                silent=silent, language_key=language_key,
            )

        if request.default_plural and self.selector.select_index(language_key, count) > 0:
            untranslated = request.default_plural
        else:
            untranslated = msgid

        table = find_table(settings, language_key)
        if table is None:
            if not silent:
                self.diagnostics.warn(
                    f"No translations found for {language_key}",
                    outcome="missing_language", language_key=language_key,
                )
            return interp(untranslated)

        # Template formatting may leave spaces around the msgid
        msgid = msgid.strip()

        entry = table.get(msgid)
        if entry is not None and context:
            entry = entry.get(context) if isinstance(entry, ContextEntry) else None

        if entry is None or (isinstance(entry, PlainEntry) and not entry.text):
            if not silent:
                message = f"Untranslated {language_key} key found: {msgid}"
                if context:
                    message += f" (with context: {context})"
                self.diagnostics.warn(
                    message, outcome="untranslated", language_key=language_key,
                    reason=f"context {context!r}" if context else None,
                )
            return interp(untranslated)

        # The void key is easygettext's void context; it lets a msgid exist
        # both with and without a context.
        if isinstance(entry, ContextEntry):
            if not entry.has_void_context:
                raise TranslationDataError(
                    f"Key {msgid!r} in {language_key} only has contexts "
                    f"{sorted(entry.contexts)} and no context was requested"
                )
            entry = entry.get("")

        if isinstance(entry, PlainEntry):
            return interp(entry.text)

        index = self.selector.select_index(language_key, count)

        # Index 0 is not the count == 1 slot in every language (Arabic),
        # but a single form is unambiguous.
        if len(entry) == 1 and count == 1:
            index = 0

        if index >= len(entry) or not entry.forms[index]:
            logger.error(
                "[I18N] malformed plural data: msgid=%r index=%s language=%s count=%s",
                msgid, index, language_key, count,
            )
            raise MalformedPluralDataError(msgid, index, language_key, count)
        return interp(entry.forms[index])


default_resolver = TranslationResolver()


def resolve(settings: LanguageSettings, request: LookupRequest) -> str:
    return default_resolver.resolve(settings, request)


class Translator:
    """
    gettext-style API bound to one LanguageSettings.

    Every method is a call pattern over TranslationResolver.resolve().
    """

    def __init__(self, settings: LanguageSettings, resolver: Optional[TranslationResolver] = None):
        self.settings = settings
        self.resolver = resolver or default_resolver

    def get_translation(
        self,
        msgid: str,
        count: Any = 1,
        context: Optional[str] = None,
        default_plural: Optional[str] = None,
        language_key: Optional[str] = None,
        parameters: Optional[Mapping[str, Any]] = None,
        disable_escaping: bool = False,
    ) -> str:
        """
        Get the translated string for msgid.

        Args:
            msgid: The translation key
            count: The number to switch between singular and plural
            context: The translation key context
            default_plural: Untranslated plural, used when no translation exists
            language_key: Language to use instead of settings.current (e.g. 'fr_FR')
            parameters: Values for %{ name } placeholders
            disable_escaping: Insert parameter values without HTML escaping

        Returns:
            The translated string
        """
        request = LookupRequest(
            msgid=msgid,
            count=count,
            context=context,
            default_plural=default_plural,
            language_key=language_key,
            parameters=parameters,
            disable_escaping=disable_escaping,
        )
        return self.resolver.resolve(self.settings, request)

    def gettext(self, msgid: str, parameters: Optional[Mapping[str, Any]] = None,
                disable_escaping: bool = False) -> str:
        return self.get_translation(msgid, parameters=parameters, disable_escaping=disable_escaping)

    def pgettext(self, context: str, msgid: str, parameters: Optional[Mapping[str, Any]] = None,
                 disable_escaping: bool = False) -> str:
        return self.get_translation(
            msgid, 1, context, parameters=parameters, disable_escaping=disable_escaping
        )

    def ngettext(self, msgid: str, plural: str, count: Any,
                 parameters: Optional[Mapping[str, Any]] = None,
                 disable_escaping: bool = False) -> str:
        return self.get_translation(
            msgid, count, None, plural, parameters=parameters, disable_escaping=disable_escaping
        )

    def npgettext(self, context: str, msgid: str, plural: str, count: Any,
                  parameters: Optional[Mapping[str, Any]] = None,
                  disable_escaping: bool = False) -> str:
        return self.get_translation(
            msgid, count, context, plural, parameters=parameters, disable_escaping=disable_escaping
        )
