"""
Runtime for easygettext-compiled translations.

Resolves msgids against a precompiled {language: {msgid: entry}} dictionary,
with locale fallback, contexts and per-language plural rules.
"""

from gettext_runtime.core.config import I18nConfig, get_i18n_config
from gettext_runtime.core.exceptions import I18nError, InvalidDictionaryError
from gettext_runtime.core.i18n import (
    Interpolator,
    LanguageSettings,
    LoggingDiagnostics,
    LookupRequest,
    PluralRule,
    PluralSelector,
    load_dictionary,
)
from gettext_runtime.services.language_service import (
    create_language_settings,
    mute_language,
    switch_language,
    unmute_language,
)
from gettext_runtime.services.translation import (
    MalformedPluralDataError,
    TranslationDataError,
    TranslationResolver,
    Translator,
    resolve,
)

__all__ = [
    "I18nConfig",
    "get_i18n_config",
    "I18nError",
    "InvalidDictionaryError",
    "Interpolator",
    "LanguageSettings",
    "LoggingDiagnostics",
    "LookupRequest",
    "PluralRule",
    "PluralSelector",
    "load_dictionary",
    "create_language_settings",
    "mute_language",
    "switch_language",
    "unmute_language",
    "MalformedPluralDataError",
    "TranslationDataError",
    "TranslationResolver",
    "Translator",
    "resolve",
]
