# -*- coding: utf-8 -*-
"""
Language settings management.

Builds LanguageSettings from a compiled dictionary plus I18nConfig, and
applies the changes a settings controller makes between lookups: switching
the current language, muting warnings for a language.
"""
import logging
from typing import Any, Dict, Mapping, Optional

from gettext_runtime.core.config import I18nConfig, get_i18n_config
from gettext_runtime.core.i18n.plurals import language_family
from gettext_runtime.core.i18n.types import LanguageSettings

logger = logging.getLogger(__name__)


def create_language_settings(
    raw_dictionary: Mapping[str, Mapping[str, Any]],
    config: Optional[I18nConfig] = None,
    available: Optional[Dict[str, str]] = None,
) -> LanguageSettings:
    """
    Ingest a compiled dictionary and build the settings for it.

    Args:
        raw_dictionary: gettext-compile output, {languageKey: {msgid: entry}}
        config: Defaults to the environment config
        available: Optional language key -> display name, for switch_language checks

    Raises:
        InvalidDictionaryError: if an entry has an unsupported shape
    """
    config = config or get_i18n_config()
    settings = LanguageSettings(
        current=config.default_language,
        dictionary=raw_dictionary,
        muted_language_keys=set(config.muted_languages),
        silent=config.silent,
        available=dict(available or {}),
    )
    logger.debug(
        "[I18N] settings created: current=%s languages=%s",
        settings.current, sorted(settings.dictionary),
    )
    return settings


def resolve_table_key(settings: LanguageSettings, language_key: str) -> Optional[str]:
    """Return the dictionary key that serves language_key: exact, family, or None."""
    if language_key in settings.dictionary:
        return language_key
    family = language_family(language_key)
    if family in settings.dictionary:
        return family
    return None


def switch_language(settings: LanguageSettings, language_key: str) -> str:
    """
    Make language_key the current language.

    Unknown languages are still accepted (lookups fall back to the msgid),
    but a warning is logged when an ``available`` list is configured.
    """
    if settings.available and language_key not in settings.available:
        logger.warning("[I18N] switching to language not in available list: %s", language_key)
    elif resolve_table_key(settings, language_key) is None:
        logger.info("[I18N] no translations loaded for %s, msgids will be shown", language_key)

    previous = settings.current
    settings.current = language_key
    logger.debug("[I18N] language switched: %s -> %s", previous, language_key)
    return previous


def mute_language(settings: LanguageSettings, language_key: str) -> None:
    """Suppress missing-translation warnings for language_key."""
    settings.muted_language_keys.add(language_key)


def unmute_language(settings: LanguageSettings, language_key: str) -> None:
    settings.muted_language_keys.discard(language_key)
