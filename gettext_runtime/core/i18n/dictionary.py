"""
Ingest of compiled translation dictionaries.

gettext-compile emits ``{languageKey: {msgid: entry}}`` where ``entry`` is a
string, a list of plural forms, or a ``{context: string | list}`` map. The
shape of every entry is checked once here and converted to the typed union,
so lookups never re-inspect raw JSON.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping

from gettext_runtime.core.exceptions import InvalidDictionaryError
from gettext_runtime.core.i18n.plurals import PluralSelector, default_selector
from gettext_runtime.core.i18n.types import (
    ContextEntry,
    PlainEntry,
    PluralEntry,
    TranslationEntry,
    TranslationTable,
)

logger = logging.getLogger(__name__)

_TYPED_ENTRIES = (PlainEntry, PluralEntry, ContextEntry)


def _to_forms(value, language_key: str, msgid: str) -> PluralEntry:
    for form in value:
        if not isinstance(form, str):
            raise InvalidDictionaryError(
                f"Plural form of {msgid!r} in {language_key} must be a string, got {type(form).__name__}",
                language_key=language_key,
                msgid=msgid,
            )
    return PluralEntry(tuple(value))


def parse_entry(value: Any, language_key: str, msgid: str) -> TranslationEntry:
    """Convert one raw JSON value to a TranslationEntry."""
    if isinstance(value, _TYPED_ENTRIES):
        return value
    if isinstance(value, str):
        return PlainEntry(value)
    if isinstance(value, (list, tuple)):
        return _to_forms(value, language_key, msgid)
    if isinstance(value, Mapping):
        contexts = {}
        for context, form in value.items():
            if not isinstance(context, str):
                raise InvalidDictionaryError(
                    f"Context key of {msgid!r} in {language_key} must be a string",
                    language_key=language_key,
                    msgid=msgid,
                )
            if isinstance(form, (PlainEntry, PluralEntry)):
                contexts[context] = form
            elif isinstance(form, str):
                contexts[context] = PlainEntry(form)
            elif isinstance(form, (list, tuple)):
                contexts[context] = _to_forms(form, language_key, msgid)
            else:
                raise InvalidDictionaryError(
                    f"Context {context!r} of {msgid!r} in {language_key} "
                    f"has unsupported type {type(form).__name__}",
                    language_key=language_key,
                    msgid=msgid,
                )
        return ContextEntry(MappingProxyType(contexts))
    raise InvalidDictionaryError(
        f"Entry {msgid!r} in {language_key} has unsupported type {type(value).__name__}",
        language_key=language_key,
        msgid=msgid,
    )


def load_table(raw_table: Mapping[str, Any], language_key: str) -> TranslationTable:
    if not isinstance(raw_table, Mapping):
        raise InvalidDictionaryError(
            f"Translations for {language_key} must be a mapping, got {type(raw_table).__name__}",
            language_key=language_key,
        )
    table = {}
    for msgid, value in raw_table.items():
        table[msgid] = parse_entry(value, language_key, msgid)
    return MappingProxyType(table)


def load_dictionary(raw: Mapping[str, Mapping[str, Any]]) -> Dict[str, TranslationTable]:
    """
    Validate a compiled dictionary and return read-only typed tables.

    Args:
        raw: Mapping language key -> {msgid: entry}, as produced by gettext-compile

    Returns:
        Dict language key -> read-only TranslationTable

    Raises:
        InvalidDictionaryError: on the first entry of unsupported shape
    """
    if not isinstance(raw, Mapping):
        raise InvalidDictionaryError(f"Dictionary must be a mapping, got {type(raw).__name__}")

    tables = {language_key: load_table(raw_table, language_key) for language_key, raw_table in raw.items()}
    logger.debug(
        "[I18N] dictionary loaded: %s",
        ", ".join(f"{key}={len(table)}" for key, table in tables.items()),
    )
    return tables


def _plural_entries(entry: TranslationEntry):
    if isinstance(entry, PluralEntry):
        yield "", entry
    elif isinstance(entry, ContextEntry):
        for context, form in entry.contexts.items():
            if isinstance(form, PluralEntry):
                yield context, form


def validate_plural_forms(
    tables: Mapping[str, TranslationTable],
    selector: PluralSelector = default_selector,
) -> List[str]:
    """
    Find plural lists that would fail at lookup time.

    Returns one message per plural list holding fewer forms than the
    language's rule expects, or holding an empty form. Single-form lists are
    allowed: they only serve count == 1.
    """
    problems: List[str] = []
    for language_key, table in tables.items():
        expected = selector.nplurals(language_key)
        for msgid, entry in table.items():
            for context, plural in _plural_entries(entry):
                where = f"{language_key} key {msgid!r}"
                if context:
                    where += f" (context {context!r})"
                if 1 < len(plural) < expected:
                    problems.append(f"{where}: {len(plural)} plural forms, expected {expected}")
                empty = [i for i, form in enumerate(plural.forms) if not form]
                if empty:
                    problems.append(f"{where}: empty plural form at index {empty}")
    return problems
