"""
Runtime i18n primitives: plural rules, entry types, dictionary ingest,
interpolation and diagnostics.
"""

from .diagnostics import CollectingDiagnostics, Diagnostics, LoggingDiagnostics
from .dictionary import load_dictionary, validate_plural_forms
from .interpolate import Interpolator, interpolate
from .plurals import PluralRule, PluralSelector, language_family, select_index
from .types import (
    ContextEntry,
    LanguageSettings,
    LookupRequest,
    PlainEntry,
    PluralEntry,
    TranslationEntry,
    TranslationTable,
)

__all__ = [
    "CollectingDiagnostics",
    "Diagnostics",
    "LoggingDiagnostics",
    "load_dictionary",
    "validate_plural_forms",
    "Interpolator",
    "interpolate",
    "PluralRule",
    "PluralSelector",
    "language_family",
    "select_index",
    "ContextEntry",
    "LanguageSettings",
    "LookupRequest",
    "PlainEntry",
    "PluralEntry",
    "TranslationEntry",
    "TranslationTable",
]
