"""
Translation Service Package
"""

from gettext_runtime.services.translation.service import (
    resolve,
    find_table,
    TranslationResolver,
    Translator,
)
from gettext_runtime.services.translation.exceptions import (
    TranslationServiceError,
    TranslationDataError,
    MalformedPluralDataError,
)

__all__ = [
    "resolve",
    "find_table",
    "TranslationResolver",
    "Translator",
    "TranslationServiceError",
    "TranslationDataError",
    "MalformedPluralDataError",
]
