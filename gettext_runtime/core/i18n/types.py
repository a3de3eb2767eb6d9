"""
I18N type definitions.

TranslationEntry is a tagged union of the three shapes gettext-compile emits:
a plain string, a list of plural forms, or a context map.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Set, Tuple, Union


@dataclass(frozen=True)
class PlainEntry:
    """Single translated string, no plurals, no context."""
    text: str


@dataclass(frozen=True)
class PluralEntry:
    """One translated string per plural index."""
    forms: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.forms)


@dataclass(frozen=True)
class ContextEntry:
    """Context key -> plain or plural form. The "" key means no context."""
    contexts: Mapping[str, Union[PlainEntry, PluralEntry]]

    def get(self, context: str) -> Optional[Union[PlainEntry, PluralEntry]]:
        return self.contexts.get(context)

    @property
    def has_void_context(self) -> bool:
        return "" in self.contexts


TranslationEntry = Union[PlainEntry, PluralEntry, ContextEntry]
TranslationTable = Mapping[str, TranslationEntry]


@dataclass
class LanguageSettings:
    """
    Per-UI state consulted on every lookup.

    ``current`` and ``muted_language_keys`` may change between lookups;
    ``dictionary`` is replaced wholesale, never edited in place. Raw
    gettext-compile JSON is accepted: every assignment goes through
    load_dictionary(), which passes already typed entries through.
    """
    current: str
    dictionary: Mapping[str, TranslationTable]
    muted_language_keys: Set[str] = field(default_factory=set)
    silent: bool = False
    available: Dict[str, str] = field(default_factory=dict)

    def __setattr__(self, name, value):
        if name == "dictionary":
            from gettext_runtime.core.i18n.dictionary import load_dictionary
            value = load_dictionary(value)
        super().__setattr__(name, value)

    def is_silent_for(self, language_key: str) -> bool:
        return self.silent or language_key in self.muted_language_keys


@dataclass(frozen=True)
class LookupRequest:
    msgid: Optional[str]
    count: Any = 1
    context: Optional[str] = None
    default_plural: Optional[str] = None
    language_key: Optional[str] = None
    parameters: Optional[Mapping[str, Any]] = None
    disable_escaping: bool = False
