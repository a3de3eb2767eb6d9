"""
Translation service domain exceptions.

Missing languages and missing keys are not exceptions: they fall back to the
untranslated text. Only defects in the compiled dictionary raise.
"""

from gettext_runtime.core.exceptions import I18nError


class TranslationServiceError(I18nError):
    """Base exception for translation service errors"""
    pass


class TranslationDataError(TranslationServiceError):
    """Raised when a dictionary entry cannot be turned into a string at lookup time"""
    pass


class MalformedPluralDataError(TranslationDataError):
    """Raised when a plural-form list has no usable form at the selected index.

    Never silenced: the compiled dictionary is broken for this
    key/language/count combination.
    """

    def __init__(self, msgid: str, index: int, language_key: str, count):
        self.msgid = msgid
        self.index = index
        self.language_key = language_key
        self.count = count
        super().__init__(
            f"No plural form for msgid={msgid!r} index={index} "
            f"language={language_key} count={count}"
        )
