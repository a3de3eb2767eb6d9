"""
Core domain exceptions for dictionary handling.

Used to distinguish malformed compiled data from ordinary missing translations.
"""


class I18nError(Exception):
    """Base exception for everything raised by gettext_runtime."""
    pass


class InvalidDictionaryError(I18nError):
    """Raised when a compiled dictionary has an entry of unsupported shape.

    Detected once, when the dictionary is ingested, not on every lookup.
    """

    def __init__(self, message: str, language_key: str = None, msgid: str = None):
        self.language_key = language_key
        self.msgid = msgid
        super().__init__(message)
