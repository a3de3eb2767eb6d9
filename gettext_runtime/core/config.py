"""
Runtime configuration for translation lookups.

Immutable settings read once from the environment:
- GETTEXT_DEFAULT_LANGUAGE (default: en_US)
- GETTEXT_SILENT (default: false) - suppress all missing-translation warnings
- GETTEXT_MUTED_LANGUAGES (default: empty) - comma separated language keys
  whose missing-translation warnings are suppressed

Invalid values fall back to defaults; nothing here raises at import time.
"""

import os
import logging
from dataclasses import dataclass
from typing import FrozenSet, Optional

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en_US"


@dataclass(frozen=True)
class I18nConfig:
    """Configuration for language settings."""
    default_language: str = DEFAULT_LANGUAGE
    silent: bool = False
    muted_languages: FrozenSet[str] = frozenset()

    def __post_init__(self):
        if not isinstance(self.default_language, str) or not self.default_language:
            raise ValueError(f"default_language must be a non-empty string, got {self.default_language!r}")
        if not isinstance(self.silent, bool):
            raise ValueError(f"silent must be boolean, got {type(self.silent)}")
        if not isinstance(self.muted_languages, frozenset):
            object.__setattr__(self, "muted_languages", frozenset(self.muted_languages))


# Global singleton instance (read-only after initialization)
_i18n_config: Optional[I18nConfig] = None


def _parse_bool_env(key: str, default: bool = False) -> bool:
    """
    Parse boolean from environment variable.

    Args:
        key: Environment variable name
        default: Default value if not set or unrecognized

    Returns:
        Boolean value
    """
    value = os.getenv(key, "").lower().strip()
    if value in ("true", "1", "yes", "on"):
        return True
    elif value in ("false", "0", "no", "off"):
        return False
    else:
        return default


def _parse_list_env(key: str) -> FrozenSet[str]:
    raw = os.getenv(key, "")
    return frozenset(item.strip() for item in raw.split(",") if item.strip())


def get_i18n_config() -> I18nConfig:
    """
    Get global i18n configuration (singleton).

    Returns:
        I18nConfig instance
    """
    global _i18n_config

    if _i18n_config is None:
        _i18n_config = I18nConfig(
            default_language=os.getenv("GETTEXT_DEFAULT_LANGUAGE", "").strip() or DEFAULT_LANGUAGE,
            silent=_parse_bool_env("GETTEXT_SILENT", default=False),
            muted_languages=_parse_list_env("GETTEXT_MUTED_LANGUAGES"),
        )
        logger.info(
            "[I18N_CONFIG] Initialized: default_language=%s, silent=%s, muted=%s",
            _i18n_config.default_language,
            _i18n_config.silent,
            sorted(_i18n_config.muted_languages),
        )

    return _i18n_config


def reset_i18n_config() -> None:
    """Drop the cached config so the next call re-reads the environment."""
    global _i18n_config
    _i18n_config = None
