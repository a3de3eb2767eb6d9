#!/usr/bin/env python3
"""
Compiled translation dictionary validation.

Validates a gettext-compile JSON file:
1. Entry shapes (string, plural list, context map)
2. Plural lists short of the language's plural forms, or with empty forms
3. Keys with surrounding whitespace (lookups trim the msgid, so they never match)
4. Placeholder mismatch between msgid and translation (e.g. %{count})
5. With --reference LANG: keys present in LANG but missing elsewhere

Usage:
    python validate_translations.py translations.json
    python validate_translations.py translations.json --reference en

Exit code 1 if validation fails (for CI).
"""

import argparse
import json
import logging
import re
import sys
from typing import Iterator, List, Mapping, Optional, Set, Tuple

from gettext_runtime.core.exceptions import InvalidDictionaryError
from gettext_runtime.core.i18n.dictionary import load_dictionary, validate_plural_forms
from gettext_runtime.core.i18n.types import ContextEntry, PlainEntry, TranslationEntry
from gettext_runtime.core.logging_config import setup_logging

logger = logging.getLogger("validate_translations")

PLACEHOLDER_RE = re.compile(r"%\{\s*([^}]+?)\s*\}")


def extract_placeholders(text: str) -> Set[str]:
    """Extract placeholder expressions from a message (e.g. %{ count } -> count)."""
    if not isinstance(text, str):
        return set()
    return set(PLACEHOLDER_RE.findall(text))


def _texts(entry: TranslationEntry) -> Iterator[Tuple[str, str]]:
    """Yield (context, text) for every string an entry holds."""
    forms = entry.contexts.items() if isinstance(entry, ContextEntry) else [("", entry)]
    for context, form in forms:
        if isinstance(form, PlainEntry):
            yield context, form.text
        else:
            for text in form.forms:
                yield context, text


def _check_coverage(tables: Mapping, reference: str, errors: List[str], warnings: List[str]) -> None:
    if reference not in tables:
        errors.append(f"Reference language '{reference}' not found in dictionary")
        return

    reference_keys = set(tables[reference])
    for language_key, table in tables.items():
        if language_key == reference:
            continue
        keys = set(table)

        missing_keys = reference_keys - keys
        if missing_keys:
            errors.append(
                f"Language '{language_key}' missing {len(missing_keys)} keys: {sorted(missing_keys)[:10]}"
            )

        extra_keys = keys - reference_keys
        if extra_keys:
            warnings.append(
                f"Language '{language_key}' has {len(extra_keys)} extra keys not in "
                f"'{reference}': {sorted(extra_keys)[:10]}"
            )


def validate_dictionary(raw: Mapping, reference: Optional[str] = None) -> Tuple[bool, List[str], List[str]]:
    """
    Validate a compiled dictionary.

    Args:
        raw: Parsed gettext-compile JSON
        reference: Language whose keys every other language must cover

    Returns:
        Tuple of (success, errors, warnings)
    """
    errors: List[str] = []
    warnings: List[str] = []

    try:
        tables = load_dictionary(raw)
    except InvalidDictionaryError as e:
        errors.append(str(e))
        return False, errors, warnings

    if not tables:
        errors.append("No languages found in dictionary")
        return False, errors, warnings

    errors.extend(validate_plural_forms(tables))

    if reference is not None:
        _check_coverage(tables, reference, errors, warnings)

    for language_key, table in tables.items():
        for msgid, entry in table.items():
            if msgid != msgid.strip():
                errors.append(f"Key {msgid!r} in '{language_key}' has surrounding whitespace")

            # Translations may omit placeholders, never add unknown ones
            expected = extract_placeholders(msgid)
            for context, text in _texts(entry):
                found = extract_placeholders(text)
                if found - expected:
                    where = f" (context {context!r})" if context else ""
                    warnings.append(
                        f"Placeholder mismatch in '{language_key}' for key {msgid!r}{where}: "
                        f"unknown {sorted(found - expected)}"
                    )

    return not errors, errors, warnings


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Validate a compiled translation dictionary")
    parser.add_argument("path", help="JSON file produced by gettext-compile")
    parser.add_argument("--reference", metavar="LANG",
                        help="Language whose keys every other language must cover")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        with open(args.path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Cannot read %s: %s", args.path, e)
        return 1

    success, errors, warnings = validate_dictionary(raw, reference=args.reference)

    for error in errors[:20]:
        logger.error("  - %s", error)
    if len(errors) > 20:
        logger.error("  ... and %d more errors", len(errors) - 20)
    for warning in warnings[:10]:
        logger.warning("  - %s", warning)

    if not success:
        logger.error("VALIDATION FAILED: %d error(s), %d warning(s)", len(errors), len(warnings))
        return 1

    logger.info("VALIDATION PASSED: %d language(s), %d warning(s)", len(raw), len(warnings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
