"""
Plural-form selection.

Maps (language key, count) to a zero-based index into a language's list of
plural forms. The rules follow the gettext ``Plural-Forms`` headers, i.e. the
CLDR categories of each language collapsed to an ordered index.

Lookup order: exact key (``pt_BR``), then family code (``pt``), then the
binary default.
"""

import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Mapping, Optional


@dataclass(frozen=True)
class PluralRule:
    """Number of plural forms plus the function picking one of them."""
    nplurals: int
    select: Callable[[float], int]


def _mod(n, m):
    # Remainder keeps the sign of n, so negative counts pick the same form as
    # the gettext C-style expressions.
    return math.fmod(n, m)


def _one_form(n):
    return 0


def _greater_than_one(n):
    return 1 if n > 1 else 0


def _not_one(n):
    return 1 if n != 1 else 0


def _ar_plural(n):
    # zero, one, two, few, many, other
    if n == 0:
        return 0
    if n == 1:
        return 1
    if n == 2:
        return 2
    if 3 <= _mod(n, 100) <= 10:
        return 3
    if 11 <= _mod(n, 100) <= 99:
        return 4
    return 5


def _cs_plural(n):
    if n == 1:
        return 0
    if 2 <= n <= 4:
        return 1
    return 2


def _csb_plural(n):
    if n == 1:
        return 0
    if 2 <= _mod(n, 10) <= 4 and (_mod(n, 100) < 10 or _mod(n, 100) >= 20):
        return 1
    return 2


def _cy_plural(n):
    if n == 1:
        return 0
    if n == 2:
        return 1
    if n != 8 and n != 11:
        return 2
    return 3


def _ga_plural(n):
    if n == 1:
        return 0
    if n == 2:
        return 1
    if n < 7:
        return 2
    if n < 11:
        return 3
    return 4


def _gd_plural(n):
    if n in (1, 11):
        return 0
    if n in (2, 12):
        return 1
    if 2 < n < 20:
        return 2
    return 3


def _is_plural(n):
    return 1 if _mod(n, 10) != 1 or _mod(n, 100) == 11 else 0


def _jv_plural(n):
    return 1 if n != 0 else 0


def _kw_plural(n):
    if n == 1:
        return 0
    if n == 2:
        return 1
    if n == 3:
        return 2
    return 3


def _lt_plural(n):
    if _mod(n, 10) == 1 and _mod(n, 100) != 11:
        return 0
    if _mod(n, 10) >= 2 and (_mod(n, 100) < 10 or _mod(n, 100) >= 20):
        return 1
    return 2


def _lv_plural(n):
    if _mod(n, 10) == 1 and _mod(n, 100) != 11:
        return 0
    if n != 0:
        return 1
    return 2


def _mk_plural(n):
    return 0 if n == 1 or _mod(n, 10) == 1 else 1


def _mnk_plural(n):
    if n == 0:
        return 0
    if n == 1:
        return 1
    return 2


def _mt_plural(n):
    if n == 1:
        return 0
    if n == 0 or 1 < _mod(n, 100) < 11:
        return 1
    if 10 < _mod(n, 100) < 20:
        return 2
    return 3


def _pl_plural(n):
    if n == 1:
        return 0
    if 2 <= _mod(n, 10) <= 4 and (_mod(n, 100) < 10 or _mod(n, 100) >= 20):
        return 1
    return 2


def _ro_plural(n):
    if n == 1:
        return 0
    if n == 0 or 0 < _mod(n, 100) < 20:
        return 1
    return 2


# ru, uk, be, bs, hr, sr, me
def _east_slavic_plural(n):
    if _mod(n, 10) == 1 and _mod(n, 100) != 11:
        return 0
    if 2 <= _mod(n, 10) <= 4 and (_mod(n, 100) < 10 or _mod(n, 100) >= 20):
        return 1
    return 2


def _sl_plural(n):
    if _mod(n, 100) == 1:
        return 0
    if _mod(n, 100) == 2:
        return 1
    if _mod(n, 100) in (3, 4):
        return 2
    return 3


ONE_FORM_LANGUAGES = (
    "ay", "bo", "cgg", "dz", "fa", "id", "ja", "jbo", "ka", "kk", "km", "ko",
    "ky", "lo", "ms", "my", "sah", "su", "th", "tt", "ug", "vi", "wo", "zh",
)

GREATER_THAN_ONE_LANGUAGES = (
    "ach", "ak", "am", "arn", "br", "fil", "fr", "gun", "ln", "mfe", "mg",
    "mi", "oc", "pt_BR", "tg", "ti", "tr", "uz", "wa",
)

NOT_ONE_LANGUAGES = (
    "af", "an", "ast", "az", "bg", "bn", "ca", "da", "de", "dev", "el", "en",
    "eo", "es", "et", "eu", "fi", "fo", "fur", "fy", "gl", "gu", "ha", "he",
    "hi", "hu", "hy", "ia", "it", "kn", "ku", "lb", "mai", "ml", "mn", "mr",
    "nah", "nap", "nb", "ne", "nl", "nn", "no", "nso", "or", "pa", "pap",
    "pms", "ps", "pt", "rm", "rw", "sat", "sco", "sd", "se", "si", "so",
    "son", "sq", "sv", "sw", "ta", "te", "tk", "ur", "yo",
)


def _group(codes: Iterable[str], rule: PluralRule) -> Dict[str, PluralRule]:
    return {code: rule for code in codes}


DEFAULT_RULE = PluralRule(2, _not_one)

PLURAL_RULES: Dict[str, PluralRule] = {
    **_group(ONE_FORM_LANGUAGES, PluralRule(1, _one_form)),
    **_group(GREATER_THAN_ONE_LANGUAGES, PluralRule(2, _greater_than_one)),
    **_group(NOT_ONE_LANGUAGES, DEFAULT_RULE),
    **_group(("ru", "uk", "be", "bs", "hr", "sr", "me"), PluralRule(3, _east_slavic_plural)),
    **_group(("cs", "sk"), PluralRule(3, _cs_plural)),
    "ar": PluralRule(6, _ar_plural),
    "csb": PluralRule(3, _csb_plural),
    "cy": PluralRule(4, _cy_plural),
    "ga": PluralRule(5, _ga_plural),
    "gd": PluralRule(4, _gd_plural),
    "is": PluralRule(2, _is_plural),
    "jv": PluralRule(2, _jv_plural),
    "kw": PluralRule(4, _kw_plural),
    "lt": PluralRule(3, _lt_plural),
    "lv": PluralRule(3, _lv_plural),
    "mk": PluralRule(2, _mk_plural),
    "mnk": PluralRule(3, _mnk_plural),
    "mt": PluralRule(4, _mt_plural),
    "pl": PluralRule(3, _pl_plural),
    "ro": PluralRule(3, _ro_plural),
    "sl": PluralRule(4, _sl_plural),
}


def language_family(language_key: str) -> str:
    """``de_DE`` -> ``de``, ``ast_ES`` -> ``ast``; keys without ``_`` are returned as is."""
    return language_key.split("_")[0]


def _normalize_count(count) -> float:
    if count is None:
        return 1
    if isinstance(count, float) and math.isnan(count):
        return 1
    return count


class PluralSelector:
    """
    Registry of plural rules keyed by language code.

    New languages are added with register_plural_rule() without touching the
    resolver. Unknown languages fall back to the binary singular/plural rule.
    """

    def __init__(self, rules: Optional[Mapping[str, PluralRule]] = None,
                 default: PluralRule = DEFAULT_RULE):
        self._rules: Dict[str, PluralRule] = dict(PLURAL_RULES if rules is None else rules)
        self._default = default

    def register_plural_rule(self, language_code: str, rule: PluralRule) -> None:
        self._rules[language_code] = rule

    def rule_for(self, language_key: str) -> PluralRule:
        rule = self._rules.get(language_key)
        if rule is None:
            rule = self._rules.get(language_family(language_key), self._default)
        return rule

    def select_index(self, language_key: str, count=1) -> int:
        """
        Pick the plural-form index for ``count`` in ``language_key``.

        A missing or NaN count is treated as 1. Always returns an int >= 0.
        """
        return self.rule_for(language_key).select(_normalize_count(count))

    def nplurals(self, language_key: str) -> int:
        return self.rule_for(language_key).nplurals


default_selector = PluralSelector()


def select_index(language_key: str, count=1) -> int:
    return default_selector.select_index(language_key, count)
