"""
Unit tests for plural-form selection.
"""
import math

import pytest

from gettext_runtime.core.i18n.plurals import (
    DEFAULT_RULE,
    PLURAL_RULES,
    PluralRule,
    PluralSelector,
    language_family,
    select_index,
)


class TestLanguageFamily:
    """Tests for language_family"""

    @pytest.mark.parametrize("key,family", [
        ("de_DE", "de"),
        ("de", "de"),
        ("ast_ES", "ast"),
        ("sr_RS_latin", "sr"),
    ])
    def test_family(self, key, family):
        assert language_family(key) == family


class TestSelectIndex:
    """Tests for select_index on the built-in table"""

    @pytest.mark.parametrize("count,index", [(0, 1), (1, 0), (2, 1), (21, 1)])
    def test_english(self, count, index):
        assert select_index("en_US", count) == index

    @pytest.mark.parametrize("count,index", [(0, 0), (1, 0), (2, 1), (100, 1)])
    def test_french(self, count, index):
        assert select_index("fr_FR", count) == index

    def test_brazilian_portuguese_exact_rule(self):
        """pt_BR has its own rule, pt falls under n != 1"""
        assert select_index("pt_BR", 0) == 0
        assert select_index("pt_PT", 0) == 1

    @pytest.mark.parametrize("count", [0, 1, 2, 5, 1000])
    def test_one_form_languages(self, count):
        assert select_index("ja_JP", count) == 0
        assert select_index("zh", count) == 0

    @pytest.mark.parametrize("count,index", [
        (1, 0), (21, 0), (11, 2),
        (2, 1), (4, 1), (22, 1), (12, 2),
        (5, 2), (0, 2), (111, 2),
    ])
    def test_russian(self, count, index):
        assert select_index("ru_RU", count) == index

    @pytest.mark.parametrize("count,index", [
        (0, 0), (1, 1), (2, 2), (3, 3), (10, 3), (103, 3),
        (11, 4), (99, 4), (100, 5), (102, 5),
    ])
    def test_arabic(self, count, index):
        """Arabic index 0 is zero, the count == 1 slot is index 1"""
        assert select_index("ar", count) == index

    @pytest.mark.parametrize("count,index", [(1, 0), (2, 1), (5, 2), (22, 1), (12, 2)])
    def test_polish(self, count, index):
        assert select_index("pl_PL", count) == index

    @pytest.mark.parametrize("count,index", [(1, 0), (3, 1), (5, 2)])
    def test_czech(self, count, index):
        assert select_index("cs", count) == index

    @pytest.mark.parametrize("count,index", [(1, 0), (101, 0), (2, 1), (3, 2), (4, 2), (5, 3)])
    def test_slovenian(self, count, index):
        assert select_index("sl_SI", count) == index

    @pytest.mark.parametrize("count,index", [(1, 0), (21, 0), (11, 1), (2, 1)])
    def test_icelandic(self, count, index):
        assert select_index("is", count) == index

    @pytest.mark.parametrize("count,index", [(1, 0), (2, 1), (5, 2), (8, 3), (11, 3)])
    def test_welsh(self, count, index):
        assert select_index("cy", count) == index

    def test_unknown_language_is_binary(self):
        assert select_index("xx_YY", 1) == 0
        assert select_index("xx_YY", 0) == 1
        assert select_index("xx_YY", 7) == 1

    def test_missing_count_is_singular(self):
        assert select_index("en", None) == 0
        assert select_index("en", math.nan) == 0

    def test_fractional_count(self):
        assert select_index("en", 1.5) == 1
        assert select_index("fr", 1.5) == 1

    @pytest.mark.parametrize("language,count,index", [
        ("ru", -8, 2),
        ("ru", -1, 2),
        ("ru", -21, 2),
        ("ar", -3, 5),
        ("is", -9, 1),
        ("sl", -99, 3),
        ("pl", -2, 2),
        ("lt", -2, 2),
    ])
    def test_negative_counts(self, language, count, index):
        """Remainders keep the sign of the count, as in the C-style Plural-Forms expressions"""
        assert select_index(language, count) == index

    def test_deterministic(self):
        assert [select_index("ru_RU", 3) for _ in range(5)] == [1] * 5

    def test_every_rule_stays_in_range(self):
        for code, rule in PLURAL_RULES.items():
            for n in range(-250, 250):
                assert 0 <= rule.select(n) < rule.nplurals, (code, n)


class TestPluralSelector:
    """Tests for the swappable rule registry"""

    def test_register_rule(self):
        selector = PluralSelector()
        selector.register_plural_rule("xx", PluralRule(3, lambda n: 2 if n > 10 else int(n != 1)))

        assert selector.select_index("xx_YY", 1) == 0
        assert selector.select_index("xx_YY", 5) == 1
        assert selector.select_index("xx_YY", 50) == 2
        assert selector.nplurals("xx_YY") == 3

    def test_register_does_not_touch_default_selector(self):
        selector = PluralSelector()
        selector.register_plural_rule("en", PluralRule(1, lambda n: 0))

        assert selector.select_index("en", 5) == 0
        assert select_index("en", 5) == 1

    def test_exact_key_before_family(self):
        selector = PluralSelector(rules={
            "de": PluralRule(2, lambda n: 1),
            "de_CH": PluralRule(2, lambda n: 0),
        })
        assert selector.select_index("de_CH", 5) == 0
        assert selector.select_index("de_AT", 5) == 1

    def test_empty_registry_uses_default(self):
        selector = PluralSelector(rules={})
        assert selector.rule_for("ru") is DEFAULT_RULE
        assert selector.nplurals("ru") == 2

    def test_nplurals(self):
        selector = PluralSelector()
        assert selector.nplurals("ar_EG") == 6
        assert selector.nplurals("ja") == 1
        assert selector.nplurals("en_GB") == 2
