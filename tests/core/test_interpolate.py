"""
Unit tests for placeholder interpolation.
"""
from unittest.mock import MagicMock

import pytest

from gettext_runtime.core.i18n.interpolate import Interpolator


@pytest.fixture
def sink():
    return MagicMock()


@pytest.fixture
def interpolator(sink):
    return Interpolator(sink)


class TestApply:
    """Tests for Interpolator.apply"""

    def test_no_parameters_returns_text(self, interpolator):
        text = "Hello %{ name } {{ raw }}"
        assert interpolator.apply(text) is text

    def test_named_placeholder(self, interpolator):
        assert interpolator.apply("Hello %{name}!", {"name": "Ann"}) == "Hello Ann!"

    def test_whitespace_inside_braces(self, interpolator):
        assert interpolator.apply("Hello %{  name  }!", {"name": "Ann"}) == "Hello Ann!"

    def test_multiple_placeholders(self, interpolator):
        result = interpolator.apply("%{ a } + %{ b } = %{ c }", {"a": 1, "b": 2, "c": 3})
        assert result == "1 + 2 = 3"

    def test_escaping(self, interpolator):
        result = interpolator.apply("%{ v }", {"v": "<a href=\"x\">'&'</a>"})
        assert result == "&lt;a href=&quot;x&quot;&gt;&#x27;&amp;&#x27;&lt;/a&gt;"

    def test_escaping_disabled(self, interpolator):
        assert interpolator.apply("%{ v }", {"v": "<b>"}, escape=False) == "<b>"

    def test_text_itself_is_not_escaped(self, interpolator):
        assert interpolator.apply("<b>%{ v }</b>", {"v": "x"}) == "<b>x</b>"

    def test_dotted_path(self, interpolator):
        assert interpolator.apply("%{ user.name }", {"user": {"name": "Ann"}}) == "Ann"

    def test_bracket_path(self, interpolator):
        assert interpolator.apply("%{ items[1] }", {"items": ["a", "b"]}) == "b"

    def test_attribute_path(self, interpolator):
        class User:
            name = "Ann"

        assert interpolator.apply("%{ user.name }", {"user": User()}) == "Ann"

    def test_unknown_expression(self, interpolator, sink):
        assert interpolator.apply("Hi %{ missing }", {}) == "Hi missing"
        sink.warn.assert_called_once_with(
            "Cannot evaluate expression: missing",
            outcome="unresolved_placeholder",
            language_key=None,
        )

    def test_none_value_is_unresolved(self, interpolator, sink):
        assert interpolator.apply("%{ v }", {"v": None}) == "v"
        sink.warn.assert_called_once()

    def test_mustache_warning(self, interpolator, sink):
        assert interpolator.apply("Hi {{ name }}", {"name": "Ann"}) == "Hi {{ name }}"
        sink.warn.assert_called_once()
        assert "Mustache syntax" in sink.warn.call_args[0][0]
        assert sink.warn.call_args.kwargs["outcome"] == "mustache_syntax"

    def test_silent_interpolator(self, sink):
        interpolator = Interpolator(sink, silent=True)
        assert interpolator.apply("%{ missing } {{ x }}", {}) == "missing {{ x }}"
        sink.warn.assert_not_called()

    def test_silent_per_call(self, interpolator, sink):
        """silent=True mutes one call without changing the interpolator"""
        assert interpolator.apply("%{ missing }", {}, silent=True) == "missing"
        sink.warn.assert_not_called()

        interpolator.apply("%{ missing }", {})
        sink.warn.assert_called_once()

    def test_language_key_is_reported(self, interpolator, sink):
        interpolator.apply("%{ missing }", {}, language_key="fr_FR")
        assert sink.warn.call_args.kwargs["language_key"] == "fr_FR"

    @pytest.mark.parametrize("expression", [
        "user.__class__",
        "user._secret",
        "user.__class__.__init__.__globals__",
    ])
    def test_underscore_attributes_are_unresolved(self, interpolator, sink, expression):
        class User:
            _secret = "hidden"

        text = "%{ " + expression + " }"
        assert interpolator.apply(text, {"user": User()}) == expression
        sink.warn.assert_called_once()
        assert sink.warn.call_args[0][0] == f"Cannot evaluate expression: {expression}"

    def test_underscore_mapping_keys_still_resolve(self, interpolator, sink):
        assert interpolator.apply("%{ _id }", {"_id": 7}) == "7"
        sink.warn.assert_not_called()

    def test_percent_without_braces_untouched(self, interpolator):
        assert interpolator.apply("100% of %{ n }", {"n": 3}) == "100% of 3"
