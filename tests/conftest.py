"""
Pytest configuration and shared fixtures for translation tests.
"""
import pytest

from gettext_runtime.core.i18n.diagnostics import CollectingDiagnostics
from gettext_runtime.core.i18n.dictionary import load_dictionary
from gettext_runtime.core.i18n.interpolate import Interpolator
from gettext_runtime.core.i18n.types import LanguageSettings
from gettext_runtime.services.translation.service import TranslationResolver, Translator


@pytest.fixture
def raw_dictionary():
    """Compiled dictionary in gettext-compile JSON shape"""
    return {
        "fr_FR": {
            "Hello": ["Bonjour", "Bonjours"],
            "Goodbye": "Au revoir",
            "Bank": {"": "Banque", "river": "Rive"},
            "Book": {"": ["Livre", "Livres"], "shelf": ["Étagère", "Étagères"]},
            "Only void": {"": "Seulement"},
            "Welcome %{ name }": "Bienvenue %{ name }",
            "%{ count } car": ["%{ count } voiture", "%{ count } voitures"],
            "Single": ["Unique"],
            "Empty": "",
            "Broken": ["Cassé", ""],
            "Contexts only": {"menu": "Menu"},
        },
        "de": {
            "Hello": "Hallo",
        },
        "ar": {
            "Day": ["أيام", "يوم", "يومان", "أيام", "يوما", "يوم"],
            "Single": ["واحد"],
        },
    }


@pytest.fixture
def diagnostics():
    """In-memory warning sink"""
    return CollectingDiagnostics()


@pytest.fixture
def resolver(diagnostics):
    return TranslationResolver(
        interpolator=Interpolator(diagnostics),
        diagnostics=diagnostics,
    )


@pytest.fixture
def settings(raw_dictionary):
    return LanguageSettings(current="fr_FR", dictionary=load_dictionary(raw_dictionary))


@pytest.fixture
def translator(settings, resolver):
    return Translator(settings, resolver)
