"""
Tests for translator/languages.py - Static language registry.
"""
import pytest

from translator.languages import Language, LanguageRegistry, registry


class TestLookup:

    def test_known_code(self):
        assert registry.lookup("es") == "Spanish"
        assert registry.lookup("sv") == "Swedish"

    def test_unknown_code_returns_none(self):
        assert registry.lookup("xx") is None
        assert registry.lookup("") is None

    def test_display_name_falls_back_to_raw_code(self):
        assert registry.display_name("fr") == "French"
        assert registry.display_name("Klingon") == "Klingon"

    def test_is_supported(self):
        assert registry.is_supported("ja")
        assert not registry.is_supported("Spanish")
        assert "de" in registry


class TestListing:

    def test_list_all_keeps_category_order(self):
        codes = [lang.code for lang in registry.list_all()]
        assert codes[:7] == ["en", "es", "fr", "de", "zh", "ar", "ru"]
        assert codes[7:] == ["it", "ja", "ko", "pt", "nl", "tr", "hi", "sv"]
        assert len(registry) == 15

    def test_categories(self):
        names = [name for name, _ in registry.categories()]
        assert names == ["popular", "other"]

    def test_languages_are_immutable(self):
        lang = registry.list_all()[0]
        with pytest.raises(Exception):
            lang.name = "Changed"

    def test_no_mutation_surface(self):
        with pytest.raises(TypeError):
            registry._names["xx"] = "Nope"


class TestConstruction:

    def test_duplicate_codes_rejected(self):
        with pytest.raises(ValueError):
            LanguageRegistry({"a": [("en", "English")], "b": [("en", "Anglais")]})

    def test_custom_registry(self):
        custom = LanguageRegistry({"only": [("eo", "Esperanto")]})
        assert custom.list_all() == (Language(code="eo", name="Esperanto"),)
