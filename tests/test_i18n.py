"""Tests for translation loading."""

import pytest

from formfor.exceptions import TranslationFileError
from formfor.i18n import MappingTranslator, Translator, flatten, load_translations


class TestFlatten:
    def test_nested(self):
        assert flatten({"a": {"b": {"c": "x"}}, "d": 1}) == {"a.b.c": "x", "d": "1"}

    def test_skips_none(self):
        assert flatten({"a": None}) == {}


class TestMappingTranslator:
    def test_lookup(self):
        translator = MappingTranslator({"model": {"attributes": {"email": "E-mail"}}})
        assert translator.lookup("model.attributes.email") == "E-mail"
        assert translator.lookup("model.attributes.name") is None

    def test_satisfies_protocol(self):
        assert isinstance(MappingTranslator(), Translator)


class TestLoadTranslations:
    def test_loads_nested_yaml(self, write_yaml):
        path = write_yaml(
            "model:\n"
            "  order:\n"
            "    attributes:\n"
            "      total: Grand total\n"
        )
        translator = load_translations(path)
        assert translator.lookup("model.order.attributes.total") == "Grand total"

    def test_locale_section(self, write_yaml):
        path = write_yaml(
            "en:\n"
            "  model.attributes.total: Total\n"
            "de:\n"
            "  model.attributes.total: Summe\n"
        )
        assert load_translations(path, locale="de").lookup("model.attributes.total") == "Summe"

    def test_missing_locale_is_empty(self, write_yaml):
        path = write_yaml("en:\n  a: b\n")
        assert len(load_translations(path, locale="fr")) == 0

    def test_empty_file(self, write_yaml):
        assert len(load_translations(write_yaml(""))) == 0

    def test_rejects_non_mapping(self, write_yaml):
        with pytest.raises(TranslationFileError):
            load_translations(write_yaml("- a\n- b\n"))
