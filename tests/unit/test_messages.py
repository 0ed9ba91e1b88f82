"""
Unit tests for the message catalog.
"""

import pytest

from fieldrules.core.exceptions import MessageCatalogError
from fieldrules.core.messages import MessageCatalog, get_messages, set_messages

CATALOG = """
greeting:
  en: "Hello {0}, you are {1}."
  tr: "Merhaba {0}, {1} yaşındasın."
plain:
  en: "No arguments."
hello: greeting
loop_a: loop_b
loop_b: loop_a
"""


class TestMessageCatalog:
    """Tests for MessageCatalog"""

    def test_bundled_catalog_has_every_core_key(self):
        catalog = MessageCatalog(language="en")
        for key in [
            "rule_must_be_non_empty",
            "unknown_rule",
            "requiredwithout_cannot_reference_itself",
            "only_one_of_fields_can_be_present",
            "required_field_missing",
            "either_field_or_other_must_be_present",
            "field_must_be_numeric",
            "min_requires_number",
            "field_min_value",
        ]:
            assert catalog.has(key), key

    def test_positional_arguments(self, write_catalog):
        catalog = MessageCatalog([write_catalog(CATALOG)], language="en")
        assert catalog.get("greeting", "Ada", 36) == "Hello Ada, you are 36."

    def test_no_arguments_leaves_text_alone(self, write_catalog):
        catalog = MessageCatalog([write_catalog(CATALOG)], language="en")
        assert catalog.get("plain") == "No arguments."

    def test_language_selection(self, write_catalog):
        catalog = MessageCatalog([write_catalog(CATALOG)], language="tr")
        assert catalog.get("greeting", "Ada", 36) == "Merhaba Ada, 36 yaşındasın."

    def test_language_from_environment(self, write_catalog, monkeypatch):
        monkeypatch.setenv("FIELDRULES_LANGUAGE", "tr")
        catalog = MessageCatalog([write_catalog(CATALOG)])
        assert catalog.language == "tr"

    def test_alias(self, write_catalog):
        catalog = MessageCatalog([write_catalog(CATALOG)], language="en")
        assert catalog.get("hello", "Ada", 36) == "Hello Ada, you are 36."

    def test_alias_cycle(self, write_catalog):
        catalog = MessageCatalog([write_catalog(CATALOG)], language="en")

        with pytest.raises(MessageCatalogError) as exc_info:
            catalog.get("loop_a")
        assert "cycle" in str(exc_info.value)

    def test_missing_key(self, write_catalog):
        catalog = MessageCatalog([write_catalog(CATALOG)], language="en")

        with pytest.raises(MessageCatalogError):
            catalog.get("nope")

    def test_missing_language(self, write_catalog):
        catalog = MessageCatalog([write_catalog(CATALOG)], language="de")

        with pytest.raises(MessageCatalogError) as exc_info:
            catalog.get("plain")
        assert "Language 'de'" in str(exc_info.value)

    def test_later_files_override_per_language(self, write_catalog):
        base = write_catalog(CATALOG, "base.yaml")
        override = write_catalog('plain:\n  en: "Overridden."\n  de: "Keine."\n', "override.yaml")

        catalog = MessageCatalog([base, override], language="en")

        assert catalog.get("plain") == "Overridden."
        assert catalog.get("greeting", "Ada", 1) == "Hello Ada, you are 1."

    @pytest.mark.parametrize(
        "text",
        [
            "- just\n- a list\n",
            "key: 5\n",
            "key:\n  en: 5\n",
            "key: [unclosed\n",
        ],
    )
    def test_malformed_files(self, write_catalog, text):
        catalog = MessageCatalog([write_catalog(text)], language="en")

        with pytest.raises(MessageCatalogError):
            catalog.get("key")

    def test_missing_file(self, tmp_path):
        catalog = MessageCatalog([tmp_path / "absent.yaml"], language="en")

        with pytest.raises(MessageCatalogError):
            catalog.get("key")


class TestDefaultCatalog:
    """Tests for the process-wide catalog"""

    def test_default_catalog_is_cached(self):
        assert get_messages() is get_messages()

    def test_set_messages_swaps_catalog(self, write_catalog):
        custom = MessageCatalog([write_catalog(CATALOG)], language="en")
        set_messages(custom)

        assert get_messages() is custom

    def test_extra_catalog_from_environment(self, write_catalog, monkeypatch):
        path = write_catalog('required_field_missing:\n  en: "Please fill in {0}."\n')
        monkeypatch.setenv("FIELDRULES_MESSAGES", str(path))
        set_messages(None)

        assert get_messages().get("required_field_missing", "name") == "Please fill in name."
        assert get_messages().get("unknown_rule", "x") == "Unknown rule 'x'."

    def test_turkish_bundled_messages(self, monkeypatch):
        monkeypatch.setenv("FIELDRULES_LANGUAGE", "tr")
        set_messages(None)

        assert get_messages().get("required_field_missing", "ad") == "Zorunlu alan 'ad' eksik."
