"""
Tests for the Manifest model
"""
import dataclasses

import pytest

from cursetool.exceptions import DuplicateEntryError
from cursetool.models import Manifest, ModEntry


class TestModEntry:
    """Test suite for ModEntry"""

    def test_to_dict_uses_fixed_key_order(self):
        entry = ModEntry(
            id="jei",
            name="JEI",
            version="1",
            download_url="https://example/jei.jar",
            checksum="abc",
        )

        assert list(entry.to_dict()) == [
            "id",
            "name",
            "version",
            "download_url",
            "checksum",
        ]

    def test_to_dict_omits_missing_optional_fields(self):
        entry = ModEntry(id="jei", name="JEI", version="1")

        assert entry.to_dict() == {"id": "jei", "name": "JEI", "version": "1"}

    def test_from_dict_defaults_name_to_id(self):
        entry = ModEntry.from_dict({"id": "jei", "version": "1"})

        assert entry.name == "jei"
        assert entry.download_url is None

    def test_entry_is_frozen(self):
        entry = ModEntry(id="jei", name="JEI", version="1")

        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.version = "2"


class TestManifest:
    """Test suite for Manifest"""

    def test_preserves_insertion_order(self, sample_manifest):
        assert sample_manifest.ids() == ("jei", "appleskin", "baubles")
        assert [e.id for e in sample_manifest] == ["jei", "appleskin", "baubles"]

    def test_lookup(self, sample_manifest):
        assert "baubles" in sample_manifest
        assert sample_manifest.get("baubles").name == "Baubles"
        assert sample_manifest.get("missing") is None
        assert len(sample_manifest) == 3

    def test_rejects_duplicate_ids(self):
        entries = [
            ModEntry(id="jei", name="JEI", version="1"),
            ModEntry(id="jei", name="JEI again", version="2"),
        ]

        with pytest.raises(DuplicateEntryError) as exc_info:
            Manifest.from_entries(entries)

        assert exc_info.value.entry_id == "jei"
        assert exc_info.value.context["index"] == 1

    def test_with_entries_returns_new_manifest(self, sample_manifest):
        trimmed = sample_manifest.with_entries(list(sample_manifest)[:1])

        assert trimmed.ids() == ("jei",)
        assert trimmed.minecraft_version == "1.12.2"
        assert sample_manifest.ids() == ("jei", "appleskin", "baubles")
        assert "appleskin" not in trimmed

    def test_equality_ignores_index(self, sample_manifest):
        copy = Manifest.from_entries(list(sample_manifest), minecraft_version="1.12.2")

        assert copy == sample_manifest
        assert copy != sample_manifest.with_entries(reversed(list(sample_manifest)))

    def test_duplicate_error_serialises(self):
        with pytest.raises(DuplicateEntryError) as exc_info:
            Manifest.from_entries(
                [ModEntry(id="a", name="A", version="1")] * 2
            )

        assert exc_info.value.to_dict() == {
            "error": True,
            "code": "E301",
            "message": "重复的模组 ID: a",
            "context": {"index": 1, "id": "a"},
            "type": "DuplicateEntryError",
        }
        assert str(exc_info.value) == "[E301] 重复的模组 ID: a"
