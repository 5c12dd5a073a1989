"""Tests for index document generation."""

from datetime import datetime
from pathlib import Path

from numdex.indexer.folder_notes import folder_note_candidate, resolve_folder_note
from numdex.indexer.generator import (
    EMPTY_INDEX_CONTENT,
    generate_index_content,
    get_numbered_folders,
)
from numdex.storage.vault import FolderEntry, Vault

FIXED_NOW = datetime(2026, 1, 2, 3, 4, 5)


def folder(path: str, *children: FolderEntry) -> FolderEntry:
    return FolderEntry(path=path, name=path.split("/")[-1], children=children)


class TestFolderNotes:
    """Tests for folder note resolution."""

    def test_candidate_path(self):
        assert folder_note_candidate("02 - Projects") == "02 - Projects/02 - Projects.md"
        assert folder_note_candidate("01 - A/01.01 - B") == "01 - A/01.01 - B/01.01 - B.md"

    def test_resolves_note_inside_folder(self, tmp_vault: Path):
        vault = Vault(tmp_vault)

        assert resolve_folder_note(vault, "01 - Collections") == (
            "01 - Collections/01 - Collections.md"
        )

    def test_missing_note(self, tmp_vault: Path):
        vault = Vault(tmp_vault)

        assert resolve_folder_note(vault, "10 - Archive") is None

    def test_ignores_sibling_note(self, tmp_vault: Path):
        (tmp_vault / "10 - Archive.md").write_text("Sibling note")
        vault = Vault(tmp_vault)

        assert resolve_folder_note(vault, "10 - Archive") is None

    def test_ignores_folder_with_note_name(self, tmp_vault: Path):
        (tmp_vault / "10 - Archive" / "10 - Archive.md").mkdir()
        vault = Vault(tmp_vault)

        assert resolve_folder_note(vault, "10 - Archive") is None


class TestGetNumberedFolders:
    """Tests for get_numbered_folders."""

    def test_filters_and_sorts(self):
        folders = (
            folder("Inbox", folder("Inbox/03 - Later")),
            folder("10 - Z"),
            folder("2 - A", folder("2 - A/Notes")),
        )

        assert get_numbered_folders(folders) == ["10 - Z", "2 - A", "Inbox/03 - Later"]

    def test_descends_into_excluded_folders(self):
        folders = (folder("2024", folder("2024/01 - Plans", folder("2024/01 - Plans/2025"))),)

        assert get_numbered_folders(folders) == ["2024/01 - Plans"]

    def test_year_prefixed_names_excluded(self):
        folders = (folder("2024"), folder("2024.01 - Archive"), folder("1999 Photos"))

        assert get_numbered_folders(folders) == []

    def test_vault_snapshot(self, tmp_vault: Path):
        folders = Vault(tmp_vault).list_all_folders()

        assert get_numbered_folders(folders) == [
            "01 - Collections",
            "01 - Collections/01.01 - Topics",
            "01 - Collections/01.10 - Later",
            "01 - Collections/01.2 - Second",
            "02 - Projects",
            "02 - Projects/2024/02.01 - Plan",
            "10 - Archive",
        ]


class TestGenerateIndexContent:
    """Tests for generate_index_content."""

    def test_full_document(self, tmp_vault: Path):
        vault = Vault(tmp_vault)

        content = generate_index_content(
            vault.list_all_folders(),
            lambda path: resolve_folder_note(vault, path),
            now=FIXED_NOW,
            timestamp_format="%Y-%m-%d %H:%M:%S",
        )

        assert content == (
            "- [[01 - Collections/01 - Collections.md|01 - Collections]]\n"
            "  - 01.01 - Topics\n"
            "  - 01.2 - Second\n"
            "  - 01.10 - Later\n"
            "- 02 - Projects\n"
            "  - 02.01 - Plan\n"
            "- 10 - Archive\n"
            "\n"
            "---\n"
            "*Last updated: 2026-01-02 03:04:05*\n"
        )

    def test_empty_vault_placeholder(self, empty_vault: Path):
        vault = Vault(empty_vault)

        content = generate_index_content(
            vault.list_all_folders(),
            lambda path: resolve_folder_note(vault, path),
            now=FIXED_NOW,
        )

        assert content == EMPTY_INDEX_CONTENT
        assert content == (
            "# Numbered Folders Index\n\n"
            "No numbered folders found in the vault.\n\n"
            "Folders should be named similar to: 01 - Collections and 01.01 - Topics etc…"
        )

    def test_year_sub_number_appears_through_descendant(self):
        folders = (folder("2024.01 - Archive", folder("2024.01 - Archive/01 - Old")),)

        content = generate_index_content(folders, lambda path: None, now=FIXED_NOW)

        assert content.startswith("- 2024.01 - Archive\n  - 01 - Old\n")

    def test_default_timestamp_uses_locale_format(self):
        content = generate_index_content((folder("1 - A"),), lambda path: None, now=FIXED_NOW)

        assert content.endswith(f"*Last updated: {FIXED_NOW.strftime('%c')}*\n")

    def test_deterministic_for_fixed_time(self, tmp_vault: Path):
        vault = Vault(tmp_vault)

        def generate() -> str:
            return generate_index_content(
                vault.list_all_folders(),
                lambda path: resolve_folder_note(vault, path),
                now=FIXED_NOW,
            )

        assert generate() == generate()
