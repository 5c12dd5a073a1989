"""Shared test fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def tmp_vault(tmp_path: Path) -> Path:
    """Create a temporary vault with a small numbering scheme."""
    vault = tmp_path / "vault"
    vault.mkdir()

    (vault / "Note.md").write_text("# Loose note\n")

    # Numbered folder with a folder note and sub-numbers
    collections = vault / "01 - Collections"
    collections.mkdir()
    (collections / "01 - Collections.md").write_text("# Collections\n")
    (collections / "01.01 - Topics").mkdir()
    (collections / "01.10 - Later").mkdir()
    (collections / "01.2 - Second").mkdir()

    # Numbered folder nested under a bare year
    projects = vault / "02 - Projects"
    projects.mkdir()
    (projects / "2024" / "02.01 - Plan").mkdir(parents=True)

    (vault / "10 - Archive").mkdir()

    # Not numbered
    (vault / "2024").mkdir()
    (vault / "Inbox").mkdir()

    # Hidden config folder
    (vault / ".obsidian" / "1 - Hidden").mkdir(parents=True)

    return vault


@pytest.fixture
def empty_vault(tmp_path: Path) -> Path:
    """A vault without any numbered folders."""
    vault = tmp_path / "empty"
    vault.mkdir()
    (vault / "Inbox").mkdir()
    (vault / "2023").mkdir()
    (vault / "Welcome.md").write_text("Hello")
    return vault
