"""Generate the numbered folders index document."""

import logging
from collections.abc import Callable, Iterable
from datetime import datetime

from numdex.storage.vault import FolderEntry

from .classifier import is_numbered_folder_path
from .tree import build_folder_tree, render_tree

logger = logging.getLogger(__name__)

EMPTY_INDEX_CONTENT = (
    "# Numbered Folders Index\n\n"
    "No numbered folders found in the vault.\n\n"
    "Folders should be named similar to: 01 - Collections and 01.01 - Topics etc…"
)


def get_numbered_folders(folders: Iterable[FolderEntry]) -> list[str]:
    """Collect paths of numbered folders, sorted.

    A folder is kept when its own name qualifies. Excluded folders are still
    descended into, so "2024/01 - Plans" is found under a year folder.
    """
    paths = [
        entry.path
        for root in folders
        for entry in root.walk()
        if is_numbered_folder_path(entry.path)
    ]
    return sorted(paths)


def format_footer(now: datetime, timestamp_format: str = "%c") -> str:
    return f"\n---\n*Last updated: {now.strftime(timestamp_format)}*\n"


def generate_index_content(
    folders: Iterable[FolderEntry],
    resolve_folder_note: Callable[[str], str | None],
    now: datetime | None = None,
    timestamp_format: str = "%c",
) -> str:
    """Map the current folder snapshot to the full index document text.

    Args:
        folders: Top-level folder snapshot from the vault.
        resolve_folder_note: Folder path -> folder note path or None.
        now: Timestamp for the footer; defaults to the current local time.
        timestamp_format: strftime format for the footer timestamp.
    """
    numbered = get_numbered_folders(folders)

    if not numbered:
        return EMPTY_INDEX_CONTENT

    logger.debug(f"Indexing {len(numbered)} numbered folders")

    folder_tree = build_folder_tree(numbered, resolve_folder_note)
    content = render_tree(folder_tree)
    content += format_footer(now or datetime.now(), timestamp_format)

    return content
