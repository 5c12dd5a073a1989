"""Folder note lookup."""

from typing import Protocol

from numdex.storage.vault import FileKind


class FileKindLookup(Protocol):
    def get_file_kind(self, path: str) -> FileKind: ...


def folder_note_candidate(folder_path: str) -> str:
    """Path of the note that would act as the folder's front page.

    The note lives inside the folder and shares its name:
    "01 - Projects" -> "01 - Projects/01 - Projects.md".
    """
    folder_name = folder_path.split("/")[-1]
    return f"{folder_path}/{folder_name}.md"


def resolve_folder_note(store: FileKindLookup, folder_path: str) -> str | None:
    """Return the folder note path if it exists as a file, else None."""
    candidate = folder_note_candidate(folder_path)
    if store.get_file_kind(candidate) is FileKind.FILE:
        return candidate
    return None
