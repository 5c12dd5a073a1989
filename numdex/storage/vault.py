"""Filesystem-backed vault store.

Paths handed in and out are vault-relative strings joined with "/", the way
the vault itself names folders and notes. They are never normalized.
"""

import logging
import os
import stat
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)


class FileKind(Enum):
    """What lives at a vault path."""

    NONE = "none"
    FILE = "file"
    FOLDER = "folder"


@dataclass(frozen=True)
class FolderEntry:
    """Immutable snapshot of one folder and its subfolders."""

    path: str
    name: str
    children: tuple["FolderEntry", ...] = ()

    def walk(self):
        """Yield this folder and every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()


class Vault:
    """Read and write access to a vault directory."""

    def __init__(self, vault_path: Path, include_hidden: bool = False) -> None:
        self.vault_path = vault_path.resolve()
        self.include_hidden = include_hidden

    def _validate_path(self, path: str) -> Path:
        """Validate that path is within vault and return resolved path."""
        if path.startswith("/"):
            path = path[1:]

        full_path = (self.vault_path / path).resolve()

        try:
            full_path.relative_to(self.vault_path)
        except ValueError as e:
            raise ValueError(f"Path escapes vault: {path}") from e

        return full_path

    def _is_hidden(self, name: str) -> bool:
        return not self.include_hidden and name.startswith(".")

    def list_all_folders(self) -> tuple[FolderEntry, ...]:
        """Snapshot of the full folder tree, anchored at the vault root."""
        return self._scan_folders(self.vault_path, "")

    def _scan_folders(self, directory: Path, prefix: str) -> tuple[FolderEntry, ...]:
        entries = []

        for item in sorted(directory.iterdir(), key=lambda p: p.name):
            if not item.is_dir() or self._is_hidden(item.name):
                continue

            path = f"{prefix}/{item.name}" if prefix else item.name
            entries.append(
                FolderEntry(
                    path=path,
                    name=item.name,
                    children=self._scan_folders(item, path),
                )
            )

        return tuple(entries)

    def get_file_kind(self, path: str) -> FileKind:
        """Tell whether path is a file, a folder, or absent."""
        try:
            full_path = self._validate_path(path)
        except ValueError:
            return FileKind.NONE

        if full_path.is_dir():
            return FileKind.FOLDER
        if full_path.is_file():
            return FileKind.FILE
        return FileKind.NONE

    def file_exists(self, path: str) -> bool:
        return self.get_file_kind(path) is FileKind.FILE

    def read_file(self, path: str) -> str:
        return self._validate_path(path).read_text(encoding="utf-8")

    def create_file(self, path: str, content: str) -> None:
        """Create a new note. Fails if anything already exists at path."""
        full_path = self._validate_path(path)

        if full_path.exists():
            raise FileExistsError(f"File already exists: {path}")

        full_path.parent.mkdir(parents=True, exist_ok=True)
        self._replace(full_path, content)

    def write_file(self, path: str, content: str) -> None:
        """Overwrite an existing note in one step."""
        full_path = self._validate_path(path)

        if full_path.is_dir():
            raise IsADirectoryError(f"Not a file: {path}")
        if not full_path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        self._replace(full_path, content)

    def _replace(self, full_path: Path, content: str) -> None:
        """Write to a temp file next to the target, then swap it in.

        Readers see either the old content or the new one, never a partial write.
        """
        fd, tmp_name = tempfile.mkstemp(dir=full_path.parent, prefix=".", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            os.chmod(tmp_name, self._file_mode(full_path))
            os.replace(tmp_name, full_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug(f"Wrote {full_path.relative_to(self.vault_path)}")

    def _file_mode(self, full_path: Path) -> int:
        """Permissions for the new content: the existing file's, or the umask default."""
        try:
            return stat.S_IMODE(full_path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask
