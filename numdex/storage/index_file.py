"""Persistent storage for the generated index document."""

import logging

from .vault import FileKind, Vault

logger = logging.getLogger(__name__)


class IndexFileStorage:
    """Owns the single index note at its well-known vault path."""

    def __init__(self, vault: Vault, file_name: str) -> None:
        self.vault = vault
        self.file_name = file_name

    def exists(self) -> bool:
        return self.vault.get_file_kind(self.file_name) is FileKind.FILE

    def read(self) -> str | None:
        """Current document content, or None if it was never written."""
        if not self.exists():
            return None
        return self.vault.read_file(self.file_name)

    def write(self, content: str) -> bool:
        """Replace the whole document, creating it if absent.

        Returns:
            True if the document was created, False if it was overwritten.
        """
        kind = self.vault.get_file_kind(self.file_name)

        if kind is FileKind.FOLDER:
            raise IsADirectoryError(f"Index path is a folder: {self.file_name}")

        if kind is FileKind.FILE:
            self.vault.write_file(self.file_name, content)
            return False

        self.vault.create_file(self.file_name, content)
        logger.info(f"Created {self.file_name}")
        return True
