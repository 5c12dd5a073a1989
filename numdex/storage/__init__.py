"""Vault access and persistent storage for the index document."""

from .index_file import IndexFileStorage
from .vault import FileKind, FolderEntry, Vault

__all__ = [
    "FileKind",
    "FolderEntry",
    "IndexFileStorage",
    "Vault",
]
