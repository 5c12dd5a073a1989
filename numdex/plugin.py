"""Numbered folders plugin - keeps the index note in sync with the vault."""

import logging
import threading
from collections.abc import Callable
from datetime import datetime

from numdex.commands import Command, CommandRegistry
from numdex.config import DEFAULT_INDEX_FILE_NAME, Settings
from numdex.events import EventBus, EventRef, VaultEvent, VaultItem
from numdex.indexer import generate_index_content, is_numbered_folder_path, resolve_folder_note
from numdex.storage import IndexFileStorage, Vault

logger = logging.getLogger(__name__)

REGENERATE_COMMAND_ID = "regenerate-numbered-folders-index"
REGENERATE_COMMAND_NAME = "Regenerate numbered folders index"


class NumberedFoldersPlugin:
    """Regenerates the numbered folders index on folder changes and on demand."""

    def __init__(
        self,
        vault: Vault,
        events: EventBus | None = None,
        commands: CommandRegistry | None = None,
        index_file_name: str = DEFAULT_INDEX_FILE_NAME,
        timestamp_format: str = "%c",
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.vault = vault
        self.events = events or EventBus()
        self.commands = commands or CommandRegistry()
        self.index_file = IndexFileStorage(vault, index_file_name)
        self.timestamp_format = timestamp_format
        self.clock = clock
        self._event_refs: list[EventRef] = []
        self._generate_lock = threading.Lock()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        events: EventBus | None = None,
        commands: CommandRegistry | None = None,
    ) -> "NumberedFoldersPlugin":
        vault = Vault(settings.vault_path, include_hidden=settings.include_hidden)
        return cls(
            vault,
            events=events,
            commands=commands,
            index_file_name=settings.index_file_name,
            timestamp_format=settings.timestamp_format,
        )

    @property
    def is_loaded(self) -> bool:
        return bool(self._event_refs)

    def on_load(self) -> None:
        """Build the initial index and start listening for folder changes."""
        logger.info("Loading numbered folders plugin")

        self.generate_index()

        self.register_event(VaultEvent.CREATE, self._on_create)
        self.register_event(VaultEvent.DELETE, self._on_delete)
        self.register_event(VaultEvent.RENAME, self._on_rename)

        self.register_commands()

    def register_commands(self) -> None:
        """Add the manual regeneration command to the registry."""
        self.commands.register(
            Command(
                id=REGENERATE_COMMAND_ID,
                name=REGENERATE_COMMAND_NAME,
                callback=self._regenerate_command,
            )
        )

    def on_unload(self) -> None:
        """Release every listener handle and the command."""
        logger.info("Unloading numbered folders plugin")

        for ref in self._event_refs:
            self.events.off(ref)
        self._event_refs.clear()

        self.commands.unregister(REGENERATE_COMMAND_ID)

    def register_event(self, event: VaultEvent, callback: Callable) -> EventRef:
        """Subscribe to an event; the handle is released on unload."""
        ref = self.events.on(event, callback)
        self._event_refs.append(ref)
        return ref

    def generate_index_content(self) -> str:
        """Compute the document text from a fresh vault snapshot."""
        return generate_index_content(
            self.vault.list_all_folders(),
            lambda path: resolve_folder_note(self.vault, path),
            now=self.clock(),
            timestamp_format=self.timestamp_format,
        )

    def generate_index(self) -> bool:
        """Regenerate and write the index document.

        Only one generation runs at a time. Errors are logged and never
        raised, so later events still trigger regeneration.

        Returns:
            True if the document was written.
        """
        with self._generate_lock:
            try:
                content = self.generate_index_content()
                self.index_file.write(content)
            except Exception as e:
                logger.error(f"Error generating numbered folders index: {e}")
                return False

        logger.info("Numbered folders index updated")
        return True

    def _on_create(self, item: VaultItem) -> None:
        if item.is_folder and is_numbered_folder_path(item.path):
            self.generate_index()
        else:
            logger.debug(f"Ignoring create: {item.path}")

    def _on_delete(self, item: VaultItem) -> None:
        if item.is_folder and is_numbered_folder_path(item.path):
            self.generate_index()
        else:
            logger.debug(f"Ignoring delete: {item.path}")

    def _on_rename(self, item: VaultItem, old_path: str) -> None:
        if not item.is_folder:
            return

        was_numbered = is_numbered_folder_path(old_path)
        is_numbered = is_numbered_folder_path(item.path)

        if was_numbered or is_numbered:
            self.generate_index()
        else:
            logger.debug(f"Ignoring rename: {old_path} -> {item.path}")

    def _regenerate_command(self) -> bool:
        updated = self.generate_index()
        logger.info("Manual regeneration completed")
        return updated
