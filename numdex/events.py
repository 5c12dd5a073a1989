"""Vault change events and listener registration."""

import itertools
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from numdex.storage.vault import FileKind

logger = logging.getLogger(__name__)


class VaultEvent(str, Enum):
    """Structural changes a host reports to listeners.

    Listener signatures:
        CREATE: callback(item)
        DELETE: callback(item)
        RENAME: callback(item, old_path)
    """

    CREATE = "create"
    DELETE = "delete"
    RENAME = "rename"


@dataclass(frozen=True)
class VaultItem:
    """A file or folder affected by an event."""

    path: str
    kind: FileKind

    @property
    def name(self) -> str:
        return self.path.split("/")[-1]

    @property
    def is_folder(self) -> bool:
        return self.kind is FileKind.FOLDER

    @classmethod
    def folder(cls, path: str) -> "VaultItem":
        return cls(path=path, kind=FileKind.FOLDER)

    @classmethod
    def file(cls, path: str) -> "VaultItem":
        return cls(path=path, kind=FileKind.FILE)


@dataclass(frozen=True)
class EventRef:
    """Handle returned by EventBus.on, used to unsubscribe."""

    event: VaultEvent
    ref_id: int


@dataclass
class EventBus:
    """Registry of event listeners."""

    listeners: dict[VaultEvent, dict[int, Callable]] = field(default_factory=dict)
    _ids: itertools.count = field(default_factory=itertools.count, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def on(self, event: VaultEvent, callback: Callable) -> EventRef:
        """Subscribe a listener and return its handle."""
        with self._lock:
            ref = EventRef(event=VaultEvent(event), ref_id=next(self._ids))
            self.listeners.setdefault(ref.event, {})[ref.ref_id] = callback
        return ref

    def off(self, ref: EventRef) -> bool:
        """Unsubscribe a listener. Returns False if it was already removed."""
        with self._lock:
            return self.listeners.get(ref.event, {}).pop(ref.ref_id, None) is not None

    def listener_count(self, event: VaultEvent) -> int:
        return len(self.listeners.get(event, {}))

    def trigger(self, event: VaultEvent, *args) -> int:
        """Call every listener of event in subscription order.

        A listener that raises is logged and skipped; the rest still run.

        Returns:
            Number of listeners that were called.
        """
        event = VaultEvent(event)
        with self._lock:
            callbacks = list(self.listeners.get(event, {}).values())

        for callback in callbacks:
            try:
                callback(*args)
            except Exception as e:
                logger.error(f"Listener for '{event.value}' failed: {e}")

        return len(callbacks)
