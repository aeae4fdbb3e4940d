"""
EOS directory decoding.

The directory buffer holds 26-byte entries back to back. Slot 0 is the
volume label, file entries follow from slot 1, and the entry flagged
BLOCKS LEFT ends the directory and records the free block count.
"""

from collections.abc import Iterator
from typing import Any

from .constants import DIR_BUFFER_SIZE, DIR_ENTRY_SIZE, MAX_DIR_SLOTS
from .exceptions import MalformedDirectoryError
from .logging_config import get_logger
from .models import DirectoryEntry

log = get_logger('directory')


def used_bytes(entry: DirectoryEntry) -> int:
    """Bytes of data in a file entry (0 for an entry with no used blocks)."""
    return entry.used_bytes


def free_space_bytes(entry: DirectoryEntry) -> int:
    """Free bytes on the volume, read from the BLOCKS LEFT entry."""
    return entry.free_space_bytes


class Directory:
    """Decoded view over a 7168-byte EOS directory buffer."""

    def __init__(self, buffer: bytes):
        if len(buffer) != DIR_BUFFER_SIZE:
            raise MalformedDirectoryError(
                f"Directory buffer must be {DIR_BUFFER_SIZE} bytes, got {len(buffer)}")
        self._buffer = bytes(buffer)

    @property
    def buffer(self) -> bytes:
        return self._buffer

    def _slot_bytes(self, slot: int) -> bytes:
        offset = slot * DIR_ENTRY_SIZE
        return self._buffer[offset:offset + DIR_ENTRY_SIZE]

    def entry_at(self, slot: int) -> DirectoryEntry:
        """Decode the entry in a single slot."""
        if not 0 <= slot < MAX_DIR_SLOTS:
            raise MalformedDirectoryError(f"Directory slot out of range: {slot}", slot=slot)
        return DirectoryEntry.from_bytes(self._slot_bytes(slot), slot=slot)

    def volume_label(self) -> str:
        """Volume label stored in slot 0."""
        return self.entry_at(0).name

    def entries(self) -> Iterator[DirectoryEntry]:
        """
        Yield entries from slot 1 up to and including the BLOCKS LEFT entry.

        Raises MalformedDirectoryError if the buffer runs out first.
        """
        for slot in range(1, MAX_DIR_SLOTS):
            entry = self.entry_at(slot)
            yield entry
            if entry.is_blocks_left:
                return

        raise MalformedDirectoryError(
            f"No BLOCKS LEFT entry within {MAX_DIR_SLOTS - 1} directory slots")

    def files(self) -> list[DirectoryEntry]:
        """File entries, without the BLOCKS LEFT terminator."""
        return [e for e in self.entries() if not e.is_blocks_left]

    def terminator(self) -> DirectoryEntry:
        """The BLOCKS LEFT entry."""
        *_, last = self.entries()
        return last

    def free_space_bytes(self) -> int:
        return self.terminator().free_space_bytes

    def summary(self) -> dict[str, Any]:
        """Volume statistics for the info command."""
        files = []
        terminator = None
        for entry in self.entries():
            if entry.is_blocks_left:
                terminator = entry
            else:
                files.append(entry)

        live = [e for e in files if not e.is_deleted]
        degenerate = [e for e in live if e.is_degenerate]
        if degenerate:
            log.debug("%d entries report no used blocks", len(degenerate))

        return {
            'label': self.volume_label(),
            'entries': len(files),
            'files': len(live),
            'deleted': len(files) - len(live),
            'locked': sum(1 for e in live if e.is_locked),
            'system_files': sum(1 for e in live if e.is_system_file),
            'used_bytes': sum(e.used_bytes for e in live),
            'allocated_bytes': sum(e.allocated_bytes for e in live),
            'free_bytes': terminator.free_space_bytes,
            'free_blocks': terminator.allocated_blocks,
            'terminator_slot': terminator.slot,
        }
