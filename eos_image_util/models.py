"""
Data model classes for EOS disk image utilities.
"""

import struct
from dataclasses import dataclass

from .constants import (
    ATTR_BLOCKS_LEFT,
    ATTR_CLEAR_CHAR,
    ATTR_DELETED,
    ATTR_EXEC_PROTECT,
    ATTR_FLAGS,
    ATTR_LOCKED,
    ATTR_READ_PROTECT,
    ATTR_SYSTEM_FILE,
    ATTR_USER_FILE,
    ATTR_WRITE_PROTECT,
    BLOCK_SIZE,
    DIR_ENTRY_FORMAT,
    DIR_ENTRY_SIZE,
    EOS_FILENAME_LEN,
    FILENAME_TERMINATOR,
)
from .exceptions import MalformedDirectoryError


def decode_filename(field: bytes, slot: int | None = None) -> str:
    """
    Decode a fixed-width EOS filename field.

    Bytes are taken up to the 0x03 terminator. Anything after it is
    padding. A field with no terminator in its first 12 bytes is malformed.
    """
    end = field.find(FILENAME_TERMINATOR, 0, EOS_FILENAME_LEN)
    if end == -1:
        where = f" in slot {slot}" if slot is not None else ""
        raise MalformedDirectoryError(f"Filename has no terminator{where}", slot=slot)
    return field[:end].decode('latin-1')


@dataclass(frozen=True)
class DirectoryEntry:
    """Represents a 26-byte EOS directory entry."""
    raw_name: bytes             # 12 bytes, 0x03 terminated
    attributes: int             # Attribute byte
    start_block: int            # First data block
    allocated_blocks: int       # Blocks reserved (free blocks for BLOCKS LEFT)
    blocks_used: int            # Blocks holding data
    last_block_bytes_used: int  # Bytes used in the final block
    year: int = 0
    month: int = 0
    day: int = 0
    slot: int | None = None     # Directory slot the entry was read from

    @classmethod
    def from_bytes(cls, data: bytes, slot: int | None = None) -> 'DirectoryEntry':
        """Parse a 26-byte directory entry."""
        if len(data) != DIR_ENTRY_SIZE:
            raise MalformedDirectoryError(
                f"Invalid directory entry size: {len(data)}", slot=slot)

        (raw_name, attributes, start_block, allocated_blocks, blocks_used,
         last_block_bytes_used, year, month, day) = struct.unpack(DIR_ENTRY_FORMAT, data)

        return cls(
            raw_name=raw_name,
            attributes=attributes,
            start_block=start_block,
            allocated_blocks=allocated_blocks,
            blocks_used=blocks_used,
            last_block_bytes_used=last_block_bytes_used,
            year=year,
            month=month,
            day=day,
            slot=slot,
        )

    @property
    def name(self) -> str:
        """Filename up to the terminator byte."""
        return decode_filename(self.raw_name, self.slot)

    def _has(self, mask: int) -> bool:
        return (self.attributes & mask) == mask

    @property
    def is_blocks_left(self) -> bool:
        """Check if this is the BLOCKS LEFT entry that ends the directory."""
        return self._has(ATTR_BLOCKS_LEFT)

    @property
    def is_exec_protected(self) -> bool:
        return self._has(ATTR_EXEC_PROTECT)

    @property
    def is_deleted(self) -> bool:
        return self._has(ATTR_DELETED)

    @property
    def is_system_file(self) -> bool:
        return self._has(ATTR_SYSTEM_FILE)

    @property
    def is_user_file(self) -> bool:
        return self._has(ATTR_USER_FILE)

    @property
    def is_read_protected(self) -> bool:
        return self._has(ATTR_READ_PROTECT)

    @property
    def is_write_protected(self) -> bool:
        return self._has(ATTR_WRITE_PROTECT)

    @property
    def is_locked(self) -> bool:
        return self._has(ATTR_LOCKED)

    @property
    def is_degenerate(self) -> bool:
        """A file entry claiming no used blocks."""
        return self.blocks_used == 0

    @property
    def used_bytes(self) -> int:
        """
        Bytes of data in the file.

        Every block but the last is full. An entry with no used blocks
        reports 0 rather than a negative size.
        """
        if self.is_degenerate:
            return 0
        return (self.blocks_used - 1) * BLOCK_SIZE + self.last_block_bytes_used

    @property
    def allocated_bytes(self) -> int:
        return self.allocated_blocks * BLOCK_SIZE

    @property
    def free_space_bytes(self) -> int:
        """Free space on the volume, read from the BLOCKS LEFT entry."""
        if not self.is_blocks_left:
            raise ValueError("Free space is only recorded in the BLOCKS LEFT entry")
        return self.allocated_blocks * BLOCK_SIZE

    @property
    def date_string(self) -> str:
        """Return 'YY-MM-DD' format."""
        return f"{self.year:02d}-{self.month:02d}-{self.day:02d}"

    def attr_string(self) -> str:
        """Return attribute mask like '----U-W-'."""
        return ''.join(
            char if self._has(mask) else ATTR_CLEAR_CHAR
            for mask, char in ATTR_FLAGS
        )
