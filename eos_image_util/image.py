"""
EOS disk image access.

Reads the seven directory blocks of an ADAM disk image into one contiguous
buffer. DSK images are floppy dumps in physical sector order, so each
1024-byte block is split over two 512-byte sectors five sectors apart. DDP
images are stored in block order.
"""

from typing import BinaryIO

from .constants import (
    BLOCK_SIZE,
    DIR_BLOCKS,
    DIR_START_BLOCK,
    INTERLEAVE,
    MODE_DDP,
    MODE_DSK,
    SECTOR_SIZE,
)
from .directory import Directory
from .exceptions import DiskError, UnsupportedModeError
from .logging_config import get_logger
from .utils import detect_image_mode

log = get_logger('image')

DIR_BLOCK_RANGE = range(DIR_START_BLOCK, DIR_START_BLOCK + DIR_BLOCKS)

# Bytes covered by one lap of the 8-sector skew pattern
_SKEW_SPAN = 8 * SECTOR_SIZE


def interleave_offsets(block: int) -> tuple[int, int]:
    """
    Byte offsets of the two sectors holding a directory block in a DSK image.

    Returns (upper, lower). The upper half sits at the block's own offset;
    the lower half is INTERLEAVE sectors ahead for blocks 0 and 1 of each
    group of four, and wraps back for blocks 2 and 3.
    """
    if block not in DIR_BLOCK_RANGE:
        raise ValueError(f"Directory block out of range: {block}")

    upper = block * BLOCK_SIZE
    if block % 4 in (0, 1):
        lower = upper + INTERLEAVE * SECTOR_SIZE
    else:
        lower = upper - (_SKEW_SPAN - INTERLEAVE * SECTOR_SIZE)
    return upper, lower


def flat_offset(block: int) -> int:
    """Byte offset of a directory block in a DDP image."""
    if block not in DIR_BLOCK_RANGE:
        raise ValueError(f"Directory block out of range: {block}")
    return block * BLOCK_SIZE


def _read_at(image: BinaryIO, offset: int, size: int, block: int, stage: str) -> bytes:
    """Positioned read that must return exactly size bytes."""
    log.debug("block %d %s: reading %d bytes at offset %d", block, stage, size, offset)
    try:
        image.seek(offset)
        data = image.read(size)
    except OSError as e:
        raise DiskError(f"Failed to read block {block} ({stage}): {e}",
                        block=block, stage=stage) from e

    if len(data) != size:
        raise DiskError(
            f"Short read on block {block} ({stage}): "
            f"expected {size} bytes at offset {offset}, got {len(data)}",
            block=block, stage=stage)
    return data


def _load_dsk(image: BinaryIO) -> bytes:
    buf = bytearray()
    for block in DIR_BLOCK_RANGE:
        upper, lower = interleave_offsets(block)
        buf += _read_at(image, upper, SECTOR_SIZE, block, 'upper')
        buf += _read_at(image, lower, SECTOR_SIZE, block, 'lower')
    return bytes(buf)


def _load_ddp(image: BinaryIO) -> bytes:
    buf = bytearray()
    for block in DIR_BLOCK_RANGE:
        buf += _read_at(image, flat_offset(block), BLOCK_SIZE, block, 'read')
    return bytes(buf)


def load_directory(image: BinaryIO, mode: str) -> bytes:
    """
    Read the directory blocks of an open image into a 7168-byte buffer.

    Args:
        image: Seekable binary file holding the disk image
        mode: MODE_DSK (interleaved) or MODE_DDP (flat)

    Returns:
        The directory blocks in logical order

    Raises:
        UnsupportedModeError: mode is not a known image mode (no I/O is done)
        DiskError: a seek or read failed or came up short
    """
    if mode == MODE_DSK:
        return _load_dsk(image)
    if mode == MODE_DDP:
        return _load_ddp(image)
    raise UnsupportedModeError(f"Unsupported image mode: {mode!r}")


class EOSDiskImage:
    """EOS disk image opened read-only for directory access."""

    def __init__(self, image_path: str):
        """Select the image mode from the file name, then open the image."""
        self.image_path = str(image_path)
        self.mode = detect_image_mode(self.image_path)
        self._file: BinaryIO | None = None

        try:
            self._file = open(self.image_path, 'rb')
        except OSError as e:
            raise DiskError(f"Cannot open disk image: {e}", stage='open') from e

        log.debug("Opened %s image %s", self.mode.upper(), self.image_path)

    def read_directory_buffer(self) -> bytes:
        """Read the raw 7168-byte directory buffer."""
        if self._file is None:
            raise DiskError("Disk image not open", stage='open')
        return load_directory(self._file, self.mode)

    def read_directory(self) -> Directory:
        """Read and decode the directory."""
        return Directory(self.read_directory_buffer())

    def close(self) -> None:
        """Close the disk image."""
        if self._file:
            self._file.close()
            self._file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
