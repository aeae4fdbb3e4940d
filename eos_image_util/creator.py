"""
Disk image creation for EOS disk images.

Only the image file itself is allocated. The directory is not written.
"""

from .constants import BLOCK_SIZE
from .exceptions import ImageCreateError
from .logging_config import get_logger
from .utils import detect_image_mode

log = get_logger('creator')


def create_image(path: str, total_blocks: int) -> int:
    """
    Create a sparse disk image of total_blocks 1024-byte blocks.

    The file is extended by seeking to its last byte and writing a single
    zero, so untouched blocks read back as zeros.

    Args:
        path: Path for the new image; must contain .dsk or .ddp
        total_blocks: Size of the volume in blocks

    Returns:
        Offset of the last byte in the image

    Raises:
        UnsupportedModeError: path selects no image mode
        ImageCreateError: total_blocks is not positive or the file cannot be written
    """
    mode = detect_image_mode(path)

    if total_blocks < 1:
        raise ImageCreateError(f"Total blocks must be at least 1, got {total_blocks}")

    last = total_blocks * BLOCK_SIZE - 1

    try:
        with open(path, 'wb') as f:
            f.seek(last)
            f.write(b'\x00')
    except OSError as e:
        raise ImageCreateError(f"Failed to create disk image: {e}") from e

    log.info("Created %s image %s (%d blocks)", mode.upper(), path, total_blocks)
    return last
