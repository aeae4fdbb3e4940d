"""
EOS Disk Image Utility

A Python package for reading the directory of Coleco ADAM EOS disk
images, in both the sector-interleaved DSK floppy format and the flat
DDP data pack format.
"""

from .constants import (
    ATTR_BLOCKS_LEFT,
    ATTR_DELETED,
    ATTR_EXEC_PROTECT,
    ATTR_LOCKED,
    ATTR_READ_PROTECT,
    ATTR_SYSTEM_FILE,
    ATTR_USER_FILE,
    ATTR_WRITE_PROTECT,
    BLOCK_SIZE,
    DIR_BUFFER_SIZE,
    DIR_ENTRY_SIZE,
    EOS_FILENAME_LEN,
    INTERLEAVE,
    MAX_DIR_SLOTS,
    MODE_DDP,
    MODE_DSK,
    SECTOR_SIZE,
)
from .exceptions import (
    DiskError,
    EOSError,
    ImageCreateError,
    InvalidLabelError,
    MalformedDirectoryError,
    UnsupportedModeError,
)
from .models import DirectoryEntry, decode_filename
from .directory import Directory, free_space_bytes, used_bytes
from .image import EOSDiskImage, flat_offset, interleave_offsets, load_directory
from .creator import create_image
from .formatter import OutputFormatter
from .utils import detect_image_mode, validate_label
from .commands import cmd_create, cmd_info, cmd_list

__version__ = "0.1.0"

__all__ = [
    # Disk image access
    "EOSDiskImage",
    "load_directory",
    "interleave_offsets",
    "flat_offset",
    "create_image",
    # Directory decoding
    "Directory",
    "DirectoryEntry",
    "decode_filename",
    "used_bytes",
    "free_space_bytes",
    # Exceptions
    "EOSError",
    "UnsupportedModeError",
    "DiskError",
    "MalformedDirectoryError",
    "ImageCreateError",
    "InvalidLabelError",
    # Utilities
    "detect_image_mode",
    "validate_label",
    # Commands
    "cmd_list",
    "cmd_info",
    "cmd_create",
    # Output
    "OutputFormatter",
    # Constants
    "BLOCK_SIZE",
    "SECTOR_SIZE",
    "INTERLEAVE",
    "DIR_BUFFER_SIZE",
    "DIR_ENTRY_SIZE",
    "EOS_FILENAME_LEN",
    "MAX_DIR_SLOTS",
    "MODE_DSK",
    "MODE_DDP",
    "ATTR_BLOCKS_LEFT",
    "ATTR_EXEC_PROTECT",
    "ATTR_DELETED",
    "ATTR_SYSTEM_FILE",
    "ATTR_USER_FILE",
    "ATTR_READ_PROTECT",
    "ATTR_WRITE_PROTECT",
    "ATTR_LOCKED",
]
