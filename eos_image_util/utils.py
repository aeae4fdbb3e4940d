"""
Utility functions for EOS disk image utilities.
"""

from .constants import FILENAME_TERMINATOR, MAX_LABEL_LEN, MODE_DDP, MODE_DSK
from .exceptions import InvalidLabelError, UnsupportedModeError


def detect_image_mode(image_path: str) -> str:
    """
    Detect the image mode from the file name.

    '.dsk' anywhere in the name selects the interleaved floppy format,
    '.ddp' the flat data pack format. Case is ignored and '.dsk' wins
    if both appear.
    """
    lower = str(image_path).lower()
    if '.dsk' in lower:
        return MODE_DSK
    if '.ddp' in lower:
        return MODE_DDP
    raise UnsupportedModeError("Image filename must end with .dsk or .ddp")


def validate_label(label: str) -> str:
    """
    Validate a volume label for a new image.
    Returns the label unchanged. Raises InvalidLabelError if it cannot be stored.
    """
    if not label:
        raise InvalidLabelError("Volume label cannot be empty")
    if len(label) > MAX_LABEL_LEN:
        raise InvalidLabelError(f"Volume label '{label}' exceeds {MAX_LABEL_LEN} characters")
    if not label.isascii():
        raise InvalidLabelError(f"Volume label '{label}' must be ASCII")
    if chr(FILENAME_TERMINATOR) in label:
        raise InvalidLabelError("Volume label cannot contain the 0x03 terminator")
    return label
