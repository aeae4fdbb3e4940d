"""
Custom exceptions for the EOS disk image utilities.
"""


class EOSError(Exception):
    """Base exception for all EOS disk image errors."""
    pass


class UnsupportedModeError(EOSError):
    """Image file name selects neither the DSK nor the DDP format."""
    pass


class DiskError(EOSError):
    """Error opening or reading a disk image."""

    def __init__(self, message: str, block: int | None = None, stage: str | None = None):
        super().__init__(message)
        self.block = block
        self.stage = stage


class MalformedDirectoryError(EOSError):
    """Directory structure cannot be decoded."""

    def __init__(self, message: str, slot: int | None = None):
        super().__init__(message)
        self.slot = slot


class ImageCreateError(EOSError):
    """Error creating a new disk image."""
    pass


class InvalidLabelError(EOSError):
    """Volume label cannot be stored in a 12-byte filename field."""
    pass
