"""
Constants for the Coleco ADAM EOS disk image utilities.
"""

# Block and sector sizes
BLOCK_SIZE = 1024        # EOS / AdamNet block size
SECTOR_SIZE = 512        # Floppy sector size
SECTORS_PER_BLOCK = BLOCK_SIZE // SECTOR_SIZE
INTERLEAVE = 5           # DSK images carry the 5:1 physical interleave

# Directory location and size
DIR_START_BLOCK = 1      # Block 0 is the boot block
DIR_BLOCKS = 7
DIR_BUFFER_SIZE = DIR_BLOCKS * BLOCK_SIZE  # 7168 bytes

# Directory entry layout (26 bytes, little-endian, packed)
DIR_ENTRY_SIZE = 26
DIR_ENTRY_FORMAT = '<12sBIHHHBBB'
EOS_FILENAME_LEN = 12
FILENAME_TERMINATOR = 0x03
MAX_DIR_SLOTS = DIR_BUFFER_SIZE // DIR_ENTRY_SIZE  # 275, slot 0 is the volume label

# Entry attributes
ATTR_BLOCKS_LEFT = 0x01
ATTR_EXEC_PROTECT = 0x02
ATTR_DELETED = 0x04
ATTR_SYSTEM_FILE = 0x08
ATTR_USER_FILE = 0x10
ATTR_READ_PROTECT = 0x20
ATTR_WRITE_PROTECT = 0x40
ATTR_LOCKED = 0x80

# Listing order for the attribute mask
ATTR_FLAGS = (
    (ATTR_BLOCKS_LEFT, 'L'),
    (ATTR_EXEC_PROTECT, 'X'),
    (ATTR_DELETED, 'D'),
    (ATTR_SYSTEM_FILE, 'S'),
    (ATTR_USER_FILE, 'U'),
    (ATTR_READ_PROTECT, 'R'),
    (ATTR_WRITE_PROTECT, 'W'),
    (ATTR_LOCKED, 'K'),
)
ATTR_CLEAR_CHAR = '-'

# Image modes (chosen from the image file name)
MODE_DSK = 'dsk'         # Sector-interleaved floppy image
MODE_DDP = 'ddp'         # Flat digital data pack image
IMAGE_MODES = (MODE_DSK, MODE_DDP)

# Image creator argument limits
MAX_LABEL_LEN = EOS_FILENAME_LEN - 1  # Room for the terminator
MAX_DIR_BLOCKS_ARG = 6
