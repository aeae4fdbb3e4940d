#!/usr/bin/env python3
"""
Entry point script for the CLI executable.
Used by PyInstaller to build a standalone eos_image_util binary.
"""

import sys
from eos_image_util.__main__ import main

if __name__ == '__main__':
    sys.exit(main())
