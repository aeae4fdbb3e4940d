"""
Output formatting for EOS disk image utilities.
"""

import json
import sys
from typing import Any

from .directory import Directory
from .models import DirectoryEntry


def _entry_row(entry: DirectoryEntry) -> str:
    """Format one entry as a long listing row."""
    return (
        f"{entry.attr_string()}"
        f" {entry.start_block:10d} "
        f" {entry.used_bytes:5d} / {entry.allocated_bytes:<5d} "
        f" {entry.date_string} "
        f"{entry.name}"
    )


def _entry_dict(entry: DirectoryEntry) -> dict[str, Any]:
    return {
        "name": entry.name,
        "attr": entry.attr_string(),
        "attributes": entry.attributes,
        "start_block": entry.start_block,
        "size": entry.used_bytes,
        "allocated": entry.allocated_bytes,
        "blocks_used": entry.blocks_used,
        "allocated_blocks": entry.allocated_blocks,
        "date": entry.date_string,
        "is_deleted": entry.is_deleted,
    }


class OutputFormatter:
    """Handle output formatting (text or JSON)."""

    def __init__(self, json_mode: bool = False):
        self.json_mode = json_mode

    def success(self, message: str, **data) -> None:
        """Output success message."""
        if self.json_mode:
            output = {"status": "success", "message": message, **data}
            print(json.dumps(output))
        else:
            print(message)

    def error(self, message: str) -> None:
        """Output error message."""
        if self.json_mode:
            output = {"status": "error", "message": message}
            print(json.dumps(output))
        else:
            print(f"Error: {message}", file=sys.stderr)

    def list_directory(self, directory: Directory, verbose: bool = False, path: str = "") -> None:
        """
        Output a directory listing.

        Terse mode prints one filename per line. Verbose mode adds the
        volume label, an attribute/size/date row per entry and the free
        space left on the volume.
        """
        if self.json_mode:
            files = []
            terminator = None
            for entry in directory.entries():
                if entry.is_blocks_left:
                    terminator = entry
                else:
                    files.append(_entry_dict(entry))
            output = {
                "status": "success",
                "image": path,
                "volume": directory.volume_label(),
                "files": files,
                "bytes_free": terminator.free_space_bytes,
            }
            print(json.dumps(output))
            return

        # Fully decoded before anything is printed
        lines = []
        if verbose:
            lines += ["", f"VOLUME: {directory.volume_label()}", ""]

        for entry in directory.entries():
            if entry.is_blocks_left:
                if verbose:
                    lines += ["", f" {entry.free_space_bytes:10d} BYTES FREE", ""]
            elif verbose:
                lines.append(_entry_row(entry))
            else:
                lines.append(entry.name)

        for line in lines:
            print(line)

    def disk_info(self, info: dict[str, Any]) -> None:
        """Output volume statistics."""
        if self.json_mode:
            print(json.dumps({"status": "success", **info}))
            return

        rows = [
            ("Image", info.get('image', '')),
            ("Format", info.get('mode', '').upper()),
            ("Volume", info['label']),
            ("Files", info['files']),
            ("Deleted", info['deleted']),
            ("Locked", info['locked']),
            ("System files", info['system_files']),
            ("Used", f"{info['used_bytes']:,} bytes"),
            ("Allocated", f"{info['allocated_bytes']:,} bytes"),
            ("Free", f"{info['free_bytes']:,} bytes ({info['free_blocks']} blocks)"),
        ]
        for label, value in rows:
            print(f"{label:>16}: {value}")
