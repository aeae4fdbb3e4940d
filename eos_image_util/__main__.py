"""
Entry point for the EOS disk image utility.

Allows running as: python -m eos_image_util
"""

import argparse
import sys

from . import __version__
from .commands import cmd_create, cmd_info, cmd_list
from .formatter import OutputFormatter
from .logging_config import setup_logging, QUIET, NORMAL, VERBOSE


class UsageParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on a usage error."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return number


def _add_make_image_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('output', metavar='fname.dsk|ddp',
                        help='Filename for image with DDP or DSK extender')
    parser.add_argument('label', help='Volume label (11 chars max)')
    parser.add_argument('total_blocks', type=_positive_int,
                        help='Total # of blocks for volume')
    parser.add_argument('dir_blocks', type=int,
                        help='# of directory blocks for volume (6 max)')
    parser.add_argument('dir', nargs='?', default=None,
                        help='Optional name of directory of files to copy in')


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = UsageParser(
        prog='eos_image_util',
        description='Coleco ADAM EOS disk image utility (DSK and DDP images)',
    )

    # Global options
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Show detailed output')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Suppress non-essential output')
    parser.add_argument('--json', action='store_true', help='Output in JSON format')

    subparsers = parser.add_subparsers(dest='command', required=True)

    # List command
    list_parser = subparsers.add_parser('ls', help='List the directory of an image')
    list_parser.add_argument('path', help='Disk image (image.dsk or image.ddp)')
    list_parser.add_argument('-l', '--long', action='store_true',
                             help='Show attributes, sizes and dates')

    # Info command
    info_parser = subparsers.add_parser('info', help='Show volume statistics')
    info_parser.add_argument('path', help='Disk image (image.dsk or image.ddp)')

    # Make-image command
    create_parser = subparsers.add_parser('make-image', help='Create a new empty image file')
    _add_make_image_arguments(create_parser)

    args = parser.parse_args(argv)

    if args.quiet:
        setup_logging(level=QUIET)
    elif args.verbose:
        setup_logging(level=VERBOSE)
    else:
        setup_logging(level=NORMAL)

    formatter = OutputFormatter(json_mode=args.json)

    match args.command:
        case 'ls':
            return cmd_list(args, formatter)
        case 'info':
            return cmd_info(args, formatter)
        case 'make-image':
            return cmd_create(args, formatter)
        case _:
            formatter.error(f"Unknown command: {args.command}")
            return 1


def ls_main(argv: list[str] | None = None) -> int:
    """Entry point for eos-ls: prog [-l] <image.dsk|ddp>."""
    parser = UsageParser(prog='eos-ls', description='List an EOS directory')
    parser.add_argument('-l', dest='long', action='store_true',
                        help='Show attributes, sizes and dates')
    parser.add_argument('path', metavar='image.dsk|ddp', help='Disk image to list')
    args = parser.parse_args(argv)

    setup_logging(level=QUIET)
    return cmd_list(args, OutputFormatter())


def make_image_main(argv: list[str] | None = None) -> int:
    """Entry point for eos-make-image."""
    parser = UsageParser(prog='eos-make-image',
                         description='Create an EOS image file')
    _add_make_image_arguments(parser)
    args = parser.parse_args(argv)

    setup_logging(level=NORMAL)
    return cmd_create(args, OutputFormatter())


if __name__ == '__main__':
    sys.exit(main())
