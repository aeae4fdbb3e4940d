"""
Command handlers for the EOS disk image utilities.
"""

from .constants import MAX_DIR_BLOCKS_ARG
from .creator import create_image
from .exceptions import DiskError, EOSError, ImageCreateError, MalformedDirectoryError
from .formatter import OutputFormatter
from .image import EOSDiskImage
from .logging_config import get_logger
from .utils import detect_image_mode, validate_label

log = get_logger('commands')


def _report(formatter: OutputFormatter, e: EOSError) -> None:
    """Report an error with the stage it came from."""
    if isinstance(e, DiskError) and e.stage == 'open':
        formatter.error(f"could not open image: {e}")
    elif isinstance(e, DiskError):
        formatter.error(f"read failed: {e}")
    elif isinstance(e, MalformedDirectoryError):
        formatter.error(f"bad directory: {e}")
    else:
        formatter.error(str(e))


def cmd_list(args, formatter: OutputFormatter) -> int:
    """Handle the 'ls' command."""
    verbose = getattr(args, 'long', False)

    try:
        with EOSDiskImage(args.path) as disk:
            directory = disk.read_directory()
            formatter.list_directory(directory, verbose=verbose, path=args.path)
        return 0

    except EOSError as e:
        _report(formatter, e)
        return 1


def cmd_info(args, formatter: OutputFormatter) -> int:
    """Handle the 'info' command."""
    try:
        with EOSDiskImage(args.path) as disk:
            info = disk.read_directory().summary()
            info['image'] = args.path
            info['mode'] = disk.mode
        formatter.disk_info(info)
        return 0

    except EOSError as e:
        _report(formatter, e)
        return 1


def cmd_create(args, formatter: OutputFormatter) -> int:
    """Handle the 'make-image' command."""
    try:
        detect_image_mode(args.output)
        validate_label(args.label)
        if not 1 <= args.dir_blocks <= MAX_DIR_BLOCKS_ARG:
            raise ImageCreateError(
                f"Directory blocks must be 1-{MAX_DIR_BLOCKS_ARG}, got {args.dir_blocks}")

        if not formatter.json_mode:
            print(f"{'Filename':>16}: {args.output}")
            print(f"{'Label':>16}: {args.label}")
            print(f"{'# Total Blocks':>16}: {args.total_blocks}")
            print(f"{'# Dir Blocks':>16}: {args.dir_blocks}")
            if args.dir:
                print(f"{'Directory':>16}: {args.dir}")

        create_image(args.output, args.total_blocks)

        if args.dir:
            log.warning("Copying files from %s is not supported; image left empty", args.dir)

        formatter.success(
            f"Created {args.output}",
            path=args.output,
            label=args.label,
            total_blocks=args.total_blocks,
            dir_blocks=args.dir_blocks,
        )
        return 0

    except EOSError as e:
        formatter.error(str(e))
        return 1
