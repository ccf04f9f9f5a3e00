import argparse
import logging
import os
import sys
from typing import List, NoReturn, Optional

from ..config.loader import load_config
from ..config.validate import validate_config
from ..errors import LsregError
from ..logging_conf import setup_logging
from ..version import __version__
from .commands.dump import dump_command
from .commands.find import find_command

logger = logging.getLogger(__name__)

PROG = "lsreg"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, description="Launch Services registry access.")
    parser.add_argument("-f", "--format", default=None,
                        help="Output format: 'c' (default), 'xml' or 'json'")
    parser.add_argument("-i", "--input", default=None,
                        help="Read a saved 'lsregister -dump' file instead of running lsregister ('-' for stdin)")
    parser.add_argument("--config", default=None, help="Path to config file (default: lsreg.yaml if present)")
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL env or config)")
    parser.add_argument("-V", "--version", action="store_true",
                        help="Show version number and quit")

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("dump", aliases=["list"], help="Output all information available")
    find_parser = subparsers.add_parser("find", help="Print paths of bundles whose identifier starts with PREFIX")
    find_parser.add_argument("prefix", help="Identifier prefix, e.g. com.apple.")
    subparsers.add_parser("help", help="Show this help message and quit")
    return parser


def die(message: str) -> NoReturn:
    print(f"{PROG}: {message}", file=sys.stderr)
    print(f"Type '{PROG} help' for usage.", file=sys.stderr)
    sys.exit(2)


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"liblsreg {__version__}", file=sys.stderr)
        sys.exit(0)

    if args.command in (None, "help"):
        parser.print_help(sys.stderr)
        sys.exit(1)

    try:
        config = load_config(args.config)
        if args.format:
            config.output.format = args.format.lower()
        validate_config(config)
    except LsregError as e:
        die(str(e))

    log_level = (args.log_level or os.environ.get("LOG_LEVEL") or config.logging.level).upper()
    setup_logging(log_level=getattr(logging, log_level, logging.INFO), log_file=config.logging.file)

    try:
        if args.command in ("dump", "list"):
            dump_command(config, sys.stdout, input_path=args.input)
        elif args.command == "find":
            find_command(config, args.prefix, sys.stdout, input_path=args.input)
    except LsregError as e:
        die(str(e))
    except BrokenPipeError:
        # Reader went away (e.g. "| head"); keep the interpreter from flushing into it again
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(1)


if __name__ == "__main__":
    main()
