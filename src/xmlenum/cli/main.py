"""Main CLI entry point for the xmlenum command-line tool.

Prints the merged tag shape found under a named element across one or more
XML files:

    xmlenum catalog a.xml b.xml
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from xmlenum import __version__
from xmlenum.api import enumerate_files
from xmlenum.shared import ConfigError, ShapeConfig, UsageError, XmlEnumError, get_logger
from xmlenum.tree import render_tree

USAGE = "%(prog)s [options] FIRST_ELEMENT_NAME FILES*"

logger = get_logger(__name__, None, "cli")


def _indent_step(value: str) -> int:
    try:
        step = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid indent step: {value!r}") from None
    if step < 1:
        raise argparse.ArgumentTypeError("indent step must be >= 1")
    return step


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="xmlenum",
        usage=USAGE,
        description=(
            "Print every tag nesting found beneath FIRST_ELEMENT_NAME, "
            "merged across all FILES"
        ),
    )

    parser.add_argument("--version", action="version", version=__version__)

    # Optional at the argparse level so a short command line is reported
    # with the tool's own usage line. Options may appear between them
    # because main() parses intermixed arguments.
    parser.add_argument("root", nargs="?", metavar="FIRST_ELEMENT_NAME",
                        help="Element name at which aggregation begins")
    parser.add_argument("files", nargs="*", type=Path, metavar="FILES",
                        help="XML files to aggregate")

    parser.add_argument(
        "--indent",
        type=_indent_step,
        help="Spaces per nesting level (default: 4)"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="JSON configuration file path"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )

    return parser


def load_config(args: argparse.Namespace) -> ShapeConfig:
    """Build the run configuration from ``--config`` and command-line overrides."""
    config = ShapeConfig()
    if args.config:
        try:
            config = ShapeConfig.from_file(args.config)
        except ConfigError as e:
            print(f"Warning: {e}", file=sys.stderr)

    return config.override(indent_step=args.indent)


def run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    """Aggregate the named files and print the rendered shape."""
    if not args.root or not args.files:
        raise UsageError(parser.format_usage().strip())

    config = load_config(args)
    tree = enumerate_files(args.files, args.root, config)

    sys.stdout.write(render_tree(tree, config.indent_step))
    sys.stdout.flush()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_intermixed_args(argv)

    # Set up logging verbosity
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    elif args.quiet:
        logging.basicConfig(level=logging.ERROR)

    try:
        return run(args, parser)

    except XmlEnumError as e:
        logger.debug("Run aborted", extra={"error_type": type(e).__name__})
        print(e, file=sys.stderr)
        return e.exit_code

    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT


if __name__ == "__main__":
    sys.exit(main())
