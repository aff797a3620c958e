from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from propdiff.app import diff_property_files
from propdiff.config import (
    CONSOLE_PREFIX,
    ConfigurationError,
    configure_logging,
    get_output_config,
)
from propdiff.domain.errors import PropDiffError
from propdiff.domain.reconciliation import Operation, Precedence

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

_EPILOG = f"""\
The flags can either be combined or separate.
When no flags are used, all 6 property file combinations are produced.
Flags are case-insensitive.

Use "-f {CONSOLE_PREFIX}" to stream output to console (stdout).

examples:
  dump all variants to console:
    propdiff p1.properties p2.properties -f -
  combine two property files where first is default:
    propdiff -u p1.properties p2.properties

Input property files are not modified.
"""

_FLAG_HELP: dict[Operation, str] = {
    Operation.COMMON: (
        "property settings that are common to both p1 and p2, where p2 takes precedence"
    ),
    Operation.UNION: "union p1 and p2 where p2 has higher precedence",
    Operation.ONLY_IN_BASE: "property settings that are only in p1",
    Operation.ONLY_IN_OVERRIDE: "property settings that are only in p2",
    Operation.INTERSECT_DIFF: (
        "intersection of properties in p1 and p2 that have different values"
    ),
    Operation.INTERSECT_EQUAL: "intersection of properties in p1 and p2 that have equal values",
}


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="propdiff",
        description="Compare and combine two property files (p2 overrides p1)",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("base", metavar="p1", help="default (lower precedence) property file")
    parser.add_argument("override", metavar="p2", help="overriding property file")
    for operation, help_text in _FLAG_HELP.items():
        # Flags are case-insensitive: -C is the same as -c.
        parser.add_argument(
            *dict.fromkeys((f"-{operation.flag}", f"-{operation.flag.upper()}")),
            dest="flags",
            action="append_const",
            const=operation.flag,
            help=help_text,
        )
    parser.add_argument(
        "-f",
        dest="prefix",
        metavar="PREFIX",
        type=str,
        help="file name or path prefix for results, '-' for stdout (defaults to config)",
    )
    parser.add_argument(
        "--precedence",
        type=Precedence,
        choices=list(Precedence),
        default=Precedence.OVERRIDE,
        help="which file wins when both define a key (default: %(default)s)",
    )
    parser.add_argument(
        "--encoding",
        type=str,
        help="character encoding of input and output files (defaults to config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        configure_logging(level=logging.DEBUG if parsed_args.verbose else None)
        output = get_output_config().with_overrides(
            prefix=parsed_args.prefix,
            encoding=parsed_args.encoding,
        )
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)

    if output.to_console:
        log.info("Results go to console (stdout)")
    else:
        log.info("File name or path prefix for results = %r", output.prefix)

    try:
        diff_property_files(
            parsed_args.base,
            parsed_args.override,
            operations=Operation.from_flags(parsed_args.flags or ()),
            precedence=parsed_args.precedence,
            output=output,
        )
    except PropDiffError as exc:
        log.error("%s", exc)  # noqa: TRY400
        sys.exit(1)
    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
