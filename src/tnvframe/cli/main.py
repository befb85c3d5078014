"""Main CLI entry point for tnvframe."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Sequence

from .. import __version__
from ..codec.buffer import AppendResult, FrameBuffer
from ..codec.types import TYPE_REGISTRY, ValueType, lookup_name
from ..config import MAX_CAPACITY, FrameConfig
from ..diagnostics import StreamSink
from ..exceptions import TnvFrameError

_SCALAR_OPTIONS = ("uint8", "uint16", "uint32", "int8", "int16", "int32")


class _ScalarAction(argparse.Action):
    """Collect scalar options into one list, keeping command-line order."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        scalars = list(getattr(namespace, self.dest, None) or [])
        scalars.append((self.metavar.lower(), values))
        setattr(namespace, self.dest, scalars)


def _parse_int(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None


def _parse_record(text: str) -> tuple[ValueType, int, int]:
    parts = text.split(":")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"record must be TYPE:NUMBER:VALUE, got {text!r}")
    tag = lookup_name(parts[0])
    if tag is None:
        raise argparse.ArgumentTypeError(f"unknown value type: {parts[0]!r}")
    return tag, _parse_int(parts[1]), _parse_int(parts[2])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tnvframe",
        description="tnvframe: Compact TNV payload encoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tnvframe --uint16 0x1234 volumetric_water_content:3:500
  tnvframe --decoder version:0:1 soil_temperature:0:-125
  tnvframe --list-types
        """,
    )

    parser.add_argument(
        "records",
        metavar="RECORD",
        nargs="*",
        type=_parse_record,
        help="TNV record as TYPE:NUMBER:VALUE (TYPE is case-insensitive)",
    )

    for name in _SCALAR_OPTIONS:
        parser.add_argument(
            f"--{name}",
            dest="scalars",
            metavar=name.upper(),
            type=_parse_int,
            action=_ScalarAction,
            help=f"Append a {name} scalar before the records (repeatable)",
        )

    parser.add_argument(
        "--capacity",
        type=int,
        default=MAX_CAPACITY,
        help=f"Payload capacity in bytes (default {MAX_CAPACITY})",
    )
    parser.add_argument("--decoder", action="store_true", help="Print TTN decoder snippets")
    parser.add_argument("--verbose", action="store_true", help="Log each appended value")
    parser.add_argument("--spaced", action="store_true", help="Print 0xNN listing instead of hex")
    parser.add_argument(
        "--strict", action="store_true", help="Fail on the first append that doesn't fit"
    )
    parser.add_argument("--list-types", action="store_true", help="List registered value types")
    parser.add_argument("--version", action="version", version=f"tnvframe {__version__}")
    return parser


def list_types() -> None:
    """Print the type registry as a table."""
    print(f"{'Type':<28} {'Code':>6} {'Width':>6}  Signed")
    for tag, info in TYPE_REGISTRY.items():
        print(
            f"{tag.name:<28} {f'0x{info.wire_code:02X}':>6} {info.width:>6}  "
            f"{'yes' if info.signed else 'no'}"
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the tnvframe CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_types:
        list_types()
        return 0

    if not args.records and not args.scalars:
        parser.print_help()
        return 0

    try:
        config = FrameConfig(
            capacity=args.capacity,
            emit_decoder_text=args.decoder,
            emit_added_bytes=args.verbose,
            strict=args.strict,
        )
        frame = FrameBuffer(config, sink=StreamSink(sys.stdout))

        for kind, value in args.scalars or []:
            result = getattr(frame, f"append_{kind}")(value)
            _warn_rejected(result, f"{kind} {value}")

        for tag, number, value in args.records:
            result = frame.append_tnv(tag, number, value)
            _warn_rejected(result, f"{tag.name}:{number}:{value}")
    except TnvFrameError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(frame.format_hex() if args.spaced else frame.hex())
    return 0


def _warn_rejected(result: AppendResult, what: str) -> None:
    if not result:
        print(f"Warning: {what} not appended ({result.value})", file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
