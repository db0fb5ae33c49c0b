from __future__ import annotations

import argparse
import logging

from .api import FILE_CHUNK_SIZE, load_file
from .handler import TextRenderer


def _position(s: str) -> tuple[int, int]:
    line, sep, column = s.partition(":")
    try:
        if not sep:
            raise ValueError(s)
        pos = (int(line), int(column))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected LINE:COLUMN, got {s!r}") from None
    if pos[0] < 1 or pos[1] < 1:
        raise argparse.ArgumentTypeError(f"line and column are 1-based, got {s!r}")
    return pos


def _line(s: str) -> tuple[int]:
    try:
        n = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a line number, got {s!r}") from None
    if n < 1:
        raise argparse.ArgumentTypeError(f"line numbers are 1-based, got {s!r}")
    return (n,)


def _tagged(kind: str, parse):
    def convert(s: str) -> tuple[object, ...]:
        return (kind, *parse(s))

    convert.__name__ = kind
    return convert


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="srcindex", description="Show source excerpts for error positions")
    ap.add_argument("file", help="Text file to index")
    ap.add_argument(
        "--record",
        dest="queries",
        action="append",
        type=_tagged("record", _position),
        metavar="L:C",
        help="Checkpoint a parser position, used to infer range starts (repeatable)",
    )
    ap.add_argument(
        "--point",
        dest="queries",
        action="append",
        type=_tagged("point", _position),
        metavar="L:C",
        help="Show the character at L:C with context (repeatable)",
    )
    ap.add_argument(
        "--range",
        dest="queries",
        action="append",
        type=_tagged("range", _position),
        metavar="L:C",
        help="Show the range ending at L:C, starting at the previous checkpoint (repeatable)",
    )
    ap.add_argument(
        "--line",
        dest="queries",
        action="append",
        type=_tagged("line", _line),
        metavar="L",
        help="Show line L (repeatable)",
    )
    ap.add_argument("--chunk-size", type=int, default=FILE_CHUNK_SIZE, help="Read the file in chunks of N characters")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.chunk_size <= 0:
        ap.error("--chunk-size must be positive")

    src = load_file(args.file, chunk_size=args.chunk_size)
    if not args.queries:
        print(f"{args.file}: {src.number_of_lines} lines")
        return 0

    for kind, *pos in args.queries:
        if kind == "record":
            src.add_locator_location(*pos)
            continue
        r = TextRenderer()
        if kind == "point":
            src.exact_error(*pos, r)
        elif kind == "range":
            src.range_end_error(*pos, r)
        else:
            src.line_error(*pos, r)
        where = ":".join(str(n) for n in pos)
        if r.excerpts:
            print(f"{args.file}:{where}: {kind}")
            print(r.excerpts[-1])
        else:
            print(f"{args.file}:{where}: {kind}: outside the indexed source")
    return 0
