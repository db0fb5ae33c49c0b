from __future__ import annotations

import argparse
from pathlib import Path

from srcindex import load_file
from srcindex.testing import generate_documents


def _terminators(text: str) -> str:
    crlf = text.count("\r\n")
    return f"lf={text.count(chr(10)) - crlf} cr={text.count(chr(13)) - crlf} crlf={crlf}"


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="generate_corpus", description="Write generated documents as text files")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=100)
    ap.add_argument("--out", type=Path, default=Path("tests/fixtures/documents"))
    ap.add_argument("-l", "--list", action="store_true", help="Print line and terminator counts per file")
    args = ap.parse_args(argv)

    out_dir = args.out.resolve() / f"seed_{args.seed}"
    out_dir.mkdir(parents=True, exist_ok=True)

    total = 0
    for i, text in enumerate(generate_documents(seed=args.seed, count=args.count)):
        p = out_dir / f"doc_{i:05d}.txt"
        # newline="" so CR and CRLF reach the disk unchanged
        with p.open("w", encoding="utf-8", newline="") as f:
            f.write(text)
        lines = load_file(p).number_of_lines
        total += lines
        if args.list:
            print(f"{p.name}: {lines} lines, {_terminators(text)}")

    print(f"{out_dir}: {args.count} documents, {total} lines")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
