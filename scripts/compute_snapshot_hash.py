from __future__ import annotations

import argparse

from srcindex.testing import excerpt_digest, snapshot_digest


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="compute_snapshot_hash")
    ap.add_argument("--seed", type=int, default=1, help="Seed of the generated corpus check")
    ap.add_argument("--count", type=int, default=500)
    args = ap.parse_args(argv)

    # Splitting must never change an excerpt.
    for chunk_size in (1, 2, 5):
        if snapshot_digest(chunk_size=chunk_size) != snapshot_digest():
            raise SystemExit(f"chunk size {chunk_size} changed the snapshot excerpts")
    if excerpt_digest(seed=args.seed, count=args.count, chunked=True) != excerpt_digest(seed=args.seed, count=args.count):
        raise SystemExit(f"chunked ingestion changed the corpus excerpts (seed={args.seed})")

    print(snapshot_digest())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
