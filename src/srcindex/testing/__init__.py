from __future__ import annotations

from .corpus import (
    SNAPSHOT_CASES,
    chunk_document,
    excerpt_digest,
    generate_documents,
    run_queries,
    snapshot_digest,
)

__all__ = [
    "SNAPSHOT_CASES",
    "chunk_document",
    "excerpt_digest",
    "generate_documents",
    "run_queries",
    "snapshot_digest",
]
