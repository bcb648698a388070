"""Shared read helper for the binary decoders."""

from __future__ import annotations

from typing import BinaryIO


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """
    Reads up to ``size`` bytes, looping over short reads.

    Returns fewer than ``size`` bytes only when the stream is exhausted.
    """
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)
