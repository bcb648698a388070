"""
IDX Decoder (MNIST family).

Layout of an IDX file::

    offset  type    value
    0       u32 BE  magic: 0x00 0x00 <element type> <number of dims>
    4       u32 BE  dimension 0 (sample count)
    ...     u32 BE  remaining dimensions (rows, cols for images)
    ...     u8[]    payload, row-major

Labels use magic 2049 (0x0801, one dimension) and images 2051 (0x0803,
three dimensions). The cached files are gzip-compressed and are inflated
lazily while decoding.
"""

from __future__ import annotations

import gzip
import logging
import struct
import zlib
from pathlib import Path
from typing import BinaryIO, Callable, Final, TypeVar

from ...core.logger import LogStyle
from ...core.paths import LOGGER_NAME
from ...exceptions import ArchiveError, DataIntegrityError
from ._stream import read_exact

logger = logging.getLogger(LOGGER_NAME)

LABEL_MAGIC: Final[int] = 2049
IMAGE_MAGIC: Final[int] = 2051

_U32: Final = struct.Struct(">I")

_T = TypeVar("_T")

_CORRUPT_HINT: Final[str] = "The cache is likely corrupt; force a redownload."


def decode_idx(stream: BinaryIO, expected_magic: int) -> tuple[tuple[int, ...], bytes]:
    """
    Parses an IDX header and returns it together with the raw payload.

    The number of dimension fields is taken from the low byte of
    ``expected_magic`` (1 for labels, 3 for images).

    Args:
        stream: Binary stream positioned at the start of the IDX data.
        expected_magic: Magic number the stream must start with.

    Returns:
        tuple: ``(header, payload)`` where ``header`` is
        ``(magic, *dims)`` and ``payload`` is everything after it.

    Raises:
        DataIntegrityError: If the magic number does not match or the
            header is cut short.
    """
    raw_magic = read_exact(stream, _U32.size)
    if len(raw_magic) < _U32.size:
        raise DataIntegrityError(f"IDX stream too short to hold a magic number. {_CORRUPT_HINT}")

    (magic,) = _U32.unpack(raw_magic)
    if magic != expected_magic:
        raise DataIntegrityError(
            f"Unexpected IDX magic number {magic} (expected {expected_magic}). {_CORRUPT_HINT}"
        )

    num_dims = expected_magic & 0xFF
    raw_dims = read_exact(stream, _U32.size * num_dims)
    if len(raw_dims) < _U32.size * num_dims:
        raise DataIntegrityError(f"IDX header truncated after the magic number. {_CORRUPT_HINT}")

    dims = struct.unpack(f">{num_dims}I", raw_dims)
    payload = stream.read()

    return (magic, *dims), payload


def decode_idx_labels(stream: BinaryIO) -> list[int]:
    """
    Decodes an IDX label stream: one label per payload byte.

    A declared count that disagrees with the payload length is logged and
    otherwise ignored.
    """
    (_, declared), payload = decode_idx(stream, LABEL_MAGIC)

    if declared != len(payload):
        logger.warning(
            f"{LogStyle.WARNING} IDX label header declares {declared} items, "
            f"payload holds {len(payload)}"
        )

    return list(payload)


def decode_idx_images(stream: BinaryIO) -> list[bytes]:
    """
    Decodes an IDX image stream into one ``rows * cols`` buffer per image.

    The image count is ``len(payload) // (rows * cols)``; trailing bytes
    that do not form a whole image are dropped with a warning.

    Raises:
        DataIntegrityError: On a bad magic number or a zero-sized image.
    """
    (_, declared, rows, cols), payload = decode_idx(stream, IMAGE_MAGIC)

    size = rows * cols
    if size == 0:
        raise DataIntegrityError(f"IDX image header declares {rows}x{cols} images. {_CORRUPT_HINT}")

    count, remainder = divmod(len(payload), size)
    if remainder:
        logger.warning(
            f"{LogStyle.WARNING} Dropping {remainder} trailing bytes that do not form a whole image"
        )
    if declared != count:
        logger.warning(
            f"{LogStyle.WARNING} IDX image header declares {declared} items, payload holds {count}"
        )

    return [payload[i * size : (i + 1) * size] for i in range(count)]


def read_idx_labels(path: Path) -> list[int]:
    """Decodes a gzip-compressed IDX label file."""
    return _read_gzip(path, decode_idx_labels)


def read_idx_images(path: Path) -> list[bytes]:
    """Decodes a gzip-compressed IDX image file."""
    return _read_gzip(path, decode_idx_images)


def _read_gzip(path: Path, decode: Callable[[BinaryIO], _T]) -> _T:
    """Opens ``path`` through gzip and applies ``decode``; FileNotFoundError propagates."""
    with gzip.open(path, "rb") as stream:
        try:
            return decode(stream)
        except (gzip.BadGzipFile, EOFError, zlib.error) as e:
            logger.error(f"Could not decompress {path}: {e}")
            raise ArchiveError(f"Corrupt gzip file {path}: {e}") from e
