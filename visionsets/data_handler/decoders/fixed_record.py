"""
Fixed-Record Decoder (CIFAR family).

A CIFAR binary batch is a headerless sequence of records::

    <label_width label bytes><pixel_width pixel bytes>

``label_width`` is 1 for CIFAR-10 and 2 for CIFAR-100 (coarse, fine).
Pixels are 1024 red, 1024 green, then 1024 blue bytes for a 32x32 image.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Iterable

from ...core.paths import LOGGER_NAME
from ...exceptions import TruncatedRecordError
from ..dataset import Label
from ._stream import read_exact

logger = logging.getLogger(LOGGER_NAME)


def decode_fixed_records(
    stream: BinaryIO,
    label_width: int,
    pixel_width: int,
) -> tuple[list[Label], list[bytes]]:
    """
    Decodes repeating ``label + pixel`` records until end of input.

    End of input exactly on a record boundary is the normal stop condition.
    Any other read error propagates unchanged.

    Args:
        stream: Binary stream positioned at the first record.
        label_width: Label bytes per record, 1 or 2.
        pixel_width: Pixel bytes per record.

    Returns:
        tuple: ``(labels, images)`` in file order. Labels are ints for
        width 1 and ``(coarse, fine)`` tuples for width 2.

    Raises:
        ValueError: If the record geometry is invalid.
        TruncatedRecordError: If the stream ends inside a record.
    """
    if label_width not in (1, 2):
        raise ValueError(f"label_width must be 1 or 2, got {label_width}")
    if pixel_width < 1:
        raise ValueError(f"pixel_width must be positive, got {pixel_width}")

    stride = label_width + pixel_width
    labels: list[Label] = []
    images: list[bytes] = []

    while True:
        record = read_exact(stream, stride)
        if not record:
            break
        if len(record) < stride:
            raise TruncatedRecordError(
                f"Record {len(images)} truncated: got {len(record)} of {stride} bytes"
            )

        labels.append(record[0] if label_width == 1 else (record[0], record[1]))
        images.append(record[label_width:])

    return labels, images


def read_fixed_record_files(
    paths: Iterable[Path],
    label_width: int,
    pixel_width: int,
) -> tuple[list[Label], list[bytes]]:
    """Decodes several batch files and concatenates them in order."""
    labels: list[Label] = []
    images: list[bytes] = []

    for path in paths:
        with open(path, "rb") as stream:
            batch_labels, batch_images = decode_fixed_records(stream, label_width, pixel_width)
        logger.debug(f"Decoded {len(batch_images)} records from {path.name}")
        labels.extend(batch_labels)
        images.extend(batch_images)

    return labels, images
