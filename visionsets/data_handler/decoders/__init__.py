"""
Binary Decoders.

One decoder per on-disk format, parameterized by the dataset registry:

- ``idx``: MNIST-family IDX files (magic + big-endian dims + payload).
- ``fixed_record``: CIFAR-family headerless ``label + pixels`` records.
"""

from .fixed_record import decode_fixed_records, read_fixed_record_files
from .idx import (
    IMAGE_MAGIC,
    LABEL_MAGIC,
    decode_idx,
    decode_idx_images,
    decode_idx_labels,
    read_idx_images,
    read_idx_labels,
)

__all__ = [
    "IMAGE_MAGIC",
    "LABEL_MAGIC",
    "decode_idx",
    "decode_idx_images",
    "decode_idx_labels",
    "read_idx_images",
    "read_idx_labels",
    "decode_fixed_records",
    "read_fixed_record_files",
]
