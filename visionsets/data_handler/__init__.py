"""
Data Handler Package

Manages the dataset pipeline from cache resolution and archive download to
binary decoding into in-memory Dataset values.
"""

from .builder import load_cifar10, load_cifar100, load_dataset, load_fashion_mnist, load_mnist
from .cache import needs_download
from .dataset import Dataset, Label
from .decoders import (
    decode_fixed_records,
    decode_idx,
    decode_idx_images,
    decode_idx_labels,
    read_fixed_record_files,
    read_idx_images,
    read_idx_labels,
)
from .fetcher import ensure_directory, fetch_and_unpack, fetch_files

__all__ = [
    "load_dataset",
    "load_mnist",
    "load_fashion_mnist",
    "load_cifar10",
    "load_cifar100",
    "needs_download",
    "Dataset",
    "Label",
    "decode_idx",
    "decode_idx_labels",
    "decode_idx_images",
    "read_idx_labels",
    "read_idx_images",
    "decode_fixed_records",
    "read_fixed_record_files",
    "ensure_directory",
    "fetch_files",
    "fetch_and_unpack",
]
