"""
Benchmark Dataset Registry Definitions.

Contains DatasetMetadata for the four supported benchmarks. The MNIST pair
and the CIFAR pair share one decoder each; everything that differs between
siblings lives in these entries.
"""

from __future__ import annotations

from typing import Dict, Final

from ...exceptions import VisionConfigError
from .base import DatasetMetadata

_IDX_TRAIN_FILES: Final = ("train-labels-idx1-ubyte.gz", "train-images-idx3-ubyte.gz")
_IDX_TEST_FILES: Final = ("t10k-labels-idx1-ubyte.gz", "t10k-images-idx3-ubyte.gz")

_CIFAR10_DIR: Final = "cifar-10-batches-bin"
_CIFAR100_DIR: Final = "cifar-100-binary"

# BENCHMARK DATASET REGISTRY
DATASET_REGISTRY: Final[Dict[str, DatasetMetadata]] = {
    "mnist": DatasetMetadata(
        name="mnist",
        display_name="MNIST",
        family="idx",
        default_home="MNIST",
        url="https://ossci-datasets.s3.amazonaws.com/mnist/",
        train_files=_IDX_TRAIN_FILES,
        test_files=_IDX_TEST_FILES,
        pixel_width=784,
        image_shape=(28, 28),
        num_classes=10,
    ),
    "fashion_mnist": DatasetMetadata(
        name="fashion_mnist",
        display_name="Fashion-MNIST",
        family="idx",
        default_home="FashionMNIST",
        url="http://fashion-mnist.s3-website.eu-central-1.amazonaws.com/",
        train_files=_IDX_TRAIN_FILES,
        test_files=_IDX_TEST_FILES,
        pixel_width=784,
        image_shape=(28, 28),
        num_classes=10,
    ),
    "cifar10": DatasetMetadata(
        name="cifar10",
        display_name="CIFAR-10",
        family="fixed_record",
        default_home="CIFAR10",
        url="https://www.cs.toronto.edu/~kriz/cifar-10-binary.tar.gz",
        train_files=tuple(f"{_CIFAR10_DIR}/data_batch_{i}.bin" for i in range(1, 6)),
        test_files=(f"{_CIFAR10_DIR}/test_batch.bin",),
        label_width=1,
        pixel_width=3072,
        image_shape=(32, 32, 3),
        num_classes=10,
    ),
    "cifar100": DatasetMetadata(
        name="cifar100",
        display_name="CIFAR-100",
        family="fixed_record",
        default_home="CIFAR100",
        url="https://www.cs.toronto.edu/~kriz/cifar-100-binary.tar.gz",
        train_files=(f"{_CIFAR100_DIR}/train.bin",),
        test_files=(f"{_CIFAR100_DIR}/test.bin",),
        label_width=2,
        pixel_width=3072,
        image_shape=(32, 32, 3),
        num_classes=100,
        num_coarse_classes=20,
    ),
}

# Accepted spellings → registry key
_ALIASES: Final[Dict[str, str]] = {
    "fashion-mnist": "fashion_mnist",
    "fashionmnist": "fashion_mnist",
    "cifar-10": "cifar10",
    "cifar-100": "cifar100",
}


def get_dataset_metadata(name: str) -> DatasetMetadata:
    """
    Retrieves DatasetMetadata by name (case-insensitive, common aliases allowed).

    Raises:
        VisionConfigError: If the dataset is not registered.
    """
    key = name.strip().lower()
    key = _ALIASES.get(key, key)

    if key not in DATASET_REGISTRY:
        available = sorted(DATASET_REGISTRY)
        raise VisionConfigError(f"Dataset '{name}' not found. Available: {available}")

    return DATASET_REGISTRY[key]
