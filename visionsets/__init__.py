"""
VisionSets: acquisition and decoding of standard image benchmarks.

Top-level convenience API re-exporting the most commonly used components,
so users can write:

    from visionsets import LoaderConfig, load_dataset

    mnist = load_dataset("mnist", LoaderConfig(verbose=True))
"""

from importlib.metadata import version as _pkg_version

__version__ = _pkg_version("visionsets")

from .core import DATASET_REGISTRY, LoaderConfig, Logger, LogStyle, get_dataset_metadata
from .data_handler import (
    Dataset,
    load_cifar10,
    load_cifar100,
    load_dataset,
    load_fashion_mnist,
    load_mnist,
)
from .exceptions import (
    ArchiveError,
    DataIntegrityError,
    DownloadError,
    TruncatedRecordError,
    VisionConfigError,
    VisionDatasetError,
    VisionError,
)

__all__ = [
    "__version__",
    # Core
    "DATASET_REGISTRY",
    "LoaderConfig",
    "Logger",
    "LogStyle",
    "get_dataset_metadata",
    # Loading
    "Dataset",
    "load_dataset",
    "load_mnist",
    "load_fashion_mnist",
    "load_cifar10",
    "load_cifar100",
    # Errors
    "VisionError",
    "VisionConfigError",
    "VisionDatasetError",
    "DownloadError",
    "ArchiveError",
    "DataIntegrityError",
    "TruncatedRecordError",
]
