"""
Dataset Builder.

Orchestrates one dataset load end to end:

    1. ensure the cache directory exists
    2. ask the cache resolver whether a download is needed
    3. fetch (multi-file for IDX, archive + unpack for fixed records)
    4. decode the training split, then the test split
    5. assemble the Dataset

The first error at any step propagates; a Dataset is returned only when
all four sequences were decoded.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.config import LoaderConfig
from ..core.logger import log_step, progress_level
from ..core.metadata import DatasetMetadata, get_dataset_metadata
from ..core.paths import LOGGER_NAME
from .cache import needs_download
from .dataset import Dataset, Label
from .decoders import read_fixed_record_files, read_idx_images, read_idx_labels
from .fetcher import ensure_directory, fetch_and_unpack, fetch_files

logger = logging.getLogger(LOGGER_NAME)


# LOADING INTERFACE
def load_dataset(name: str, config: LoaderConfig | None = None) -> Dataset:
    """
    Ensures the dataset is cached locally and decodes both splits.

    Args:
        name: Registry key (``'mnist'``, ``'fashion_mnist'``, ``'cifar10'``,
            ``'cifar100'``) or a common alias such as ``'cifar-10'``.
        config: Cache location and download policy (defaults apply if None).

    Returns:
        Dataset: Train and test labels and images.

    Raises:
        VisionConfigError: If the dataset name is unknown.
        DownloadError: On network failure.
        ArchiveError: On a corrupt gzip or tar archive.
        DataIntegrityError: On an IDX magic number mismatch.
        TruncatedRecordError: If a CIFAR batch ends mid-record.
        OSError: If the cache cannot be created or read.
    """
    metadata = get_dataset_metadata(name)
    cfg = config or LoaderConfig()
    home = cfg.resolve_home(metadata)

    log_step("Cache directory", str(home), cfg.verbose)
    ensure_directory(home)

    if needs_download(metadata.expected_files, home, cfg.force_download):
        log_step("Downloading", metadata.display_name, cfg.verbose)
        _fetch(metadata, home)
    else:
        log_step("Cache", "already downloaded", cfg.verbose)

    log_step("Decoding", metadata.display_name, cfg.verbose)
    train_labels, train_images = _decode_split(metadata, home, metadata.train_files)
    test_labels, test_images = _decode_split(metadata, home, metadata.test_files)

    dataset = Dataset(
        name=metadata.name,
        train_labels=train_labels,
        train_images=train_images,
        test_labels=test_labels,
        test_images=test_images,
    )
    logger.log(
        progress_level(cfg.verbose),
        f"{metadata.display_name} loaded: {dataset.num_train} train / {dataset.num_test} test",
    )
    return dataset


def load_mnist(config: LoaderConfig | None = None) -> Dataset:
    """Loads MNIST (60k/10k grayscale 28x28 digits)."""
    return load_dataset("mnist", config)


def load_fashion_mnist(config: LoaderConfig | None = None) -> Dataset:
    """Loads Fashion-MNIST (60k/10k grayscale 28x28 clothing items)."""
    return load_dataset("fashion_mnist", config)


def load_cifar10(config: LoaderConfig | None = None) -> Dataset:
    """Loads CIFAR-10 (50k/10k RGB 32x32 images, 10 classes)."""
    return load_dataset("cifar10", config)


def load_cifar100(config: LoaderConfig | None = None) -> Dataset:
    """Loads CIFAR-100 with ``(coarse, fine)`` label pairs."""
    return load_dataset("cifar100", config)


# PRIVATE HELPERS
def _fetch(metadata: DatasetMetadata, home: Path) -> None:
    if metadata.family == "idx":
        fetch_files({url: home / rel for rel, url in metadata.file_urls.items()})
    else:
        fetch_and_unpack(metadata.url, home)


def _decode_split(
    metadata: DatasetMetadata,
    home: Path,
    files: tuple[str, ...],
) -> tuple[list[Label], list[bytes]]:
    if metadata.family == "idx":
        labels_file, images_file = files
        labels: list[Label] = list(read_idx_labels(home / labels_file))
        return labels, read_idx_images(home / images_file)

    return read_fixed_record_files(
        (home / rel for rel in files),
        label_width=metadata.label_width,
        pixel_width=metadata.pixel_width,
    )
