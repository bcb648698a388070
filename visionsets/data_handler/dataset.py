"""
In-Memory Dataset Container.

Holds the decoded train and test splits of one benchmark as raw byte
buffers plus label values. No normalization or tensor conversion is
applied; consumers reshape the buffers themselves using the registry's
``image_shape``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from ..exceptions import VisionDatasetError

# A single class index, or a (coarse, fine) pair for two-level labels
Label = Union[int, Tuple[int, int]]


# DATA CONTAINERS
@dataclass(frozen=True)
class Dataset:
    """
    Decoded benchmark dataset.

    Attributes:
        name: Registry key of the dataset (e.g. ``'cifar100'``).
        train_labels: Training labels in file order.
        train_images: Training images, one ``bytes`` buffer per sample.
        test_labels: Test labels in file order.
        test_images: Test images, one ``bytes`` buffer per sample.

    Raises:
        VisionDatasetError: If labels and images of a split differ in
            length, or a split mixes images of different sizes.
    """

    name: str
    train_labels: Sequence[Label]
    train_images: Sequence[bytes]
    test_labels: Sequence[Label]
    test_images: Sequence[bytes]

    def __post_init__(self) -> None:
        _check_split("train", self.train_labels, self.train_images)
        _check_split("test", self.test_labels, self.test_images)

    @property
    def num_train(self) -> int:
        return len(self.train_images)

    @property
    def num_test(self) -> int:
        return len(self.test_images)

    @property
    def image_size(self) -> int | None:
        """Bytes per image, or None when both splits are empty."""
        for images in (self.train_images, self.test_images):
            if images:
                return len(images[0])
        return None

    def __repr__(self) -> str:
        return (
            f"<Dataset: {self.name} "
            f"(train={self.num_train}, test={self.num_test}, image_size={self.image_size})>"
        )


def _check_split(split: str, labels: Sequence[Label], images: Sequence[bytes]) -> None:
    if len(labels) != len(images):
        raise VisionDatasetError(
            f"{split} split has {len(labels)} labels but {len(images)} images"
        )

    sizes = {len(img) for img in images}
    if len(sizes) > 1:
        raise VisionDatasetError(f"{split} split mixes image sizes: {sorted(sizes)}")
