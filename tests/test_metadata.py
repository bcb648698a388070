"""
Test Suite for the dataset registry and DatasetMetadata schema.
"""

import pytest
from pydantic import ValidationError

from visionsets.core.metadata import DATASET_REGISTRY, DatasetMetadata, get_dataset_metadata
from visionsets.exceptions import VisionConfigError


@pytest.mark.unit
class TestRegistry:
    """Tests for the built-in registry entries."""

    def test_registers_four_datasets(self):
        assert set(DATASET_REGISTRY) == {"mnist", "fashion_mnist", "cifar10", "cifar100"}

    @pytest.mark.parametrize("name", ["mnist", "fashion_mnist"])
    def test_idx_family_layout(self, name):
        meta = DATASET_REGISTRY[name]

        assert meta.family == "idx"
        assert meta.pixel_width == 784
        assert meta.expected_files == {
            "train-labels-idx1-ubyte.gz",
            "train-images-idx3-ubyte.gz",
            "t10k-labels-idx1-ubyte.gz",
            "t10k-images-idx3-ubyte.gz",
        }

    def test_mnist_file_urls(self):
        urls = DATASET_REGISTRY["mnist"].file_urls

        assert urls["t10k-images-idx3-ubyte.gz"] == (
            "https://ossci-datasets.s3.amazonaws.com/mnist/t10k-images-idx3-ubyte.gz"
        )
        assert len(urls) == 4

    def test_cifar10_layout(self):
        meta = DATASET_REGISTRY["cifar10"]

        assert meta.label_width == 1
        assert meta.pixel_width == 3072
        assert meta.train_files == tuple(
            f"cifar-10-batches-bin/data_batch_{i}.bin" for i in range(1, 6)
        )
        assert meta.test_files == ("cifar-10-batches-bin/test_batch.bin",)

    def test_cifar100_layout(self):
        meta = DATASET_REGISTRY["cifar100"]

        assert meta.label_width == 2
        assert meta.num_coarse_classes == 20
        assert meta.expected_files == {"cifar-100-binary/train.bin", "cifar-100-binary/test.bin"}

    @pytest.mark.parametrize(
        "alias, key",
        [("MNIST", "mnist"), ("Fashion-MNIST", "fashion_mnist"), ("cifar-100", "cifar100")],
    )
    def test_aliases(self, alias, key):
        assert get_dataset_metadata(alias) is DATASET_REGISTRY[key]

    def test_unknown_dataset(self):
        with pytest.raises(VisionConfigError, match="Available"):
            get_dataset_metadata("svhn")

    def test_entries_are_frozen(self):
        with pytest.raises(ValidationError):
            DATASET_REGISTRY["mnist"].pixel_width = 1

    def test_repr(self):
        assert repr(DATASET_REGISTRY["cifar10"]) == "<DatasetMetadata: CIFAR-10 (32x32x3, 10 classes)>"


@pytest.mark.unit
class TestMetadataValidation:
    """Tests for the schema cross-checks."""

    BASE = dict(
        name="toy",
        display_name="Toy",
        family="fixed_record",
        default_home="TOY",
        url="https://host/toy.tar.gz",
        train_files=("train.bin",),
        test_files=("test.bin",),
        pixel_width=12,
        image_shape=(2, 2, 3),
        num_classes=2,
    )

    def test_valid_entry(self):
        assert DatasetMetadata(**self.BASE).pixel_width == 12

    def test_shape_must_match_pixel_width(self):
        with pytest.raises(ValidationError, match="pixel_width"):
            DatasetMetadata(**{**self.BASE, "pixel_width": 13})

    def test_idx_requires_label_and_image_files(self):
        with pytest.raises(ValidationError, match="labels, images"):
            DatasetMetadata(**{**self.BASE, "family": "idx"})

    def test_two_byte_labels_need_coarse_classes(self):
        with pytest.raises(ValidationError, match="num_coarse_classes"):
            DatasetMetadata(**{**self.BASE, "label_width": 2})

    def test_label_width_bounds(self):
        with pytest.raises(ValidationError):
            DatasetMetadata(**{**self.BASE, "label_width": 3})
