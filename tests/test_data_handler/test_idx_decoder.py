"""
Pytest test suite for the IDX decoder.

Covers magic-number validation, header parsing, label and image
segmentation, and gzip-backed file reading.
"""

import gzip
import io
from unittest.mock import MagicMock

import pytest

from visionsets.data_handler.decoders.idx import (
    IMAGE_MAGIC,
    LABEL_MAGIC,
    decode_idx,
    decode_idx_images,
    decode_idx_labels,
    read_idx_images,
    read_idx_labels,
)
from visionsets.exceptions import ArchiveError, DataIntegrityError


@pytest.fixture
def mock_logger(monkeypatch):
    """Replaces the module logger to observe warnings."""
    fake = MagicMock()
    monkeypatch.setattr("visionsets.data_handler.decoders.idx.logger", fake)
    return fake


# TEST: decode_idx
@pytest.mark.unit
class TestDecodeIdx:
    """Tests for the generic header + payload parser."""

    def test_label_header_has_two_fields(self, idx_bytes):
        stream = io.BytesIO(idx_bytes(LABEL_MAGIC, [3], [5, 0, 4]))

        header, payload = decode_idx(stream, LABEL_MAGIC)

        assert header == (2049, 3)
        assert payload == bytes([5, 0, 4])

    def test_image_header_has_four_fields(self, idx_bytes):
        stream = io.BytesIO(idx_bytes(IMAGE_MAGIC, [1, 2, 2], [1, 2, 3, 4]))

        header, payload = decode_idx(stream, IMAGE_MAGIC)

        assert header == (2051, 1, 2, 2)
        assert payload == bytes([1, 2, 3, 4])

    def test_header_is_big_endian(self):
        raw = bytes([0x00, 0x00, 0x08, 0x01, 0x00, 0x00, 0x01, 0x00])

        header, payload = decode_idx(io.BytesIO(raw), LABEL_MAGIC)

        assert header == (2049, 256)
        assert payload == b""

    @pytest.mark.parametrize("bad_magic", [0, 2051, 2048, 0x01080000])
    def test_wrong_magic_raises_integrity_error(self, idx_bytes, bad_magic):
        stream = io.BytesIO(idx_bytes(bad_magic, [3], [5, 0, 4]))

        with pytest.raises(DataIntegrityError, match="force a redownload"):
            decode_idx(stream, LABEL_MAGIC)

    def test_label_magic_rejected_for_image_stream(self, idx_bytes):
        stream = io.BytesIO(idx_bytes(LABEL_MAGIC, [1, 28, 28], bytes(784)))

        with pytest.raises(DataIntegrityError):
            decode_idx(stream, IMAGE_MAGIC)

    def test_empty_stream_raises_integrity_error(self):
        with pytest.raises(DataIntegrityError):
            decode_idx(io.BytesIO(b""), LABEL_MAGIC)

    def test_truncated_dimensions_raise_integrity_error(self, idx_bytes):
        raw = idx_bytes(IMAGE_MAGIC, [2, 28], [])

        with pytest.raises(DataIntegrityError, match="truncated"):
            decode_idx(io.BytesIO(raw), IMAGE_MAGIC)


# TEST: decode_idx_labels
@pytest.mark.unit
class TestDecodeIdxLabels:
    """Tests for label streams."""

    def test_synthetic_label_file(self, idx_bytes):
        """Magic 0x00000801, count 3, payload [5, 0, 4] decodes to [5, 0, 4]."""
        stream = io.BytesIO(idx_bytes(0x00000801, [3], [5, 0, 4]))

        assert decode_idx_labels(stream) == [5, 0, 4]

    def test_label_count_equals_payload_length(self, idx_bytes):
        payload = list(range(10)) * 25
        stream = io.BytesIO(idx_bytes(LABEL_MAGIC, [len(payload)], payload))

        labels = decode_idx_labels(stream)

        assert len(labels) == len(payload)
        assert labels == payload

    def test_count_mismatch_only_warns(self, idx_bytes, mock_logger):
        stream = io.BytesIO(idx_bytes(LABEL_MAGIC, [5], [1, 2, 3]))

        assert decode_idx_labels(stream) == [1, 2, 3]
        mock_logger.warning.assert_called_once()

    def test_consistent_header_does_not_warn(self, idx_bytes, mock_logger):
        decode_idx_labels(io.BytesIO(idx_bytes(LABEL_MAGIC, [3], [1, 2, 3])))

        mock_logger.warning.assert_not_called()


# TEST: decode_idx_images
@pytest.mark.unit
class TestDecodeIdxImages:
    """Tests for image streams."""

    def test_two_28x28_images(self, idx_bytes):
        payload = bytes([1]) * 784 + bytes([2]) * 784
        stream = io.BytesIO(idx_bytes(IMAGE_MAGIC, [2, 28, 28], payload))

        images = decode_idx_images(stream)

        assert len(images) == 2
        assert all(len(img) == 784 for img in images)
        assert images[0] == bytes([1]) * 784
        assert images[1] == bytes([2]) * 784

    def test_non_square_geometry(self, idx_bytes):
        stream = io.BytesIO(idx_bytes(IMAGE_MAGIC, [2, 2, 3], range(12)))

        images = decode_idx_images(stream)

        assert images == [bytes([0, 1, 2, 3, 4, 5]), bytes([6, 7, 8, 9, 10, 11])]

    def test_trailing_partial_image_dropped(self, idx_bytes, mock_logger):
        stream = io.BytesIO(idx_bytes(IMAGE_MAGIC, [2, 2, 2], range(10)))

        images = decode_idx_images(stream)

        assert len(images) == 10 // 4
        assert all(len(img) == 4 for img in images)
        assert mock_logger.warning.called

    def test_zero_sized_images_rejected(self, idx_bytes):
        stream = io.BytesIO(idx_bytes(IMAGE_MAGIC, [0, 0, 28], []))

        with pytest.raises(DataIntegrityError):
            decode_idx_images(stream)

    def test_empty_payload_yields_no_images(self, idx_bytes):
        stream = io.BytesIO(idx_bytes(IMAGE_MAGIC, [0, 28, 28], []))

        assert decode_idx_images(stream) == []


# TEST: gzip-backed readers
@pytest.mark.unit
class TestReadIdxFiles:
    """Tests for read_idx_labels / read_idx_images."""

    def test_reads_gzip_label_file(self, tmp_path, write_idx_gz):
        path = write_idx_gz(tmp_path / "labels.gz", LABEL_MAGIC, [3], [9, 8, 7])

        assert read_idx_labels(path) == [9, 8, 7]

    def test_reads_gzip_image_file(self, tmp_path, write_idx_gz):
        path = write_idx_gz(tmp_path / "images.gz", IMAGE_MAGIC, [1, 28, 28], bytes(784))

        assert read_idx_images(path) == [bytes(784)]

    def test_wrong_kind_of_file_raises_integrity_error(self, tmp_path, write_idx_gz):
        path = write_idx_gz(tmp_path / "images.gz", IMAGE_MAGIC, [1, 28, 28], bytes(784))

        with pytest.raises(DataIntegrityError):
            read_idx_labels(path)

    def test_not_gzip_raises_archive_error(self, tmp_path):
        path = tmp_path / "labels.gz"
        path.write_bytes(b"definitely not gzip data")

        with pytest.raises(ArchiveError):
            read_idx_labels(path)

    def test_truncated_gzip_raises_archive_error(self, tmp_path, idx_bytes):
        path = tmp_path / "labels.gz"
        compressed = gzip.compress(idx_bytes(LABEL_MAGIC, [1000], bytes(range(256)) * 4))
        path.write_bytes(compressed[: len(compressed) // 2])

        with pytest.raises(ArchiveError):
            read_idx_labels(path)

    def test_missing_file_propagates(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_idx_labels(tmp_path / "missing.gz")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
