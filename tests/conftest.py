"""
Shared fixtures for the VisionSets test suite.

Builders for synthetic IDX and CIFAR payloads so no test touches the
network or needs the real datasets.
"""

import gzip
import io
import struct
import tarfile

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast, isolated tests")
    config.addinivalue_line("markers", "integration: tests spanning several components")


def build_idx(magic, dims, payload):
    """Raw (uncompressed) IDX bytes: big-endian header followed by payload."""
    return struct.pack(f">{1 + len(dims)}I", magic, *dims) + bytes(payload)


def build_tar_gz(members):
    """In-memory .tar.gz holding ``{archive_path: bytes}``."""
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w:gz") as tar:
        for name, data in members.items():
            info = tarfile.TarInfo(name=name)
            info.size = len(data)
            tar.addfile(info, io.BytesIO(data))
    return buf.getvalue()


@pytest.fixture
def idx_bytes():
    """Factory for raw IDX payloads."""
    return build_idx


@pytest.fixture
def write_idx_gz():
    """Factory writing a gzip-compressed IDX file and returning its path."""

    def _write(path, magic, dims, payload):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(gzip.compress(build_idx(magic, dims, payload)))
        return path

    return _write


@pytest.fixture
def tar_gz_bytes():
    """Factory for in-memory .tar.gz archives."""
    return build_tar_gz


@pytest.fixture
def mnist_like_cache(tmp_path, write_idx_gz):
    """
    Populates an MNIST-layout cache with 3 train and 2 test samples.

    Returns the cache root. Train labels are [5, 0, 4]; image ``i`` of a split
    is filled with byte value ``i``.
    """

    def _images(n):
        return b"".join(bytes([i]) * 784 for i in range(n))

    root = tmp_path / "MNIST"
    write_idx_gz(root / "train-labels-idx1-ubyte.gz", 2049, [3], [5, 0, 4])
    write_idx_gz(root / "train-images-idx3-ubyte.gz", 2051, [3, 28, 28], _images(3))
    write_idx_gz(root / "t10k-labels-idx1-ubyte.gz", 2049, [2], [7, 2])
    write_idx_gz(root / "t10k-images-idx3-ubyte.gz", 2051, [2, 28, 28], _images(2))
    return root
