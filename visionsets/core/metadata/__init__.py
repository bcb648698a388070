"""
Dataset Metadata Package

Single source of truth for the supported benchmarks: upstream URLs, cache
layout, record geometry and class counts.
"""

from .base import DatasetMetadata
from .registry import DATASET_REGISTRY, get_dataset_metadata

__all__ = [
    "DatasetMetadata",
    "DATASET_REGISTRY",
    "get_dataset_metadata",
]
