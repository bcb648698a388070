"""
Configuration Package Initialization.

Flat public API for the loader configuration and its validation primitives.

Example:
    >>> from visionsets.core.config import LoaderConfig
    >>> cfg = LoaderConfig(data_home="~/datasets/mnist", verbose=True)
"""

from .loader_config import LoaderConfig
from .types import DatasetFamily, LabelWidth, PositiveInt, ValidatedPath

__all__ = [
    "LoaderConfig",
    "DatasetFamily",
    "LabelWidth",
    "PositiveInt",
    "ValidatedPath",
]
