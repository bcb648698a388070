"""
Core Utilities Package

Exposes configuration, logging, YAML I/O, project constants and the
dataset registry.
"""

# Configuration
from .config import LoaderConfig

# Input/Output Utilities
from .io import load_config_from_yaml, save_config_as_yaml

# Logging
from .logger import Logger, LogStyle, log_dataset_summary, log_step

# Dataset Registry
from .metadata import DATASET_REGISTRY, DatasetMetadata, get_dataset_metadata

# Constants
from .paths import LOGGER_NAME

__all__ = [
    # Configuration
    "LoaderConfig",
    # I/O
    "load_config_from_yaml",
    "save_config_as_yaml",
    # Logging
    "Logger",
    "LogStyle",
    "log_dataset_summary",
    "log_step",
    # Registry
    "DATASET_REGISTRY",
    "DatasetMetadata",
    "get_dataset_metadata",
    # Constants
    "LOGGER_NAME",
]
