"""
Configuration Serialization & Persistence Utilities.

Converts Pydantic models and Path objects into YAML and back, with a
flushed write to the filesystem.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from ..paths import LOGGER_NAME


# YAML ORCHESTRATION
def save_config_as_yaml(data: Any, yaml_path: Path) -> Path:
    """
    Serializes and persists configuration data to a YAML file.

    Args:
        data (Any): The configuration object to save. Supports objects with
            a 'model_dump()' method, or standard dictionaries.
        yaml_path (Path): The destination filesystem path.

    Returns:
        Path: The confirmed path where the YAML was successfully written.

    Raises:
        ValueError: If the data structure cannot be serialized.
        OSError: If a filesystem-level error occurs (permissions, disk full).
    """
    logger = logging.getLogger(LOGGER_NAME)

    try:
        if hasattr(data, "model_dump"):
            raw_dict = data.model_dump(mode="json")
        else:
            raw_dict = data

        final_data = _sanitize_for_yaml(raw_dict)

    except (TypeError, ValueError) as e:
        logger.error(f"Serialization failed: object structure is incompatible. Error: {e}")
        raise ValueError(f"Could not serialize configuration object: {e}") from e

    try:
        _persist_yaml(final_data, yaml_path)
        logger.debug(f"Configuration written to → {yaml_path.name}")
        return yaml_path

    except OSError as e:
        logger.error(f"IO Error: Could not write YAML to {yaml_path}. Error: {e}")
        raise


def load_config_from_yaml(yaml_path: Path) -> Any:
    """
    Loads a raw configuration document from a YAML file.

    Args:
        yaml_path (Path): Path to the source YAML file.

    Returns:
        The parsed YAML document (usually a dict, None for an empty file).

    Raises:
        FileNotFoundError: If the specified path does not exist.
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"YAML configuration file not found at: {yaml_path}")

    with open(yaml_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _sanitize_for_yaml(obj: Any) -> Any:
    """
    Recursively converts non-serializable types into YAML-standard formats.

    - Path objects -> converted to strings.
    - Dicts/Lists/Tuples -> processed recursively.
    """
    if isinstance(obj, dict):
        return {k: _sanitize_for_yaml(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_sanitize_for_yaml(i) for i in obj]
    if isinstance(obj, Path):
        return str(obj)
    return obj


def _persist_yaml(data: Any, path: Path) -> None:
    """Writes YAML with directory creation and an fsync before close."""
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False, indent=4, allow_unicode=True)
        f.flush()
        os.fsync(f.fileno())
