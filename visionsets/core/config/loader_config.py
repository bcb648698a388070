"""
Loader Configuration Manifest.

Immutable replacement for a chained builder: the cache location, the
force-redownload toggle and the verbosity toggle are declared once and
handed to a single ``load_dataset`` call.

Attributes:
    data_home: Cache root (default: per-dataset directory in the working dir).
    force_download: Always re-download, even when the cache looks complete.
    verbose: Promote progress messages from DEBUG to INFO.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ...exceptions import VisionConfigError
from ..io import load_config_from_yaml
from .types import ValidatedPath

if TYPE_CHECKING:  # pragma: no cover
    from ..metadata import DatasetMetadata


class LoaderConfig(BaseModel):
    """
    Declarative manifest for one dataset load.

    Frozen after creation; consumed exactly once by ``load_dataset`` to
    produce a Dataset or an error.

    Attributes:
        data_home: Validated absolute cache root, or None for the dataset default.
        force_download: Re-download regardless of cache state.
        verbose: Emit progress messages at INFO level.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    data_home: ValidatedPath | None = Field(default=None, description="Cache root directory")
    force_download: bool = Field(default=False, description="Ignore the existing cache")
    verbose: bool = Field(default=False, description="Log progress at INFO level")

    @model_validator(mode="before")
    @classmethod
    def handle_empty_config(cls, data: Any) -> Any:
        """
        Handle an empty YAML document by returning default dict.

        When the YAML file has no values, Pydantic receives None. This
        validator converts None to an empty dict so field defaults apply.
        """
        if data is None:
            return {}
        return data

    def resolve_home(self, metadata: "DatasetMetadata") -> Path:
        """
        Cache root to use for *metadata*.

        Returns:
            ``data_home`` when set, otherwise the dataset's default
            directory name relative to the working directory.
        """
        if self.data_home is not None:
            return self.data_home
        return Path(metadata.default_home)

    @classmethod
    def from_yaml(cls, yaml_path: Path, **overrides: Any) -> "LoaderConfig":
        """
        Build a config from a YAML mapping, applying keyword overrides on top.

        Args:
            yaml_path: Path to a YAML file with any of the config fields.
            **overrides: Field values that take precedence over the file.

        Raises:
            FileNotFoundError: If ``yaml_path`` does not exist.
            VisionConfigError: If the file content is not a valid config.
        """
        raw = load_config_from_yaml(yaml_path) or {}
        if not isinstance(raw, dict):
            raise VisionConfigError(
                f"Loader config must be a YAML mapping, got {type(raw).__name__}: {yaml_path}"
            )

        raw.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return cls(**raw)
        except ValidationError as e:
            raise VisionConfigError(f"Invalid loader config in {yaml_path}: {e}") from e
