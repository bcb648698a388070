"""
Dataset Metadata Base Definitions.

Defines the per-dataset parameter table using Pydantic for immutability
and type safety. One entry fully describes where a dataset comes from,
how its cache is laid out and how its binary records are shaped.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..config.types import DatasetFamily, LabelWidth, PositiveInt


# METADATA SCHEMA
class DatasetMetadata(BaseModel):
    """
    Immutable metadata container for a dataset entry.

    Attributes:
        name: Short identifier (e.g., ``'mnist'``, ``'cifar100'``).
        display_name: Human-readable name for reporting.
        family: Binary format family, ``'idx'`` or ``'fixed_record'``.
        default_home: Cache directory used when no data_home is configured.
        url: Base URL of the IDX files, or URL of the tar.gz archive.
        train_files: Cache-relative training files. For the IDX family the
            order is ``(labels, images)``.
        test_files: Cache-relative test files, same ordering rules.
        label_width: Label bytes per record (1, or 2 for coarse/fine pairs).
        pixel_width: Pixel bytes per image.
        image_shape: Image geometry, ``(rows, cols)`` or ``(rows, cols, channels)``.
        num_classes: Number of (fine) classes.
        num_coarse_classes: Number of coarse classes for two-level labels.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Identity
    name: str = Field(..., description="Short identifier (e.g., 'mnist')")
    display_name: str = Field(..., description="Full name for reporting")
    family: DatasetFamily = Field(..., description="Binary record format")

    # Source & cache layout
    default_home: str = Field(..., description="Default cache directory name")
    url: str = Field(..., description="IDX base URL or archive URL")
    train_files: tuple[str, ...] = Field(..., min_length=1)
    test_files: tuple[str, ...] = Field(..., min_length=1)

    # Record geometry
    label_width: LabelWidth = Field(default=1)
    pixel_width: PositiveInt = Field(...)
    image_shape: tuple[int, ...] = Field(...)

    # Classification
    num_classes: PositiveInt = Field(...)
    num_coarse_classes: PositiveInt | None = Field(default=None)

    @model_validator(mode="after")
    def _check_geometry(self) -> "DatasetMetadata":
        """Cross-checks record geometry against the format family."""
        pixels = 1
        for dim in self.image_shape:
            pixels *= dim
        if pixels != self.pixel_width:
            raise ValueError(
                f"image_shape {self.image_shape} holds {pixels} bytes, "
                f"pixel_width is {self.pixel_width}"
            )

        if self.family == "idx":
            if len(self.train_files) != 2 or len(self.test_files) != 2:
                raise ValueError("IDX datasets need exactly (labels, images) files per split")
            if self.label_width != 1:
                raise ValueError("IDX datasets carry single-byte labels")

        if (self.label_width == 2) != (self.num_coarse_classes is not None):
            raise ValueError("num_coarse_classes is required exactly when label_width is 2")

        return self

    @property
    def expected_files(self) -> frozenset[str]:
        """Every cache-relative file that must exist for a complete cache."""
        return frozenset(self.train_files) | frozenset(self.test_files)

    @property
    def file_urls(self) -> dict[str, str]:
        """Remote URL per cache-relative file (IDX family only)."""
        base = self.url if self.url.endswith("/") else f"{self.url}/"
        return {f: base + f for f in (*self.train_files, *self.test_files)}

    @property
    def resolution_str(self) -> str:
        """Formatted resolution string (e.g., '28x28', '32x32x3')."""
        return "x".join(str(d) for d in self.image_shape)

    def __repr__(self) -> str:
        return (
            f"<DatasetMetadata: {self.display_name} "
            f"({self.resolution_str}, {self.num_classes} classes)>"
        )
