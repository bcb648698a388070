"""
Semantic type Definitions & Validation Primitives.

Leverages Pydantic's Annotated types and functional validators to enforce
path integrity and record geometry before reaching the loaders.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal

from pydantic import AfterValidator, Field, PlainSerializer


# VALIDATORS
def _sanitize_path(v: str | Path) -> Path:
    """
    Resolve path to absolute form without disk side-effects.

    Expands user home directory (~) and converts to absolute path
    for consistency across environments. No filesystem validation
    is performed to avoid I/O during schema initialization.
    """
    return Path(v).expanduser().resolve()


# GENERIC PRIMITIVES
PositiveInt = Annotated[int, Field(gt=0)]

# FILESYSTEM
ValidatedPath = Annotated[
    Path,
    AfterValidator(_sanitize_path),
    PlainSerializer(lambda v: str(v), when_used="json", return_type=str),
]

# RECORD GEOMETRY
LabelWidth = Annotated[int, Field(ge=1, le=2)]

# DATASET FAMILY
DatasetFamily = Literal["idx", "fixed_record"]
