"""
VisionSets Exception Hierarchy.

VisionError (base, Exception)
├── VisionConfigError(VisionError, ValueError)   ← config validation
└── VisionDatasetError(VisionError)              ← data I/O and fetching
    ├── DownloadError                            ← transport failures
    ├── ArchiveError                             ← gzip / tar failures
    ├── DataIntegrityError                       ← bad IDX magic or header
    └── TruncatedRecordError                     ← record cut off mid-way

VisionConfigError multi-inherits from ValueError so existing
``except ValueError`` blocks keep working.
"""


class VisionError(Exception):
    """Base exception for all VisionSets errors."""


class VisionConfigError(VisionError, ValueError):
    """Configuration validation error (backward-compatible with ValueError)."""


class VisionDatasetError(VisionError):
    """Dataset loading, fetching, or validation error."""


class DownloadError(VisionDatasetError):
    """Network, DNS or HTTP failure while retrieving a remote resource."""


class ArchiveError(VisionDatasetError):
    """Corrupt or incomplete gzip / tar archive."""


class DataIntegrityError(VisionDatasetError):
    """Binary header did not match the expected format.

    Raised when a cached file is likely corrupt; the caller should retry
    with ``force_download=True``.
    """


class TruncatedRecordError(VisionDatasetError):
    """A fixed-record stream ended in the middle of a record."""
