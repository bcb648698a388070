"""
Static Constants Package.

Exposes the logger identity and network tuning constants shared by the
fetchers and the logging layer.

Example:
    >>> from visionsets.core.paths import LOGGER_NAME
    >>> LOGGER_NAME
    'VisionSets'
"""

from .constants import HTTP_TIMEOUT, IO_CHUNK_SIZE, LOGGER_NAME, USER_AGENT

__all__ = [
    "LOGGER_NAME",
    "HTTP_TIMEOUT",
    "IO_CHUNK_SIZE",
    "USER_AGENT",
]
