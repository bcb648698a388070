"""
Project-wide Constants.

Single source of truth for logger identity and the shared network and
I/O tuning values used by the fetchers.

Module Attributes:
    LOGGER_NAME: Global logger identity used by all modules for log synchronization.
    HTTP_TIMEOUT: Socket timeout (seconds) for every HTTP request.
    IO_CHUNK_SIZE: Streaming chunk size (bytes) for downloads.
    USER_AGENT: User-Agent header sent to upstream mirrors.
"""

from typing import Final

# GLOBAL CONSTANTS
# Global logger identity used by all modules to ensure log synchronization
LOGGER_NAME: Final[str] = "VisionSets"

# NETWORK
HTTP_TIMEOUT: Final[float] = 60.0
IO_CHUNK_SIZE: Final[int] = 8192
USER_AGENT: Final[str] = "Wget/1.0"
