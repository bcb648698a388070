"""
Logging style constants for consistent visual hierarchy.

Provides unified formatting symbols, separators and ANSI colors used across
all logging modules.
"""

from __future__ import annotations


class LogStyle:
    """Unified logging style constants for consistent visual hierarchy."""

    # Separator length
    HEADER_WIDTH = 80

    # Summary separators (80 chars)
    LIGHT = "─" * HEADER_WIDTH

    # Symbols
    ARROW = "»"
    BULLET = "•"
    WARNING = "⚠"
    SUCCESS = "✓"

    # Indentation
    INDENT = "  "

    # ANSI colors (console only)
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
