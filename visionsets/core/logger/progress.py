"""
Progress and Summary Logging.

Formatted logging helpers for dataset loading progress and split summaries.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..paths import LOGGER_NAME
from .styles import LogStyle

if TYPE_CHECKING:  # pragma: no cover
    from ...data_handler.dataset import Dataset

logger = logging.getLogger(LOGGER_NAME)


def progress_level(verbose: bool) -> int:
    """Log level for progress messages: INFO when verbose, DEBUG otherwise."""
    return logging.INFO if verbose else logging.DEBUG


def log_step(step: str, detail: str, verbose: bool = False) -> None:
    """Log a single ``» step : detail`` progress line."""
    logger.log(
        progress_level(verbose),
        f"{LogStyle.INDENT}{LogStyle.ARROW} {step:<18}: {detail}",
    )


def log_dataset_summary(
    dataset: "Dataset",
    display_name: str,
    logger_instance: logging.Logger | None = None,
) -> None:
    """
    Log split sizes and image size of a loaded dataset.

    Args:
        dataset: Loaded dataset value.
        display_name: Human-readable dataset name for the header.
        logger_instance: Logger instance to use (defaults to module logger)
    """
    log = logger_instance or logger

    log.info(LogStyle.LIGHT)
    log.info(f"{LogStyle.INDENT}{LogStyle.SUCCESS} {display_name} loaded")
    log.info(f"{LogStyle.INDENT}{LogStyle.BULLET} {'Train samples':<18}: {dataset.num_train}")
    log.info(f"{LogStyle.INDENT}{LogStyle.BULLET} {'Test samples':<18}: {dataset.num_test}")
    log.info(f"{LogStyle.INDENT}{LogStyle.BULLET} {'Image bytes':<18}: {dataset.image_size}")
    log.info(LogStyle.LIGHT)
