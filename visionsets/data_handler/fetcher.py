"""
Archive Fetching Module

Handles the physical retrieval of benchmark archives. Two shapes are
supported:

    * Multi-file streamed (MNIST family): N gzip files are streamed
      concurrently, each straight to its own cache path. The ``.gz`` file is
      the cached artifact; decompression happens at decode time.
    * Single archive with unpack (CIFAR family): one ``.tar.gz`` is
      downloaded into memory, decompressed and unpacked into the cache.

There is no retry loop and no cleanup of partial state: the first failure
is raised to the caller, who may re-run with ``force_download``.
"""

from __future__ import annotations

import gzip
import io
import logging
import tarfile
import zlib
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from pathlib import Path
from typing import Mapping

import requests

from ..core.logger import LogStyle
from ..core.paths import HTTP_TIMEOUT, IO_CHUNK_SIZE, LOGGER_NAME, USER_AGENT
from ..exceptions import ArchiveError, DownloadError

logger = logging.getLogger(LOGGER_NAME)

_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "application/octet-stream",
    "Accept-Encoding": "identity",
}


def ensure_directory(path: Path) -> Path:
    """Creates ``path`` and its parents if missing. Idempotent."""
    path.mkdir(parents=True, exist_ok=True)
    return path


# MULTI-FILE STREAMED
def fetch_files(urls_to_paths: Mapping[str, Path], max_workers: int | None = None) -> list[Path]:
    """
    Streams several remote files concurrently, each to its own local path.

    Every transfer must succeed. As soon as one fails, pending transfers are
    cancelled and the failure is raised without waiting for the rest.
    Transfers already in flight keep running in their worker threads until
    they finish, so their files may still be incomplete when this returns.

    Args:
        urls_to_paths: Remote URL → destination file path.
        max_workers: Thread pool size (default: one thread per file).

    Returns:
        list[Path]: Destination paths, in input order.

    Raises:
        DownloadError: On any network or HTTP failure.
        OSError: If a destination file cannot be written.
    """
    if not urls_to_paths:
        return []

    for path in urls_to_paths.values():
        ensure_directory(path.parent)

    workers = max_workers or len(urls_to_paths)
    executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="visionsets-fetch")
    try:
        futures = [
            executor.submit(_stream_download, url, path) for url, path in urls_to_paths.items()
        ]
        done, _ = wait(futures, return_when=FIRST_EXCEPTION)

        for future in futures:
            if future in done and future.exception() is not None:
                raise future.exception()  # type: ignore[misc]
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    return list(urls_to_paths.values())


def _stream_download(url: str, target: Path, chunk_size: int = IO_CHUNK_SIZE) -> None:
    """Executes the streaming GET request and writes straight to ``target``."""
    logger.debug(f"{LogStyle.INDENT}{LogStyle.ARROW} {'GET':<18}: {url}")

    try:
        with requests.get(
            url, headers=_HEADERS, timeout=HTTP_TIMEOUT, stream=True, allow_redirects=True
        ) as r:
            r.raise_for_status()
            _reject_html(r, url)

            with open(target, "wb") as f:
                for chunk in r.iter_content(chunk_size=chunk_size):
                    if chunk:
                        f.write(chunk)

    except requests.RequestException as e:
        logger.error(f"Download failed: {url} ({e})")
        raise DownloadError(f"Could not download {url}") from e


# SINGLE ARCHIVE WITH UNPACK
def fetch_and_unpack(url: str, destination: Path) -> Path:
    """
    Downloads a gzip-compressed tar archive into memory and unpacks it.

    Args:
        url: Archive URL.
        destination: Directory the archive tree is extracted into.

    Returns:
        Path: ``destination``.

    Raises:
        DownloadError: On any network or HTTP failure.
        ArchiveError: If the payload is not a readable ``.tar.gz``.
    """
    ensure_directory(destination)

    payload = _download_bytes(url)
    logger.debug(f"{LogStyle.INDENT}{LogStyle.ARROW} {'Received':<18}: {len(payload)} bytes")

    _unpack_tar_gz(payload, destination, source=url)
    return destination


def _download_bytes(url: str) -> bytes:
    """Fetches a whole response body into memory."""
    logger.debug(f"{LogStyle.INDENT}{LogStyle.ARROW} {'GET':<18}: {url}")

    try:
        with requests.get(
            url, headers=_HEADERS, timeout=HTTP_TIMEOUT, allow_redirects=True
        ) as r:
            r.raise_for_status()
            _reject_html(r, url)
            return r.content

    except requests.RequestException as e:
        logger.error(f"Download failed: {url} ({e})")
        raise DownloadError(f"Could not download {url}") from e


def _unpack_tar_gz(payload: bytes, destination: Path, source: str = "<memory>") -> None:
    """Decompresses and extracts an in-memory ``.tar.gz`` into ``destination``."""
    try:
        with tarfile.open(fileobj=io.BytesIO(payload), mode="r:gz") as archive:
            archive.extractall(destination, **_extract_options())

    except (tarfile.TarError, gzip.BadGzipFile, EOFError, zlib.error) as e:
        logger.error(f"Archive extraction failed: {source} ({e})")
        raise ArchiveError(f"Could not unpack archive from {source}: {e}") from e


def _reject_html(response: requests.Response, url: str) -> None:
    """Mirrors sometimes answer with an HTML error page and a 200 status."""
    content_type = response.headers.get("Content-Type", "")
    if "text/html" in content_type:
        raise DownloadError(f"Expected a binary file from {url}, got an HTML page")


def _extract_options() -> dict[str, str]:
    """Extraction filter keyword, on interpreters whose tarfile supports it."""
    if hasattr(tarfile, "data_filter"):
        return {"filter": "data"}
    return {}
