"""Producing a registry file's bytes at its destination."""

import logging
import os
import shutil
import stat
import tempfile
from pathlib import Path

from unicrn.core.errors import FetchError, MaterializeError
from unicrn.core.sources import LocalDevTree, LocalPackage, Remote, SourceRef
from unicrn.integrations.fetcher.abc import Fetcher

logger = logging.getLogger(__name__)


def materialize(source: SourceRef, destination: Path, fetcher: Fetcher) -> None:
    """Copy or download a file to destination, replacing any prior content.

    Parent directories are created as needed. A failed download leaves the
    destination untouched.

    Args:
        source: Where the bytes live (from locate_source)
        destination: Absolute target path inside the consumer project
        fetcher: Used only for Remote sources

    Raises:
        MaterializeError: If the file could not be obtained or written
    """
    match source:
        case LocalPackage(path=path) | LocalDevTree(path=path):
            _copy_local(path, destination)
        case Remote(url=url):
            _download(url, destination, fetcher)


def _copy_local(source_path: Path, destination: Path) -> None:
    logger.debug("Copying %s -> %s", source_path, destination)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source_path, destination)
    except OSError as e:
        raise MaterializeError(str(destination), e.strerror or str(e)) from e


def _download(url: str, destination: Path, fetcher: Fetcher) -> None:
    try:
        body = fetcher.get(url)
    except FetchError as e:
        raise MaterializeError(str(destination), str(e), e.status_code) from e

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        write_atomic(destination, body)
    except OSError as e:
        raise MaterializeError(str(destination), e.strerror or str(e)) from e
    logger.debug("Wrote %d bytes to %s", len(body), destination)


def _file_mode(destination: Path) -> int:
    """Mode of the file being replaced, or the umask-adjusted default for a new file."""
    try:
        return stat.S_IMODE(destination.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_atomic(destination: Path, data: bytes) -> None:
    """Write data to a sibling temp file, then rename it over destination."""
    fd, tmp_name = tempfile.mkstemp(dir=destination.parent, prefix=f".{destination.name}.")
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        tmp_path.chmod(_file_mode(destination))
        os.replace(tmp_path, destination)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
