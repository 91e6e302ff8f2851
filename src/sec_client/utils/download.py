"""Temporary storage and ZIP extraction for the SEC bulk archives.

``submissions.zip`` and ``companyfacts.zip`` are multi-gigabyte archives of
per-company JSON files. The downloaded bytes are written to a temporary file
that never outlives the extraction, and every entry name is checked against
the destination directory before anything is written.
"""

import io
import logging
import os
import shutil
import tempfile
import zipfile
import zlib
from contextlib import contextmanager
from pathlib import Path

from tqdm import tqdm

from sec_client.errors import EdgarIOError, RequestError, ZipError

logger = logging.getLogger(__name__)


@contextmanager
def write_temp_file(data: bytes):
    """Write ``data`` to a temporary file and yield its path.

    The file is removed when the block exits, whether extraction succeeded
    or not.
    """
    try:
        fd, name = tempfile.mkstemp(prefix="sec-bulk-", suffix=".zip")
    except OSError as e:
        raise RequestError(f"Failed to create temporary file: {e}") from e

    path = Path(name)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
    except OSError as e:
        path.unlink(missing_ok=True)
        raise RequestError(f"Failed to write temporary file: {e}") from e

    logger.debug(f"Wrote {len(data):,} bytes to temporary file {path}")
    try:
        yield path
    finally:
        path.unlink(missing_ok=True)


def _resolve_entry(root: Path, name: str) -> Path:
    """Map an archive entry name onto ``root``, refusing anything that escapes it."""
    if not name or name.startswith(("/", "\\")) or os.path.isabs(name):
        raise ZipError(f"Invalid file path in ZIP: {name!r}")

    target = (root / name).resolve()
    if target != root and root not in target.parents:
        raise ZipError(f"Entry {name!r} resolves outside {root}")
    return target


def _extract(archive: zipfile.ZipFile, output_dir, progress: bool) -> int:
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise EdgarIOError(f"Failed to create directory {output_dir}: {e}") from e
    root = output_dir.resolve()

    # Check every name up front so a bad entry leaves nothing half-written.
    members = [(info, _resolve_entry(root, info.filename)) for info in archive.infolist()]

    written = 0
    for info, target in tqdm(members, desc="Extracting", unit="file", ncols=100, disable=not progress):
        try:
            if info.is_dir():
                target.mkdir(parents=True, exist_ok=True)
                continue

            target.parent.mkdir(parents=True, exist_ok=True)
            with archive.open(info) as src, open(target, "wb") as dst:
                shutil.copyfileobj(src, dst)
            written += 1
        except (zipfile.BadZipFile, zipfile.LargeZipFile, NotImplementedError, zlib.error, EOFError) as e:
            raise ZipError(f"Failed to read ZIP entry {info.filename!r}: {e}") from e
        except OSError as e:
            raise EdgarIOError(f"Failed to write {target}: {e}") from e

    return written


def extract_zip(zip_path, output_dir, progress: bool = False) -> int:
    """Extract every entry of the archive at ``zip_path`` into ``output_dir``.

    Returns the number of files written.
    """
    try:
        archive = zipfile.ZipFile(zip_path)
    except zipfile.BadZipFile as e:
        raise ZipError(f"Failed to read ZIP archive: {e}") from e
    except OSError as e:
        raise RequestError(f"Failed to open ZIP file: {e}") from e

    with archive:
        written = _extract(archive, output_dir, progress)

    logger.info(f"Extracted {written:,} files from {zip_path} to {output_dir}")
    return written


def extract_zip_from_memory(data: bytes, output_dir, progress: bool = False) -> int:
    """Extract an archive held in memory into ``output_dir``."""
    try:
        archive = zipfile.ZipFile(io.BytesIO(data))
    except zipfile.BadZipFile as e:
        raise ZipError(f"Failed to read ZIP archive: {e}") from e

    with archive:
        return _extract(archive, output_dir, progress)


def extract_archive_bytes(data: bytes, output_dir, progress: bool = False) -> int:
    """Persist downloaded archive bytes to a scoped temporary file and extract them."""
    with write_temp_file(data) as zip_path:
        return extract_zip(zip_path, output_dir, progress=progress)
