# Upload receiver: persists one multipart file under the shared root.
# Created: 2026-10-17
#
# Data is copied into a temp file in the destination directory and renamed
# over the final name. A colliding name is replaced without warning.

from __future__ import annotations

import logging
import ntpath
import os
import posixpath
import tempfile
from pathlib import Path
from typing import BinaryIO

from webshare.config import DEFAULT_FILE_MODE
from webshare.errors import BadRequest, InternalError
from webshare.listing import resolve_under_root

logger = logging.getLogger(__name__)

COPY_CHUNK = 1024 * 1024


def safe_basename(declared_name: str | None) -> str:
    """Strip any directory components (``/`` or ``\\``) from a client filename."""
    name = ntpath.basename(posixpath.basename(declared_name or ""))
    if name in ("", ".", "..") or "\x00" in name:
        raise BadRequest("upload has no usable file name")
    return name


def upload_target_dir(root: str | Path, url_path: str) -> Path:
    """Directory that ``/upload/<url_path>`` writes into."""
    target = resolve_under_root(root, url_path)
    if target is None:
        raise BadRequest("upload path invalid or outside shared directory")
    return target


def save_upload(
    target_dir: str | Path,
    filename: str,
    source: BinaryIO,
    mode: int = DEFAULT_FILE_MODE,
) -> tuple[Path, int]:
    """Copy *source* to ``target_dir/filename``. Returns (destination, bytes written).

    The finished file gets permission bits *mode* (see
    :attr:`ServerConfig.file_mode`).

    Raises:
        InternalError: the destination cannot be created or the copy fails.
            Any temp file is removed; an existing file of the same name is
            left untouched.
    """
    target_dir = Path(target_dir)
    dst = target_dir / filename

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=".upload-", suffix=".part", dir=target_dir)
    except OSError as exc:
        logger.error("error when create file %s: %s", dst, exc)
        raise InternalError(f"error when create file {filename}") from exc

    size = 0
    try:
        with os.fdopen(fd, "wb") as out:
            while chunk := source.read(COPY_CHUNK):
                out.write(chunk)
                size += len(chunk)
        # mkstemp creates 0600.
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, dst)
    except OSError as exc:
        logger.error("unable to save file %s: %s", dst, exc)
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise InternalError(f"unable to save file {filename}") from exc

    return dst, size
