"""Directory reading for the listing page and the JSON browse API.

``resolve_under_root`` is also used by the upload and raw file handlers so
that every surface maps URL paths onto the shared root the same way.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from urllib.parse import quote

from webshare.errors import DirectoryReadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryEntry:
    """One child of a listed directory."""

    name: str
    is_dir: bool
    size: int
    modified_at: datetime
    url_name: str = ""

    @property
    def href_name(self) -> str:
        """Percent-encoded name for links (from the raw on-disk bytes)."""
        return self.url_name or quote(self.name)


def resolve_under_root(root: str | Path, sub_path: str = "") -> Path | None:
    """Join *sub_path* onto *root*, or return None if it would climb above it.

    A leading ``/`` on *sub_path* is relative to the root. ``..`` segments are
    collapsed lexically; symbolic links are not resolved. Paths containing a
    NUL byte are rejected.
    """
    if "\x00" in sub_path:
        return None
    root = Path(os.path.abspath(root))
    target = Path(os.path.normpath(os.path.join(root, sub_path.lstrip("/"))))
    if target != root and root not in target.parents:
        return None
    return target


def display_name(name: str) -> str:
    """Printable form of an on-disk name; undecodable bytes become U+FFFD."""
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def _entry_for(item: os.DirEntry) -> DirectoryEntry | None:
    dangling = False
    try:
        st = item.stat()
    except OSError:
        # Dangling symlink: fall back to the link itself.
        dangling = True
        try:
            st = item.stat(follow_symlinks=False)
        except OSError:
            return None  # removed since scandir
    is_dir = item.is_dir()
    return DirectoryEntry(
        name=display_name(item.name),
        is_dir=is_dir,
        size=0 if is_dir or dangling else st.st_size,
        modified_at=datetime.fromtimestamp(st.st_mtime),
        url_name=quote(os.fsencode(item.name)),
    )


def list_directory(root: str | Path, sub_path: str = "") -> list[DirectoryEntry]:
    """Return the immediate entries of ``root/sub_path`` sorted by name.

    Sorting is case-sensitive and ascending, independent of the order the OS
    returns entries in.

    Raises:
        DirectoryReadError: the path is missing, not a directory, unreadable,
            or outside *root*. The message is safe to show to clients.
    """
    display = "/" + sub_path.strip("/")
    target = resolve_under_root(root, sub_path)
    if target is None:
        raise DirectoryReadError(f"{display}: invalid path or outside shared directory")

    try:
        with os.scandir(target) as it:
            entries = [e for e in map(_entry_for, it) if e is not None]
    except FileNotFoundError:
        raise DirectoryReadError(f"{display}: no such directory") from None
    except NotADirectoryError:
        raise DirectoryReadError(f"{display}: not a directory") from None
    except PermissionError:
        raise DirectoryReadError(f"{display}: permission denied") from None
    except OSError as exc:
        logger.warning("Failed to read directory %s: %s", target, exc)
        raise DirectoryReadError(f"{display}: cannot read directory") from None

    entries.sort(key=lambda e: e.name)
    return entries
