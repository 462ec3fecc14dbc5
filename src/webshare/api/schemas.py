# File browser schemas.
# Created: 2026-10-17

from __future__ import annotations

from pydantic import BaseModel


class NavigationItem(BaseModel):
    """One breadcrumb."""

    name: str
    href: str
    isLast: bool = False


class FileEntry(BaseModel):
    """A single file or directory entry."""

    name: str
    isDir: bool = False
    size: int = 0
    humanSize: str = ""
    modified: str = ""


class BrowseResponse(BaseModel):
    """File browser listing."""

    path: str
    navigation: list[NavigationItem] = []
    files: list[FileEntry] = []


class ErrorResponse(BaseModel):
    """Error envelope for the JSON API."""

    detail: str
