# Breadcrumb trail for the listing page.
# Created: 2026-10-17

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NavigationEntry:
    """One breadcrumb. ``is_last`` marks the current directory (not a link)."""

    name: str
    href: str
    is_last: bool = False


def build_navigation(path: str, prefix: str = "/ui") -> list[NavigationEntry]:
    """Split *path* into breadcrumbs rooted at a synthetic "Home" entry.

    ``build_navigation("docs/2024")`` gives Home -> ``/ui/``,
    docs -> ``/ui/docs``, 2024 -> ``/ui/docs/2024`` (last).

    Empty segments (``a//b`` or a trailing slash) are kept as empty-named
    entries rather than collapsed.
    """
    if not path.startswith("/"):
        path = "/" + path
    parts = path.split("/")

    nav = [NavigationEntry(name="Home", href=prefix + "/")]
    for i in range(1, len(parts)):
        nav.append(
            NavigationEntry(
                name=parts[i],
                href=prefix + "/".join(parts[: i + 1]),
                is_last=i == len(parts) - 1,
            )
        )
    return nav
