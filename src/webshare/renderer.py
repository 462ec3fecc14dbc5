"""HTML rendering of a directory listing.

The template directory comes from :class:`~webshare.config.ServerConfig`, so a
custom look can be dropped in with ``--templates`` without touching the
package. Two filters are available to templates:

- ``humansize``: byte count -> ``"1.5 KB"``
- ``humantime``: datetime -> ``"2026-10-17 09:30:00"``
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import jinja2
from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from webshare.errors import InternalError
from webshare.humanize import human_size, human_time
from webshare.listing import DirectoryEntry
from webshare.navigation import NavigationEntry

logger = logging.getLogger(__name__)

VIEW_TEMPLATE = "view.html"


class ViewRenderer:
    """Merges breadcrumbs and directory entries into the listing page."""

    def __init__(
        self,
        template_dir: str | Path,
        template_name: str = VIEW_TEMPLATE,
        title: str = "webshare",
    ):
        self.template_name = template_name
        self.title = title
        self.templates = Jinja2Templates(directory=str(template_dir))
        self.templates.env.filters["humansize"] = human_size
        self.templates.env.filters["humantime"] = human_time

    def render(
        self,
        request: Request,
        path: str,
        navigation: Sequence[NavigationEntry],
        entries: Sequence[DirectoryEntry],
    ) -> HTMLResponse:
        """Render the listing page.

        A template that is missing, fails to parse, or raises while rendering
        is logged and reported as :class:`InternalError`; nothing is sent from
        a half-rendered page.
        """
        context = {
            "title": self.title,
            "path": "/" + path.strip("/"),
            "navigation": list(navigation),
            "files": list(entries),
        }
        try:
            return self.templates.TemplateResponse(request, self.template_name, context)
        except jinja2.TemplateError as exc:
            logger.warning("Template %s failed: %s", self.template_name, exc)
            raise InternalError("unable to render directory listing") from exc
