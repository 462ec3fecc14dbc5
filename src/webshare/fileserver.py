"""Raw file serving under ``/fs/``.

Files are streamed with ``FileResponse``. Directories get a bare ``<pre>``
index of links (subdirectories suffixed with ``/``), the way a plain static
file server would; the styled page lives under ``/ui/``.
"""

from __future__ import annotations

import html
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import FileResponse, HTMLResponse, RedirectResponse
from starlette.concurrency import run_in_threadpool

from webshare.config import ServerConfig
from webshare.deps import get_config
from webshare.errors import NotFound
from webshare.listing import DirectoryEntry, list_directory, resolve_under_root

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Files"])


def render_index(entries: list[DirectoryEntry]) -> str:
    """Plain HTML index; hrefs are relative to the (slash-terminated) directory URL."""
    lines = ["<pre>"]
    for entry in entries:
        name = entry.name + "/" if entry.is_dir else entry.name
        href = entry.href_name + "/" if entry.is_dir else entry.href_name
        lines.append(f'<a href="{href}">{html.escape(name)}</a>')
    lines.append("</pre>")
    return "\n".join(lines) + "\n"


@router.get("/fs/{path:path}")
async def serve_file(request: Request, path: str, config: ServerConfig = Depends(get_config)):
    """Download a file, or list a directory."""
    target = resolve_under_root(config.root_path, path)
    if target is None or not target.exists():
        raise NotFound(f"/{path}: not found")

    if target.is_dir():
        if path and not path.endswith("/"):
            return RedirectResponse(request.url.path + "/", status_code=301)
        entries = await run_in_threadpool(list_directory, config.root_path, path)
        return HTMLResponse(render_index(entries))

    return FileResponse(target)
