# File browser router: JSON directory listing.
# Created: 2026-10-17

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from webshare.api.schemas import BrowseResponse, ErrorResponse, FileEntry, NavigationItem
from webshare.config import ServerConfig
from webshare.deps import get_config
from webshare.humanize import human_size, human_time
from webshare.listing import list_directory
from webshare.navigation import build_navigation

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Files"])


@router.get(
    "/files/browse",
    response_model=BrowseResponse,
    responses={404: {"model": ErrorResponse}},
)
async def browse_files(path: str = "", config: ServerConfig = Depends(get_config)):
    """List a directory under the shared root. Defaults to the root itself."""
    entries = await run_in_threadpool(list_directory, config.root_path, path)

    files = [
        FileEntry(
            name=e.name,
            isDir=e.is_dir,
            size=e.size,
            humanSize="" if e.is_dir else human_size(e.size),
            modified=human_time(e.modified_at),
        )
        for e in entries
    ]
    navigation = [
        NavigationItem(name=n.name, href=n.href, isLast=n.is_last)
        for n in build_navigation(path)
    ]
    return BrowseResponse(path="/" + path.strip("/"), navigation=navigation, files=files)
