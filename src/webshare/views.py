# Browser-facing routes: listing page, uploads, root redirect.
# Created: 2026-10-17

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse, Response
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException

from webshare.config import ServerConfig
from webshare.deps import get_config, get_renderer
from webshare.errors import BadRequest
from webshare.listing import list_directory
from webshare.navigation import build_navigation
from webshare.renderer import ViewRenderer
from webshare.upload import safe_basename, save_upload, upload_target_dir

logger = logging.getLogger(__name__)

router = APIRouter()

UI_PREFIX = "/ui"


@router.get("/", include_in_schema=False)
async def index():
    return RedirectResponse(UI_PREFIX + "/", status_code=302)


@router.get(UI_PREFIX + "/{path:path}")
async def view_directory(
    request: Request,
    path: str,
    config: ServerConfig = Depends(get_config),
    renderer: ViewRenderer = Depends(get_renderer),
):
    """Listing page with breadcrumbs, sorted entries and humanized metadata."""
    entries = await run_in_threadpool(list_directory, config.root_path, path)
    navigation = build_navigation(path, prefix=UI_PREFIX)
    return renderer.render(request, path, navigation, entries)


@router.post("/upload/{path:path}")
async def upload_file(request: Request, path: str, config: ServerConfig = Depends(get_config)):
    """Store the multipart field ``file`` under ``root/<path>``.

    Redirects back to the Referer when the browser sent one, so the form on
    the listing page lands on the refreshed listing.
    """
    try:
        form = await request.form()
    except (MultiPartException, HTTPException, ValueError) as exc:
        raise BadRequest(f"unable to parse http request, {exc}") from exc

    try:
        upload = form.get("file")
        if not isinstance(upload, UploadFile):
            raise BadRequest("unable to parse http request, missing file field")

        filename = safe_basename(upload.filename)
        target_dir = upload_target_dir(config.root_path, path)
        _, size = await run_in_threadpool(
            save_upload, target_dir, filename, upload.file, config.file_mode
        )
    finally:
        await form.close()

    logger.info("upload file %s with size %d successfully", filename, size)

    referer = request.headers.get("referer")
    if referer:
        return RedirectResponse(referer, status_code=302)
    return Response(status_code=200)
