# Shared FastAPI dependencies.
# Created: 2026-10-17
#
# The server context (config + renderer) lives on app.state, set up by
# create_app(); handlers reach it through these instead of module globals.

from __future__ import annotations

from fastapi import Request

from webshare.config import ServerConfig
from webshare.renderer import ViewRenderer


def get_config(request: Request) -> ServerConfig:
    return request.app.state.config


def get_renderer(request: Request) -> ViewRenderer:
    return request.app.state.renderer
