# JSON API routers.
# Created: 2026-10-17
