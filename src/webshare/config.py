"""Process-lifetime server configuration.

Built once from command-line arguments and stored on ``app.state.config``.
There is no config file and no environment lookup.
"""

from __future__ import annotations

import logging
import os
import socket
from dataclasses import dataclass, field
from pathlib import Path

from webshare.errors import ConfigError

logger = logging.getLogger(__name__)

FRONTEND_DIR = Path(__file__).parent / "frontend"
DEFAULT_TEMPLATE_DIR = FRONTEND_DIR / "templates"
DEFAULT_STATIC_DIR = FRONTEND_DIR / "static"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8888
DEFAULT_FILE_MODE = 0o644


def app_version() -> str:
    """Installed package version, or 0.0.0 when running from a bare checkout."""
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as get_version

    try:
        return get_version("webshare")
    except PackageNotFoundError:
        return "0.0.0"


@dataclass(frozen=True)
class ServerConfig:
    """Immutable settings for one server process."""

    root_path: Path
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    template_dir: Path = field(default=DEFAULT_TEMPLATE_DIR)
    static_dir: Path = field(default=DEFAULT_STATIC_DIR)
    title: str = "webshare"
    file_mode: int = DEFAULT_FILE_MODE

    @classmethod
    def from_args(
        cls,
        root: str | Path | None = None,
        port: int = DEFAULT_PORT,
        host: str = DEFAULT_HOST,
        template_dir: str | Path | None = None,
    ) -> ServerConfig:
        """Validate CLI values and build a config.

        *root* defaults to the current working directory. Raises
        :class:`ConfigError` on anything unusable.
        """
        try:
            root_path = Path(root).expanduser() if root else Path.cwd()
            root_path = root_path.resolve()
        except OSError as exc:
            raise ConfigError(f"cannot resolve root directory: {exc}") from exc

        if not root_path.exists():
            raise ConfigError(f"root directory does not exist: {root_path}")
        if not root_path.is_dir():
            raise ConfigError(f"root path is not a directory: {root_path}")

        if not 1 <= port <= 65535:
            raise ConfigError(f"port must be between 1 and 65535, got {port}")

        templates = Path(template_dir).expanduser().resolve() if template_dir else DEFAULT_TEMPLATE_DIR
        if not templates.is_dir():
            raise ConfigError(f"template directory not found: {templates}")

        logger.debug("Config: root=%s host=%s port=%d templates=%s", root_path, host, port, templates)
        return cls(
            root_path=root_path,
            port=port,
            host=host,
            template_dir=templates,
            file_mode=default_file_mode(),
        )


def default_file_mode() -> int:
    """Permission bits a plain create would give a new file under the current umask.

    os.umask() can only be read by setting it, so call this during startup,
    before the server starts handling requests on worker threads.
    """
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def check_port_available(host: str, port: int) -> None:
    """Raise :class:`ConfigError` if *host*:*port* cannot be bound."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    try:
        with socket.socket(family, socket.SOCK_STREAM) as s:
            # uvicorn sets SO_REUSEADDR too; without it TIME_WAIT sockets look like a conflict.
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((host, port))
    except OSError as exc:
        raise ConfigError(f"cannot bind {host}:{port}: {exc.strerror or exc}") from exc
