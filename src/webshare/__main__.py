"""webshare entry point.

    webshare [--port NUM] [--host ADDR] [--templates DIR] [PATH]

Shares PATH (default: the current directory) over HTTP. Exits with status 1
on bad arguments or when the server cannot start.
"""

from __future__ import annotations

import argparse
import logging
import sys

from webshare.config import DEFAULT_HOST, DEFAULT_PORT, ServerConfig, app_version
from webshare.errors import ConfigError
from webshare.logging_setup import setup_logging

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """argparse exits with 2 on usage errors; webshare uses 1."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="webshare",
        description="Share a directory on the local network: browse, download and upload files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  webshare                        Share the current directory on port 8888
  webshare ~/Downloads            Share ~/Downloads
  webshare --port 9000 /srv/pub   Share /srv/pub on port 9000
""",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to share (default: current directory)",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=DEFAULT_PORT,
        help=f"Port to listen on (default: {DEFAULT_PORT})",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=DEFAULT_HOST,
        help=f"Address to bind (default: {DEFAULT_HOST}, all interfaces)",
    )
    parser.add_argument(
        "--templates",
        type=str,
        default=None,
        help="Directory holding a custom view.html (default: bundled template)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level (default: INFO)",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {app_version()}",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level)

    from webshare.server import run_server

    try:
        config = ServerConfig.from_args(
            root=args.path,
            port=args.port,
            host=args.host,
            template_dir=args.templates,
        )
        run_server(config)
    except ConfigError as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc
    except KeyboardInterrupt:
        logger.info("webshare stopped.")


if __name__ == "__main__":
    main()
