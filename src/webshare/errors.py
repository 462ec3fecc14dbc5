# Error taxonomy shared by handlers and the CLI.
# Created: 2026-10-17
#
# Handlers raise WebshareError subclasses; server.py registers one exception
# handler that logs them and turns them into plain-text responses.

from __future__ import annotations


class WebshareError(Exception):
    """Base class for errors that map onto an HTTP status code."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequest(WebshareError):
    """The client sent a request we cannot act on (malformed upload form)."""

    status_code = 400


class NotFound(WebshareError):
    status_code = 404


class DirectoryReadError(NotFound):
    """A listing target is missing, not a directory, or unreadable."""


class InternalError(WebshareError):
    """File creation, copy or template failure."""

    status_code = 500


class ConfigError(Exception):
    """Invalid command-line arguments or an unusable bind address."""
