"""Exceptions raised by the fetch, parse, extract and write stages."""

from __future__ import annotations

from typing import Optional


class ScraperError(Exception):
    """Base exception for every fatal recipescraper failure."""


class TransportError(ScraperError):
    """Raised when the page cannot be retrieved.

    Covers DNS, connection, TLS and read failures as well as responses
    aborted because of an error status.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HTTPStatusError(TransportError):
    """Raised when the server answers with a status of 400 or above."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"remote server failure for {url}: HTTP {status_code}", status_code=status_code)
        self.url = url


class ParseError(ScraperError):
    """Raised when the HTML parser reports a failure."""


class MissingElementError(ScraperError):
    """Raised when a mandatory element is not present in the document."""

    def __init__(self, class_name: str) -> None:
        super().__init__(f"failed to find element with class {class_name}")
        self.class_name = class_name


class OutputIOError(ScraperError):
    """Raised when the output file cannot be opened or written."""

    def __init__(self, path: str, errno: Optional[int], strerror: Optional[str]) -> None:
        super().__init__(f"failed to open output file: {path}: {strerror} ({errno})")
        self.path = path
        self.errno = errno
        self.strerror = strerror


class DocumentClosedError(ScraperError):
    """Raised when a document or one of its collections is used after close."""
