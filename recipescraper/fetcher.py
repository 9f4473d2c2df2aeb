"""HTTP fetching utilities."""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Dict, Optional

import certifi
from curl_cffi import requests
from curl_cffi.requests import RequestsError

from .config import settings
from .exceptions import HTTPStatusError, TransportError
from .models import FetchResult

logger = logging.getLogger(__name__)


def _ensure_ascii_cert_path() -> Optional[str]:
    """Ensure CA bundle lives on an ASCII path (curl can't open non-ASCII)."""
    original = Path(certifi.where())
    try:
        str(original).encode("ascii")
        return str(original)
    except UnicodeEncodeError:
        temp_dir = Path(tempfile.gettempdir())
        ascii_copy = temp_dir / "certifi_cacert.pem"
        try:
            if not ascii_copy.exists() or original.stat().st_mtime > ascii_copy.stat().st_mtime:
                shutil.copy2(original, ascii_copy)
            return str(ascii_copy)
        except OSError as exc:
            logger.warning("failed to copy certifi bundle to ASCII path: %s", exc)
            return None


CERT_BUNDLE_PATH = _ensure_ascii_cert_path()


def charset_from_content_type(content_type: str) -> Optional[str]:
    """Return the charset parameter of a Content-Type header, if any."""
    for param in content_type.split(";")[1:]:
        key, _, value = param.partition("=")
        if key.strip().lower() == "charset":
            value = value.strip().strip('"').strip("'")
            return value or None
    return None


class Fetcher:
    """Retrieve a single page, streaming its body into memory."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self.timeout = timeout if timeout is not None else settings.timeout
        self.headers = {"User-Agent": settings.user_agent}
        self.headers.update(headers or {})
        self._cert_bundle = CERT_BUNDLE_PATH

    def fetch(self, url: str) -> FetchResult:
        """Fetch ``url`` and return its complete body.

        The status code is checked as soon as the headers arrive. Error
        statuses abort the transfer before any of the body is read.
        """
        logger.info("retrieving %s", url)
        try:
            with self._session() as session:
                response = self._open_stream(session, url)
                try:
                    return self._read_response(url, response)
                finally:
                    response.close()
        except RequestsError as exc:
            logger.error("failed to fetch %s: %s", url, exc)
            raise TransportError(f"failed to fetch {url}: {exc}") from exc

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #
    def _session(self) -> requests.Session:
        return requests.Session(impersonate=settings.impersonate)

    def _open_stream(self, session: requests.Session, url: str):
        return session.get(
            url,
            headers=self.headers,
            timeout=self.timeout,
            allow_redirects=True,
            verify=self._cert_bundle or True,
            stream=True,
        )

    def _read_response(self, url: str, response) -> FetchResult:
        status_code = int(response.status_code)
        if status_code >= 400:
            logger.warning("remote server failure: HTTP %d, terminating.", status_code)
            raise HTTPStatusError(url, status_code)

        buffer = bytearray()
        for chunk in response.iter_content():
            if not chunk:
                continue
            logger.debug("received %d bytes", len(chunk))
            buffer.extend(chunk)

        logger.info("retrieved %d bytes from %s", len(buffer), url)
        content_type = response.headers.get("content-type") or ""
        return FetchResult(
            url=str(response.url or url),
            status_code=status_code,
            body=bytes(buffer),
            encoding=charset_from_content_type(content_type),
        )
