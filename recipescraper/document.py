"""Incremental HTML parsing into an owned document tree."""

from __future__ import annotations

import logging
import weakref
from typing import Iterator, List, Optional, Sequence

from lxml import etree
from lxml.html import Element, HTMLParser, HtmlElement

from .config import settings
from .exceptions import DocumentClosedError, ParseError

logger = logging.getLogger(__name__)

# Documents keyed by the id of their root element. A closed document stays
# registered so elements taken from it can still be traced to it.
_documents: "weakref.WeakValueDictionary[int, Document]" = weakref.WeakValueDictionary()


class Document:
    """A parsed HTML tree.

    Elements and collections taken from a document must not be used after
    the document has been closed. Use it as a context manager to scope it.
    """

    def __init__(self, root: HtmlElement) -> None:
        self._root = root
        self._closed = False
        _documents[id(root)] = self

    @property
    def root(self) -> HtmlElement:
        if self._closed:
            raise DocumentClosedError("document has been closed")
        return self._root

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        logger.debug("closing document %#x", id(self))
        self._closed = True

    def __enter__(self) -> "Document":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def owner_document(element: HtmlElement) -> Optional[Document]:
    """Return the document ``element`` was parsed into, if any."""
    return _documents.get(id(element.getroottree().getroot()))


def ensure_open(element: HtmlElement) -> Optional[Document]:
    """Return the owner of ``element``, raising if it has been closed."""
    owner = owner_document(element)
    if owner is not None and owner.closed:
        raise DocumentClosedError("element used after its document was closed")
    return owner


class ElementCollection:
    """Ordered, read-only view of elements matched by a query."""

    def __init__(self, elements: Sequence[HtmlElement] = (), owner: Optional[Document] = None) -> None:
        self._elements: List[HtmlElement] = list(elements)
        self._owner = owner

    def _check(self) -> None:
        if self._owner is not None and self._owner.closed:
            raise DocumentClosedError("collection used after its document was closed")

    def first(self) -> Optional[HtmlElement]:
        self._check()
        return self._elements[0] if self._elements else None

    def __len__(self) -> int:
        self._check()
        return len(self._elements)

    def __iter__(self) -> Iterator[HtmlElement]:
        self._check()
        return iter(self._elements)

    def __getitem__(self, index: int) -> HtmlElement:
        self._check()
        return self._elements[index]

    def __repr__(self) -> str:
        return f"ElementCollection(size={len(self._elements)})"


def _empty_root() -> HtmlElement:
    root = Element("html")
    etree.SubElement(root, "head")
    etree.SubElement(root, "body")
    return root


def parse_document(
    body: bytes,
    chunk_size: Optional[int] = None,
    encoding: Optional[str] = None,
) -> Document:
    """Feed ``body`` through lxml's incremental parser in fixed-size chunks.

    The chunk size only bounds how much is handed to the parser at once; the
    resulting tree is the same as a single-shot parse of the same bytes.
    """
    if chunk_size is None:
        chunk_size = settings.parse_chunk_size
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    if not body.strip():
        logger.info("empty input, using an empty document")
        return Document(_empty_root())

    try:
        parser = HTMLParser(encoding=encoding or settings.default_encoding)
    except (etree.LxmlError, LookupError) as exc:
        raise ParseError(f"failed to initialize parser: {exc}") from exc

    view = memoryview(body)
    chunk_count = 0
    try:
        for offset in range(0, len(view), chunk_size):
            chunk = view[offset:offset + chunk_size].tobytes()
            parser.feed(chunk)
            chunk_count += 1
            logger.debug("fed chunk %d (%d bytes)", chunk_count, len(chunk))
    except etree.LxmlError as exc:
        raise ParseError(f"chunk process failed: {exc}") from exc

    try:
        root = parser.close()
    except etree.LxmlError as exc:
        raise ParseError(f"chunk finalization failed: {exc}") from exc
    if root is None:
        logger.info("no elements in input, using an empty document")
        root = _empty_root()

    logger.info("processed input in %d chunks", chunk_count)
    return Document(root)
