"""Class-name lookups and text extraction over parsed documents."""

from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

from lxml import etree
from lxml.html import HtmlElement

from .document import Document, ElementCollection, ensure_open

logger = logging.getLogger(__name__)

Root = Union[Document, HtmlElement, None]


def _resolve(root: Root) -> Tuple[Optional[HtmlElement], Optional[Document]]:
    if root is None:
        return None, None
    if isinstance(root, Document):
        return root.root, root
    return root, ensure_open(root)


def find_all(root: Root, class_name: str) -> ElementCollection:
    """Return every element at or below ``root`` carrying ``class_name``.

    Matches are in document order and include ``root`` itself. Lookup
    failures are logged and yield an empty collection.
    """
    element, owner = _resolve(root)
    if element is None:
        return ElementCollection(owner=owner)
    try:
        matches = element.find_class(class_name)
    except etree.LxmlError as exc:
        logger.debug("failed to find elements with class %s: %s", class_name, exc)
        return ElementCollection(owner=owner)
    return ElementCollection(matches, owner=owner)


def find_first(root: Root, class_name: str) -> Optional[HtmlElement]:
    """Return the first element carrying ``class_name``, or None."""
    match = find_all(root, class_name).first()
    if match is None:
        logger.debug("failed to find element with class %s", class_name)
    return match


def text_content(element: Optional[HtmlElement]) -> str:
    # Comments are skipped, as in the DOM's textContent.
    if element is None:
        return ""
    ensure_open(element)
    return str(element.text_content())
