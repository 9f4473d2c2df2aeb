"""Tests for the chunked HTML parser adapter."""

from __future__ import annotations

import logging

import pytest
from lxml import etree

from recipescraper import ParseError, find_all, find_first, parse_document, text_content
from recipescraper import document as document_module


def _title(body: bytes, chunk_size: int) -> str:
    with parse_document(body, chunk_size=chunk_size) as doc:
        return text_content(find_first(doc, "recipe-header__title"))


def _large_page() -> bytes:
    filler = "".join(f"<p class='filler'>paragraph {i}</p>" for i in range(400))
    html = (
        "<html><head><title>ignored</title></head><body>"
        f"{filler}<h1 class='recipe-header__title'>Soup</h1>{filler}"
        "</body></html>"
    )
    body = html.encode("utf-8")
    assert len(body) > 10 * 1024
    return body


@pytest.mark.parametrize("chunk_size", [1, 7, 4096, 1 << 20])
def test_chunk_size_does_not_change_large_document(chunk_size):
    assert _title(_large_page(), chunk_size) == "Soup"


@pytest.mark.parametrize("chunk_size", [1, 4096])
def test_single_byte_input(chunk_size):
    assert _title(b"x", chunk_size) == ""


def test_query_results_identical_across_chunkings():
    body = _large_page()
    results = []
    for chunk_size in (3, 4096, len(body)):
        with parse_document(body, chunk_size=chunk_size) as doc:
            results.append([text_content(node) for node in find_all(doc, "filler")])
    assert results[0] == results[1] == results[2]
    assert len(results[0]) == 800


def test_utf8_split_across_chunks():
    body = "<div class='recipe-header__title'>Crème brûlée</div>".encode("utf-8")
    assert _title(body, 1) == "Crème brûlée"


def test_invalid_chunk_size():
    with pytest.raises(ValueError):
        parse_document(b"<html></html>", chunk_size=0)


def test_logs_chunk_count(caplog):
    caplog.set_level(logging.INFO, logger="recipescraper")
    with parse_document(b"a" * 10, chunk_size=4):
        pass
    assert "processed input in 3 chunks" in caplog.text


class FailingFeedParser:
    def __init__(self, **kwargs) -> None:
        pass

    def feed(self, data):
        raise etree.ParserError("boom")

    def close(self):
        return None


class EmptyParser(FailingFeedParser):
    def feed(self, data):
        return None


class FailingCloseParser(EmptyParser):
    def close(self):
        raise etree.ParserError("unterminated")


def test_feed_failure_raises_parse_error(monkeypatch):
    monkeypatch.setattr(document_module, "HTMLParser", FailingFeedParser)
    with pytest.raises(ParseError, match="chunk process failed"):
        parse_document(b"<html></html>")


def test_close_failure_raises_parse_error(monkeypatch):
    monkeypatch.setattr(document_module, "HTMLParser", FailingCloseParser)
    with pytest.raises(ParseError, match="chunk finalization failed"):
        parse_document(b"<html></html>")


def test_missing_root_yields_empty_document(monkeypatch):
    monkeypatch.setattr(document_module, "HTMLParser", EmptyParser)
    with parse_document(b"<html></html>") as doc:
        assert doc.root.tag == "html"
        assert find_first(doc, "recipe__text__content") is None


@pytest.mark.parametrize("body", [b"", b"   \r\n\t  "])
def test_empty_body_yields_empty_document(body, monkeypatch):
    monkeypatch.setattr(document_module, "HTMLParser", FailingFeedParser)
    with parse_document(body) as doc:
        assert doc.root.tag == "html"
        assert [child.tag for child in doc.root] == ["head", "body"]
        assert text_content(doc.root) == ""


def test_unknown_encoding_raises_parse_error():
    with pytest.raises(ParseError, match="failed to initialize parser"):
        parse_document(b"<html></html>", encoding="no-such-encoding")
