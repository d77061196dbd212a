"""Tests for the lenient HTML loader."""

import io

import pytest

from pez.errors import ParseError, SourceUnavailable
from pez.loader import load_memory, load_path, load_stream, load_target
from pez.source import DocumentBuffer, Target


def body_tags(tree):
    return [child.tag for child in tree.getroot().find("body")]


def test_load_memory_wraps_fragment():
    tree = load_memory(b"<a><b>hello</b></a>", "memory")
    assert tree.getroot().tag == "html"
    assert body_tags(tree) == ["a"]


def test_malformed_markup_is_repaired():
    tree = load_memory(b"<div><p>one<p>two</div><span>", "memory")
    assert len(tree.xpath("//p")) == 2
    assert len(tree.xpath("//span")) == 1


def test_load_stream():
    tree = load_stream(io.BytesIO(b"<p>streamed</p>"))
    assert tree.xpath("//p/text()") == ["streamed"]


def test_load_path(html_file):
    tree = load_path(html_file(b"<p>on disk</p>"))
    assert tree.xpath("//p/text()") == ["on disk"]


def test_empty_memory_is_parse_error():
    with pytest.raises(ParseError) as excinfo:
        load_memory(b"", "http://example.com/empty")
    assert 'http://example.com/empty' in str(excinfo.value)


def test_empty_stream_is_parse_error():
    with pytest.raises(ParseError) as excinfo:
        load_stream(io.BytesIO(b""))
    assert '"stdin"' in str(excinfo.value)


def test_external_references_are_not_fetched(fake_http):
    load_memory(b'<html><body><img src="http://example.com/x.png"></body></html>', "memory")
    assert fake_http.requests == []


def test_load_target_from_url(fake_http):
    fake_http.add("http://example.com/", b"<p>remote</p>")
    tree = load_target(Target.parse("http://example.com/"))
    assert tree.xpath("//p/text()") == ["remote"]


def test_load_target_unreachable(fake_http):
    with pytest.raises(SourceUnavailable):
        load_target(Target.parse("http://unreachable.invalid/"))


def test_load_target_stdin():
    tree = load_target(Target.parse(None), stdin=io.BytesIO(b"<i>in</i>"))
    assert tree.xpath("//i/text()") == ["in"]


def test_load_memory_accepts_download_buffer():
    with DocumentBuffer() as buffer:
        buffer.append(b"<p>buffered</p>")
        tree = load_memory(buffer.data, "http://example.com/")
    assert tree.xpath("//p/text()") == ["buffered"]
