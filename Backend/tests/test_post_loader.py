from __future__ import annotations

from pathlib import Path

import pytest

from fixtures import make_post_source, write_post, write_raw
from services.content_errors import MalformedContent, MetadataDecodeError, PostIOError
from services.post_loader import load_post


def test_load_post_builds_post(tmp_path: Path):
    path = write_post(
        tmp_path,
        "hello-world.md",
        title="Hello",
        date="2024-01-02T10:00:00Z",
        tags="a, b",
        body="First paragraph.\n\nSecond paragraph.",
    )
    post = load_post(path)

    assert post.title == "Hello"
    assert post.date == "2024-01-02T10:00:00Z"
    assert post.tags == "a, b"
    assert post.tag_list == ["a", "b"]
    assert post.draft is False
    assert "<p>First paragraph.</p>" in post.body


def test_identifier_is_base_name_with_extension(tmp_path: Path):
    """Identifiers keep the file extension: `hello-world.md`, not `hello-world`."""
    path = write_post(tmp_path / "nested", "hello-world.md")
    post = load_post(path)
    assert post.identifier == "hello-world.md"


def test_footnote_round_trip(tmp_path: Path):
    path = write_post(
        tmp_path,
        "notes.md",
        body="Text with a note.[^1]\n\n[^1]: The definition.\n",
    )
    post = load_post(path)
    assert 'class="footnote-ref"' in post.body
    assert 'href="#fn:1"' in post.body
    assert 'id="fn:1"' in post.body
    assert "The definition." in post.body


def test_missing_delimiter_raises_malformed(tmp_path: Path):
    path = write_raw(tmp_path, "broken.md", "title: no delimiter\nbody text\n")
    with pytest.raises(MalformedContent) as excinfo:
        load_post(path)
    assert excinfo.value.path == str(path)


def test_bad_yaml_raises_decode_error(tmp_path: Path):
    path = write_raw(tmp_path, "bad.md", "title: [oops\n---\nbody\n")
    with pytest.raises(MetadataDecodeError):
        load_post(path)


def test_missing_file_raises_io_error(tmp_path: Path):
    with pytest.raises(PostIOError):
        load_post(tmp_path / "missing.md")


def test_invalid_utf8_raises_io_error(tmp_path: Path):
    path = tmp_path / "latin1.md"
    path.write_bytes(make_post_source(title="café").encode("latin-1"))
    with pytest.raises(PostIOError):
        load_post(path)


def test_crlf_file_is_malformed(tmp_path: Path):
    path = write_raw(tmp_path, "windows.md", "title: x\r\n---\r\nbody\r\n")
    with pytest.raises(MalformedContent):
        load_post(path)
