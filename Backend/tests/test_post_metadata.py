from __future__ import annotations

import pytest

from services.content_errors import MetadataDecodeError
from services.post_metadata import parse_metadata


def test_parse_metadata_happy_path():
    meta = parse_metadata(
        "title: Hello\n"
        "date: 2024-01-02T10:00:00Z\n"
        "tags: go, python\n"
        "draft: true\n"
    )
    assert meta.title == "Hello"
    assert meta.date == "2024-01-02T10:00:00Z"
    assert meta.tags == "go, python"
    assert meta.draft is True


def test_draft_defaults_to_false():
    meta = parse_metadata("title: Hello\ndate: 2024-01-02T10:00:00Z\n")
    assert meta.draft is False


@pytest.mark.parametrize("block", ["title: t\ndraft:\n", "title: t\ndraft: null\n", "title: t\ndraft: ~\n"])
def test_empty_draft_means_not_a_draft(block: str):
    assert parse_metadata(block).draft is False


def test_unquoted_timestamp_keeps_source_text():
    meta = parse_metadata("title: t\ndate: 2024-05-01T09:00:00.500+02:00\n")
    assert isinstance(meta.date, str)
    assert meta.date == "2024-05-01T09:00:00.500+02:00"


def test_plain_date_is_not_converted_either():
    meta = parse_metadata("title: t\ndate: 2024-05-01\n")
    assert meta.date == "2024-05-01"


def test_unknown_keys_are_ignored():
    meta = parse_metadata("title: t\nauthor: someone\nlayout: post\n")
    assert meta.title == "t"
    assert not hasattr(meta, "author")


def test_scalar_title_is_coerced_to_text():
    meta = parse_metadata("title: 42\n")
    assert meta.title == "42"


def test_leading_document_marker_is_accepted():
    meta = parse_metadata("---\ntitle: Jekyll style\n")
    assert meta.title == "Jekyll style"


def test_missing_optional_fields_default_to_empty():
    meta = parse_metadata("title: only a title\n")
    assert meta.date == ""
    assert meta.tags == ""


@pytest.mark.parametrize(
    "block",
    [
        "title: [unclosed\n",            # syntax error
        "- just\n- a list\n",            # root is not a mapping
        "plain scalar text",             # root is not a mapping
        "date: 2024-01-01T00:00:00Z\n",  # title missing
        "title: t\ntags:\n  - a\n  - b\n",  # wrong type for tags
        "title: t\ndraft: maybe\n",      # not a boolean
    ],
)
def test_invalid_front_matter_raises_decode_error(block: str):
    with pytest.raises(MetadataDecodeError):
        parse_metadata(block)


def test_empty_block_fails_on_missing_title():
    with pytest.raises(MetadataDecodeError):
        parse_metadata("")


def test_deeply_nested_front_matter_raises_decode_error():
    with pytest.raises(MetadataDecodeError):
        parse_metadata("title: x\ntags: " + "[" * 5000 + "\n")
