# Backend/tests/fixtures/__init__.py
"""
Test fixtures for the post pipeline.

Factory functions for creating post sources on disk:
- make_post_source()
- write_post()
- write_raw()
"""

from pathlib import Path
from typing import Optional


def make_post_source(
    title: str = "Test Post",
    date: str = "2024-01-02T10:00:00Z",
    tags: str = "test, python",
    draft: Optional[bool] = None,
    body: str = "Hello **world**.",
    extra: str = "",
) -> str:
    """Factory function to build the raw text of a post file."""
    lines = [f"title: {title}", f"date: {date}", f"tags: {tags}"]
    if draft is not None:
        lines.append(f"draft: {'true' if draft else 'false'}")
    if extra:
        lines.append(extra)
    return "\n".join(lines) + "\n---\n" + body


def write_post(directory: Path, name: str, **kwargs) -> Path:
    """Write a well-formed post file and return its path."""
    return write_raw(directory, name, make_post_source(**kwargs))


def write_raw(directory: Path, name: str, content: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_bytes(content.encode("utf-8"))
    return path
