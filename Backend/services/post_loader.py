from __future__ import annotations

from pathlib import Path
from typing import Union

from app.core.logging import get_logger
from app.models.posts import Post
from services.content_errors import ContentError, PostIOError
from services.front_matter import split_front_matter
from services.markdown_render import render_body
from services.post_metadata import parse_metadata

logger = get_logger()


def read_source(path: Path) -> str:
    """
    Read a post file as UTF-8 without newline translation.

    CRLF files therefore keep their "\\r\\n" and do not match the delimiter.
    """
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise PostIOError(f"cannot read file: {exc}", path) from exc
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise PostIOError(f"file is not valid UTF-8: {exc}", path) from exc


def load_post(path: Union[str, Path]) -> Post:
    """Read, split, decode and render one source file into a Post."""
    path = Path(path)
    content = read_source(path)

    try:
        meta_block, body_text = split_front_matter(content)
        meta = parse_metadata(meta_block)
    except ContentError as exc:
        if exc.path is None:
            exc.path = str(path)
        raise

    post = Post.from_metadata(path.name, meta, render_body(body_text))
    logger.debug("post_loaded", path=str(path), identifier=post.identifier, draft=post.draft)
    return post
