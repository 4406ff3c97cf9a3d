"""
Post repository: a fresh directory scan on every call.

There is deliberately no cache. Each listing or lookup reads the filesystem as
it is at call time, so concurrent requests share nothing but read-only files.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, List, Optional, Union

from app.core.logging import get_logger
from app.models.posts import Post
from services.content_errors import ContentError, LoadError, NotFoundError
from services.post_loader import load_post

logger = get_logger()

PostLoader = Callable[[Path], Post]


def sort_posts(posts: List[Post]) -> List[Post]:
    """
    Newest first by plain string comparison of the raw ``date`` values.

    This is lexical, not chronological: ``2024-01-01T10:00:00+01:00`` is listed
    before ``2024-01-01T09:30:00Z`` although it is the earlier instant.
    Equal dates keep scan order.
    """
    return sorted(posts, key=lambda post: post.date, reverse=True)


def resolve_post_path(content_dir: Union[str, Path], identifier: str) -> Optional[Path]:
    """
    Join ``identifier`` to the content root and normalise ``.``/``..`` lexically.

    Returns None when the result is not strictly inside the root. Nothing on
    disk is touched here.
    """
    if not identifier or "\x00" in identifier:
        return None

    root = os.path.abspath(str(content_dir))
    candidate = os.path.normpath(os.path.join(root, identifier))
    try:
        inside = os.path.commonpath([root, candidate]) == root
    except ValueError:
        # different drives on Windows
        return None
    if not inside or candidate == root:
        return None
    return Path(candidate)


class PostRepository:
    def __init__(
        self,
        content_dir: Union[str, Path],
        extension: str = ".md",
        loader: PostLoader = load_post,
    ):
        self.content_dir = Path(content_dir)
        self.extension = extension
        self._loader = loader

    def source_files(self) -> List[Path]:
        if not self.content_dir.is_dir():
            logger.warning("posts_dir_missing", path=str(self.content_dir))
            return []
        return sorted(
            path
            for path in self.content_dir.glob(f"*{self.extension}")
            if path.is_file()
        )

    def list_posts(self) -> List[Post]:
        """Load every source file, skipping (and logging) the ones that fail."""
        posts: List[Post] = []
        for path in self.source_files():
            try:
                posts.append(self._loader(path))
            except ContentError as exc:
                logger.warning(
                    "post_skipped",
                    path=str(path),
                    error_kind=exc.kind,
                    error=str(exc),
                )
                continue

        ordered = sort_posts(posts)
        logger.info("posts_listed", total=len(ordered), path=str(self.content_dir))
        return ordered

    def get_post(self, identifier: str) -> Post:
        """
        Resolve one post by identifier (file name, extension included).

        Raises NotFoundError for identifiers outside the root or without a file,
        LoadError when the file exists but cannot be read or parsed.
        """
        path = resolve_post_path(self.content_dir, identifier)
        if path is None:
            logger.info("post_identifier_rejected", identifier=identifier)
            raise NotFoundError(identifier)
        if not path.is_file():
            raise NotFoundError(identifier)

        try:
            return self._loader(path)
        except ContentError as exc:
            raise LoadError(identifier, exc) from exc
