"""
Error kinds raised by the post pipeline.

Per-file failures derive from ContentError; the listing skips and logs them.
Single-post lookups raise NotFoundError or LoadError so the HTTP layer can pick
404 vs 500 without inspecting the filesystem itself.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class ContentError(Exception):
    """A single source file could not be turned into a Post."""

    kind = "content_error"

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None


class PostIOError(ContentError):
    """The source file exists but could not be read or decoded."""

    kind = "io_error"


class MalformedContent(ContentError):
    """The front matter delimiter line is missing."""

    kind = "malformed_content"


class MetadataDecodeError(ContentError):
    """The front matter block is not valid YAML of the expected shape."""

    kind = "metadata_decode_error"


class NotFoundError(Exception):
    """No post file inside the content root matches the identifier."""

    def __init__(self, identifier: str):
        super().__init__(f"post not found: {identifier!r}")
        self.identifier = identifier


class LoadError(Exception):
    """The post file exists but loading it failed."""

    def __init__(self, identifier: str, cause: ContentError):
        super().__init__(f"post {identifier!r} could not be loaded: {cause}")
        self.identifier = identifier
        self.cause = cause
