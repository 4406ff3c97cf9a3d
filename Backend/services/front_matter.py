from __future__ import annotations

from typing import Tuple

from services.content_errors import MalformedContent

FRONT_MATTER_DELIMITER = "\n---\n"


def split_front_matter(content: str) -> Tuple[str, str]:
    """
    Split raw file text into (metadata block, body).

    Only the first delimiter counts; any later ``---`` line stays in the body.
    """
    parts = content.split(FRONT_MATTER_DELIMITER, 1)
    if len(parts) < 2:
        raise MalformedContent("missing front matter delimiter")
    return parts[0], parts[1]
