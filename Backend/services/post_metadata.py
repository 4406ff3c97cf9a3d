"""
Front matter decoding.

YAML is read with a SafeLoader variant that never resolves timestamps, so an
unquoted ``date: 2024-05-01T09:00:00+02:00`` keeps its exact source text. The
repository sorts on that text, so it must not be round-tripped through datetime.
"""

from __future__ import annotations

from typing import Any, Dict

import yaml
from pydantic import ValidationError

from app.models.posts import PostMetadata
from services.content_errors import MetadataDecodeError

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class FrontMatterLoader(yaml.SafeLoader):
    pass


FrontMatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_front_matter(block: str) -> Dict[str, Any]:
    try:
        data = yaml.load(block, Loader=FrontMatterLoader)
    except yaml.YAMLError as exc:
        raise MetadataDecodeError(f"invalid YAML: {exc}") from exc
    except RecursionError as exc:
        # the composer recurses once per nesting level
        raise MetadataDecodeError("front matter nested too deeply") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MetadataDecodeError(
            f"front matter must be a mapping, got {type(data).__name__}"
        )
    return data


def parse_metadata(block: str) -> PostMetadata:
    data = load_front_matter(block)
    try:
        return PostMetadata.model_validate(data)
    except ValidationError as exc:
        raise MetadataDecodeError(f"invalid front matter: {exc}") from exc
