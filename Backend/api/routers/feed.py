from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from app.config import Settings
from app.core.logging import get_logger
from app.deps.posts import get_repository, get_settings_dep
from services.feed_builder import build_feed, render_feed
from services.post_repository import PostRepository

logger = get_logger()

router = APIRouter(
    tags=["feed"],
)

FEED_MEDIA_TYPE = "text/xml"


@router.get("/feed.xml")
async def get_feed(
    request: Request,
    repo: PostRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings_dep),
) -> Response:
    """RSS 2.0 feed of all non-draft posts, newest first."""
    posts = await asyncio.to_thread(repo.list_posts)
    channel = build_feed(posts, str(request.base_url), settings)

    try:
        payload = render_feed(channel)
    except (TypeError, ValueError) as exc:
        logger.error("feed_render_failed", error=str(exc))
        raise HTTPException(status_code=500, detail="Internal Server Error") from exc

    return Response(
        content=payload,
        media_type=FEED_MEDIA_TYPE,
        headers={"Content-Disposition": "inline"},
    )
