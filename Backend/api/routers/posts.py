from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.core.logging import get_logger
from app.deps.posts import get_repository, get_templates
from services.content_errors import LoadError, NotFoundError
from services.post_repository import PostRepository

logger = get_logger()

router = APIRouter(
    tags=["posts"],
)


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    repo: PostRepository = Depends(get_repository),
    templates: Jinja2Templates = Depends(get_templates),
) -> HTMLResponse:
    posts = await asyncio.to_thread(repo.list_posts)
    return templates.TemplateResponse(
        request,
        "index.html",
        {"is_home": True, "posts": posts},
    )


@router.get("/post/{identifier}", response_class=HTMLResponse)
async def show_post(
    identifier: str,
    request: Request,
    repo: PostRepository = Depends(get_repository),
    templates: Jinja2Templates = Depends(get_templates),
) -> HTMLResponse:
    try:
        post = await asyncio.to_thread(repo.get_post, identifier)
    except NotFoundError:
        logger.info("post_not_found", identifier=identifier)
        raise HTTPException(status_code=404, detail="Post not found")
    except LoadError as exc:
        logger.error(
            "post_load_failed",
            identifier=identifier,
            error_kind=exc.cause.kind,
            error=str(exc.cause),
        )
        raise HTTPException(status_code=500, detail="Internal Server Error") from exc

    return templates.TemplateResponse(
        request,
        "post.html",
        {"is_home": False, "post": post},
    )
