# Backend/app/deps/posts.py
from __future__ import annotations

from fastapi import Request
from fastapi.templating import Jinja2Templates

from app.config import Settings
from services.post_repository import PostRepository

__all__ = ["get_settings_dep", "get_repository", "get_templates"]


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_repository(request: Request) -> PostRepository:
    """A new repository per request; nothing is shared between requests."""
    settings: Settings = request.app.state.settings
    return PostRepository(settings.POSTS_DIR, extension=settings.POST_EXTENSION)


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates
