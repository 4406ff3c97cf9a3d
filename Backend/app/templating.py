# Backend/app/templating.py
"""
Jinja2 environment for the HTML pages.

Helpers are plain functions registered on the environment built here; the
routers receive the Jinja2Templates instance through app.state.
"""

from __future__ import annotations

import random
from typing import Optional

from fastapi.templating import Jinja2Templates

from app.config import Settings
from services.date_format import format_date

TRIVIA = (
    "Your beloved ones love you",
    "Your beloved ones don't love you",
    "You will feel more intelligent",
    "You will feel less intelligent",
    "There is a heaven and you're not going",
    "There is a heaven and you're going",
    "There is no heaven but you're not going anyway",
    "There is no heaven but you're going somewhere else",
    "Your path to enlightenment is blocked by a cat",
    "You will get arrested",
    "Your loneliness will be cured",
    "Your loneliness will be eternal",
    "Your loneliness will be cured by a cat",
    "Your loneliness will be eternal because of a cat",
    "You will be reincarnated as a cat",
    "You will be reincarnated as a cat and you will be lonely",
    "You will be reincarnated as a cat and you will be loved",
    "You will be reincarnated as a cat and you will be loved by a lonely person",
    "You will be reincarnated as a cat and you will be loved by a lonely person who will be arrested",
    "You will be reincarnated as a tree and you will live three thousand years",
    "You will be reincarnated as a tree and you will be cut down",
    "You will be reincarnated as a dog and someone will eat you",
    "You will be reincarnated as a dog and you will eat someone",
    "You will be reincarnated as a sea urchin",
    "You will be reincarnated as a bacterium inside your own body",
    "You will be reincarnated as a maggot who will eat your decaying body",
)


def trivia(rng: Optional[random.Random] = None) -> str:
    """Pick one fortune for the page footer."""
    return (rng or random).choice(TRIVIA)


def build_templates(settings: Settings) -> Jinja2Templates:
    templates = Jinja2Templates(directory=str(settings.TEMPLATES_DIR))
    env = templates.env
    env.filters["format_date"] = format_date
    env.globals["trivia"] = trivia
    env.globals["feed_title"] = settings.FEED_TITLE
    return templates
