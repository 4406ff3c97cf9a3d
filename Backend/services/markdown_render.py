from __future__ import annotations

import markdown
from markupsafe import Markup

from app.core.logging import get_logger

logger = get_logger()

MARKDOWN_EXTENSIONS = [
    "footnotes",
    "tables",
    "fenced_code",
    "def_list",
    "pymdownx.magiclink",
    "pymdownx.tilde",
]


def _new_renderer() -> markdown.Markdown:
    # Markdown instances collect footnotes as they render; never share one.
    return markdown.Markdown(extensions=MARKDOWN_EXTENSIONS, output_format="html")


def render_body(text: str) -> Markup:
    """
    Convert a post body to HTML.

    Raw HTML in the body is passed through untouched: authors are trusted.
    Footnote references resolve against ``[^id]: ...`` lines anywhere in the text.
    """
    html = _new_renderer().convert(text)
    logger.debug("body_rendered", input_chars=len(text), output_chars=len(html))
    return Markup(html)
