"""
RSS 2.0 feed built from the repository's ordered post collection.

Drafts are dropped, descriptions hold the first two rendered paragraphs, and
items keep the collection order (date descending, lexical).
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import Iterable, List, Optional

from app.config import Settings
from app.core.logging import get_logger
from app.models.feed import FeedChannel, FeedEntry
from app.models.posts import Post
from services.date_format import format_pub_date

logger = get_logger()

RSS_VERSION = "2.0"
POST_PATH_PREFIX = "/post/"
PARAGRAPH_CLOSE = "</p>"
DESCRIPTION_PARAGRAPHS = 2

# Anything outside the XML 1.0 Char production, lone surrogates included.
_INVALID_XML_CHARS = re.compile(
    "[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def feed_description(body: str, paragraphs: int = DESCRIPTION_PARAGRAPHS) -> str:
    """
    Split the HTML on ``</p>`` and keep the first ``paragraphs`` fragments,
    each re-terminated with ``</p>``.
    """
    fragments = str(body).split(PARAGRAPH_CLOSE)
    return "".join(fragment + PARAGRAPH_CLOSE for fragment in fragments[:paragraphs])


def xml_text(value: Optional[str]) -> str:
    """Replace characters XML cannot carry with U+FFFD."""
    return _INVALID_XML_CHARS.sub("\ufffd", str(value or ""))


def post_link(base_url: str, identifier: str) -> str:
    return base_url.rstrip("/") + POST_PATH_PREFIX + identifier


def build_entry(post: Post, base_url: str) -> FeedEntry:
    return FeedEntry(
        title=post.title,
        link=post_link(base_url, post.identifier),
        description=feed_description(post.body),
        pub_date=format_pub_date(post.date),
        guid=post.identifier,
    )


def build_feed(posts: Iterable[Post], base_url: str, settings: Settings) -> FeedChannel:
    items: List[FeedEntry] = [
        build_entry(post, base_url) for post in posts if not post.draft
    ]
    logger.info("feed_built", items=len(items), base_url=base_url)
    return FeedChannel(
        title=settings.FEED_TITLE,
        link=settings.FEED_LINK,
        description=settings.FEED_DESCRIPTION,
        language=settings.FEED_LANGUAGE,
        items=items,
    )


def render_feed(channel: FeedChannel) -> bytes:
    """Serialise to an RSS document (UTF-8, with XML declaration)."""
    root = ET.Element("rss", {"version": RSS_VERSION})
    channel_el = ET.SubElement(root, "channel")
    ET.SubElement(channel_el, "title").text = xml_text(channel.title)
    ET.SubElement(channel_el, "link").text = xml_text(channel.link)
    ET.SubElement(channel_el, "description").text = xml_text(channel.description)
    ET.SubElement(channel_el, "language").text = xml_text(channel.language)

    for entry in channel.items:
        item = ET.SubElement(channel_el, "item")
        ET.SubElement(item, "title").text = xml_text(entry.title)
        ET.SubElement(item, "link").text = xml_text(entry.link)
        ET.SubElement(item, "description").text = xml_text(entry.description)
        ET.SubElement(item, "pubDate").text = xml_text(entry.pub_date)
        ET.SubElement(item, "guid").text = xml_text(entry.guid)

    return ET.tostring(root, encoding="utf-8", xml_declaration=True)
