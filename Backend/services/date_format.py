from __future__ import annotations

import re
from datetime import datetime
from email.utils import format_datetime
from typing import Optional

from app.core.logging import get_logger

logger = get_logger()

# RFC 3339 date-time: full date, "T", full time, mandatory offset.
_RFC3339_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})$"
)

DISPLAY_DATE_FORMAT = "%d %B %Y"


def parse_rfc3339(value: str) -> Optional[datetime]:
    """Parse a strict RFC 3339 timestamp; None when the text does not conform."""
    if not isinstance(value, str) or not _RFC3339_RE.match(value):
        logger.debug("date_parse_failed", value=value)
        return None

    text = value.replace("Z", "+00:00")
    fraction = re.search(r"\.(\d+)", text)
    if fraction:
        # fromisoformat only takes up to microseconds on older interpreters
        digits = fraction.group(1)[:6].ljust(6, "0")
        text = text[: fraction.start()] + "." + digits + text[fraction.end():]

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        logger.debug("date_parse_failed", value=value)
        return None


def format_date(value: str, fmt: str = DISPLAY_DATE_FORMAT) -> str:
    """Template helper: reformat an RFC 3339 string, or "" if it cannot be parsed."""
    dt = parse_rfc3339(value)
    if dt is None:
        return ""
    return dt.strftime(fmt)


def format_pub_date(value: str) -> str:
    """RSS pubDate (RFC 822/2822 style), or "" if the date cannot be parsed."""
    dt = parse_rfc3339(value)
    if dt is None:
        return ""
    return format_datetime(dt)
