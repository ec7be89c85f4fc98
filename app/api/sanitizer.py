# app/api/sanitizer.py
"""
Обезвреживание HTML в свободном тексте.
"""

import html
import re

_TAG_RE = re.compile(r"<[^>]*>")


def strip_tags(value) -> str:
    if value is None:
        return ""
    text = value if isinstance(value, str) else str(value)
    return _TAG_RE.sub("", text)


def sanitize(value) -> str:
    """Strips HTML tags and escapes ``&``, ``<`` and ``>`` in what is left."""
    return html.escape(strip_tags(value), quote=False)
