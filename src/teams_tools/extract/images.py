"""Image URL extraction from article markup."""

from __future__ import annotations

import re

IMG_SRC_PATTERN = re.compile(r'<img[^>]+src="([^">]+)"')


def extract_image_urls(content: str | None) -> list[str]:
    """Return the ``src`` of every ``<img>`` tag in document order.

    Duplicates are kept. Content without image tags yields an empty list.
    """
    if not content:
        return []
    return IMG_SRC_PATTERN.findall(content)
