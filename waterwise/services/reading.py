"""
Reading aids for the article page: scroll progress and reading time.
"""

import math
from typing import List

from waterwise.core.constants import WORDS_PER_MINUTE


def reading_progress(
    scroll_offset: float, content_height: float, viewport_height: float
) -> float:
    """
    Percentage of the article scrolled past, in [0, 100].

    The scrollable distance is the content height minus the viewport height.
    At the top the result is exactly 0 and at or past the bottom it is exactly
    100; in between it grows linearly with the offset.
    """
    if scroll_offset <= 0:
        return 0.0

    scrollable = content_height - viewport_height
    if scroll_offset >= scrollable:
        return 100.0

    progress = scroll_offset / scrollable * 100
    return min(100.0, max(0.0, progress))


def reading_minutes(content: str) -> int:
    """Estimated reading time, never less than one minute."""
    words = len((content or "").split())
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


def split_paragraphs(content: str) -> List[str]:
    return [line.strip() for line in (content or "").split("\n") if line.strip()]
