"""
Offset pagination helpers shared by the listing endpoints.
"""

import math
from typing import Tuple


def clamp_page(page: int) -> int:
    """Pages are 1-indexed; anything below 1 is treated as the first page."""
    return page if page >= 1 else 1


def page_window(page: int, limit: int) -> Tuple[int, int]:
    """
    Translate a page number into an (offset, limit) pair.

    Args:
        page: 1-indexed page number, clamped to at least 1
        limit: Page size, must be positive

    Returns:
        Tuple of (offset, limit) for the query

    Raises:
        ValueError: If limit is not positive
    """
    if limit < 1:
        raise ValueError("limit must be at least 1")
    return (clamp_page(page) - 1) * limit, limit


def total_pages(total: int, limit: int) -> int:
    """ceil(total / limit); 0 when there are no results."""
    if total <= 0:
        return 0
    return math.ceil(total / limit)
