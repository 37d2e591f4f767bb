"""Page navigation over a listing result."""

from __future__ import annotations

import math
from dataclasses import dataclass

from jobboard.domain.exceptions import ValidationError


@dataclass(slots=True)
class Paginator:
    """Tracks the 1-indexed current page against a known total."""

    page_size: int = 12
    current_page: int = 1
    total: int = 0

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValidationError("page_size must be at least 1")

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.total > 0 else 0

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.page_size

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def update_total(self, total: int) -> None:
        self.total = max(total, 0)

    def previous(self) -> int:
        self.current_page = max(self.current_page - 1, 1)
        return self.current_page

    def next(self) -> int:
        self.current_page = max(min(self.current_page + 1, self.total_pages), 1)
        return self.current_page

    def go_to(self, page: int) -> int:
        if page < 1 or page > max(self.total_pages, 1):
            raise ValidationError(f"Page {page} is outside 1..{max(self.total_pages, 1)}")
        self.current_page = page
        return self.current_page

    def reset(self) -> None:
        self.current_page = 1

    def page_window(self, max_links: int = 5) -> list[int]:
        """Page numbers to show as links, recentred around the current page.

        With 12 pages: page 2 shows 1-5, page 10 shows 8-12, page 6 shows 4-8.
        """
        total_pages = self.total_pages
        if total_pages <= max_links:
            return list(range(1, total_pages + 1))
        half = max_links // 2
        if self.current_page <= half + 1:
            start = 1
        elif self.current_page >= total_pages - half:
            start = total_pages - max_links + 1
        else:
            start = self.current_page - half
        return list(range(start, start + max_links))
