"""Page bookkeeping for resource lists."""

from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging

from PyQt6.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)

PAGE_SIZE = 10


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class PaginationInfo:
    """
    Position within a paged list.

    has_next and has_prev are always derived from the page numbers, so the
    flags can never disagree with current_page/total_pages.
    """
    current_page: int = 1
    total_pages: int = 1
    total_count: int = 0

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.current_page > 1

    @classmethod
    def create(cls, current_page: int, total_pages: int, total_count: int) -> "PaginationInfo":
        """Normalized constructor: total_pages >= 1, 1 <= current_page."""
        total_pages = max(1, total_pages)
        current_page = max(1, current_page)
        return cls(current_page=current_page, total_pages=total_pages, total_count=max(0, total_count))

    @classmethod
    def from_response(cls, data: Optional[Dict[str, Any]], requested_page: int = 1) -> "PaginationInfo":
        """Parse the backend's camelCase pagination object."""
        data = data or {}
        info = cls.create(
            current_page=_as_int(data.get("currentPage"), requested_page),
            total_pages=_as_int(data.get("totalPages"), 1),
            total_count=_as_int(data.get("totalCount"), 0),
        )
        if "hasNext" in data and bool(data["hasNext"]) != info.has_next:
            logger.debug(f"Backend hasNext={data['hasNext']} disagrees with {info}; using page numbers")
        return info

    @classmethod
    def scoped(cls, count: int) -> "PaginationInfo":
        """Single synthetic page holding a whole scoped result."""
        return cls.create(current_page=1, total_pages=1, total_count=count)

    @classmethod
    def empty(cls) -> "PaginationInfo":
        return cls()


class PaginationController(QObject):
    """
    Accepts page navigation requests and announces the accepted ones.

    The controller does not fetch; whoever listens to page_requested fetches
    with the current search and filters and later feeds the new
    PaginationInfo back through set_info().
    """

    page_requested = pyqtSignal(int)
    info_changed = pyqtSignal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._info = PaginationInfo.empty()

    @property
    def info(self) -> PaginationInfo:
        return self._info

    def set_info(self, info: PaginationInfo) -> None:
        self._info = info
        self.info_changed.emit(info)

    def go_to(self, page: int) -> bool:
        """Request a page; rejected when out of range or already current."""
        if page < 1 or page > self._info.total_pages or page == self._info.current_page:
            logger.debug(f"Rejected page request {page} ({self._info})")
            return False
        self.page_requested.emit(page)
        return True

    def next_page(self) -> bool:
        if not self._info.has_next:
            return False
        return self.go_to(self._info.current_page + 1)

    def prev_page(self) -> bool:
        if not self._info.has_prev:
            return False
        return self.go_to(self._info.current_page - 1)
