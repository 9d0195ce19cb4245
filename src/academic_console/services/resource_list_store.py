"""
Current page of records for one resource screen.

The store is the only owner of the visible list. Every fetch carries a
sequence number; callbacks of superseded fetches are dropped so a slow,
older response can never overwrite a newer one.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import logging

from PyQt6.QtCore import QObject, pyqtSignal

from academic_console.core import TaskRunner
from academic_console.forms.field_schema import ResourceSchema
from academic_console.protocols import ResourceApi, get_console_config
from .api_client import ApiError
from .notification_service import NotificationController
from .pagination_service import PaginationInfo
from .validation_service import is_blank

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListQuery:
    """Arguments of the last fetch, replayed by refresh()."""
    page: int = 1
    search: str = ""
    filters: Dict[str, Any] = field(default_factory=dict)


class ResourceListStore(QObject):
    """
    Fetches and holds one page of records.

    Signals:
        items_changed(list): Records of the current page
        pagination_changed(PaginationInfo): New paging position
        loading_changed(bool): A fetch started or finished
    """

    items_changed = pyqtSignal(object)
    pagination_changed = pyqtSignal(object)
    loading_changed = pyqtSignal(bool)

    def __init__(
        self,
        schema: ResourceSchema,
        api: ResourceApi,
        runner: TaskRunner,
        notifications: NotificationController,
        page_size: Optional[int] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.schema = schema
        self._api = api
        self._runner = runner
        self._notifications = notifications
        self.page_size = page_size if page_size is not None else get_console_config().page_size

        self._items: List[Dict[str, Any]] = []
        self._pagination = PaginationInfo.empty()
        self._loading = False
        self._sequence = 0
        self._query = ListQuery()

    # --- State ----------------------------------------------------------

    @property
    def items(self) -> List[Dict[str, Any]]:
        return list(self._items)

    @property
    def pagination(self) -> PaginationInfo:
        return self._pagination

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def query(self) -> ListQuery:
        return self._query

    def _set_loading(self, loading: bool) -> None:
        if loading != self._loading:
            self._loading = loading
            self.loading_changed.emit(loading)

    def _publish(self, items: List[Dict[str, Any]], pagination: PaginationInfo) -> None:
        self._items = items
        self._pagination = pagination
        self.items_changed.emit(list(items))
        self.pagination_changed.emit(pagination)

    # --- Fetching -------------------------------------------------------

    def fetch(self, page: int = 1, search: str = "", filters: Optional[Dict[str, Any]] = None) -> None:
        """Load one page. Scoped schemas switch to the scoped listing when a parent is chosen."""
        filters = {key: value for key, value in (filters or {}).items() if not is_blank(value)}
        self._query = ListQuery(page=max(1, page), search=search, filters=filters)
        self._sequence += 1
        sequence = self._sequence

        scope = self.schema.scope
        scope_value = filters.get(scope.field) if scope else None

        if scope is not None and scope.required and is_blank(scope_value):
            logger.debug(f"{self.schema.key}: no {scope.label} selected, clearing list")
            self._set_loading(False)
            self._publish([], PaginationInfo.empty())
            return

        self._set_loading(True)
        if scope is not None and scope.scoped_path and not is_blank(scope_value):
            logger.debug(f"{self.schema.key}: scoped fetch #{sequence} for {scope.field}={scope_value}")
            self._runner.run(
                target=self._api.list_scoped,
                args=(scope_value,),
                on_success=lambda body: self._on_loaded(sequence, body, scoped=True),
                on_error=lambda error: self._on_failed(sequence, error),
            )
            return

        logger.debug(f"{self.schema.key}: fetch #{sequence} page={self._query.page} search={search!r}")
        self._runner.run(
            target=self._api.list,
            args=(self._query.page, self.page_size, search, filters),
            on_success=lambda body: self._on_loaded(sequence, body, scoped=False),
            on_error=lambda error: self._on_failed(sequence, error),
        )

    def refresh(self) -> None:
        """Re-run the last fetch (current page, search and filters)."""
        query = self._query
        self.fetch(query.page, query.search, query.filters)

    def clear(self) -> None:
        """Empty the list and invalidate any fetch in flight."""
        self._sequence += 1
        self._set_loading(False)
        self._publish([], PaginationInfo.empty())

    def _is_stale(self, sequence: int) -> bool:
        if sequence != self._sequence:
            logger.debug(f"{self.schema.key}: dropping stale response #{sequence} (latest #{self._sequence})")
            return True
        return False

    def _on_loaded(self, sequence: int, body: Any, scoped: bool) -> None:
        if self._is_stale(sequence):
            return
        if isinstance(body, dict) and body.get("success") is False:
            self._on_failed(sequence, ApiError(body.get("message") or "", payload=body))
            return

        body = body if isinstance(body, dict) else {"data": body}
        items = list(body.get("data") or [])
        if scoped or not body.get("pagination"):
            pagination = PaginationInfo.scoped(len(items))
        else:
            pagination = PaginationInfo.from_response(body.get("pagination"), self._query.page)
            if pagination.current_page > pagination.total_pages:
                # Page emptied under us (e.g. last record of the last page deleted)
                if pagination.total_count > 0:
                    logger.debug(f"{self.schema.key}: page {pagination.current_page} is past the end, "
                                 f"loading page {pagination.total_pages}")
                    self.fetch(pagination.total_pages, self._query.search, self._query.filters)
                    return
                pagination = PaginationInfo.empty()

        self._set_loading(False)
        self._publish(items, pagination)
        logger.info(f"{self.schema.key}: loaded {len(items)} records, page {pagination.current_page}/{pagination.total_pages}")

    def _on_failed(self, sequence: int, error: Exception) -> None:
        if self._is_stale(sequence):
            return
        self._set_loading(False)
        logger.error(f"{self.schema.key}: fetch failed: {error!r}")
        # Last known good list stays visible
        self._notifications.error(self.schema.fetch_failed_message())
