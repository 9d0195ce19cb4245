"""Contract between the resource services and whatever serves the records.

The HTTP implementation lives in academic_console.services.api_client; tests
provide in-memory implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from academic_console.forms.field_codec import WirePayload


class ResourceApi(ABC):
    """List/create/update/delete for one resource collection."""

    @abstractmethod
    def list(self, page: int, limit: int, search: str = "",
             filters: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Fetch one page.

        Returns:
            {"data": [...], "pagination": {currentPage, totalPages, totalCount, hasNext, hasPrev}}
        """

    @abstractmethod
    def list_scoped(self, parent_id: Any) -> Dict[str, Any]:
        """Fetch every record under one parent. Returns {"data": [...]}."""

    @abstractmethod
    def create(self, payload: WirePayload) -> Any:
        """Create a record. Returns the created record or a message body."""

    @abstractmethod
    def update(self, resource_id: Any, payload: WirePayload) -> Any:
        """Update a record. Returns the updated record or a message body."""

    @abstractmethod
    def remove(self, resource_id: Any) -> Any:
        """Delete a record."""

    @abstractmethod
    def options(self, path: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """Fetch lookup records (parents, choices) from an auxiliary path."""
