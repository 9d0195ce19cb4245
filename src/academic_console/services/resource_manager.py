"""
One resource screen's services wired together.

ResourceManager is the only object a view talks to. It owns the
notification controller, pagination controller, list store, CRUD
orchestrator and form lifecycle for a single ResourceSchema, and holds the
screen-level query state (search text and parent scope).
"""

from typing import Any, Callable, Dict, List, Optional
import logging

from PyQt6.QtCore import QObject, pyqtSignal

from academic_console.core import BackgroundTaskManager, TaskRunner
from academic_console.forms.field_schema import (
    FieldKind,
    Option,
    ResourceSchema,
    options_from_records,
)
from academic_console.protocols import ResourceApi
from .crud_orchestrator import CrudOrchestrator
from .error_messages import extract_error_message
from .form_lifecycle import FormLifecycle
from .notification_service import NotificationController
from .pagination_service import PaginationController
from .resource_list_store import ResourceListStore
from .validation_service import is_blank

logger = logging.getLogger(__name__)


class ResourceManager(QObject):
    """
    Generic manager for one resource type.

    Args:
        schema: Declaration of the resource
        api: Record source
        runner: Executes list fetches (default: single-flight background tasks)
        mutation_runner: Executes saves, deletes and option lookups
            (default: the injected runner, else concurrent background tasks)
        page_size: Records per page (default from config)

    Signals:
        search_changed(str): Search text changed by the manager itself (scope switch)
        scope_options_changed(list): (value, label) options for the scope selector
        field_options_changed(str, list): Options for a CHOICE field loaded from the API
    """

    search_changed = pyqtSignal(str)
    scope_options_changed = pyqtSignal(object)
    field_options_changed = pyqtSignal(str, object)

    def __init__(
        self,
        schema: ResourceSchema,
        api: ResourceApi,
        runner: Optional[TaskRunner] = None,
        mutation_runner: Optional[TaskRunner] = None,
        page_size: Optional[int] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.schema = schema
        self.api = api
        if runner is None:
            runner = BackgroundTaskManager(single_flight=True, name=f"{schema.key}.list")
            mutation_runner = mutation_runner or BackgroundTaskManager(
                single_flight=False, name=f"{schema.key}.mutations"
            )
        self._runner = runner
        self._mutation_runner = mutation_runner or runner

        self.notifications = NotificationController(parent=self)
        self.pagination = PaginationController(parent=self)
        self.store = ResourceListStore(schema, api, self._runner, self.notifications,
                                       page_size=page_size, parent=self)
        self.orchestrator = CrudOrchestrator(schema, api, self._mutation_runner, self.store,
                                             self.notifications)
        self.form = FormLifecycle(schema, self.orchestrator, self.store, self.notifications,
                                  parent=self)

        self._search = ""
        self._scope_value: Any = None
        self._scope_options: List[Option] = []
        self._field_options: Dict[str, List[Option]] = {}

        self.store.pagination_changed.connect(self.pagination.set_info)
        self.pagination.page_requested.connect(self._on_page_requested)

    # --- Query state ----------------------------------------------------

    @property
    def search_text(self) -> str:
        return self._search

    @property
    def scope_value(self) -> Any:
        return self._scope_value

    @property
    def scope_options(self) -> List[Option]:
        return list(self._scope_options)

    def field_options(self, name: str) -> List[Option]:
        spec = self.schema.field(name)
        if spec.choices:
            return list(spec.choices)
        return list(self._field_options.get(name, []))

    def filters(self) -> Dict[str, Any]:
        scope = self.schema.scope
        if scope is None or is_blank(self._scope_value):
            return {}
        return {scope.field: self._scope_value}

    # --- List -----------------------------------------------------------

    def load(self) -> None:
        """Initial load: lookup options, then the first page."""
        self.load_options()
        self.store.fetch(1, self._search, self.filters())

    def search(self, text: str) -> None:
        """New search text always starts again from page 1."""
        self._search = text.strip()
        self.store.fetch(1, self._search, self.filters())

    def set_scope(self, value: Any) -> None:
        """Switch the parent filter. Search text is cleared with it."""
        if self.schema.scope is None:
            raise ValueError(f"{self.schema.key} has no scope filter")
        self._scope_value = None if is_blank(value) else value
        if self._search:
            self._search = ""
            self.search_changed.emit("")
        self.store.fetch(1, self._search, self.filters())

    def refresh(self) -> None:
        self.store.refresh()

    def go_to_page(self, page: int) -> bool:
        return self.pagination.go_to(page)

    def _on_page_requested(self, page: int) -> None:
        self.store.fetch(page, self._search, self.filters())

    # --- Form -----------------------------------------------------------

    def open_add(self, defaults: Optional[Dict[str, Any]] = None) -> bool:
        return self.form.open_add(defaults, scope_value=self._scope_value)

    def open_edit(self, record: Dict[str, Any]) -> bool:
        return self.form.open_edit(record)

    def set_field(self, name: str, value: Any) -> None:
        self.form.set_field(name, value)

    def submit(self) -> bool:
        return self.form.submit()

    def cancel(self) -> bool:
        return self.form.cancel()

    def delete(self, resource_id: Any, confirm: Callable[[str], bool]) -> bool:
        """
        Delete after a positive confirmation.

        Args:
            resource_id: Record id
            confirm: Blocking yes/no prompt receiving the confirmation text

        Returns:
            True if the delete request was issued
        """
        if not confirm(self.schema.confirm_delete_message()):
            logger.debug(f"{self.schema.key}: delete of {resource_id!r} not confirmed")
            return False
        self.orchestrator.remove(resource_id)
        return True

    # --- Options --------------------------------------------------------

    def load_options(self) -> None:
        """Fetch scope parents and API-backed choice lists."""
        scope = self.schema.scope
        if scope is not None:
            self._mutation_runner.run(
                target=self.api.options,
                args=(scope.options_path, dict(scope.option_params) or None),
                on_success=lambda records: self._on_scope_options(records),
                on_error=lambda error: self._on_options_failed(scope.label, error),
            )
        for spec in self.schema.fields:
            if spec.kind is not FieldKind.CHOICE or not spec.options_path:
                continue
            if scope is not None and spec.name == scope.field:
                continue
            self._mutation_runner.run(
                target=self.api.options,
                args=(spec.options_path,),
                on_success=lambda records, spec=spec: self._on_field_options(spec.name, spec.option_label, records),
                on_error=lambda error, spec=spec: self._on_options_failed(spec.label.lower(), error),
            )

    def _on_scope_options(self, records: List[Dict[str, Any]]) -> None:
        scope = self.schema.scope
        self._scope_options = options_from_records(records, scope.option_label)
        # The scope field inside the form offers the same parents
        if scope.field in self.schema.field_names:
            self._field_options[scope.field] = list(self._scope_options)
            self.field_options_changed.emit(scope.field, list(self._scope_options))
        self.scope_options_changed.emit(list(self._scope_options))

    def _on_field_options(self, name: str, formatter, records: List[Dict[str, Any]]) -> None:
        self._field_options[name] = options_from_records(records, formatter)
        self.field_options_changed.emit(name, list(self._field_options[name]))

    def _on_options_failed(self, label: str, error: Exception) -> None:
        logger.error(f"{self.schema.key}: loading {label} options failed: {error!r}")
        self.notifications.error(extract_error_message(error, f"Failed to fetch {label} options"))

    # --- Lifetime -------------------------------------------------------

    def teardown(self) -> None:
        """Stop timers and background work. Call when the view closes."""
        self.notifications.teardown()
        self._runner.cleanup()
        if self._mutation_runner is not self._runner:
            self._mutation_runner.cleanup()
