"""
Add/edit form state machine.

    closed -> add|edit -> submitting -> closed      (save succeeded)
                          submitting -> add|edit    (save failed)
    add|edit -> closed                              (cancel)

The draft is a private deep copy; the record it was opened from is never
mutated. The backend stays the source of truth and the list re-fetches after
every successful save.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional
import copy
import logging

from PyQt6.QtCore import QObject, pyqtSignal

from academic_console.forms.field_codec import build_payload, draft_from_record
from academic_console.forms.field_schema import ResourceSchema
from .crud_orchestrator import CrudOrchestrator, OperationResult
from .notification_service import NotificationController
from .resource_list_store import ResourceListStore
from .validation_service import ValidationContext, ValidationEngine, is_blank

logger = logging.getLogger(__name__)


class FormMode(Enum):
    CLOSED = "closed"
    ADD = "add"
    EDIT = "edit"
    SUBMITTING = "submitting"


@dataclass
class FormState:
    mode: FormMode = FormMode.CLOSED
    draft: Dict[str, Any] = field(default_factory=dict)
    field_errors: Dict[str, str] = field(default_factory=dict)
    editing_id: Any = None
    original: Optional[Dict[str, Any]] = None

    @property
    def is_open(self) -> bool:
        return self.mode is not FormMode.CLOSED


class FormLifecycle(QObject):
    """
    Drives one resource form.

    Signals:
        mode_changed(FormMode)
        draft_changed(dict): Full draft after open or a field edit
        field_errors_changed(dict): Per-field validation messages
        saving_changed(bool): Submit in flight (the dialog disables its buttons)
    """

    mode_changed = pyqtSignal(object)
    draft_changed = pyqtSignal(object)
    field_errors_changed = pyqtSignal(object)
    saving_changed = pyqtSignal(bool)

    def __init__(
        self,
        schema: ResourceSchema,
        orchestrator: CrudOrchestrator,
        store: ResourceListStore,
        notifications: NotificationController,
        parent=None,
    ):
        super().__init__(parent)
        self.schema = schema
        self._orchestrator = orchestrator
        self._store = store
        self._notifications = notifications
        self._engine = ValidationEngine(schema.rules)
        self._state = FormState()

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def mode(self) -> FormMode:
        return self._state.mode

    @property
    def draft(self) -> Dict[str, Any]:
        return copy.deepcopy(self._state.draft)

    @property
    def field_errors(self) -> Dict[str, str]:
        return dict(self._state.field_errors)

    @property
    def attachment(self) -> Optional[str]:
        """Locally chosen file of a file-bearing form, if any."""
        spec = self.schema.file_field
        if spec is None:
            return None
        return self._state.draft.get(spec.name) or None

    def _set_mode(self, mode: FormMode) -> None:
        if mode is self._state.mode:
            return
        logger.debug(f"{self.schema.key}: form {self._state.mode.value} -> {mode.value}")
        self._state.mode = mode
        self.mode_changed.emit(mode)

    def _set_errors(self, errors: Dict[str, str]) -> None:
        self._state.field_errors = dict(errors)
        self.field_errors_changed.emit(dict(errors))

    def _open(self, mode: FormMode, draft: Dict[str, Any], editing_id: Any,
              original: Optional[Dict[str, Any]]) -> None:
        self._state = FormState(mode=self._state.mode, draft=draft, editing_id=editing_id,
                                original=original)
        self._notifications.dismiss()
        self._set_errors({})
        self.draft_changed.emit(copy.deepcopy(draft))
        self._set_mode(mode)

    def _close(self) -> None:
        self._state = FormState(mode=self._state.mode)
        self._set_errors({})
        self._set_mode(FormMode.CLOSED)

    # --- Transitions ----------------------------------------------------

    def open_add(self, defaults: Optional[Dict[str, Any]] = None, scope_value: Any = None) -> bool:
        """
        Open an empty draft.

        Screens with a required parent scope refuse to open until a parent is
        selected; the chosen parent pre-fills the scope field.
        """
        if self._state.mode is FormMode.SUBMITTING:
            logger.warning(f"{self.schema.key}: cannot open form while saving")
            return False
        scope = self.schema.scope
        if scope is not None and scope.required and is_blank(scope_value):
            self._notifications.error(self.schema.select_scope_message())
            return False

        draft = self.schema.default_draft()
        draft.update(copy.deepcopy(defaults or {}))
        if scope is not None and not is_blank(scope_value) and scope.field in draft:
            draft[scope.field] = scope_value
        self._open(FormMode.ADD, draft, editing_id=None, original=None)
        return True

    def open_edit(self, record: Dict[str, Any]) -> bool:
        if self._state.mode is FormMode.SUBMITTING:
            logger.warning(f"{self.schema.key}: cannot open form while saving")
            return False
        draft = draft_from_record(self.schema, record)
        self._open(FormMode.EDIT, draft, editing_id=record.get("id"), original=copy.deepcopy(record))
        return True

    def set_field(self, name: str, value: Any) -> None:
        """Update one draft value; its error and any visible error notification go away."""
        if self._state.mode not in (FormMode.ADD, FormMode.EDIT):
            logger.debug(f"{self.schema.key}: ignoring edit of {name!r} in {self._state.mode.value} mode")
            return
        self._state.draft[name] = copy.deepcopy(value)
        if name in self._state.field_errors:
            errors = dict(self._state.field_errors)
            errors.pop(name)
            self._set_errors(errors)
        self._notifications.clear_error()

    def cancel(self) -> bool:
        if self._state.mode is FormMode.SUBMITTING:
            logger.warning(f"{self.schema.key}: cannot cancel while saving")
            return False
        self._notifications.dismiss()
        self._close()
        return True

    def submit(self) -> bool:
        """
        Validate and save the draft.

        Returns:
            True if a save request was issued. Validation failures, a closed
            form and re-entrant submits return False without any network call.
        """
        mode = self._state.mode
        if mode is FormMode.SUBMITTING:
            logger.warning(f"{self.schema.key}: submit ignored, save already in flight")
            return False
        if mode is FormMode.CLOSED:
            return False

        context = ValidationContext(items=self._store.items, editing_id=self._state.editing_id)
        result = self._engine.validate(self._state.draft, context)
        if not result.valid:
            self._set_errors(result.errors)
            self._notifications.error(result.first_error)
            return False

        self._set_errors({})
        payload = build_payload(self.schema, self._state.draft)
        self._set_mode(FormMode.SUBMITTING)
        self.saving_changed.emit(True)

        def done(outcome: OperationResult) -> None:
            self.saving_changed.emit(False)
            if outcome.ok:
                self._close()
            else:
                self._set_mode(mode)

        if mode is FormMode.ADD:
            self._orchestrator.create(payload, on_done=done)
        else:
            self._orchestrator.update(self._state.editing_id, payload, on_done=done)
        return True
