"""Create/update/delete calls with uniform notification and refresh handling."""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple
import logging

from academic_console.core import TaskRunner
from academic_console.forms.field_codec import WirePayload
from academic_console.forms.field_schema import ResourceSchema
from academic_console.protocols import ResourceApi
from .api_client import ApiError
from .error_messages import extract_error_message
from .notification_service import NotificationController
from .resource_list_store import ResourceListStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperationResult:
    ok: bool
    message: str
    data: Any = None


DoneCallback = Optional[Callable[[OperationResult], None]]


class CrudOrchestrator:
    """
    Runs mutations through the task runner.

    Success publishes the entity's success message and refreshes the current
    page; failure publishes the most specific error message available.
    Either way the optional on_done callback receives an OperationResult.
    """

    def __init__(
        self,
        schema: ResourceSchema,
        api: ResourceApi,
        runner: TaskRunner,
        store: ResourceListStore,
        notifications: NotificationController,
    ):
        self.schema = schema
        self._api = api
        self._runner = runner
        self._store = store
        self._notifications = notifications

    def create(self, payload: WirePayload, on_done: DoneCallback = None) -> None:
        self._execute(
            "create", self._api.create, (payload,),
            self.schema.created_message(), self.schema.save_failed_message(), on_done,
        )

    def update(self, resource_id: Any, payload: WirePayload, on_done: DoneCallback = None) -> None:
        self._execute(
            "update", self._api.update, (resource_id, payload),
            self.schema.updated_message(), self.schema.save_failed_message(), on_done,
        )

    def remove(self, resource_id: Any, on_done: DoneCallback = None) -> None:
        self._execute(
            "delete", self._api.remove, (resource_id,),
            self.schema.deleted_message(), self.schema.delete_failed_message(), on_done,
        )

    def _execute(
        self,
        operation: str,
        target: Callable[..., Any],
        args: Tuple,
        success_message: str,
        fallback: str,
        on_done: DoneCallback,
    ) -> None:
        logger.debug(f"{self.schema.key}: {operation} requested")

        def succeeded(body: Any) -> None:
            if isinstance(body, dict) and body.get("success") is False:
                failed(ApiError(body.get("message") or "", payload=body))
                return
            logger.info(f"{self.schema.key}: {operation} succeeded")
            self._notifications.success(success_message)
            self._store.refresh()
            if on_done:
                on_done(OperationResult(ok=True, message=success_message, data=body))

        def failed(error: Exception) -> None:
            message = extract_error_message(error, fallback)
            logger.error(f"{self.schema.key}: {operation} failed: {error!r}")
            self._notifications.error(message)
            if on_done:
                on_done(OperationResult(ok=False, message=message, data=error))

        self._runner.run(target=target, args=args, on_success=succeeded, on_error=failed)
