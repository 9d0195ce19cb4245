"""
Services: everything between a resource screen and the REST API.

Qt-aware (signals, timers) but widget-free, so they are exercised in tests
without building any UI.
"""

from .api_client import ApiClient, ApiError, HttpResourceApi
from .error_messages import extract_error_message
from .notification_service import Notification, NotificationController, NotificationKind
from .validation_service import (
    FileSize,
    FileType,
    ListItems,
    MaxLength,
    MinLength,
    NumericRange,
    Pattern,
    Predicate,
    Required,
    Rule,
    Unique,
    ValidationContext,
    ValidationEngine,
    ValidationResult,
)
from .pagination_service import PAGE_SIZE, PaginationController, PaginationInfo
from .resource_list_store import ListQuery, ResourceListStore
from .crud_orchestrator import CrudOrchestrator, OperationResult
from .form_lifecycle import FormLifecycle, FormMode, FormState
from .resource_manager import ResourceManager

__all__ = [
    "ApiClient",
    "ApiError",
    "HttpResourceApi",
    "extract_error_message",
    "Notification",
    "NotificationController",
    "NotificationKind",
    "Rule",
    "Required",
    "MinLength",
    "MaxLength",
    "NumericRange",
    "Pattern",
    "ListItems",
    "Unique",
    "FileSize",
    "FileType",
    "Predicate",
    "ValidationContext",
    "ValidationEngine",
    "ValidationResult",
    "PAGE_SIZE",
    "PaginationController",
    "PaginationInfo",
    "ListQuery",
    "ResourceListStore",
    "CrudOrchestrator",
    "OperationResult",
    "FormLifecycle",
    "FormMode",
    "FormState",
    "ResourceManager",
]
