"""Qt widgets rendering the resource services."""

from .notification_banner import NotificationBanner
from .pagination_bar import PaginationBar, visible_pages
from .resource_table_widget import ResourceTableWidget
from .resource_form_dialog import ResourceFormDialog
from .resource_manager_widget import ResourceManagerWidget

__all__ = [
    "NotificationBanner",
    "PaginationBar",
    "visible_pages",
    "ResourceTableWidget",
    "ResourceFormDialog",
    "ResourceManagerWidget",
]
