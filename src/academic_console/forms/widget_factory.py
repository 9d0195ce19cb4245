"""
Widget factory with explicit FieldKind-based dispatch.

Design:
- WIDGET_KIND_REGISTRY: FieldKind → factory function mapping
- Explicit dispatch (no hasattr checks)
- Fail-loud if a kind is not registered
- The factory configures placeholder, range and static choices from the FieldSpec
"""

from typing import Any, Callable, Dict
import logging

from academic_console.protocols.widget_adapters import (
    CheckBoxAdapter,
    ComboBoxAdapter,
    FilePickerAdapter,
    LineEditAdapter,
    ListLineEditAdapter,
    SpinBoxAdapter,
    TextEditAdapter,
)
from academic_console.protocols.widget_protocols import FieldWidget, PlaceholderCapable, RangeConfigurable
from .field_schema import FieldKind, FieldSpec

logger = logging.getLogger(__name__)

UPLOAD_FILE_FILTER = "Documents and images (*.pdf *.doc *.docx *.jpg *.jpeg *.png *.gif)"

WIDGET_KIND_REGISTRY: Dict[FieldKind, Callable[[], Any]] = {
    FieldKind.TEXT: LineEditAdapter,
    FieldKind.DATE: LineEditAdapter,
    FieldKind.TEXTAREA: TextEditAdapter,
    FieldKind.INTEGER: SpinBoxAdapter,
    FieldKind.BOOLEAN: CheckBoxAdapter,
    FieldKind.LIST: ListLineEditAdapter,
    FieldKind.CHOICE: ComboBoxAdapter,
    FieldKind.FILE: lambda: FilePickerAdapter(file_filter=UPLOAD_FILE_FILTER),
}


class WidgetFactory:
    """
    Builds the input widget for a FieldSpec.

    Example:
        factory = WidgetFactory()
        widget = factory.create_widget(schema.field("department_name"))
        # Returns LineEditAdapter instance
    """

    def create_widget(self, spec: FieldSpec) -> FieldWidget:
        """
        Create and configure the widget for one field.

        Raises:
            TypeError: If no widget is registered for the field's kind
        """
        factory_func = WIDGET_KIND_REGISTRY.get(spec.kind)
        if factory_func is None:
            raise TypeError(
                f"No widget registered for {spec.kind} (field: '{spec.name}'). "
                f"Available kinds: {[kind.value for kind in WIDGET_KIND_REGISTRY]}."
            )

        widget = factory_func()
        if isinstance(widget, PlaceholderCapable) and spec.placeholder:
            widget.set_placeholder(spec.placeholder)
        if isinstance(widget, RangeConfigurable) and (spec.minimum is not None or spec.maximum is not None):
            # Unbounded sides keep the full int range
            minimum = spec.minimum if spec.minimum is not None else -2147483648
            maximum = spec.maximum if spec.maximum is not None else 2147483647
            widget.configure_range(minimum, maximum)
        if spec.kind is FieldKind.CHOICE:
            widget.set_placeholder(spec.placeholder or f"Select {spec.label.lower()}...")
            widget.set_options(spec.choices)

        logger.debug(f"Created {type(widget).__name__} for field '{spec.name}' ({spec.kind.value})")
        return widget

    def register_widget_kind(self, kind: FieldKind, factory_func: Callable[[], Any]) -> None:
        """Register or replace the widget factory for a field kind."""
        if kind in WIDGET_KIND_REGISTRY:
            logger.warning(f"Overwriting existing widget factory for {kind}")
        WIDGET_KIND_REGISTRY[kind] = factory_func
