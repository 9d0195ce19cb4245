"""
Conversion between API records, drafts and wire payloads.

List fields live as list[str] in drafts. They are joined/split only here
(transport) and in the list line-edit adapter (display).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional
import copy
import logging

from .field_schema import FieldKind, FieldSpec, ListWire, ResourceSchema

logger = logging.getLogger(__name__)

LIST_DELIMITER = ","


def split_list(text: Any) -> List[str]:
    """Split delimited text into trimmed, non-empty items."""
    if text is None:
        return []
    return [item.strip() for item in str(text).split(LIST_DELIMITER) if item.strip()]


def join_list(items: Iterable[Any]) -> str:
    """Join items for display or transport."""
    return ", ".join(str(item) for item in items)


@dataclass
class Attachment:
    """Single binary attachment of a multipart payload."""
    field_name: str
    path: str


@dataclass
class WirePayload:
    """Body of a create/update call, ready for the HTTP client."""
    fields: Dict[str, Any] = field(default_factory=dict)
    multipart: bool = False
    attachment: Optional[Attachment] = None


def value_from_record(spec: FieldSpec, raw: Any) -> Any:
    """Bring a value read from an API record into draft form."""
    if spec.kind is FieldKind.LIST:
        if raw is None:
            return []
        if isinstance(raw, (list, tuple)):
            return [str(item).strip() for item in raw if str(item).strip()]
        return split_list(raw)
    if spec.kind is FieldKind.BOOLEAN:
        if isinstance(raw, str):
            return raw.strip().lower() in ("true", "1", "yes")
        return bool(raw)
    if spec.kind is FieldKind.INTEGER:
        try:
            return int(raw)
        except (TypeError, ValueError):
            return spec.initial_value()
    if spec.kind is FieldKind.FILE:
        # Drafts only carry newly chosen local files
        return ""
    if spec.kind is FieldKind.DATE and isinstance(raw, str):
        # Backends commonly return full ISO timestamps; the form edits the date part
        return raw[:10]
    if raw is None:
        return ""
    if isinstance(raw, (dict, list)):
        return copy.deepcopy(raw)
    return str(raw)


def draft_from_record(schema: ResourceSchema, record: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-copied draft of a record's editable fields."""
    draft = {}
    for spec in schema.fields:
        if spec.name in record:
            draft[spec.name] = value_from_record(spec, record.get(spec.name))
        else:
            draft[spec.name] = spec.initial_value()
    return draft


def _cast(func, value: Any) -> Any:
    if func is None or value in ("", None):
        return value
    try:
        return func(value)
    except (TypeError, ValueError):
        logger.warning(f"Could not cast {value!r} with {func!r}; sending as-is")
        return value


def _json_value(spec: FieldSpec, value: Any) -> Any:
    if spec.kind is FieldKind.LIST:
        items = list(value or [])
        if spec.list_wire is ListWire.JOINED:
            return join_list(items)
        return [_cast(spec.item_cast, item) for item in items]
    if spec.kind is FieldKind.INTEGER:
        return _cast(int, value) if value not in ("", None) else None
    if spec.kind is FieldKind.BOOLEAN:
        return bool(value)
    if isinstance(value, str):
        value = value.strip()
    return _cast(spec.value_cast, value)


def _form_value(spec: FieldSpec, value: Any) -> str:
    """Multipart scalars are strings; lists are comma-joined."""
    if spec.kind is FieldKind.LIST:
        return join_list(value or [])
    if spec.kind is FieldKind.BOOLEAN:
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value).strip()


def build_payload(schema: ResourceSchema, draft: Dict[str, Any]) -> WirePayload:
    """Encode a draft for the API according to the schema."""
    payload = WirePayload(multipart=schema.multipart)
    for spec in schema.fields:
        if not spec.in_payload:
            continue
        value = draft.get(spec.name, spec.initial_value())
        if spec.kind is FieldKind.FILE:
            if value:
                payload.attachment = Attachment(field_name=spec.key, path=str(value))
            continue
        if schema.multipart:
            payload.fields[spec.key] = _form_value(spec, value)
        else:
            payload.fields[spec.key] = _json_value(spec, value)
    return payload


def format_cell(value: Any) -> str:
    """Default table cell rendering."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, (list, tuple)):
        return join_list(value)
    return str(value)
