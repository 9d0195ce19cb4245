"""
Form layer: resource schemas, draft/wire conversion and widget creation.

widget_factory is imported explicitly by callers that build Qt forms.
"""

from .field_schema import (
    FieldKind,
    ListWire,
    FieldSpec,
    ColumnDef,
    ScopeSpec,
    ResourceSchema,
    options_from_records,
)
from .field_codec import (
    Attachment,
    WirePayload,
    split_list,
    join_list,
    draft_from_record,
    build_payload,
    format_cell,
)

__all__ = [
    "FieldKind",
    "ListWire",
    "FieldSpec",
    "ColumnDef",
    "ScopeSpec",
    "ResourceSchema",
    "options_from_records",
    "Attachment",
    "WirePayload",
    "split_list",
    "join_list",
    "draft_from_record",
    "build_payload",
    "format_cell",
]
