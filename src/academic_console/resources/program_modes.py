"""Program modes (/config/program-modes)."""

from academic_console.forms.field_schema import ColumnDef, FieldKind, FieldSpec, ResourceSchema
from academic_console.services.validation_service import MaxLength, MinLength, Required
from .formatters import truncate, yes_no

PROGRAM_MODES = ResourceSchema(
    key="program-modes",
    title="Program Modes",
    singular="Program mode",
    plural="program modes",
    endpoint="/config/program-modes",
    search_placeholder="Search program modes...",
    fields=(
        FieldSpec("mode_name", "Mode name", required=True),
        FieldSpec("description", "Description", FieldKind.TEXTAREA),
        FieldSpec("is_hybrid", "Hybrid", FieldKind.BOOLEAN),
        FieldSpec("is_online_sync", "Online (synchronous)", FieldKind.BOOLEAN),
        FieldSpec("is_online_async", "Online (asynchronous)", FieldKind.BOOLEAN),
    ),
    rules=(
        Required("mode_name", "Mode name is required"),
        MinLength("mode_name", 2, "Mode name must be at least 2 characters long"),
        MaxLength("mode_name", 50, "Mode name must not exceed 50 characters"),
        MaxLength("description", 500, "Description must not exceed 500 characters"),
    ),
    columns=(
        ColumnDef("Mode Name", "mode_name", width=180),
        ColumnDef("Description", "description", formatter=truncate(60)),
        ColumnDef("Hybrid", "is_hybrid", width=70, formatter=yes_no),
        ColumnDef("Online Sync", "is_online_sync", width=90, formatter=yes_no),
        ColumnDef("Online Async", "is_online_async", width=90, formatter=yes_no),
    ),
)
