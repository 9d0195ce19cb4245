"""Program educational objectives, always listed under one curriculum regulation."""

from academic_console.forms.field_schema import (
    ColumnDef,
    FieldKind,
    FieldSpec,
    ResourceSchema,
    ScopeSpec,
)
from academic_console.services.validation_service import MaxLength, MinLength, Required, Unique
from .formatters import curriculum_label, truncate

PEOS = ResourceSchema(
    key="peos",
    title="Program Educational Objectives",
    singular="PEO",
    plural="PEOs",
    noun="PEO",
    endpoint="/config/peos",
    search_placeholder="Search PEOs...",
    scope=ScopeSpec(
        field="curriculum_regulation_id",
        label="curriculum regulation",
        options_path="/config/peos/curriculum-regulations",
        option_label=curriculum_label,
        required=True,
    ),
    fields=(
        FieldSpec("curriculum_regulation_id", "Curriculum regulation", FieldKind.CHOICE,
                  value_cast=int, required=True),
        FieldSpec("peo_number", "PEO number", required=True, placeholder="e.g. PEO1"),
        FieldSpec("peo_title", "PEO title", required=True),
        FieldSpec("peo_description", "PEO description", FieldKind.TEXTAREA, required=True),
        FieldSpec("peo_statement", "PEO statement", FieldKind.TEXTAREA, required=True),
    ),
    rules=(
        Required("curriculum_regulation_id", "Curriculum regulation is required"),
        Required("peo_number", "PEO number is required"),
        MaxLength("peo_number", 10, "PEO number must not exceed 10 characters"),
        Unique("peo_number", "A PEO with this number already exists for this curriculum regulation",
               scope_fields=("curriculum_regulation_id",)),
        Required("peo_title", "PEO title is required"),
        MinLength("peo_title", 3, "PEO title must be at least 3 characters long"),
        MaxLength("peo_title", 100, "PEO title must not exceed 100 characters"),
        Required("peo_description", "PEO description is required"),
        MinLength("peo_description", 10, "PEO description must be at least 10 characters long"),
        MaxLength("peo_description", 500, "PEO description must not exceed 500 characters"),
        Required("peo_statement", "PEO statement is required"),
        MinLength("peo_statement", 10, "PEO statement must be at least 10 characters long"),
        MaxLength("peo_statement", 1000, "PEO statement must not exceed 1000 characters"),
    ),
    columns=(
        ColumnDef("PEO", "peo_number", width=70),
        ColumnDef("Title", "peo_title", width=200),
        ColumnDef("Statement", "peo_statement", formatter=truncate(80)),
        ColumnDef("Curriculum", "curriculum_batch", width=110),
    ),
)
