"""Program outcomes, always listed under one curriculum regulation."""

from academic_console.forms.field_schema import (
    ColumnDef,
    FieldKind,
    FieldSpec,
    ResourceSchema,
    ScopeSpec,
)
from academic_console.services.validation_service import MaxLength, MinLength, Required, Unique
from .formatters import curriculum_label, truncate, yes_no

PO_TYPES = (
    "Engineering Knowledge",
    "Problem Analysis",
    "Design/Development of Solutions",
    "Conduct Investigations",
    "Modern Tool Usage",
    "Engineer and Society",
    "Environment and Sustainability",
    "Ethics",
    "Individual and Team Work",
    "Communication",
    "Project Management",
    "Life-long Learning",
    "Software Development",
    "System Design",
)

GRADUATE_ATTRIBUTES = tuple(f"GA{number}" for number in range(1, 13))

STANDARDS = ("NBA", "ABET")

PROGRAM_OUTCOMES = ResourceSchema(
    key="program-outcomes",
    title="Program Outcomes",
    singular="Program outcome",
    plural="program outcomes",
    endpoint="/config/program-outcomes",
    search_placeholder="Search program outcomes...",
    scope=ScopeSpec(
        field="curriculum_regulation_id",
        label="curriculum regulation",
        options_path="/config/program-outcomes/curriculum-regulations",
        option_label=curriculum_label,
        required=True,
    ),
    fields=(
        FieldSpec("curriculum_regulation_id", "Curriculum regulation", FieldKind.CHOICE,
                  value_cast=int, required=True),
        FieldSpec("po_reference", "PO reference", required=True, placeholder="e.g. PO1"),
        FieldSpec("pso_flag", "Program specific outcome (PSO)", FieldKind.BOOLEAN),
        FieldSpec("po_type", "PO type", FieldKind.CHOICE, required=True,
                  choices=tuple((value, value) for value in PO_TYPES)),
        FieldSpec("map_ga", "Map GA", FieldKind.CHOICE,
                  choices=tuple((value, value) for value in GRADUATE_ATTRIBUTES)),
        FieldSpec("po_statement", "PO statement", FieldKind.TEXTAREA, required=True),
        FieldSpec("standard", "Standard", FieldKind.CHOICE, default="NBA",
                  choices=tuple((value, value) for value in STANDARDS)),
    ),
    rules=(
        Required("curriculum_regulation_id", "Curriculum regulation is required"),
        Required("po_reference", "PO reference is required"),
        MinLength("po_reference", 2, "PO reference must be at least 2 characters long"),
        MaxLength("po_reference", 10, "PO reference must not exceed 10 characters"),
        Unique("po_reference", "A PO with this reference already exists for this curriculum regulation",
               scope_fields=("curriculum_regulation_id",)),
        Required("po_type", "PO type is required"),
        Required("po_statement", "PO statement is required"),
        MinLength("po_statement", 10, "PO statement must be at least 10 characters long"),
        MaxLength("po_statement", 2000, "PO statement must not exceed 2000 characters"),
    ),
    columns=(
        ColumnDef("Reference", "po_reference", width=80),
        ColumnDef("Type", "po_type", width=180),
        ColumnDef("PSO", "pso_flag", width=50, formatter=yes_no),
        ColumnDef("Statement", "po_statement", formatter=truncate(80)),
        ColumnDef("Standard", "standard", width=80),
    ),
)
