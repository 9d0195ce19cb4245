"""Departments (/config/departments)."""

from academic_console.forms.field_schema import ColumnDef, FieldKind, FieldSpec, ResourceSchema
from academic_console.services.validation_service import (
    MinLength,
    NumericRange,
    Pattern,
    Required,
)
from .formatters import or_na

EMAIL_PATTERN = r"[^\s@]+@[^\s@]+\.[^\s@]+"
PHONE_PATTERN = r"[\+]?[1-9][\d]{0,15}"
PHONE_SEPARATORS = " -()"


def _chairman(record) -> str:
    return f"{or_na(record.get('chairman_name'))} <{or_na(record.get('chairman_email'))}>"


def _publications(record) -> str:
    return f"Journal: {record.get('journal_publications', 0)}, Magazine: {record.get('magazine_publications', 0)}"


DEPARTMENTS = ResourceSchema(
    key="departments",
    title="Departments",
    singular="Department",
    plural="departments",
    endpoint="/config/departments",
    search_placeholder="Search departments...",
    fields=(
        FieldSpec("department_name", "Department name", required=True),
        FieldSpec("short_name", "Short name", required=True),
        FieldSpec("chairman_name", "Chairman name"),
        FieldSpec("chairman_email", "Chairman email", placeholder="name@example.edu"),
        FieldSpec("chairman_phone", "Chairman phone"),
        FieldSpec("journal_publications", "Journal publications", FieldKind.INTEGER, minimum=0),
        FieldSpec("magazine_publications", "Magazine publications", FieldKind.INTEGER, minimum=0),
        FieldSpec("professional_body_collaborations", "Professional body collaborations", FieldKind.LIST,
                  placeholder="Comma separated, e.g. IEEE, ACM"),
        FieldSpec("is_first_year_department", "First year department", FieldKind.BOOLEAN),
    ),
    rules=(
        Required("department_name", "Department name is required"),
        MinLength("department_name", 2, "Department name must be at least 2 characters long"),
        Required("short_name", "Short name is required"),
        MinLength("short_name", 2, "Short name must be at least 2 characters long"),
        Pattern("chairman_email", EMAIL_PATTERN, "Please enter a valid email address"),
        Pattern("chairman_phone", PHONE_PATTERN, "Please enter a valid phone number",
                strip_chars=PHONE_SEPARATORS),
        NumericRange("journal_publications", "Journal publications cannot be negative", minimum=0),
        NumericRange("magazine_publications", "Magazine publications cannot be negative", minimum=0),
    ),
    columns=(
        ColumnDef("Department Name", "department_name", width=220),
        ColumnDef("Short Name", "short_name", width=100),
        ColumnDef("Chairman", None, formatter=_chairman),
        ColumnDef("Publications", None, formatter=_publications),
        ColumnDef("Status", "is_first_year_department",
                  formatter=lambda value: "First Year" if value else "Regular"),
    ),
)
