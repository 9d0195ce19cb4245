"""
Bloom's taxonomy: domains and the levels inside each domain.

Levels can be filtered by domain; a chosen domain switches the list to the
per-domain listing, which returns every level of that domain at once.
"""

from academic_console.forms.field_schema import (
    ColumnDef,
    FieldKind,
    FieldSpec,
    ListWire,
    ResourceSchema,
    ScopeSpec,
)
from academic_console.services.validation_service import (
    ListItems,
    MaxLength,
    MinLength,
    Required,
)
from .formatters import date_only, truncate

DOMAINS_PATH = "/config/blooms/domains"
LEVELS_PATH = "/config/blooms/levels"


def domain_label(record) -> str:
    return f"{record.get('domain_name', '')} ({record.get('domain_acronym', '')})"


def _level_number_ok(item: str) -> bool:
    """Whole numbers only; the wire payload casts each item with int()."""
    try:
        number = int(str(item).strip())
    except ValueError:
        return False
    return 1 <= number <= 10


BLOOMS_DOMAINS = ResourceSchema(
    key="blooms-domains",
    title="Bloom's Taxonomy: Domains",
    singular="Domain",
    plural="Bloom's domains",
    endpoint=DOMAINS_PATH,
    search_placeholder="Search domains...",
    fields=(
        FieldSpec("domain_name", "Domain name", required=True),
        FieldSpec("domain_acronym", "Domain acronym", required=True),
        FieldSpec("description", "Description", FieldKind.TEXTAREA),
    ),
    rules=(
        Required("domain_name", "Domain name is required"),
        MinLength("domain_name", 2, "Domain name must be at least 2 characters long"),
        Required("domain_acronym", "Domain acronym is required"),
        MinLength("domain_acronym", 2, "Domain acronym must be at least 2 characters long"),
        MaxLength("domain_acronym", 10, "Domain acronym must not exceed 10 characters"),
    ),
    columns=(
        ColumnDef("Domain Name", "domain_name", width=200),
        ColumnDef("Acronym", "domain_acronym", width=90),
        ColumnDef("Description", "description", formatter=truncate(60)),
        ColumnDef("Created", "created_at", width=100, formatter=date_only),
    ),
)


BLOOMS_LEVELS = ResourceSchema(
    key="blooms-levels",
    title="Bloom's Taxonomy: Levels",
    singular="Level",
    plural="Bloom's levels",
    endpoint=LEVELS_PATH,
    search_placeholder="Search levels...",
    scope=ScopeSpec(
        field="domain_id",
        label="domain",
        options_path=DOMAINS_PATH,
        option_label=domain_label,
        scoped_path=LEVELS_PATH,
        option_params={"limit": 100},
    ),
    fields=(
        FieldSpec("domain_id", "Domain", FieldKind.CHOICE, value_cast=int, required=True),
        FieldSpec("level_number", "Level numbers", FieldKind.LIST, item_cast=int, required=True,
                  placeholder="e.g. 1, 2"),
        FieldSpec("level_name", "Level names", FieldKind.LIST, list_wire=ListWire.JOINED, required=True,
                  placeholder="e.g. Remember, Understand"),
        FieldSpec("learning_characteristics", "Learning characteristics", FieldKind.TEXTAREA),
        FieldSpec("action_words", "Action words", FieldKind.LIST, placeholder="e.g. define, list, recall"),
    ),
    rules=(
        Required("domain_id", "Domain selection is required"),
        Required("level_number", "Level numbers are required"),
        ListItems("level_number", _level_number_ok, "Level numbers must be between 1 and 10"),
        Required("level_name", "Level names are required"),
        ListItems("level_name", lambda item: len(item.strip()) >= 2,
                  "Level names must be at least 2 characters long"),
        MinLength("learning_characteristics", 10,
                  "Learning characteristics must be at least 10 characters long"),
        ListItems("action_words", lambda item: len(item.strip()) >= 2,
                  "Action words must be at least 2 characters long"),
    ),
    columns=(
        ColumnDef("Domain", "domain_acronym", width=80),
        ColumnDef("Level", "level_number", width=70),
        ColumnDef("Level Name", "level_name", width=160),
        ColumnDef("Learning Characteristics", "learning_characteristics", formatter=truncate(50)),
        ColumnDef("Action Words", "action_words", formatter=truncate(50)),
    ),
)
