"""
Resource declarations.

Each entity module only builds a ResourceSchema; RESOURCE_SCHEMAS lists them
in the order the console shows its tabs.
"""

from typing import Dict

from academic_console.forms.field_schema import ResourceSchema
from .departments import DEPARTMENTS
from .blooms import BLOOMS_DOMAINS, BLOOMS_LEVELS
from .program_modes import PROGRAM_MODES
from .peos import PEOS
from .program_outcomes import PROGRAM_OUTCOMES
from .seminar_training import SEMINAR_TRAINING

RESOURCE_SCHEMAS: Dict[str, ResourceSchema] = {
    schema.key: schema
    for schema in (
        DEPARTMENTS,
        BLOOMS_DOMAINS,
        BLOOMS_LEVELS,
        PROGRAM_MODES,
        PEOS,
        PROGRAM_OUTCOMES,
        SEMINAR_TRAINING,
    )
}


def get_schema(key: str) -> ResourceSchema:
    try:
        return RESOURCE_SCHEMAS[key]
    except KeyError:
        raise KeyError(f"Unknown resource {key!r}; available: {', '.join(RESOURCE_SCHEMAS)}") from None


__all__ = [
    "RESOURCE_SCHEMAS",
    "get_schema",
    "DEPARTMENTS",
    "BLOOMS_DOMAINS",
    "BLOOMS_LEVELS",
    "PROGRAM_MODES",
    "PEOS",
    "PROGRAM_OUTCOMES",
    "SEMINAR_TRAINING",
]
