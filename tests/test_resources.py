"""Tests for the resource declarations and registry."""

import pytest


def test_registry_order_and_lookup():
    from academic_console.resources import RESOURCE_SCHEMAS, get_schema

    assert list(RESOURCE_SCHEMAS) == [
        "departments",
        "blooms-domains",
        "blooms-levels",
        "program-modes",
        "peos",
        "program-outcomes",
        "seminar-training",
    ]
    assert get_schema("peos").singular == "PEO"
    with pytest.raises(KeyError, match="available"):
        get_schema("courses")


@pytest.mark.parametrize("key", [
    "departments", "blooms-domains", "blooms-levels", "program-modes",
    "peos", "program-outcomes", "seminar-training",
])
def test_schema_is_consistent(key):
    """Rules, columns and scope only refer to declared things."""
    from academic_console.resources import get_schema

    schema = get_schema(key)
    names = set(schema.field_names)
    assert len(names) == len(schema.fields)
    assert {rule.field for rule in schema.rules} <= names
    assert schema.columns
    if schema.scope is not None:
        assert schema.scope.field in names


def test_entity_messages():
    from academic_console.resources import DEPARTMENTS, PEOS, SEMINAR_TRAINING

    assert DEPARTMENTS.created_message() == "Department created successfully!"
    assert DEPARTMENTS.fetch_failed_message() == "Failed to fetch departments"
    assert DEPARTMENTS.save_failed_message() == "Failed to save department"
    assert PEOS.select_scope_message() == "Please select a curriculum regulation first"
    assert PEOS.deleted_message() == "PEO deleted successfully!"
    assert SEMINAR_TRAINING.fetch_failed_message() == "Failed to fetch seminar training data"
    assert SEMINAR_TRAINING.delete_failed_message() == "Failed to delete seminar training"


def test_program_outcome_defaults():
    from academic_console.resources import PROGRAM_OUTCOMES

    draft = PROGRAM_OUTCOMES.default_draft()
    assert draft["standard"] == "NBA"
    assert draft["pso_flag"] is False


def test_seminar_date_rule():
    from academic_console.resources import SEMINAR_TRAINING
    from academic_console.services import ValidationEngine

    draft = dict(
        SEMINAR_TRAINING.default_draft(),
        program_title="Cloud Workshop", type="Workshop", event_organizer="IEEE", venue="Hall A",
        level="National", role="Participant", invited_deputed="Invited",
        start_date="2024-02-30", end_date="01/03/2024",
    )
    result = ValidationEngine(SEMINAR_TRAINING.rules).validate(draft)
    assert result.errors == {"end_date": "End date must be in YYYY-MM-DD format"}


def test_formatters():
    from academic_console.resources.formatters import curriculum_label, or_na, truncate, yes_no

    assert truncate(5)("abcdefgh") == "abcde..."
    assert truncate(10)("short") == "short"
    assert yes_no(1) == "Yes"
    assert or_na("") == "N/A"
    assert curriculum_label(
        {"curriculum_batch": "2023-27", "program_name": "B.Tech", "department_name": "CSE"}
    ) == "2023-27 - B.Tech (CSE)"
