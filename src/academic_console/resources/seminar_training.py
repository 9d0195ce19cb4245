"""
Faculty seminar / training / workshop records (/faculty/seminar-training).

Records come back in snake_case but the endpoint takes camelCase multipart
fields with an optional 'uploadFile' attachment.
"""

from academic_console.forms.field_schema import ColumnDef, FieldKind, FieldSpec, ResourceSchema
from academic_console.services.validation_service import FileSize, FileType, Pattern, Required

EVENT_TYPES = ("Seminar", "Training", "Development", "Workshop", "Conference", "Symposium")
LEVELS = ("State", "National", "International", "Regional", "Local")
ROLES = ("Participant", "Resource Person", "Speaker", "Organizer", "Coordinator", "Chair", "Keynote Speaker")
PARTICIPATION = ("Invited", "Deputed", "Self")

DATE_PATTERN = r"\d{4}-\d{2}-\d{2}"


def _choices(values):
    return tuple((value, value) for value in values)


def _dates(record) -> str:
    start = (record.get("start_date") or "")[:10]
    end = (record.get("end_date") or "")[:10]
    if end and end != start:
        return f"{start} to {end}"
    return start


SEMINAR_TRAINING = ResourceSchema(
    key="seminar-training",
    title="Seminar / Training / Development / Workshop Attended",
    singular="Seminar training",
    plural="seminar training data",
    noun="seminar training",
    delete_prompt="Are you sure you want to delete this seminar training entry?",
    endpoint="/faculty/seminar-training",
    multipart=True,
    search_placeholder="Search programs...",
    fields=(
        FieldSpec("program_title", "Program title", wire_name="programTitle", required=True),
        FieldSpec("type", "Type", FieldKind.CHOICE, choices=_choices(EVENT_TYPES), required=True),
        FieldSpec("event_organizer", "Event organizer", wire_name="eventOrganizer", required=True),
        FieldSpec("venue", "Venue", required=True),
        FieldSpec("level", "Level", FieldKind.CHOICE, choices=_choices(LEVELS), required=True),
        FieldSpec("role", "Role", FieldKind.CHOICE, choices=_choices(ROLES), required=True),
        FieldSpec("invited_deputed", "Invited/Deputed", FieldKind.CHOICE, wire_name="invitedDeputed",
                  choices=_choices(PARTICIPATION), required=True),
        FieldSpec("start_date", "Start date", FieldKind.DATE, wire_name="startDate", required=True,
                  placeholder="YYYY-MM-DD"),
        FieldSpec("end_date", "End date", FieldKind.DATE, wire_name="endDate", required=True,
                  placeholder="YYYY-MM-DD"),
        FieldSpec("highlights", "Highlights", FieldKind.TEXTAREA),
        FieldSpec("upload_file", "Supporting document", FieldKind.FILE, wire_name="uploadFile"),
    ),
    rules=(
        Required("program_title", "Program title is required"),
        Required("type", "Type is required"),
        Required("event_organizer", "Event organizer is required"),
        Required("venue", "Venue is required"),
        Required("level", "Level is required"),
        Required("role", "Role is required"),
        Required("invited_deputed", "Invited/Deputed is required"),
        Required("start_date", "Start date is required"),
        Pattern("start_date", DATE_PATTERN, "Start date must be in YYYY-MM-DD format"),
        Required("end_date", "End date is required"),
        Pattern("end_date", DATE_PATTERN, "End date must be in YYYY-MM-DD format"),
        FileType("upload_file", "Only images (JPEG, PNG, GIF) and documents (PDF, DOC, DOCX) are allowed"),
        FileSize("upload_file", "File size must not exceed 5MB"),
    ),
    columns=(
        ColumnDef("Program Title", "program_title", width=220),
        ColumnDef("Level", "level", width=90),
        ColumnDef("Organizer", "event_organizer", width=160),
        ColumnDef("Dates", None, width=170, formatter=_dates),
        ColumnDef("Role", "role", width=120),
    ),
)
