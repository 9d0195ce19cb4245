"""Cell and option-label formatters shared by the resource declarations."""

from typing import Any, Dict

from academic_console.forms.field_codec import format_cell

NOT_AVAILABLE = "N/A"


def truncate(length: int):
    """Formatter cutting long text to length characters plus an ellipsis."""
    def formatter(value: Any) -> str:
        text = format_cell(value)
        if len(text) <= length:
            return text
        return text[:length].rstrip() + "..."
    return formatter


def date_only(value: Any) -> str:
    return format_cell(value)[:10]


def yes_no(value: Any) -> str:
    return "Yes" if value else "No"


def or_na(value: Any) -> str:
    return format_cell(value) or NOT_AVAILABLE


def curriculum_label(record: Dict[str, Any]) -> str:
    """Curriculum regulation option: '<batch> - <program> (<department>)'."""
    return (f"{record.get('curriculum_batch', '')} - {record.get('program_name', '')} "
            f"({record.get('department_name', '')})")
