"""
Declarative resource schemas.

A ResourceSchema is everything the generic resource manager needs to know
about one entity type: its endpoints, form fields, validation rules, table
columns, labels and optional parent scope. Entity modules under
academic_console.resources only build these; they contain no control flow.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple
import copy

# Option lists are (value, label) pairs
Option = Tuple[Any, str]
OptionFormatter = Callable[[Dict[str, Any]], str]


class FieldKind(Enum):
    """Input kinds the form knows how to build and encode."""
    TEXT = "text"
    TEXTAREA = "textarea"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    LIST = "list"
    CHOICE = "choice"
    DATE = "date"
    FILE = "file"


class ListWire(Enum):
    """How a list field travels over JSON. Multipart always joins."""
    ARRAY = "array"
    JOINED = "joined"


@dataclass(frozen=True)
class FieldSpec:
    """
    One form field.

    Attributes:
        name: Key in the draft and in records returned by the API
        label: Human label shown next to the input
        kind: Input kind (drives widget choice and wire encoding)
        default: Value of the field in a fresh "add" draft (None = kind default)
        wire_name: Key sent to the API when it differs from name
        choices: Static (value, label) options for CHOICE fields
        options_path: API path that lists options for CHOICE fields
        option_label: Formats an option record into its label
        value_cast: Applied to scalar values before sending (e.g. int for ids)
        item_cast: Applied to each list element before sending as an array
        list_wire: JSON encoding of LIST fields
        minimum: Lower bound hint for INTEGER inputs
        maximum: Upper bound hint for INTEGER inputs
        placeholder: Placeholder text for the input
        required: Marks the label as required (rules still decide validity)
        in_payload: False for display-only fields
    """
    name: str
    label: str
    kind: FieldKind = FieldKind.TEXT
    default: Any = None
    wire_name: Optional[str] = None
    choices: Tuple[Option, ...] = ()
    options_path: Optional[str] = None
    option_label: Optional[OptionFormatter] = None
    value_cast: Optional[Callable[[Any], Any]] = None
    item_cast: Optional[Callable[[str], Any]] = None
    list_wire: ListWire = ListWire.ARRAY
    minimum: Optional[int] = None
    maximum: Optional[int] = None
    placeholder: str = ""
    required: bool = False
    in_payload: bool = True

    @property
    def key(self) -> str:
        """Name used on the wire."""
        return self.wire_name or self.name

    def initial_value(self) -> Any:
        """Value for this field in an empty draft."""
        if self.default is not None:
            return copy.deepcopy(self.default)
        if self.kind is FieldKind.INTEGER:
            return 0
        if self.kind is FieldKind.BOOLEAN:
            return False
        if self.kind is FieldKind.LIST:
            return []
        return ""


@dataclass(frozen=True)
class ColumnDef:
    """
    Declarative column configuration for resource tables.

    formatter receives the record's value under key, or the whole record
    when key is None (composite columns).
    """
    name: str
    key: Optional[str]
    width: Optional[int] = None
    formatter: Optional[Callable[[Any], str]] = None

    def render(self, record: Dict[str, Any]) -> Any:
        value = record if self.key is None else record.get(self.key)
        if self.formatter is not None:
            return self.formatter(value)
        return value


@dataclass(frozen=True)
class ScopeSpec:
    """
    Parent filter for a resource list (e.g. PEOs under one curriculum).

    Attributes:
        field: Query parameter and draft field holding the parent id
        label: Human name of the parent, used in prompts ("curriculum regulation")
        options_path: API path listing the parents for the selector
        option_label: Formats a parent record into its selector label
        required: List stays empty and "add" is refused until a parent is chosen
        scoped_path: When set, a chosen parent switches the list to a scoped
            fetch of GET <scoped_path>/<parent id>, which returns every record
            under the parent and bypasses pagination
        option_params: Extra query parameters for the options request
    """
    field: str
    label: str
    options_path: str
    option_label: OptionFormatter
    required: bool = False
    scoped_path: Optional[str] = None
    option_params: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ResourceSchema:
    """
    Complete declaration of one manageable resource type.

    Attributes:
        key: Stable identifier (used by the CLI and registry)
        title: Screen title
        singular: Capitalized singular noun used in messages ("Department")
        plural: Lower-case plural used in fetch errors ("departments")
        endpoint: Collection path relative to the API base ("/config/departments")
        fields: Form fields in display order
        rules: Validation rules in evaluation order
        columns: Table columns in display order
        scope: Optional parent filter
        multipart: Send create/update as multipart form data
        noun: Lower-case singular for fallback messages (default singular.lower())
        delete_prompt: Confirmation text (default built from noun)
        search_placeholder: Placeholder for the search box
    """
    key: str
    title: str
    singular: str
    plural: str
    endpoint: str
    fields: Tuple[FieldSpec, ...]
    rules: Tuple[Any, ...] = ()
    columns: Tuple[ColumnDef, ...] = ()
    scope: Optional[ScopeSpec] = None
    multipart: bool = False
    noun: Optional[str] = None
    delete_prompt: Optional[str] = None
    search_placeholder: str = "Search..."

    def field(self, name: str) -> FieldSpec:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise KeyError(f"{self.key} has no field {name!r}")

    @property
    def field_names(self) -> List[str]:
        return [spec.name for spec in self.fields]

    @property
    def noun_lower(self) -> str:
        return self.noun or self.singular.lower()

    @property
    def file_field(self) -> Optional[FieldSpec]:
        return next((spec for spec in self.fields if spec.kind is FieldKind.FILE), None)

    def default_draft(self) -> Dict[str, Any]:
        return {spec.name: spec.initial_value() for spec in self.fields}

    # --- Messages -------------------------------------------------------

    def created_message(self) -> str:
        return f"{self.singular} created successfully!"

    def updated_message(self) -> str:
        return f"{self.singular} updated successfully!"

    def deleted_message(self) -> str:
        return f"{self.singular} deleted successfully!"

    def save_failed_message(self) -> str:
        return f"Failed to save {self.noun_lower}"

    def delete_failed_message(self) -> str:
        return f"Failed to delete {self.noun_lower}"

    def fetch_failed_message(self) -> str:
        return f"Failed to fetch {self.plural}"

    def confirm_delete_message(self) -> str:
        return self.delete_prompt or f"Are you sure you want to delete this {self.noun_lower}?"

    def select_scope_message(self) -> str:
        return f"Please select a {self.scope.label} first" if self.scope else ""


def option_from_record(record: Dict[str, Any], formatter: Optional[OptionFormatter],
                       value_key: str = "id") -> Option:
    """Turn an API record into a (value, label) option."""
    value = record.get(value_key)
    label = formatter(record) if formatter else str(record.get("name", value))
    return value, label


def options_from_records(records: Sequence[Dict[str, Any]],
                         formatter: Optional[OptionFormatter]) -> List[Option]:
    return [option_from_record(record, formatter) for record in records]
