"""
Field validation for resource drafts.

Rules are declared per schema in evaluation order. For each field the first
failing rule wins; the first failure overall becomes the summary message.
Uniqueness is checked against the records currently loaded in the list,
which is the only data the form can see.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple
import logging
import os
import re

from academic_console.protocols import get_console_config

logger = logging.getLogger(__name__)


def is_blank(value: Any) -> bool:
    """Blank means absent for validation: None, whitespace-only text, empty collections."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return False


@dataclass
class ValidationContext:
    """What a rule may look at besides the draft itself."""
    items: Sequence[Dict[str, Any]] = ()
    editing_id: Any = None


@dataclass
class ValidationResult:
    valid: bool
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def first_error(self) -> Optional[str]:
        return next(iter(self.errors.values()), None)


class Rule(ABC):
    """
    Base validation rule bound to one field.

    Subclasses implement check(). Every rule except Required treats a blank
    value as valid, so optional fields are only checked when provided.
    """

    skip_blank = True

    def __init__(self, field_name: str, message: str):
        self.field = field_name
        self.message = message

    def applies(self, value: Any) -> bool:
        return not (self.skip_blank and is_blank(value))

    @abstractmethod
    def check(self, value: Any, draft: Dict[str, Any], context: ValidationContext) -> bool:
        """True when value passes. Only called for values applies() accepts."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.field!r})"


class Required(Rule):
    skip_blank = False

    def check(self, value, draft, context):
        return not is_blank(value)


class MinLength(Rule):
    """Minimum length of trimmed text."""

    def __init__(self, field_name: str, length: int, message: str):
        super().__init__(field_name, message)
        self.length = length

    def check(self, value, draft, context):
        return len(str(value).strip()) >= self.length


class MaxLength(Rule):
    """Maximum length of trimmed text."""

    def __init__(self, field_name: str, length: int, message: str):
        super().__init__(field_name, message)
        self.length = length

    def check(self, value, draft, context):
        return len(str(value).strip()) <= self.length


class NumericRange(Rule):
    """Value must parse as a number within [minimum, maximum] (either bound optional)."""

    def __init__(self, field_name: str, message: str,
                 minimum: Optional[float] = None, maximum: Optional[float] = None):
        super().__init__(field_name, message)
        self.minimum = minimum
        self.maximum = maximum

    def check(self, value, draft, context):
        try:
            number = float(value)
        except (TypeError, ValueError):
            return False
        if self.minimum is not None and number < self.minimum:
            return False
        if self.maximum is not None and number > self.maximum:
            return False
        return True


class Pattern(Rule):
    """Text must fully match a regular expression after optional character stripping."""

    def __init__(self, field_name: str, pattern: str, message: str, strip_chars: str = ""):
        super().__init__(field_name, message)
        self.regex = re.compile(pattern)
        self.strip_chars = strip_chars

    def check(self, value, draft, context):
        text = str(value).strip()
        if self.strip_chars:
            text = re.sub(f"[{re.escape(self.strip_chars)}]", "", text)
        return self.regex.fullmatch(text) is not None


class ListItems(Rule):
    """Every element of a list field must satisfy a predicate."""

    def __init__(self, field_name: str, predicate: Callable[[str], bool], message: str):
        super().__init__(field_name, message)
        self.predicate = predicate

    def check(self, value, draft, context):
        items = value if isinstance(value, (list, tuple)) else [value]
        return all(self.predicate(str(item)) for item in items)


class Unique(Rule):
    """
    Case-insensitive uniqueness among the loaded records.

    scope_fields restrict the comparison to records sharing those field
    values with the draft (e.g. same curriculum). The record being edited
    is excluded.
    """

    def __init__(self, field_name: str, message: str, scope_fields: Iterable[str] = ()):
        super().__init__(field_name, message)
        self.scope_fields = tuple(scope_fields)

    @staticmethod
    def _norm(value: Any) -> str:
        return "" if value is None else str(value).strip().lower()

    def check(self, value, draft, context):
        wanted = self._norm(value)
        for item in context.items:
            if context.editing_id is not None and str(item.get("id")) == str(context.editing_id):
                continue
            if self._norm(item.get(self.field)) != wanted:
                continue
            if all(self._norm(item.get(name)) == self._norm(draft.get(name)) for name in self.scope_fields):
                return False
        return True


class FileSize(Rule):
    """Chosen attachment must not exceed max_bytes (default from config)."""

    def __init__(self, field_name: str, message: str, max_bytes: Optional[int] = None):
        super().__init__(field_name, message)
        self.max_bytes = max_bytes

    def check(self, value, draft, context):
        limit = self.max_bytes if self.max_bytes is not None else get_console_config().max_upload_bytes
        try:
            return os.path.getsize(value) <= limit
        except OSError:
            logger.warning(f"Attachment {value!r} is not readable")
            return False


class FileType(Rule):
    """Chosen attachment must have one of the allowed extensions (default from config)."""

    def __init__(self, field_name: str, message: str, extensions: Optional[Iterable[str]] = None):
        super().__init__(field_name, message)
        self.extensions = tuple(extensions) if extensions is not None else None

    def check(self, value, draft, context):
        allowed = self.extensions or tuple(get_console_config().allowed_upload_extensions)
        return Path(str(value)).suffix.lower() in {ext.lower() for ext in allowed}


class Predicate(Rule):
    """Escape hatch: any callable over (value, draft)."""

    def __init__(self, field_name: str, predicate: Callable[[Any, Dict[str, Any]], bool],
                 message: str, skip_blank: bool = True):
        super().__init__(field_name, message)
        self.predicate = predicate
        self.skip_blank = skip_blank

    def check(self, value, draft, context):
        return bool(self.predicate(value, draft))


class ValidationEngine:
    """Runs an ordered rule list against a draft."""

    def __init__(self, rules: Iterable[Rule]):
        self.rules: Tuple[Rule, ...] = tuple(rules)

    def validate(self, draft: Dict[str, Any], context: Optional[ValidationContext] = None) -> ValidationResult:
        context = context or ValidationContext()
        errors: Dict[str, str] = {}
        for rule in self.rules:
            if rule.field in errors:
                continue
            value = draft.get(rule.field)
            if not rule.applies(value):
                continue
            if not rule.check(value, draft, context):
                errors[rule.field] = rule.message
        if errors:
            logger.debug(f"Validation failed: {list(errors)}")
        return ValidationResult(valid=not errors, errors=errors)

    def fields(self) -> List[str]:
        seen = []
        for rule in self.rules:
            if rule.field not in seen:
                seen.append(rule.field)
        return seen
