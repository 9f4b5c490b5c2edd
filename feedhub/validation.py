"""Declarative field validation on top of pydantic models.

A schema pairs a pydantic model with a message table::

    login_schema = ValidationSchema(
        UserLogin,
        messages={"email": {"required": "Email is required.", "invalid": "Invalid email format."}},
    )

    result = login_schema.check({"email": "nope", "password": "secret1"})
    if isinstance(result, Invalid):
        result.errors  # {"email": "Invalid email format."}

Message lookup for a violated field goes ``required`` (value missing, None or
empty string), then the pydantic error type (``string_too_short``, ...), then
``invalid``, then pydantic's own message. Every field is checked in a single
pass; a field reports one message.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ValidationError

from feedhub.exceptions import FieldValidationError

_MISSING = object()


@dataclass(frozen=True)
class FieldViolation:
    """A single failed rule on one field."""

    field: str
    message: str


@dataclass(frozen=True)
class Valid:
    """Validation passed; `value` is the parsed model."""

    value: BaseModel


@dataclass(frozen=True)
class Invalid:
    """Validation failed on one or more fields."""

    violations: list[FieldViolation] = field(default_factory=list)

    @property
    def errors(self) -> dict[str, str]:
        return {v.field: v.message for v in self.violations}


ValidationResult = Valid | Invalid


def field_path(loc: Iterable[Any]) -> str:
    """Turn a pydantic error location into a dotted field path."""
    return ".".join(str(p) for p in loc) or "__root__"


def collect_violations(
    errors: Iterable[Mapping[str, Any]],
    data: Any = None,
    messages: Mapping[str, Mapping[str, str]] | None = None,
) -> list[FieldViolation]:
    """Reduce pydantic errors to one violation per field."""
    messages = messages or {}
    violations: dict[str, FieldViolation] = {}
    for error in errors:
        path = field_path(error["loc"])
        if path in violations:
            continue
        rules = messages.get(path, {})
        if "required" in rules and _is_blank(_lookup(data, error["loc"])):
            message = rules["required"]
        else:
            message = rules.get(error["type"]) or rules.get("invalid") or error["msg"]
        violations[path] = FieldViolation(path, message)
    return list(violations.values())


def field_errors(
    errors: Iterable[Mapping[str, Any]],
    data: Any = None,
    messages: Mapping[str, Mapping[str, str]] | None = None,
) -> dict[str, str]:
    """Map pydantic errors to ``{field path: message}``."""
    return {v.field: v.message for v in collect_violations(errors, data, messages)}


class ValidationSchema:
    """Field rules for one form."""

    def __init__(
        self,
        model: type[BaseModel],
        messages: Mapping[str, Mapping[str, str]] | None = None,
    ):
        self.model = model
        self.messages = dict(messages or {})

    def check(self, data: Mapping[str, Any]) -> ValidationResult:
        """Validate without raising."""
        try:
            value = self.model.model_validate(data)
        except ValidationError as e:
            return Invalid(collect_violations(e.errors(), data, self.messages))
        return Valid(value)

    def validate(self, data: Mapping[str, Any]) -> BaseModel:
        """Validate and return the parsed model, or raise FieldValidationError."""
        result = self.check(data)
        if isinstance(result, Invalid):
            raise FieldValidationError(result.errors)
        return result.value


def _lookup(data: Any, loc: Iterable[Any]) -> Any:
    value = data
    for part in loc:
        if isinstance(value, Mapping) and part in value:
            value = value[part]
        elif isinstance(value, list | tuple) and isinstance(part, int) and part < len(value):
            value = value[part]
        else:
            return _MISSING
    return value


def _is_blank(value: Any) -> bool:
    return value is _MISSING or value is None or value == ""
