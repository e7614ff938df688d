"""Raising Boundary for Validation Results

Validators return failures as data. At the edge of an application it is
often more convenient to raise; ValidationError carries the original
ErrorDetail together with a flattened, path-addressed view of it.

Error Format:
{
    "error": {
        "type": "validation_error",
        "message": "Validation failed",
        "error_count": 2,
        "errors": [
            {"field": "[0].age", "message": "is not a number", "code": "invalid_type", "category": "coercion"},
            {"field": "[1].addresses[0].state", "message": "is blank", "code": "required", "category": "presence"}
        ]
    }
}
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from vouch.errors import Err, ErrorCode, ErrorDetail, Ok, Result, flatten
from vouch.logging import validation_logger

from .pipeline import describe

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ValidationErrorDetail:
    """A single leaf failure addressed by its JSON-style path."""
    field_path: str
    message: str
    code: ErrorCode = ErrorCode.CUSTOM

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field_path, "message": self.message, "code": self.code.value,
            "category": self.code.category}


def summarize(detail: ErrorDetail) -> str:
    """One-line rendering: the bare message at the root, else ``path: message`` pairs."""
    entries = [(p, m.text) for p, m in flatten(detail)]
    if len(entries) == 1 and entries[0][0] == "$": return entries[0][1]
    return "; ".join(f"{p}: {m}" for p, m in entries)


@dataclass
class ValidationError(Exception):
    """Raised by validate_or_raise when a validator rejects its input."""
    detail: ErrorDetail
    message: str = "Validation failed"
    details: list[ValidationErrorDetail] = field(init=False)

    def __post_init__(self):
        self.details = [ValidationErrorDetail(path, m.text, m.code) for path, m in flatten(self.detail)]
        super().__init__(self.message)

    def __str__(self) -> str:
        if not self.details: return self.message
        if len(self.details) == 1: return f"{(d := self.details[0]).field_path}: {d.message}"
        return f"{self.message} ({len(self.details)} errors)"

    @property
    def field_errors(self) -> dict[str, list[ValidationErrorDetail]]:
        """Group errors by field path."""
        result: dict[str, list[ValidationErrorDetail]] = {}
        for d in self.details: result.setdefault(d.field_path, []).append(d)
        return result

    def to_data(self) -> Any: return self.detail.to_data()

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API responses."""
        return {"error": {"type": "validation_error", "message": self.message,
            "error_count": len(self.details), "errors": [d.to_dict() for d in self.details]}}


def raise_result(result: Result[T], *, source: str = "result") -> T:
    """Unwrap Ok or raise ValidationError for Err."""
    match result:
        case Ok(value):
            return value
        case Err(detail):
            error = ValidationError(detail)
            validation_logger().debug("validation_rejected", source=source, error_count=len(error.details),
                errors=detail.to_data())
            raise error
    raise TypeError(f"Expected a Result, got {type(result).__name__}")


def validate_or_raise(validator: Callable[[Any], Result[T]], value: Any) -> T:
    """Run a validator and return its value, raising ValidationError on failure.

    Usage:
        person = validate_or_raise(person_validator, request_json)
    """
    return raise_result(validator(value), source=describe(validator))
