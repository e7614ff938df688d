"""Monadic Result Types and Validation Error Details

Implements the Result/Either type that every validator returns, plus the
three-shaped error detail sum type carried by its failure variant:

- Message: a single leaf failure ("is blank", "is not a number", ...)
- Alternatives: ordered per-alternative failures (produced by any_of)
- Nested: position/key to detail mapping (produced by list_of/map_of)

All types are frozen so results can be shared freely between callers.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import (
    Any, Callable, Generic, Hashable, Iterator, NoReturn,
    TypeVar, Union, final,
)

T = TypeVar("T")
U = TypeVar("U")


class ErrorCode(Enum):
    """Taxonomy of validation failures.

    Codes classify a Message for programmatic handling; they never take
    part in equality, so two messages with the same text are equal.
    """
    INVALID_TYPE = "invalid_type"
    REQUIRED = "required"
    OUT_OF_RANGE = "out_of_range"
    NOT_ALLOWED = "not_allowed"
    INVALID_FORMAT = "invalid_format"
    TOO_DEEP = "too_deep"
    CUSTOM = "custom"

    @property
    def category(self) -> str:
        """Coarse grouping used in serialized error payloads."""
        if self is ErrorCode.INVALID_TYPE:
            return "coercion"
        if self is ErrorCode.REQUIRED:
            return "presence"
        if self is ErrorCode.CUSTOM:
            return "custom"
        return "constraint"


# ============================================================================
# Error Details
# ============================================================================

@final
@dataclass(frozen=True, slots=True)
class Message:
    """Leaf failure with a human-readable text."""
    text: str
    code: ErrorCode = field(default=ErrorCode.CUSTOM, compare=False, repr=False)

    def to_data(self) -> str: return self.text

    def __str__(self) -> str: return self.text


@final
@dataclass(frozen=True, slots=True)
class Alternatives:
    """One failure per attempted alternative, in declaration order."""
    errors: tuple[ErrorDetail, ...]

    def to_data(self) -> list[Any]: return [e.to_data() for e in self.errors]

    def __len__(self) -> int: return len(self.errors)

    def __str__(self) -> str: return "; ".join(str(e) for e in self.errors)


@final
@dataclass(frozen=True, slots=True)
class Nested:
    """Structural failure keyed by list index or map key.

    Only failing positions are present; order follows evaluation order.
    """
    errors: Mapping[Hashable, ErrorDetail]

    def to_data(self) -> dict[Any, Any]: return {k: e.to_data() for k, e in self.errors.items()}

    def __len__(self) -> int: return len(self.errors)

    def __getitem__(self, key: Hashable) -> ErrorDetail: return self.errors[key]

    def __str__(self) -> str:
        return ", ".join(f"{k}: {e}" for k, e in self.errors.items())


ErrorDetail = Union[Message, Alternatives, Nested]


def error_from(data: Any) -> ErrorDetail:
    """Build an ErrorDetail from its plain rendering (str, list or dict)."""
    match data:
        case Message() | Alternatives() | Nested():
            return data
        case str():
            return Message(data)
        case list() | tuple():
            return Alternatives(tuple(error_from(d) for d in data))
        case Mapping():
            return Nested({k: error_from(v) for k, v in data.items()})
    raise TypeError(f"Cannot build an error detail from {type(data).__name__}")


def flatten(detail: ErrorDetail, path: str = "") -> Iterator[tuple[str, Message]]:
    """Yield (path, message) pairs for every leaf of a detail.

    Paths use JSON-style notation: ``addresses[0].state``; the root is ``$``.
    Alternatives are addressed as ``path|n``.
    """
    match detail:
        case Message():
            yield (path or "$", detail)
        case Alternatives(errors):
            for i, sub in enumerate(errors):
                yield from flatten(sub, f"{path or '$'}|{i}")
        case Nested(errors):
            for key, sub in errors.items():
                segment = f"[{key}]" if isinstance(key, int) else (f".{key}" if path else str(key))
                yield from flatten(sub, f"{path}{segment}")


# ============================================================================
# Result
# ============================================================================

@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result: wraps the normalized value."""
    value: T

    def is_ok(self) -> bool: return True

    def is_err(self) -> bool: return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"Called unwrap_err on Ok: {self.value!r}")

    def map(self, f: Callable[[T], U]) -> Result[U]:
        """Transform the success value."""
        return Ok(f(self.value))

    def map_err(self, f: Callable[[ErrorDetail], ErrorDetail]) -> Result[T]:
        return self

    def and_then(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """Chain a step that may fail."""
        return f(self.value)

    def match(self, ok: Callable[[T], U], err: Callable[[ErrorDetail], U]) -> U:
        return ok(self.value)

    def __iter__(self) -> Iterator[T]:
        yield self.value


@final
@dataclass(frozen=True, slots=True)
class Err:
    """Failure variant of Result: wraps an ErrorDetail."""
    error: ErrorDetail

    def is_ok(self) -> bool: return False

    def is_err(self) -> bool: return True

    def unwrap(self) -> NoReturn:
        """Raises because Err has no value to unwrap."""
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> ErrorDetail:
        return self.error

    def map(self, f: Callable[[Any], U]) -> Result[U]:
        return self

    def map_err(self, f: Callable[[ErrorDetail], ErrorDetail]) -> Result[Any]:
        """Transform the error detail."""
        return Err(f(self.error))

    def and_then(self, f: Callable[[Any], Result[U]]) -> Result[U]:
        return self

    def match(self, ok: Callable[[Any], U], err: Callable[[ErrorDetail], U]) -> U:
        return err(self.error)

    def __iter__(self) -> Iterator:
        return iter([])


Result = Union[Ok[T], Err]


def ok(value: T) -> Ok[T]:
    """Construct Ok variant."""
    return Ok(value)


def err(detail: ErrorDetail | str | list | dict) -> Err:
    """Construct Err variant, accepting a detail or its plain rendering."""
    return Err(error_from(detail))
