"""Step Pipeline Runner

A validator is an ordered tuple of fallible steps. The runner threads the
value through each step left to right and stops at the first failure.

Features:
- Frozen dataclass validators: immutable and shareable across threads
- Short-circuit evaluation within one validator's own pipeline
- Override message applied uniformly to the validator's own failures,
  while structural (Nested) child errors keep their shape
- Operator shorthands: & (compose), | (any_of)
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, Sequence, TypeVar

from vouch.errors import Err, Nested, Ok, Result, custom

T = TypeVar("T")

StepFn = Callable[[Any], Result[Any]]


class Step(ABC):
    """Base class for pipeline steps.

    A step maps a value to ``Ok(new_value)`` or ``Err(detail)``. Steps
    are immutable; all configuration is fixed at construction.
    """

    @abstractmethod
    def apply(self, value: Any) -> Result[Any]:
        """Run the step against a value."""

    @property
    def constraint_name(self) -> str:
        return type(self).__name__

    def __call__(self, value: Any) -> Result[Any]: return self.apply(value)


def run_steps(value: Any, steps: Sequence[StepFn], message: str | None = None) -> Result[Any]:
    """Apply steps in order, returning the first failure or the final value.

    When ``message`` is given it replaces any failing step's detail except
    a Nested one, which carries child validators' errors.
    """
    for step in steps:
        match step(value):
            case Ok(value):
                continue
            case Err(detail) if message is not None and not isinstance(detail, Nested):
                return custom(message)
            case failure:
                return failure
    return Ok(value)


@dataclass(frozen=True, slots=True)
class Validator(Generic[T]):
    """Callable validator: ``validator(value) -> Ok(normalized) | Err(detail)``.

    Usage:
        age = integer(min=0, max=150)
        age("42")   # Ok(42)
        age("old")  # Err(Message("is not a number"))
    """
    steps: tuple[StepFn, ...]
    message: str | None = None
    name: str = "validator"

    def __call__(self, value: Any) -> Result[T]: return run_steps(value, self.steps, self.message)

    def __and__(self, other: Validator) -> Validator:
        from .combinators import compose
        return compose([self, other])

    def __or__(self, other: Validator) -> Validator:
        from .combinators import any_of
        return any_of([self, other])

    def with_message(self, message: str | None) -> Validator[T]:
        """Copy of this validator with a different override message."""
        return replace(self, message=message)

    def __repr__(self) -> str:
        suffix = f", message={self.message!r}" if self.message is not None else ""
        return f"Validator({self.name}{suffix})"


def describe(validator: Any) -> str:
    """Display name for any callable used as a validator."""
    return getattr(validator, "name", None) or getattr(validator, "__name__", type(validator).__name__)
