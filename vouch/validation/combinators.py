"""Validator Combinators

- compose: chain validators; the first failure stops the chain, so later
  validators may rely on earlier ones' postconditions
- any_of: try alternatives against the same input; the first success
  wins, otherwise every alternative's failure is reported in order
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

from vouch.errors import Alternatives, Err, Ok, Result
from vouch.logging import validation_logger

from .pipeline import Step, Validator, describe

ValidatorFn = Callable[[Any], Result[Any]]


def _checked(validators: Iterable[ValidatorFn]) -> tuple[ValidatorFn, ...]:
    validators = tuple(validators)
    for v in validators:
        if not callable(v): raise TypeError(f"Expected a validator, got {type(v).__name__}")
    return validators


@dataclass(frozen=True, slots=True)
class CheckAnyOf(Step):
    """Return the first alternative's success, or all failures in order."""
    alternatives: tuple[ValidatorFn, ...]

    @property
    def constraint_name(self) -> str:
        return f"any_of[{', '.join(describe(v) for v in self.alternatives)}]"

    def apply(self, value: Any) -> Result[Any]:
        errors = []
        for validator in self.alternatives:
            match validator(value):
                case Ok() as success:
                    return success
                case Err(detail):
                    errors.append(detail)
        validation_logger().debug("any_of_exhausted", constraint=self.constraint_name, attempts=len(errors))
        return Err(Alternatives(tuple(errors)))


def compose(validators: Iterable[ValidatorFn]) -> Validator[Any]:
    """Run validators in sequence, each on the previous one's output.

    Usage:
        score = compose([
            integer(required=True, message="WHERE'S THE NUMBER??"),
            integer(min=5, message="IT'S TOO LOW!!!"),
            integer(max=15, message="IT'S TOO HIGH!!!"),
        ])
        score(3)  # Err(Message("IT'S TOO LOW!!!"))
    """
    validators = _checked(validators)
    return Validator(validators, name=f"compose({', '.join(describe(v) for v in validators)})")


def any_of(validators: Iterable[ValidatorFn], *, message: str | None = None, **_ignored: Any) -> Validator[Any]:
    """Accept the value if any validator accepts it.

    No required/default policy applies at this level; presence is decided
    by the alternatives themselves. Failures are reported as Alternatives,
    one entry per validator, unless ``message`` collapses them.
    """
    check = CheckAnyOf(_checked(validators))
    return Validator((check,), message=message, name=check.constraint_name)
