"""Structural Validators

list_of and map_of recurse into child validators. Siblings never
short-circuit each other: every element or field is validated and all
failures are reported together as a Nested detail keyed by index or key.

Recursion depth is tracked per execution context; beyond
``settings.max_depth`` a structural validator fails with
"is nested too deeply" instead of descending further.
"""
from __future__ import annotations

from collections.abc import Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterator

from vouch.config import get_settings
from vouch.errors import Err, Nested, Ok, Result, too_deep
from vouch.logging import validation_logger

from .coercion import EnsureList, EnsureMap, stringify
from .pipeline import Step, Validator, describe
from .policies import MaxItems, MinItems, PutDefault, Required

ValidatorFn = Callable[[Any], Result[Any]]

_depth: ContextVar[int] = ContextVar("vouch_structural_depth", default=0)


@contextmanager
def _descend() -> Iterator[int]:
    """Increment the nesting depth for the duration of the block."""
    token = _depth.set(_depth.get() + 1)
    try:
        yield _depth.get()
    finally:
        _depth.reset(token)


def _partition(results: list[tuple[Hashable, Result[Any]]]) -> Result[list[tuple[Hashable, Any]]]:
    """Ok with all (position, value) pairs, or Nested of the failing positions only."""
    errors = {pos: r.error for pos, r in results if isinstance(r, Err)}
    if errors: return Err(Nested(errors))
    return Ok([(pos, r.value) for pos, r in results])


def _too_deep(validator: str, depth: int) -> Result[Any]:
    validation_logger().warning("max_depth_exceeded", validator=validator, depth=depth,
        max_depth=get_settings().max_depth)
    return too_deep()


# ============================================================================
# Key lookup
# ============================================================================

def textual_key(key: Hashable) -> Hashable:
    """Text form of a spec key, rendered the way string() renders values."""
    text = stringify(key)
    return text if text is not None else str(key)


@dataclass(frozen=True, slots=True)
class KeyLookup:
    """Two-step field lookup: the spec key first, then its alias.

    Accepts either of two equivalent external representations of the same
    logical field name. Lookup is by presence, so falsy values are kept.
    """
    alias: Callable[[Hashable], Hashable] = textual_key

    def __call__(self, data: Mapping, key: Hashable) -> Any:
        if key in data: return data[key]
        if (alt := self.alias(key)) != key and alt in data: return data[alt]
        return None


# ============================================================================
# Element / field steps
# ============================================================================

@dataclass(frozen=True, slots=True)
class ValidateElements(Step):
    """Validate every element; drop elements whose validated value is absent."""
    inner: ValidatorFn

    @property
    def constraint_name(self) -> str:
        return f"elements[{describe(self.inner)}]"

    def apply(self, items: Any) -> Result[Any]:
        if items is None: return Ok(None)
        with _descend() as depth:
            if depth > get_settings().max_depth: return _too_deep(self.constraint_name, depth)
            results = [(i, self.inner(item)) for i, item in enumerate(items)]
        return _partition(results).map(lambda pairs: [v for _, v in pairs if v is not None])


@dataclass(frozen=True, slots=True)
class ValidateSpec(Step):
    """Validate each declared field; undeclared input keys are ignored."""
    fields: tuple[tuple[Hashable, ValidatorFn], ...]
    lookup: KeyLookup = KeyLookup()

    @property
    def constraint_name(self) -> str:
        return f"spec[{', '.join(str(k) for k, _ in self.fields)}]"

    def apply(self, data: Any) -> Result[Any]:
        if data is None: return Ok(None)
        with _descend() as depth:
            if depth > get_settings().max_depth: return _too_deep(self.constraint_name, depth)
            results = [(key, validator(self.lookup(data, key))) for key, validator in self.fields]
        return _partition(results).map(dict)


# ============================================================================
# Constructors
# ============================================================================

def list_of(
    validator: ValidatorFn,
    *,
    required: bool = False,
    default: Any = None,
    min: int | None = None,
    max: int | None = None,
    message: str | None = None,
    **_ignored: Any,
) -> Validator[list]:
    """Validates lists, stripping absent elements.

    Errors are returned as a Nested detail of failing index to error.
    Length bounds apply to the filtered list and are checked only once
    every element has passed.

    Usage:
        list_of(integer())([1, 2, None, 3])             # Ok([1, 2, 3])
        list_of(integer(min=5))([3, 7])                  # Err(Nested({0: "is less than 5"}))
    """
    if not callable(validator): raise TypeError(f"Expected a validator, got {type(validator).__name__}")

    steps: list[Step] = [EnsureList()]
    if required:
        steps.append(Required())
    steps.append(ValidateElements(validator))
    if min is not None:
        steps.append(MinItems(min))
    if max is not None:
        steps.append(MaxItems(max))
    if default is not None:
        steps.append(PutDefault(default))
    return Validator(tuple(steps), message=message, name=f"list_of({describe(validator)})")


def map_of(
    spec: Mapping[Hashable, ValidatorFn],
    *,
    required: bool = False,
    default: Any = None,
    message: str | None = None,
    key_lookup: Callable[[Hashable], Hashable] | None = None,
    **_ignored: Any,
) -> Validator[dict]:
    """Validates maps against a spec of field validators.

    The output holds exactly the spec's keys, in spec order; fields missing
    from the input are validated as absent. Errors are returned as a Nested
    detail containing only the failing keys.

    Usage:
        person = map_of({"name": string(required=True), "age": integer(min=1)})
        person({"name": "Jhon", "age": "2"})   # Ok({"name": "Jhon", "age": 2})
        person({"age": 0})                     # Err(Nested({"name": "is blank", "age": "is less than 1"}))

    Args:
        key_lookup: Alias function for the fallback lookup; defaults to the
            textual form of each spec key.
    """
    if not isinstance(spec, Mapping): raise TypeError(f"map_of spec must be a mapping, got {type(spec).__name__}")
    for key, validator in spec.items():
        if not callable(validator): raise TypeError(f"Validator for {key!r} is not callable")

    lookup = KeyLookup(key_lookup) if key_lookup is not None else KeyLookup()
    steps: list[Step] = [EnsureMap()]
    if required:
        steps.append(Required())
    steps.append(ValidateSpec(tuple(spec.items()), lookup))
    if default is not None:
        steps.append(PutDefault(default))
    return Validator(tuple(steps), message=message, name=f"map_of({', '.join(str(k) for k in spec)})")
