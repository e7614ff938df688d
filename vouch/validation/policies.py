"""Shared Validation Policies

Small reusable steps used by every validator: required, default,
allow-list, pattern and the inclusive range checks. Every step lets an
absent value (None) through untouched; absence is handled solely by
Required and PutDefault.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable

from vouch.errors import (
    Ok, Result, blank, does_not_match, greater_than, less_than, not_allowed,
    too_few_items, too_long, too_many_items, too_short,
)

from .coercion import is_number
from .pipeline import Step


# ============================================================================
# Presence
# ============================================================================

@dataclass(frozen=True, slots=True)
class Required(Step):
    """Absent value is an error."""

    @property
    def constraint_name(self) -> str:
        return "required"

    def apply(self, value: Any) -> Result[Any]:
        return blank() if value is None else Ok(value)


@dataclass(frozen=True, slots=True)
class PutDefault(Step):
    """Substitute a default for an absent value."""
    default: Any

    @property
    def constraint_name(self) -> str:
        return f"default[{self.default!r}]"

    def apply(self, value: Any) -> Result[Any]:
        return Ok(self.default if value is None else value)


# ============================================================================
# Allow-list and pattern
# ============================================================================

def _same(value: Any, option: Any) -> bool:
    """Equality that keeps 1, 1.0 and Decimal("1") apart."""
    if value != option: return False
    return type(value) is type(option) or not (is_number(value) or is_number(option))


@dataclass(frozen=True, slots=True)
class OneOf(Step):
    """Value must be contained in the allow-list."""
    options: tuple[Any, ...]

    def __init__(self, options: Iterable[Any]):
        object.__setattr__(self, "options", tuple(options))

    @property
    def constraint_name(self) -> str:
        return f"one_of[{', '.join(map(repr, self.options[:5]))}{'...' if len(self.options) > 5 else ''}]"

    def apply(self, value: Any) -> Result[Any]:
        if value is None or any(_same(value, o) for o in self.options): return Ok(value)
        return not_allowed()


@dataclass(frozen=True, slots=True)
class Matches(Step):
    """String must contain a match for the pattern."""
    pattern: re.Pattern

    def __init__(self, pattern: str | re.Pattern):
        object.__setattr__(self, "pattern", pattern if isinstance(pattern, re.Pattern) else re.compile(pattern))

    @property
    def constraint_name(self) -> str:
        return f"matches[{self.pattern.pattern}]"

    def apply(self, value: Any) -> Result[Any]:
        if value is None or self.pattern.search(value): return Ok(value)
        return does_not_match()


# ============================================================================
# Ranges (all bounds inclusive)
# ============================================================================

@dataclass(frozen=True, slots=True)
class MinLength(Step):
    """String has at least ``limit`` code points."""
    limit: int

    def apply(self, value: Any) -> Result[Any]:
        if value is None or len(value) >= self.limit: return Ok(value)
        return too_short(self.limit)


@dataclass(frozen=True, slots=True)
class MaxLength(Step):
    """String has at most ``limit`` code points."""
    limit: int

    def apply(self, value: Any) -> Result[Any]:
        if value is None or len(value) <= self.limit: return Ok(value)
        return too_long(self.limit)


@dataclass(frozen=True, slots=True)
class MinValue(Step):
    limit: Any

    def apply(self, value: Any) -> Result[Any]:
        if value is None or value >= self.limit: return Ok(value)
        return less_than(self.limit)


@dataclass(frozen=True, slots=True)
class MaxValue(Step):
    limit: Any

    def apply(self, value: Any) -> Result[Any]:
        if value is None or value <= self.limit: return Ok(value)
        return greater_than(self.limit)


@dataclass(frozen=True, slots=True)
class MinItems(Step):
    """List has at least ``limit`` elements."""
    limit: int

    def apply(self, value: Any) -> Result[Any]:
        if value is None or len(value) >= self.limit: return Ok(value)
        return too_few_items(self.limit)


@dataclass(frozen=True, slots=True)
class MaxItems(Step):
    """List has at most ``limit`` elements."""
    limit: int

    def apply(self, value: Any) -> Result[Any]:
        if value is None or len(value) <= self.limit: return Ok(value)
        return too_many_items(self.limit)


def common_steps(
    *,
    required: bool = False,
    one_of: Iterable[Any] | None = None,
) -> list[Step]:
    """Required and allow-list steps, in pipeline order, for the given options."""
    steps: list[Step] = []
    if required:
        steps.append(Required())
    if one_of is not None:
        steps.append(OneOf(one_of))
    return steps
