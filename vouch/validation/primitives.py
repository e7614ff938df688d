"""Primitive Validators

Each constructor assembles a fixed pipeline:
parse/coerce -> required -> allow-list -> range/pattern -> default.

Options common to all: ``required``, ``default`` and ``message``.
Unrecognized keyword options are accepted and ignored.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable

from vouch.errors import Ok, Result, not_a_boolean

from .coercion import STRING_COERCION, ParseNumber
from .combinators import any_of
from .pipeline import Step, Validator
from .policies import (
    Matches, MaxLength, MaxValue, MinLength, MinValue, PutDefault, common_steps,
)


def _with_default(steps: list[Step], default: Any) -> tuple[Step, ...]:
    if default is not None:
        steps.append(PutDefault(default))
    return tuple(steps)


def string(
    *,
    required: bool = False,
    default: str | None = None,
    min: int | None = None,
    max: int | None = None,
    one_of: Iterable[str] | None = None,
    matches: str | re.Pattern | None = None,
    message: str | None = None,
    **_ignored: Any,
) -> Validator[str]:
    """Validates and trims strings. Numbers, booleans, UUIDs and Enum
    members are converted to their text form.

    Usage:
        string()("   some text \\n")              # Ok("some text")
        string()("")                               # Ok(None)
        string(required=True)("")                  # Err(Message("is blank"))
        string(matches=r"foo|bar")("baz")          # Err(Message("does not match"))
        string()({})                               # Err(Message("is not a string"))
    """
    steps: list[Step] = [*STRING_COERCION, *common_steps(required=required, one_of=one_of)]
    if min is not None:
        steps.append(MinLength(min))
    if max is not None:
        steps.append(MaxLength(max))
    if matches is not None:
        steps.append(Matches(matches))
    return Validator(_with_default(steps, default), message=message, name="string")


def _number(
    kind: str,
    *,
    required: bool,
    default: Any,
    min: Any,
    max: Any,
    one_of: Iterable[Any] | None,
    message: str | None,
) -> Validator[Any]:
    steps: list[Step] = [ParseNumber(kind), *common_steps(required=required, one_of=one_of)]
    if min is not None:
        steps.append(MinValue(min))
    if max is not None:
        steps.append(MaxValue(max))
    return Validator(_with_default(steps, default), message=message, name=kind)


def integer(
    *,
    required: bool = False,
    default: int | None = None,
    min: int | float | None = None,
    max: int | float | None = None,
    one_of: Iterable[int] | None = None,
    message: str | None = None,
    **_ignored: Any,
) -> Validator[int]:
    """Validates and parses integers.

    Usage:
        integer()("1")                             # Ok(1)
        integer()("1a")                            # Err(Message("is not a number"))
        integer(max=2)(4)                          # Err(Message("is greater than 2"))
    """
    return _number("integer", required=required, default=default, min=min, max=max,
        one_of=one_of, message=message)


def float_(
    *,
    required: bool = False,
    default: float | None = None,
    min: int | float | None = None,
    max: int | float | None = None,
    message: str | None = None,
    **_ignored: Any,
) -> Validator[float]:
    """Validates and parses floats. Exported publicly as ``float``.

    Usage:
        float_()("1")                              # Ok(1.0)
        float_()("1a")                             # Err(Message("is not a number"))
    """
    return _number("float", required=required, default=default, min=min, max=max,
        one_of=None, message=message)


# ============================================================================
# Boolean
# ============================================================================

_BOOLEAN_LITERALS = any_of([integer(one_of=[0, 1]), string(one_of=["true", "false"])])


@dataclass(frozen=True, slots=True)
class ParseBoolean(Step):
    """Accept true/false, 1/0 and "true"/"false" (and "1"/"0")."""

    def apply(self, value: Any) -> Result[Any]:
        if isinstance(value, bool): return Ok(value)
        match _BOOLEAN_LITERALS(value):
            case Ok(None):
                return Ok(None)
            case Ok(literal):
                return Ok(literal in (1, "true"))
            case _:
                return not_a_boolean()


def boolean(
    *,
    required: bool = False,
    default: bool | None = None,
    message: str | None = None,
    **_ignored: Any,
) -> Validator[bool]:
    """Validates and parses booleans.

    Only ``required``, ``default`` and ``message`` apply; allow-list and
    range options are not offered for booleans.

    Usage:
        boolean()("1")                             # Ok(True)
        boolean()("false")                         # Ok(False)
        boolean()("yes")                           # Err(Message("is not a boolean"))
    """
    steps: list[Step] = [ParseBoolean(), *common_steps(required=required)]
    return Validator(_with_default(steps, default), message=message, name="boolean")
