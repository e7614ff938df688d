"""Coercion Steps

Parse loosely-typed input into the target primitive before any policy
runs. Coercion never fails on absence: None passes through so Required
and PutDefault can decide what absence means.

Rules:
- Strings: text passes; bytes decode as UTF-8; numbers, booleans, UUIDs
  and Enum members stringify; anything else "is not a string"
- Blank strings (empty or whitespace-only after trimming) become None
- Numbers: finite int/float/Decimal pass unchanged (bool, NaN and the
  infinities are not numbers);
  text is trimmed then parsed strictly, with no trailing characters
"""
from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Literal
from uuid import UUID

from vouch.errors import Ok, Result, not_a_list, not_a_map, not_a_number, not_a_string

from .pipeline import Step, run_steps

NUMERIC_TYPES = (int, float, Decimal)
TEXT_TYPES = (str, bytes)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_FLOAT = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")


def is_number(value: Any) -> bool:
    return isinstance(value, NUMERIC_TYPES) and not isinstance(value, bool)


def is_finite(value: Any) -> bool:
    if isinstance(value, int): return True
    if isinstance(value, Decimal): return value.is_finite()
    return math.isfinite(value)


def stringify(value: Any) -> str | None:
    """Text form of a value, or None if the type has no text form."""
    match value:
        case str():
            return value
        case bytes():
            try: return value.decode("utf-8")
            except UnicodeDecodeError: return None
        case bool():
            return "true" if value else "false"
        case Enum():
            return stringify(value.value)
        case int() | float() | Decimal() | UUID():
            try: return str(value)
            except ValueError: return None  # int beyond sys.get_int_max_str_digits()
    return None


# ============================================================================
# String coercion
# ============================================================================

@dataclass(frozen=True, slots=True)
class ParseString(Step):

    def apply(self, value: Any) -> Result[Any]:
        if value is None: return Ok(None)
        if (text := stringify(value)) is None: return not_a_string()
        return Ok(text)


@dataclass(frozen=True, slots=True)
class TrimString(Step):
    """Strip surrounding whitespace; blank text normalizes to absence."""

    def apply(self, value: Any) -> Result[Any]:
        if value is None: return Ok(None)
        return Ok(value.strip() or None)


STRING_COERCION: tuple[Step, ...] = (ParseString(), TrimString())


# ============================================================================
# Number coercion
# ============================================================================

@dataclass(frozen=True, slots=True)
class ParseNumber(Step):
    """Pass numbers through; parse text with the integer or float grammar."""
    kind: Literal["integer", "float"] = "integer"

    @property
    def constraint_name(self) -> str:
        return f"parse_{self.kind}"

    def apply(self, value: Any) -> Result[Any]:
        if value is None: return Ok(None)
        if is_number(value): return Ok(value) if is_finite(value) else not_a_number()
        if not isinstance(value, TEXT_TYPES): return not_a_number()

        match run_steps(value, STRING_COERCION):
            case Ok(None):
                return Ok(None)
            case Ok(text):
                return self._parse(text)
            case _:
                return not_a_number()

    def _parse(self, text: str) -> Result[Any]:
        grammar, convert = (_INTEGER, int) if self.kind == "integer" else (_FLOAT, float)
        if not grammar.fullmatch(text): return not_a_number()
        try: number = convert(text)
        except ValueError: return not_a_number()
        return Ok(number) if is_finite(number) else not_a_number()


# ============================================================================
# Container checks
# ============================================================================

@dataclass(frozen=True, slots=True)
class EnsureList(Step):

    def apply(self, value: Any) -> Result[Any]:
        if value is None or isinstance(value, (list, tuple)): return Ok(value)
        return not_a_list()


@dataclass(frozen=True, slots=True)
class EnsureMap(Step):

    def apply(self, value: Any) -> Result[Any]:
        if value is None or isinstance(value, Mapping): return Ok(value)
        return not_a_map()
