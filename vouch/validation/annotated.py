"""Pydantic v2 Integration

Use a vouch validator as a declarative constraint on a pydantic field.
The validator runs before pydantic's own type validation, so the field
receives the normalized value.

Usage:
    from typing import Annotated
    from pydantic import BaseModel
    from vouch import Vouched, integer, list_of

    class Order(BaseModel):
        quantity: Annotated[int, Vouched(integer(required=True, min=1))]
        tags: Annotated[list[str] | None, Vouched(list_of(string()))] = None

    Order(quantity=" 3 ").quantity  # 3
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from vouch.errors import Err, Ok, Result

from .errors import summarize


@dataclass(frozen=True, slots=True)
class Vouched:
    """Annotated marker running a vouch validator as a before-validator."""
    validator: Callable[[Any], Result[Any]]

    def __get_pydantic_core_schema__(self, source_type: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        return core_schema.no_info_before_validator_function(self._validate, handler(source_type))

    def _validate(self, value: Any) -> Any:
        match self.validator(value):
            case Ok(normalized):
                return normalized
            case Err(detail):
                raise ValueError(summarize(detail))
