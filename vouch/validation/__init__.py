"""Composable Validation and Normalization

Validators are immutable callables built from primitive constructors
(string, integer, float_, boolean) and structural combinators (list_of,
map_of, compose, any_of). Each returns ``Ok(normalized)`` or
``Err(detail)``; structural validators collect every nested failure
without short-circuiting siblings.
"""

from .pipeline import Step, Validator, run_steps, describe

from .policies import (
    Required,
    PutDefault,
    OneOf,
    Matches,
    MinLength,
    MaxLength,
    MinValue,
    MaxValue,
    MinItems,
    MaxItems,
)

from .coercion import (
    ParseString,
    TrimString,
    ParseNumber,
    EnsureList,
    EnsureMap,
    stringify,
)

from .primitives import string, integer, float_, boolean, ParseBoolean
from .structural import list_of, map_of, KeyLookup, textual_key, ValidateElements, ValidateSpec
from .combinators import compose, any_of, CheckAnyOf
from .errors import ValidationError, ValidationErrorDetail, validate_or_raise, raise_result, summarize
from .annotated import Vouched

__all__ = [
    # Pipeline
    "Step",
    "Validator",
    "run_steps",
    "describe",
    # Policies
    "Required",
    "PutDefault",
    "OneOf",
    "Matches",
    "MinLength",
    "MaxLength",
    "MinValue",
    "MaxValue",
    "MinItems",
    "MaxItems",
    # Coercion
    "ParseString",
    "TrimString",
    "ParseNumber",
    "ParseBoolean",
    "EnsureList",
    "EnsureMap",
    "stringify",
    # Constructors
    "string",
    "integer",
    "float_",
    "boolean",
    "list_of",
    "map_of",
    "compose",
    "any_of",
    # Structural helpers
    "KeyLookup",
    "textual_key",
    "ValidateElements",
    "ValidateSpec",
    "CheckAnyOf",
    # Raising boundary
    "ValidationError",
    "ValidationErrorDetail",
    "validate_or_raise",
    "raise_result",
    "summarize",
    # Pydantic integration
    "Vouched",
]
