"""vouch: composable data validation and normalization.

Helpers for validating and normalizing loosely-typed Python data.

The validation works as simple composable functions, allowing simple validations...

    >>> validator = integer(max=2)
    >>> validator(2)
    Ok(value=2)
    >>> validator(4)
    Err(error=Message(text='is greater than 2'))

...data casting...

    >>> validator = map_of({"name": string(required=True), "age": integer(min=1)})
    >>> validator({"name": "Jhon", "age": "26"})
    Ok(value={'name': 'Jhon', 'age': 26})

...and nested error reporting:

    >>> people = list_of(map_of({"name": string(required=True), "age": integer(min=1)}))
    >>> people([{"name": "Jhon", "age": "aa"}, {"age": 3}]).unwrap_err().to_data()
    {0: {'age': 'is not a number'}, 1: {'name': 'is blank'}}

Global options shared by all validators: ``required`` (absent input is an
error), ``default`` (value used when input is absent) and ``message``
(replaces the validator's own error text).
"""
from vouch.errors import (
    Result,
    Ok,
    Err,
    ErrorCode,
    ErrorDetail,
    Message,
    Alternatives,
    Nested,
    error_from,
    flatten,
)
from vouch.validation import (
    Validator,
    string,
    integer,
    float_,
    boolean,
    list_of,
    map_of,
    compose,
    any_of,
    KeyLookup,
    ValidationError,
    validate_or_raise,
    raise_result,
    Vouched,
)
from vouch.validation import float_ as float  # noqa: A001
from vouch.config import settings, get_settings
from vouch.logging import configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    "Result",
    "Ok",
    "Err",
    "ErrorCode",
    "ErrorDetail",
    "Message",
    "Alternatives",
    "Nested",
    "error_from",
    "flatten",
    "Validator",
    "string",
    "integer",
    "float",
    "float_",
    "boolean",
    "list_of",
    "map_of",
    "compose",
    "any_of",
    "KeyLookup",
    "ValidationError",
    "validate_or_raise",
    "raise_result",
    "Vouched",
    "settings",
    "get_settings",
    "configure_logging",
    "get_logger",
]
