"""Result and Error Types

Every validator returns a Result: ``Ok(value)`` on success or
``Err(detail)`` on failure, where detail is one of the three shapes of
ErrorDetail (Message, Alternatives, Nested).

Usage:
    from vouch.errors import Ok, Err, Message

    match validator(data):
        case Ok(value):
            save(value)
        case Err(detail):
            respond(422, detail.to_data())
"""
from .types import (
    # Core types
    Result,
    Ok,
    Err,
    ErrorCode,
    # Error details
    ErrorDetail,
    Message,
    Alternatives,
    Nested,
    # Constructors
    ok,
    err,
    error_from,
    flatten,
)

from .builders import (
    not_a,
    not_a_string,
    not_a_number,
    not_a_boolean,
    not_a_list,
    not_a_map,
    blank,
    not_allowed,
    does_not_match,
    too_short,
    too_long,
    less_than,
    greater_than,
    too_few_items,
    too_many_items,
    too_deep,
    custom,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "ErrorCode",
    "ErrorDetail",
    "Message",
    "Alternatives",
    "Nested",
    "ok",
    "err",
    "error_from",
    "flatten",
    "not_a",
    "not_a_string",
    "not_a_number",
    "not_a_boolean",
    "not_a_list",
    "not_a_map",
    "blank",
    "not_allowed",
    "does_not_match",
    "too_short",
    "too_long",
    "less_than",
    "greater_than",
    "too_few_items",
    "too_many_items",
    "too_deep",
    "custom",
]
