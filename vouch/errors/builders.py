"""Validation Error Builders

Ergonomic constructors for the standard failure messages. Each builder
returns an Err wrapping a Message with the matching ErrorCode, so steps
can ``return blank()`` directly.
"""
from __future__ import annotations

from typing import Any

from .types import Err, ErrorCode, Message


# =============================================================================
# Type coercion
# =============================================================================

def not_a(kind: str) -> Err:
    """Input could not be interpreted as ``kind`` ("string", "number", ...)."""
    return Err(Message(f"is not a {kind}", ErrorCode.INVALID_TYPE))


def not_a_string() -> Err: return not_a("string")


def not_a_number() -> Err: return not_a("number")


def not_a_boolean() -> Err: return not_a("boolean")


def not_a_list() -> Err: return not_a("list")


def not_a_map() -> Err: return not_a("map")


# =============================================================================
# Presence and allow-list
# =============================================================================

def blank() -> Err:
    return Err(Message("is blank", ErrorCode.REQUIRED))


def not_allowed() -> Err:
    return Err(Message("is not allowed", ErrorCode.NOT_ALLOWED))


def does_not_match() -> Err:
    return Err(Message("does not match", ErrorCode.INVALID_FORMAT))


# =============================================================================
# Ranges
# =============================================================================

def too_short(min_length: int) -> Err:
    return Err(Message(f"is less than {min_length} chars long", ErrorCode.OUT_OF_RANGE))


def too_long(max_length: int) -> Err:
    return Err(Message(f"is more than {max_length} chars long", ErrorCode.OUT_OF_RANGE))


def less_than(minimum: Any) -> Err:
    return Err(Message(f"is less than {minimum}", ErrorCode.OUT_OF_RANGE))


def greater_than(maximum: Any) -> Err:
    return Err(Message(f"is greater than {maximum}", ErrorCode.OUT_OF_RANGE))


def too_few_items(min_items: int) -> Err:
    return Err(Message(f"is smaller than {min_items} elements", ErrorCode.OUT_OF_RANGE))


def too_many_items(max_items: int) -> Err:
    return Err(Message(f"is longer than {max_items} elements", ErrorCode.OUT_OF_RANGE))


# =============================================================================
# Structure
# =============================================================================

def too_deep() -> Err:
    return Err(Message("is nested too deeply", ErrorCode.TOO_DEEP))


def custom(message: str) -> Err:
    """Failure carrying a caller-supplied override message."""
    return Err(Message(message, ErrorCode.CUSTOM))
