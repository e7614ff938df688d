"""Tests for list_of and map_of."""

from enum import Enum

import pytest
from structlog.testing import capture_logs

from vouch import (
    Err, ErrorCode, Message, Nested, Ok, boolean, error_from, integer, list_of, map_of, string,
)
from vouch.validation import textual_key


class Field(Enum):
    NAME = "name"


class TestListOf:
    """Element validation, filtering and length bounds."""

    def test_validates_every_element(self):
        assert list_of(integer())([1, "2", 3]) == Ok([1, 2, 3])

    def test_reports_only_failing_indices(self):
        result = list_of(integer(min=5, max=15))([3, 4, 7, 8, 10, 13, 17])
        assert result == Err(error_from({0: "is less than 5", 1: "is less than 5", 6: "is greater than 15"}))
        assert set(result.error.errors) == {0, 1, 6}

    def test_drops_absent_elements(self):
        assert list_of(integer())([1, 2, None, 3]) == Ok([1, 2, 3])
        assert list_of(string())(["a", " ", "", "b"]) == Ok(["a", "b"])

    def test_keeps_falsy_values(self):
        assert list_of(integer())([0, 1]) == Ok([0, 1])
        assert list_of(boolean())([False, "0"]) == Ok([False, False])

    def test_accepts_tuples_and_returns_list(self):
        assert list_of(integer())(("1", 2)) == Ok([1, 2])

    def test_empty_list(self):
        assert list_of(integer())([]) == Ok([])

    @pytest.mark.parametrize("value", ["", "abc", {}, 5, {1, 2}])
    def test_rejects_non_lists(self, value):
        result = list_of(integer())(value)
        assert result == Err(Message("is not a list"))
        assert result.error.code is ErrorCode.INVALID_TYPE

    def test_absent_and_required(self):
        assert list_of(integer())(None) == Ok(None)
        assert list_of(integer(), required=True)(None) == Err(Message("is blank"))
        assert list_of(integer(), required=True)([]) == Ok([])

    def test_min_checks_filtered_length(self):
        v = list_of(integer(), min=2)
        assert v([1, None]) == Err(Message("is smaller than 2 elements"))
        assert v([1, 2]) == Ok([1, 2])

    def test_max(self):
        assert list_of(integer(), max=1)([1, 2]) == Err(Message("is longer than 1 elements"))
        assert list_of(integer(), max=1)([1, None]) == Ok([1])

    def test_length_not_checked_when_elements_fail(self):
        assert list_of(integer(min=5), min=3)([1]) == Err(error_from({0: "is less than 5"}))

    def test_default(self):
        assert list_of(integer(), default=[0])(None) == Ok([0])

    def test_message_overrides_own_failures_only(self):
        v = list_of(integer(min=5), min=2, message="bad list")
        assert v("x") == Err(Message("bad list"))
        assert v([7]) == Err(Message("bad list"))
        assert v([1, 7]) == Err(error_from({0: "is less than 5"}))


class TestMapOf:
    """Spec validation, key lookup and error aggregation."""

    @pytest.fixture
    def validator(self):
        return map_of({"name": string(required=True), "age": integer(min=1)})

    def test_parses_fields(self, validator):
        assert validator({"name": "Jhon", "age": "2"}) == Ok({"name": "Jhon", "age": 2})

    def test_missing_fields_appear_in_output(self, validator):
        assert validator({"name": "Jhon", "foo": "Bar"}) == Ok({"name": "Jhon", "age": None})

    def test_collects_every_failing_field(self, validator):
        result = validator({"age": 0})
        assert result == Err(error_from({"name": "is blank", "age": "is less than 1"}))

    def test_reports_only_failing_keys(self, validator):
        assert validator({"name": "Jhon", "age": "a"}) == Err(error_from({"age": "is not a number"}))

    def test_error_keys_follow_spec_order(self, validator):
        assert list(validator({"age": "x"}).error.errors) == ["name", "age"]

    def test_output_follows_spec_order(self, validator):
        assert list(validator({"age": 3, "name": "A"}).value) == ["name", "age"]

    def test_ignores_undeclared_keys(self):
        assert map_of({})({"anything": 1}) == Ok({})

    @pytest.mark.parametrize("value", ["", [], 1, "a=b"])
    def test_rejects_non_maps(self, validator, value):
        assert validator(value) == Err(Message("is not a map"))

    def test_absent_and_required(self, validator):
        assert validator(None) == Ok(None)
        assert map_of({}, required=True)(None) == Err(Message("is blank"))

    def test_default(self):
        assert map_of({"a": integer()}, default={"a": 1})(None) == Ok({"a": 1})

    def test_field_defaults_fill_missing_keys(self):
        v = map_of({"limit": integer(default=10), "query": string()})
        assert v({}) == Ok({"limit": 10, "query": None})

    def test_message_overrides_own_failures_only(self):
        v = map_of({"name": string(required=True)}, required=True, message="bad person")
        assert v(None) == Err(Message("bad person"))
        assert v("x") == Err(Message("bad person"))
        assert v({}) == Err(error_from({"name": "is blank"}))

    def test_nested_errors(self, person):
        data = [
            {
                "name": "Jhon",
                "age": "aa",
                "addresses": [
                    {"city": "New York", "state": "NY"},
                    {"city": "Los Angeles", "state": "LA"},
                ],
            },
            {
                "name": "Alex",
                "addresses": [
                    {"city": "Chicago", "states": "IL"},
                    {"city": "San Francisco", "state": "CA"},
                ],
            },
        ]
        result = list_of(person)(data)
        assert result.unwrap_err().to_data() == {
            0: {"age": "is not a number"},
            1: {"addresses": {0: {"state": "is blank"}}},
        }

    def test_nested_success(self, person):
        result = person({"name": " Ann ", "age": "30", "addresses": [{"city": "Rome", "state": "RM"}, None]})
        assert result == Ok({"name": "Ann", "age": 30, "addresses": [{"city": "Rome", "state": "RM"}]})

    def test_spec_must_be_mapping(self):
        with pytest.raises(TypeError):
            map_of([("a", integer())])

    def test_spec_values_must_be_callable(self):
        with pytest.raises(TypeError):
            map_of({"a": "integer"})

    def test_inner_validator_must_be_callable(self):
        with pytest.raises(TypeError):
            list_of("integer")


class TestKeyLookup:
    """Either of two representations of a field name is accepted."""

    def test_enum_key_falls_back_to_text(self):
        v = map_of({Field.NAME: string()})
        assert v({"name": "Ann"}) == Ok({Field.NAME: "Ann"})
        assert v({Field.NAME: "Bob"}) == Ok({Field.NAME: "Bob"})

    def test_spec_key_takes_precedence(self):
        v = map_of({Field.NAME: string()})
        assert v({Field.NAME: "Bob", "name": "Ann"}) == Ok({Field.NAME: "Bob"})

    def test_int_key_falls_back_to_text(self):
        assert map_of({1: integer()})({"1": "5"}) == Ok({1: 5})

    def test_bool_key_uses_lowercase_text(self):
        assert textual_key(True) == "true"
        assert map_of({True: integer()})({"true": "1"}) == Ok({True: 1})

    def test_textual_key_forms(self):
        assert textual_key("name") == "name"
        assert textual_key(Field.NAME) == "name"
        assert textual_key(2) == "2"
        assert textual_key((1, 2)) == "(1, 2)"

    def test_lookup_is_by_presence(self):
        v = map_of({Field.NAME: boolean()})
        assert v({Field.NAME: False, "name": True}) == Ok({Field.NAME: False})

    def test_custom_alias(self):
        v = map_of({"first_name": string()}, key_lookup=lambda key: key.replace("_", "-"))
        assert v({"first-name": "Ann"}) == Ok({"first_name": "Ann"})

    def test_errors_use_spec_key(self):
        v = map_of({Field.NAME: string(required=True)})
        assert v({"name": ""}) == Err(Nested({Field.NAME: Message("is blank")}))


class TestDepthGuard:
    """Structural recursion is bounded per invocation."""

    def test_within_limit(self, max_depth):
        max_depth(3)
        assert list_of(list_of(list_of(integer())))([[[1]]]) == Ok([[[1]]])

    def test_beyond_limit(self, max_depth):
        max_depth(2)
        result = list_of(list_of(list_of(integer())))([[[1]]])
        assert result == Err(error_from({0: {0: "is nested too deeply"}}))
        assert result.error[0][0].code is ErrorCode.TOO_DEEP

    def test_depth_resets_between_invocations(self, max_depth):
        max_depth(2)
        v = list_of(list_of(integer()))
        assert v([[1]]) == Ok([[1]])
        assert v([[2]]) == Ok([[2]])

    def test_siblings_share_depth(self, max_depth):
        max_depth(2)
        v = map_of({"a": list_of(integer()), "b": list_of(integer())})
        assert v({"a": [1], "b": [2]}) == Ok({"a": [1], "b": [2]})

    def test_logs_warning(self, max_depth, fresh_logging):
        max_depth(1)
        with capture_logs() as logs:
            list_of(list_of(integer()))([[1]])
        assert [e["event"] for e in logs] == ["max_depth_exceeded"]
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["depth"] == 2
