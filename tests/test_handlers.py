"""Tests for the built-in type handlers and the handler registry."""

from datetime import date, datetime

import pytest

from docprop import (
    BaseTypeHandler,
    Computed,
    ConfigurationError,
    ErrorCode,
    HandlerRegistry,
    NotFoundError,
    OperationError,
    PropertyValidationError,
    TypeHandler,
)
from docprop.handlers import (
    BUILTIN_HANDLERS,
    BooleanHandler,
    DateHandler,
    DictHandler,
    IntegerHandler,
    ListHandler,
    NumberHandler,
    StringHandler,
)


def run(handler, make_context, schema, value):
    return handler.validate(make_context(schema, value=value))


def rejection_code(handler, make_context, schema, value):
    with pytest.raises(PropertyValidationError) as exc_info:
        run(handler, make_context, schema, value)
    return exc_info.value.error.code


class TestStringHandler:
    def test_accepts_strings(self, make_context):
        assert run(StringHandler(), make_context, {"type": "string"}, "abc") == "abc"

    def test_converts_numbers(self, make_context):
        assert run(StringHandler(), make_context, {"type": "string"}, 12) == "12"

    def test_rejects_other_types(self, make_context):
        assert rejection_code(StringHandler(), make_context, {"type": "string"}, ["a"]) == "INVALID_VALUE"
        assert rejection_code(StringHandler(), make_context, {"type": "string"}, True) == "INVALID_VALUE"

    def test_size_bounds(self, make_context):
        schema = {"type": "string", "min_size": 2, "max_size": 4}
        handler = StringHandler()

        assert run(handler, make_context, schema, "abc") == "abc"
        assert rejection_code(handler, make_context, schema, "a") == ErrorCode.MIN_SIZE.value
        assert rejection_code(handler, make_context, schema, "abcde") == ErrorCode.MAX_SIZE.value

    def test_computed_bound(self, make_context):
        schema = {"type": "string", "max_size": Computed(lambda ctx: ctx.doc["limit"])}
        context = make_context(schema, value="abcd", doc={"limit": 3, "field": "abcd"})

        with pytest.raises(PropertyValidationError) as exc_info:
            StringHandler().validate(context)
        assert exc_info.value.error.code == ErrorCode.MAX_SIZE.value

    def test_empty_passes_through(self, make_context):
        assert run(StringHandler(), make_context, {"type": "string", "min_size": 3}, "") == ""


class TestNumberHandlers:
    def test_number_parsing(self, make_context):
        handler = NumberHandler()
        schema = {"type": "number"}

        assert run(handler, make_context, schema, "12") == 12
        assert run(handler, make_context, schema, " 1.5 ") == 1.5
        assert run(handler, make_context, schema, 3) == 3

    def test_number_rejects(self, make_context):
        handler = NumberHandler()
        schema = {"type": "number"}

        assert rejection_code(handler, make_context, schema, "twelve") == "INVALID_VALUE"
        assert rejection_code(handler, make_context, schema, True) == "INVALID_VALUE"
        assert rejection_code(handler, make_context, schema, float("nan")) == "INVALID_VALUE"

    def test_value_bounds(self, make_context):
        handler = NumberHandler()
        schema = {"type": "number", "min_value": 0, "max_value": 100}

        assert run(handler, make_context, schema, 0) == 0
        assert run(handler, make_context, schema, 100) == 100
        assert rejection_code(handler, make_context, schema, -1) == ErrorCode.MIN_VALUE.value
        assert rejection_code(handler, make_context, schema, "101") == ErrorCode.MAX_VALUE.value

    def test_integer(self, make_context):
        handler = IntegerHandler()
        schema = {"type": "integer"}

        assert run(handler, make_context, schema, "42") == 42
        assert run(handler, make_context, schema, 4.0) == 4
        assert isinstance(run(handler, make_context, schema, 4.0), int)
        assert rejection_code(handler, make_context, schema, 4.5) == "INVALID_VALUE"
        assert rejection_code(handler, make_context, schema, "4.5") == "INVALID_VALUE"
        assert rejection_code(handler, make_context, schema, float("inf")) == "INVALID_VALUE"


class TestBooleanHandler:
    @pytest.mark.parametrize("value", [True, "true", "Yes", "on", "1", 1])
    def test_true_values(self, make_context, value):
        assert run(BooleanHandler(), make_context, {"type": "boolean"}, value) is True

    @pytest.mark.parametrize("value", [False, "false", "No", "off", "0", 0])
    def test_false_values(self, make_context, value):
        assert run(BooleanHandler(), make_context, {"type": "boolean"}, value) is False

    def test_rejects(self, make_context):
        assert rejection_code(BooleanHandler(), make_context, {"type": "boolean"}, "maybe") == "INVALID_VALUE"
        assert rejection_code(BooleanHandler(), make_context, {"type": "boolean"}, 2) == "INVALID_VALUE"


class TestDateHandler:
    def test_parses_strings(self, make_context):
        handler = DateHandler()
        schema = {"type": "date"}

        assert run(handler, make_context, schema, "2024-03-01") == datetime(2024, 3, 1)
        assert run(handler, make_context, schema, "2024-03-01T10:30:00") == datetime(2024, 3, 1, 10, 30)

    def test_accepts_date_objects(self, make_context):
        assert run(DateHandler(), make_context, {"type": "date"}, date(2024, 1, 2)) == datetime(2024, 1, 2)

    def test_rejects_garbage(self, make_context):
        assert rejection_code(DateHandler(), make_context, {"type": "date"}, "not a date") == "INVALID_VALUE"

    def test_bounds_given_as_strings(self, make_context):
        schema = {"type": "date", "min_value": "2024-01-01", "max_value": "2024-12-31"}
        handler = DateHandler()

        assert run(handler, make_context, schema, "2024-06-15") == datetime(2024, 6, 15)
        assert rejection_code(handler, make_context, schema, "2023-12-31") == ErrorCode.MIN_VALUE.value
        assert rejection_code(handler, make_context, schema, "2025-01-01") == ErrorCode.MAX_VALUE.value

    def test_offset_values_compare_with_naive_bounds(self, make_context):
        """Datetimes with an offset are normalized to naive UTC."""
        handler = DateHandler()
        schema = {"type": "date", "max_value": "2030-01-01"}

        assert run(handler, make_context, schema, "2024-01-01T10:00:00+02:00") == datetime(2024, 1, 1, 8, 0)
        assert rejection_code(handler, make_context, schema, "2031-01-01T00:00:00+05:00") == ErrorCode.MAX_VALUE.value

    def test_offset_bound_compares_with_naive_value(self, make_context):
        schema = {"type": "date", "min_value": "2024-01-01T00:00:00Z"}

        assert run(DateHandler(), make_context, schema, "2024-01-01 00:00:00") == datetime(2024, 1, 1)
        assert rejection_code(DateHandler(), make_context, schema, "2023-12-31") == ErrorCode.MIN_VALUE.value

    def test_unreadable_bound_is_a_configuration_error(self, make_context):
        schema = {"type": "date", "max_value": "soon"}

        with pytest.raises(ConfigurationError):
            DateHandler().validate(make_context(schema, value="2024-01-01"))


class TestCollectionHandlers:
    def test_list(self, make_context):
        handler = ListHandler()
        schema = {"type": "list", "max_size": 2}

        assert run(handler, make_context, schema, (1, 2)) == [1, 2]
        assert run(handler, make_context, schema, "[1]") == [1]
        assert rejection_code(handler, make_context, schema, [1, 2, 3]) == ErrorCode.MAX_SIZE.value
        assert rejection_code(handler, make_context, schema, "x") == "INVALID_VALUE"

    def test_dict(self, make_context):
        handler = DictHandler()
        schema = {"type": "dict", "min_size": 1}

        assert run(handler, make_context, schema, {"a": 1}) == {"a": 1}
        assert run(handler, make_context, schema, '{"a": 1}') == {"a": 1}
        assert rejection_code(handler, make_context, schema, "[1]") == "INVALID_VALUE"


class TestHandlerProtocol:
    def test_builtins_follow_protocol(self):
        for handler_cls in BUILTIN_HANDLERS.values():
            assert isinstance(handler_cls(), TypeHandler)

    def test_subclass_handler(self, make_context):
        class UpperHandler(BaseTypeHandler):
            sized = True

            def coerce(self, value, context):
                if not isinstance(value, str):
                    self.reject(context.error.invalid_value)
                return value.upper()

        schema = {"type": "upper", "max_size": 3}
        assert run(UpperHandler(), make_context, schema, "abc") == "ABC"
        assert rejection_code(UpperHandler(), make_context, schema, "abcd") == ErrorCode.MAX_SIZE.value


class TestHandlerRegistry:
    def test_with_builtins(self):
        registry = HandlerRegistry.with_builtins()

        assert set(registry.list_keys()) == set(BUILTIN_HANDLERS)
        assert isinstance(registry.get("string"), StringHandler)
        assert "number" in registry
        assert len(registry) == len(BUILTIN_HANDLERS)

    def test_register_duplicate_raises_error(self):
        registry = HandlerRegistry()
        registry.register("text", StringHandler())

        with pytest.raises(OperationError) as exc_info:
            registry.register("text", StringHandler())

        assert "already registered" in str(exc_info.value)

    def test_register_with_overwrite(self):
        registry = HandlerRegistry()
        first, second = StringHandler(), StringHandler()
        registry.register("text", first)
        registry.register("text", second, allow_overwrite=True)

        assert registry.get("text") is second

    def test_lookup_missing(self):
        registry = HandlerRegistry()

        assert registry.get_optional("text") is None
        assert not registry.has("text")
        with pytest.raises(NotFoundError):
            registry.get("text")
        with pytest.raises(NotFoundError):
            registry.unregister("text")

    def test_unregister_and_clear(self):
        registry = HandlerRegistry.with_builtins()
        handler = registry.unregister("string")

        assert isinstance(handler, StringHandler)
        assert not registry.has("string")

        registry.clear()
        assert registry.count() == 0
