"""Tests for the custom validator and converter chains."""

import asyncio

import pytest

from docprop import ConverterChain, OperationError, PropertyError, ValidatorChain


class TestValidatorChain:
    def test_empty_chain_passes(self, make_context):
        assert ValidatorChain().run(make_context({"type": "string"}, value="x")) is None

    def test_first_failure_wins(self, make_context):
        calls = []

        def first(ctx):
            calls.append("first")
            return ctx.error.as_code("FIRST")

        def second(ctx):
            calls.append("second")
            return ctx.error.as_code("SECOND")

        error = ValidatorChain([first, second]).run(make_context({"type": "string"}, value="x"))

        assert error.code == "FIRST"
        assert calls == ["first"]

    def test_boolean_results(self, make_context):
        context = make_context({"type": "string"}, value="x", property="name")

        assert ValidatorChain([lambda ctx: True]).run(context) is None
        error = ValidatorChain([lambda ctx: False]).run(context)
        assert error == PropertyError("name", "INVALID_VALUE", "Invalid value")

    def test_unsupported_result_raises(self, make_context):
        with pytest.raises(OperationError):
            ValidatorChain([lambda ctx: "nope"]).run(make_context({"type": "string"}, value="x"))

    def test_for_context_uses_schema(self, make_context):
        context = make_context({"type": "string", "validators": [lambda ctx: False]}, value="x")

        assert ValidatorChain.for_context(context).run(context).code == "INVALID_VALUE"


class TestConverterChain:
    @pytest.mark.asyncio
    async def test_empty_chain_keeps_value(self, make_context):
        context = make_context({"type": "string"}, value="x")

        assert await ConverterChain().run(context) == "x"

    @pytest.mark.asyncio
    async def test_converters_are_chained(self, make_context):
        async def exclaim(ctx):
            await asyncio.sleep(0)
            return ctx.value + "!"

        context = make_context({"type": "string"}, value=" hi ")
        chain = ConverterChain([lambda ctx: ctx.value.strip(), exclaim, lambda ctx: ctx.value.upper()])

        assert await chain.run(context) == "HI!"

    @pytest.mark.asyncio
    async def test_before_and_after_read_schema(self, make_context):
        context = make_context(
            {
                "type": "string",
                "before": [lambda ctx: ctx.value + "-before"],
                "after": [lambda ctx: ctx.value + "-after"],
            },
            value="v",
        )

        assert await ConverterChain.before(context).run(context) == "v-before"
        assert await ConverterChain.after(context).run(context) == "v-before-after"
