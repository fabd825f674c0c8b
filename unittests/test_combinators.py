import asyncio
from typing import Any

import pytest

from ruletree import create_validator, msg_for, one_of_rules, when
from ruletree.rules import is_integer, is_string, one_of_array

CUSTOM_ERROR_MESSAGE = "Custom error message"


@pytest.fixture
def test_values() -> dict[str, Any]:
    return {
        "deal": "purchase",
        "car": {"make": "BMW", "model": "5-er", "engine": {"displacement": 4, "cylinders": 6}},
    }


async def failing_async_rule(_value, _data):
    return "Some error"


async def not_failing_async_rule(_value, _data):
    return None


class TestWhen:
    async def test_enclosed_rules_are_skipped_if_predicate_is_false(self, test_values):
        validation_of_car_was_performed = False

        async def validate_car(_value, _data):
            nonlocal validation_of_car_was_performed
            validation_of_car_was_performed = True
            return "Some error description"

        validate = create_validator(
            {
                "deal": [is_string],
                "car": when(
                    False,
                    {
                        "make": [one_of_array(["BMW"]), validate_car],
                        "engine": {"cylinders": [is_integer, validate_car]},
                    },
                ),
            }
        )
        assert await validate(test_values) is None
        assert validation_of_car_was_performed is False

    async def test_enclosed_rules_run_if_predicate_is_true(self, test_values):
        async def validate_car(_value, _data):
            return "Some error description"

        validate = create_validator(
            {
                "deal": is_string,
                "car": when(
                    True,
                    {
                        "make": [one_of_array(["BMW"]), validate_car],
                        "model": [one_of_array(["5-er"]), validate_car],
                        "engine": {
                            "displacement": [is_integer, validate_car],
                            "cylinders": [is_integer, validate_car],
                        },
                    },
                ),
            }
        )
        assert await validate(test_values) == {
            "car": {
                "make": "Some error description",
                "model": "Some error description",
                "engine": {"displacement": "Some error description", "cylinders": "Some error description"},
            }
        }

    async def test_falsy_future_suppresses_execution(self):
        future = asyncio.get_running_loop().create_future()
        future.set_result(False)
        assert await create_validator({"make": when(future, is_string)})({"make": 123}) is None

    async def test_truthy_future_runs_rules(self):
        future = asyncio.get_running_loop().create_future()
        future.set_result(True)
        assert await create_validator({"make": when(future, is_string)})({"make": 123}) == {
            "make": "must be a string"
        }

    @pytest.mark.parametrize("predicate_result, expected", [(True, {"make": "must be a string"}), (False, None)])
    async def test_async_predicate(self, predicate_result: bool, expected):
        async def predicate(_value, _data):
            await asyncio.sleep(0)
            return predicate_result

        assert await create_validator({"make": when(predicate, is_string)})({"make": 123}) == expected

    @pytest.mark.parametrize("falsy", [0, "", None, []])
    async def test_falsy_literals(self, falsy):
        assert await create_validator({"make": when(falsy, is_string)})({"make": 123}) is None

    async def test_predicate_is_evaluated_once_per_invocation(self):
        calls = 0

        def predicate(_value, _data):
            nonlocal calls
            calls += 1
            return True

        validate = create_validator({"make": when(predicate, [is_string, not_failing_async_rule])})
        await validate({"make": "BMW"})
        assert calls == 1

    async def test_predicate_gets_value_and_whole_data(self, test_values):
        received = []

        def predicate(value, data):
            received.append((value, data))
            return True

        await create_validator({"car": {"make": when(predicate, is_string)}})(test_values)
        assert received == [("BMW", test_values)]

    async def test_whole_data_is_passed_into_nested_trees(self, test_values):
        deal_property_was_available = True

        def returns_true(_value, data):
            nonlocal deal_property_was_available
            if data.get("deal") != test_values["deal"]:
                deal_property_was_available = False
            return True

        validate = create_validator(
            {
                "deal": is_string,
                "car": when(
                    returns_true,
                    {
                        "make": when(returns_true, one_of_array(["BMW"])),
                        "engine": {"cylinders": when(returns_true, is_integer)},
                    },
                ),
            }
        )
        assert await validate(test_values) is None
        assert deal_property_was_available is True

    async def test_nested_tree_with_non_object_value(self):
        errors = await create_validator({"car": when(True, {"make": is_string})})({"car": "BMW"})
        assert errors == {"car": "Property car must be an object"}


class TestMsgFor:
    async def test_async_rules(self):
        errors = await create_validator({"make": msg_for(failing_async_rule, CUSTOM_ERROR_MESSAGE)})(
            {"make": "some value"}
        )
        assert errors == {"make": CUSTOM_ERROR_MESSAGE}

    async def test_enclosed_objects(self):
        errors = await create_validator({"car": msg_for({"make": failing_async_rule}, CUSTOM_ERROR_MESSAGE)})(
            {"car": {}}
        )
        assert errors == {"car": CUSTOM_ERROR_MESSAGE}

    async def test_passing_rules_return_none(self):
        validate = create_validator({"make": msg_for([is_string, not_failing_async_rule], CUSTOM_ERROR_MESSAGE)})
        assert await validate({"make": "BMW"}) is None

    async def test_message_replaces_empty_string_error(self):
        validate = create_validator({"make": msg_for(lambda _value, _data: "", CUSTOM_ERROR_MESSAGE)})
        assert await validate({"make": "BMW"}) == {"make": CUSTOM_ERROR_MESSAGE}

    async def test_whole_data_is_passed_into_nested_trees(self, test_values):
        deal_property_was_available = True

        def not_failing_rule(_value, data):
            nonlocal deal_property_was_available
            if data.get("deal") != test_values["deal"]:
                deal_property_was_available = False

        validate = create_validator(
            {
                "deal": is_string,
                "car": msg_for(
                    {
                        "make": msg_for(not_failing_rule, CUSTOM_ERROR_MESSAGE),
                        "engine": {"cylinders": msg_for(not_failing_rule, CUSTOM_ERROR_MESSAGE)},
                    },
                    CUSTOM_ERROR_MESSAGE,
                ),
            }
        )
        assert await validate(test_values) is None
        assert deal_property_was_available is True


class TestOneOfRules:
    async def test_passes_if_one_rule_passes(self):
        rule = one_of_rules([failing_async_rule, not_failing_async_rule])
        assert await rule("value", {}) is None

    async def test_first_error_if_all_fail(self):
        async def other_failing_rule(_value, _data):
            return "Other error"

        rule = one_of_rules([failing_async_rule, other_failing_rule])
        assert await rule("value", {}) == "Some error"

    async def test_every_rule_runs(self):
        invoked = []

        def record(name: str, result):
            def rule(_value, _data):
                invoked.append(name)
                return result

            return rule

        rule = one_of_rules([record("first", None), record("second", "error"), record("third", None)])
        assert await rule("value", {}) is None
        assert invoked == ["first", "second", "third"]

    async def test_falsy_errors_count_as_failures(self):
        rule = one_of_rules([lambda _value, _data: "", lambda _value, _data: 0])
        assert await rule("value", {}) == ""

    async def test_single_rule(self):
        assert await one_of_rules(is_string)(5, {}) == "must be a string"

    async def test_no_rules(self):
        assert await one_of_rules([])("value", {}) is None
