"""
Contains the rule runners. A rule runner executes a list of rules against a single value - strictly one after
another, never concurrently.
"""
import asyncio
import inspect
from collections.abc import Sequence
from typing import Any, Awaitable, Callable, Optional

from ruletree.config import current_config
from ruletree.types import ErrorMessage, Rule


def contains_error(validation_result: Any) -> bool:
    """
    The one and only check whether a rule (or a nested validation) failed. Everything except `None` is an error -
    this includes empty strings, `0` and `False`.
    """
    return validation_result is not None


def as_rule_list(rules: Rule | Sequence[Rule]) -> list[Rule]:
    """A single rule becomes a list with one element, sequences are copied into a list."""
    if isinstance(rules, (list, tuple)):
        return list(rules)
    return [rules]


async def execute_rule(rule: Rule, value: Any, whole_data: Any) -> Optional[ErrorMessage]:
    """
    Executes a single rule. Synchronous and asynchronous rules share this execution path: the result is awaited
    if it is awaitable. Exceptions raised by the rule (synchronously or by the awaitable) are not caught.
    """
    if current_config().yield_between_rules:
        await asyncio.sleep(0)
    result = rule(value, whole_data)
    if inspect.isawaitable(result):
        result = await result
    return result


def first_error(rules: Rule | Sequence[Rule]) -> Callable[[Any, Any], Awaitable[Optional[ErrorMessage]]]:
    """
    Returns an async rule which applies `rules` in series and stops on the first error. The remaining rules are
    not invoked at all. Returns `None` if every rule passed.
    """
    rules_to_apply = as_rule_list(rules)

    async def run_first_error(value: Any, whole_data: Any) -> Optional[ErrorMessage]:
        for rule in rules_to_apply:
            error = await execute_rule(rule, value, whole_data)
            if contains_error(error):
                return error
        return None

    return run_first_error


def all_errors(rules: Rule | Sequence[Rule]) -> Callable[[Any, Any], Awaitable[list[Optional[ErrorMessage]]]]:
    """
    Returns an async callable which applies every rule in series (no short circuit) and returns the results in
    rule order. Passing rules contribute `None`.
    """
    rules_to_apply = as_rule_list(rules)

    async def run_all_errors(value: Any, whole_data: Any) -> list[Optional[ErrorMessage]]:
        results: list[Optional[ErrorMessage]] = []
        for rule in rules_to_apply:
            results.append(await execute_rule(rule, value, whole_data))
        return results

    return run_all_errors
