"""
Contains helpers to compose rules: conditional execution (`when`), custom error messages (`msg_for`) and
"at least one of" semantics (`one_of_rules`). Each helper returns an async rule which can be used everywhere a
rule is accepted.
"""
import inspect
import logging
from collections.abc import Sequence
from typing import Any, Awaitable, Callable, Optional

from ruletree.core.rule_spec import compile_rule_spec
from ruletree.core.runners import all_errors, contains_error
from ruletree.types import ErrorMessage, ErrorReport, Rule, RuleSpecInput

logger = logging.getLogger(__name__)

CombinedRule = Callable[[Any, Any], Awaitable[Optional[ErrorMessage]]]


async def _resolve_predicate(predicate: Any, value: Any, whole_data: Any) -> bool:
    if callable(predicate):
        predicate = predicate(value, whole_data)
    if inspect.isawaitable(predicate):
        predicate = await predicate
    return bool(predicate)


def when(predicate: Any, rules: RuleSpecInput) -> CombinedRule:
    """
    Applies `rules` only if `predicate` holds. `predicate` may be a plain value, a (sync or async) function
    `(value, whole_data)` or an awaitable. It is evaluated once per invocation. If it is falsy, the rules are not
    executed at all.
    If `rules` is a nested rule tree, the value is validated as nested object and the result is an error report.

    Note that an awaitable predicate is awaited on every invocation. Use a future or a task (which can be awaited
    more than once) rather than a bare coroutine if the rule is used more than once.
    """
    rule_spec = compile_rule_spec(rules)

    async def run_when(value: Any, whole_data: Any) -> Optional[ErrorMessage | ErrorReport]:
        if not await _resolve_predicate(predicate, value, whole_data):
            logger.debug("Predicate of when() is falsy, rules are skipped")
            return None
        return await rule_spec.run(value, whole_data)

    return run_when


def msg_for(rules: RuleSpecInput, message: ErrorMessage) -> CombinedRule:
    """
    Applies `rules` and replaces any error they produce - be it a single message or a nested error report - with
    `message`.
    """
    rule_spec = compile_rule_spec(rules)

    async def run_msg_for(value: Any, whole_data: Any) -> Optional[ErrorMessage]:
        validation_result = await rule_spec.run(value, whole_data)
        if contains_error(validation_result):
            return message
        return None

    return run_msg_for


def one_of_rules(rules: Rule | Sequence[Rule]) -> CombinedRule:
    """
    Passes if at least one of `rules` passes. Every rule is executed (in series, in the given order). If all of
    them fail, the error of the first rule is returned.
    """
    run_all = all_errors(rules)

    async def run_one_of_rules(value: Any, whole_data: Any) -> Optional[ErrorMessage]:
        errors = await run_all(value, whole_data)
        if any(not contains_error(error) for error in errors):
            return None
        return errors[0] if errors else None

    return run_one_of_rules

