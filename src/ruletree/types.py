"""
Contains the types used in the validation framework
"""
from collections.abc import Mapping
from typing import Any, Awaitable, Callable, Optional, TypeAlias, Union

ErrorMessage: TypeAlias = Any
"""Anything except `None`. The engine never inspects the content of an error message."""

ErrorReport: TypeAlias = dict[str, Any]
"""Maps attribute names onto an `ErrorMessage` or onto a nested `ErrorReport`."""

ValidationData: TypeAlias = Mapping[str, Any]

AsyncRule: TypeAlias = Callable[[Any, Any], Awaitable[Optional[ErrorMessage]]]
SyncRule: TypeAlias = Callable[[Any, Any], Optional[ErrorMessage]]
Rule: TypeAlias = AsyncRule | SyncRule

RuleSpecInput: TypeAlias = Union[Rule, list[Rule], tuple[Rule, ...], Mapping[str, Any]]
"""What a user may put as value into a rule tree: a rule, a list of rules or a nested rule tree."""
RuleTreeInput: TypeAlias = Mapping[str, RuleSpecInput]
