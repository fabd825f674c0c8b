"""
Contains a set of ready-made leaf rules. Every rule takes `(value, whole_data)` and returns `None` if the value is
valid or an error message otherwise. Functions taking configuration (like `one_of_array`) return such a rule.
"""
import re
from collections.abc import Iterable, Mapping, Sized
from typing import Any, Optional

from typeguard import TypeCheckError, check_type

from ruletree.types import SyncRule
from ruletree.utils.query_object import required_field


def is_string(value: Any, _whole_data: Any = None) -> Optional[str]:
    """The value must be a string"""
    if not isinstance(value, str):
        return "must be a string"
    return None


def is_integer(value: Any, _whole_data: Any = None) -> Optional[str]:
    """The value must be an integer. Booleans are not accepted."""
    if isinstance(value, bool) or not isinstance(value, int):
        return "must be an integer"
    return None


def is_number(value: Any, _whole_data: Any = None) -> Optional[str]:
    """The value must be an integer or a float. Booleans are not accepted."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return "must be a number"
    return None


def is_boolean(value: Any, _whole_data: Any = None) -> Optional[str]:
    if not isinstance(value, bool):
        return "must be a boolean"
    return None


def is_mapping(value: Any, _whole_data: Any = None) -> Optional[str]:
    if not isinstance(value, Mapping):
        return "must be an object"
    return None


def is_list(value: Any, _whole_data: Any = None) -> Optional[str]:
    if not isinstance(value, (list, tuple)):
        return "must be a list"
    return None


def required(value: Any, _whole_data: Any = None) -> Optional[str]:
    """The value must be present. Missing attributes, `None` and empty strings are rejected."""
    if value is None or value == "":
        return "is required"
    return None


def one_of_array(allowed_values: Iterable[Any]) -> SyncRule:
    """The value must be one of `allowed_values`"""
    allowed = list(allowed_values)

    def check_one_of(value: Any, _whole_data: Any = None) -> Optional[str]:
        if value not in allowed:
            return f"must be one of {allowed}"
        return None

    return check_one_of


def matches(pattern: str | re.Pattern[str]) -> SyncRule:
    """The value must be a string which matches `pattern` completely"""
    compiled = re.compile(pattern)

    def check_matches(value: Any, _whole_data: Any = None) -> Optional[str]:
        if not isinstance(value, str) or compiled.fullmatch(value) is None:
            return f"must match {compiled.pattern}"
        return None

    return check_matches


def min_length(length: int) -> SyncRule:
    def check_min_length(value: Any, _whole_data: Any = None) -> Optional[str]:
        if not isinstance(value, Sized) or len(value) < length:
            return f"must have a length of at least {length}"
        return None

    return check_min_length


def max_length(length: int) -> SyncRule:
    def check_max_length(value: Any, _whole_data: Any = None) -> Optional[str]:
        if not isinstance(value, Sized) or len(value) > length:
            return f"must have a length of at most {length}"
        return None

    return check_max_length


def of_type(annotation: Any) -> SyncRule:
    """
    The value must match the type `annotation`. Any annotation understood by typeguard can be used, e.g.
    `of_type(list[int])` or `of_type(Optional[str])`.
    """

    def check_of_type(value: Any, _whole_data: Any = None) -> Optional[str]:
        try:
            check_type(value, annotation)
        except TypeCheckError as error:
            return str(error)
        return None

    return check_of_type


def equals_field(attribute_path: str, message: Optional[str] = None) -> SyncRule:
    """
    The value must equal the value at the dotted `attribute_path` of the whole data object, e.g.
    `{"password": is_string, "password_confirmation": equals_field("password")}`.
    Fails if `attribute_path` doesn't exist in the whole data, even if the value itself is missing as well.
    """
    error_message = message or f"must be equal to {attribute_path}"

    def check_equals_field(value: Any, whole_data: Any = None) -> Optional[str]:
        try:
            expected = required_field(whole_data, attribute_path, Any)
        except LookupError:
            return error_message
        if value != expected:
            return error_message
        return None

    return check_equals_field
