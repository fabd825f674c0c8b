"""
Contains the exceptions raised by the validation framework.

Note that a failing rule never raises. A rule reports invalid data by returning an error message which ends up
in the error report. Exceptions are reserved for defects: malformed rule trees and broken rules. The latter are
not wrapped at all - whatever a rule raises propagates unchanged to the caller of the validator.
"""
from typing import Any


class RuleDefinitionError(TypeError):
    """
    Raised while compiling a rule tree if an entry is neither a rule, a sequence of rules nor a nested rule tree.
    """

    def __init__(self, path: str, spec: Any, reason: str):
        self.path = path
        self.spec = spec
        self.reason = reason
        location = path or "<root>"
        super().__init__(f"{location}: {reason} (got {type(spec).__name__}: {spec!r})")
