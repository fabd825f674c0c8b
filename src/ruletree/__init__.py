"""
This package enables you to validate nested key/value data (e.g. form submissions) against a declarative rule tree.
Rules may be synchronous or asynchronous. The result is an error report shaped like the validated data.
"""

from . import rules
from .analysis import ValidationResult
from .config import ValidatorConfig, current_config, use_config
from .core import (
    RuleTreeValidator,
    all_errors,
    contains_error,
    create_validator,
    first_error,
    msg_for,
    one_of_rules,
    when,
)
from .errors import RuleDefinitionError
