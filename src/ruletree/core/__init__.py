"""
Contains the core functionality of the validation framework
"""
from .combinators import msg_for, one_of_rules, when
from .rule_spec import (
    RuleSequence,
    RuleSpec,
    RuleTree,
    SingleRule,
    compile_rule_spec,
    compile_rule_tree,
    current_attribute_path,
)
from .runners import all_errors, contains_error, execute_rule, first_error
from .validator import RuleTreeValidator, create_validator
