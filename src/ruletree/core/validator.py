"""
Contains the validator builder: `create_validator` turns a rule tree into an async function which validates a
whole data object and returns an error report shaped like the data.
"""
import logging
from collections.abc import Mapping
from typing import Any, Optional

from ruletree.analysis import ValidationResult
from ruletree.config import ValidatorConfig, current_config, use_config
from ruletree.core.rule_spec import RuleTree, compile_rule_tree
from ruletree.types import ErrorReport, RuleTreeInput, ValidationData

logger = logging.getLogger(__name__)


class RuleTreeValidator:
    """
    Validates data objects against a compiled rule tree. Instances are stateless between calls: the data of one
    call (in particular the `whole_data` handed to every rule) is passed along explicitly and never stored on the
    instance. Hence, a validator can be used by several tasks at the same time.
    """

    def __init__(
        self,
        rule_tree: RuleTreeInput | RuleTree,
        whole_data_seed: Optional[ValidationData] = None,
        config: Optional[ValidatorConfig] = None,
    ):
        self.rule_tree: RuleTree = compile_rule_tree(rule_tree)
        self.whole_data_seed = whole_data_seed
        self.config = config

    def _whole_data_for(self, data: ValidationData) -> Any:
        if self.whole_data_seed:
            return self.whole_data_seed
        return data

    async def __call__(self, data: ValidationData) -> Optional[ErrorReport]:
        """
        Validates `data` and returns the error report. Returns `None` if there are no errors at all - never an
        empty dict.
        Exceptions raised by the rules are not caught.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"Data to validate must be a mapping, got {type(data).__name__}")
        config = self.config or current_config()
        with use_config(config):
            errors = await self.rule_tree.validate(data, self._whole_data_for(data))
        if errors is None:
            logger.debug("Validation of %d attribute(s) succeeded", len(self.rule_tree.attributes))
        else:
            logger.debug("Validation failed for attribute(s) %s", ", ".join(errors.keys()))
        return errors

    async def validate(self, data: ValidationData) -> ValidationResult:
        """
        Like calling the validator but wraps the error report into a `ValidationResult` for further analysis.
        """
        return ValidationResult(await self(data))

    def __repr__(self):
        return f"RuleTreeValidator({', '.join(self.rule_tree.attributes.keys())})"


def create_validator(
    rule_tree: RuleTreeInput | RuleTree,
    whole_data_seed: Optional[ValidationData] = None,
    config: Optional[ValidatorConfig] = None,
) -> RuleTreeValidator:
    """
    Builds a validator for `rule_tree`. The rule tree is compiled immediately - a malformed tree raises a
    `RuleDefinitionError` here and not during validation.

    `whole_data_seed` is the object handed as second argument to every rule. If it is not given (or empty) the
    data object passed to the validator is used. There is usually no need to set it.

    Example:
        validate = create_validator({"deal": is_string, "car": {"make": one_of_array(["BMW", "Audi"])}})
        errors = await validate({"deal": 5, "car": {"make": "Fiat"}})
        # {"deal": "must be a string", "car": {"make": "must be one of ['BMW', 'Audi']"}}
    """
    return RuleTreeValidator(rule_tree, whole_data_seed=whole_data_seed, config=config)
