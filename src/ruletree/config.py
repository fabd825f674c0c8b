"""
Contains the configuration of the validation engine.

The configuration is selected per validator (`create_validator(..., config=...)`). While a validator runs, its
configuration is the active one. This way nested rule trees inside `when` or `msg_for` - which are built without
knowing the validator they will end up in - behave the same as the trees of the validator itself.
"""
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class ValidatorConfig:
    """
    Settings of the validation engine.
    """

    shape_error_template: str = "Property {name} must be an object"
    """
    Error message used if the rule tree expects a nested object but the data contains something else.
    Formatted with `name` (the attribute name) and `path` (the dotted path from the root of the data).
    """
    yield_between_rules: bool = True
    """
    If True, control is handed back to the event loop before each rule invocation, even for synchronous rules.
    """

    def shape_error(self, name: str, path: str) -> str:
        """Returns the error message for an attribute which should be an object but isn't."""
        return self.shape_error_template.format(name=name, path=path)


DEFAULT_CONFIG = ValidatorConfig()

_active_config: ContextVar[ValidatorConfig] = ContextVar("ruletree_config", default=DEFAULT_CONFIG)


def current_config() -> ValidatorConfig:
    """Returns the configuration of the validator currently running (or the default one)."""
    return _active_config.get()


@contextmanager
def use_config(config: ValidatorConfig) -> Iterator[ValidatorConfig]:
    """
    Activates `config` for the duration of the with-block.

    Example:
        with use_config(ValidatorConfig(shape_error_template="{path} is not an object")):
            errors = await validator(data)
    """
    token = _active_config.set(config)
    try:
        yield config
    finally:
        _active_config.reset(token)
