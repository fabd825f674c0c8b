"""
Contains functionality to analyze the result of a validation process
"""
from collections.abc import Mapping
from typing import Any, Iterator, Optional

from ruletree.types import ErrorMessage, ErrorReport


def _iter_flat_errors(error_report: Mapping[str, Any], base_path: str) -> Iterator[tuple[str, ErrorMessage]]:
    for name, error in error_report.items():
        path = f"{base_path}.{name}" if base_path else name
        if isinstance(error, Mapping) and len(error) > 0:
            yield from _iter_flat_errors(error, path)
        else:
            yield path, error


class ValidationResult:
    """
    `RuleTreeValidator.validate` will return an instance of this class. It wraps the error report and provides
    properties for further analysis of it. Note that the values are calculated only if you use them.
    Non-empty mappings in the report are treated as nested reports when flattening - this also applies to a rule
    which returns a mapping as error message. An empty mapping is an error message of its own.
    """

    def __init__(self, errors: Optional[ErrorReport]):
        self._errors = errors
        self._flat_errors: Optional[dict[str, ErrorMessage]] = None

    @property
    def ok(self) -> bool:
        """True if the data passed every rule"""
        return self._errors is None

    @property
    def errors(self) -> Optional[ErrorReport]:
        """The error report as returned by the validator (`None` if there are no errors)"""
        return self._errors

    @property
    def flat_errors(self) -> dict[str, ErrorMessage]:
        """
        Maps the dotted path of every failed attribute onto its error message, e.g. `{"car.engine.cylinders": ...}`.
        The order is the order of the error report, i.e. the declaration order of the rule tree.
        """
        if self._flat_errors is None:
            if self._errors is None:
                self._flat_errors = {}
            else:
                self._flat_errors = dict(_iter_flat_errors(self._errors, ""))
        return self._flat_errors

    @property
    def failed_paths(self) -> list[str]:
        """Dotted paths of all failed attributes"""
        return list(self.flat_errors.keys())

    @property
    def num_errors_total(self) -> int:
        """Number of failed attributes on all levels in total"""
        return len(self.flat_errors)

    def error_for(self, path: str) -> Optional[Any]:
        """
        Returns the entry of the error report at the given dotted path. This is either an error message or, for
        nested objects, an error report. Returns `None` if there is no error at this path.
        """
        current: Any = self._errors
        for name in path.split("."):
            if not isinstance(current, Mapping) or name not in current:
                return None
            current = current[name]
        return current

    def __bool__(self) -> bool:
        return self.ok

    def __repr__(self):
        return f"ValidationResult(ok={self.ok}, errors={self._errors!r})"
