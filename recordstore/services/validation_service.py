"""
Validation policies for candidate records.

A repository delegates its ``validate`` hook to a validator so that real
deployments can plug in schema or business-rule checks without touching
storage logic.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Mapping, Optional

from recordstore.models.errors import InvalidDataError

ValidatorFn = Callable[[Mapping[str, Any]], Optional[InvalidDataError]]


class Validator(ABC):
    """
    Base validation strategy.

    Validators report their verdict as a return value: ``None`` when the
    record is acceptable, an ``InvalidDataError`` otherwise. They never raise
    for invalid data; the repository decides when to raise.
    """

    @abstractmethod
    def __call__(self, data: Mapping[str, Any]) -> Optional[InvalidDataError]:
        """Check a candidate record."""
        pass


class ValidFlagValidator(Validator):
    """Accept a record only when its flag field is truthy."""

    def __init__(self, field: str = "valid"):
        self.field = field

    def __call__(self, data: Mapping[str, Any]) -> Optional[InvalidDataError]:
        if data.get(self.field):
            return None
        return InvalidDataError(data={self.field: "should be true"})


def get_default_validator() -> Validator:
    """Get the reference validation policy."""
    return ValidFlagValidator()
