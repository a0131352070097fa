from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple


class SGPACalculatorError(Exception):
    pass


class ErrorKind(str, Enum):
    REQUIRED = "required"
    BELOW_MINIMUM = "below_minimum"
    ABOVE_MAXIMUM = "above_maximum"
    COUNT_OUT_OF_RANGE = "count_out_of_range"
    INVALID_CHOICE = "invalid_choice"
    NOT_A_NUMBER = "not_a_number"
    INVALID = "invalid"


@dataclass(frozen=True)
class FieldError:
    field: str
    kind: ErrorKind
    message: str


class ValidationFailed(SGPACalculatorError):
    def __init__(self, errors: Iterable[FieldError]) -> None:
        self.errors: Tuple[FieldError, ...] = tuple(errors)
        super().__init__("; ".join(f"{err.field}: {err.message}" for err in self.errors))

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(err.field for err in self.errors)

    def for_field(self, field: str) -> Optional[FieldError]:
        for err in self.errors:
            if err.field == field:
                return err
        return None

    def messages(self) -> Dict[str, str]:
        """First message per field, keyed by dotted field path."""
        result: Dict[str, str] = {}
        for err in self.errors:
            result.setdefault(err.field, err.message)
        return result


class InvalidTransition(SGPACalculatorError):
    pass
