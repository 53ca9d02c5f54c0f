"""Tagged result type for callers that prefer values over exceptions."""
from dataclasses import dataclass
from typing import Union

from calcapi.engine.errors import CalculationError


@dataclass(frozen=True)
class Ok:
    value: float
    ok: bool = True


@dataclass(frozen=True)
class Err:
    error: CalculationError
    ok: bool = False

    @property
    def message(self) -> str:
        return str(self.error)

    @property
    def kind(self) -> str:
        """Name of the failure, e.g. 'DivisionByZero'."""
        return type(self.error).__name__


Result = Union[Ok, Err]
