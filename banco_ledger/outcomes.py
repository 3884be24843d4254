"""
Operation Outcomes

Wraps core ledger operations so callers can branch on a returned value
instead of catching exceptions.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .errors import BancoError


@dataclass(frozen=True)
class OperationResult:
    """Success value or ledger error of one operation"""
    ok: bool
    value: Any = None
    error: Optional[BancoError] = None

    @property
    def error_code(self) -> Optional[str]:
        return self.error.code if self.error is not None else None

    @property
    def message(self) -> str:
        return str(self.error) if self.error is not None else ""

    @classmethod
    def success(cls, value: Any = None) -> 'OperationResult':
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: BancoError) -> 'OperationResult':
        return cls(ok=False, error=error)

    def unwrap(self) -> Any:
        """Return the value, or raise the captured error"""
        if self.error is not None:
            raise self.error
        return self.value


def attempt(operation: Callable[..., Any], *args, **kwargs) -> OperationResult:
    """
    Run a ledger operation, capturing BancoError as a failed result

    Exceptions that are not ledger errors propagate unchanged.
    """
    try:
        return OperationResult.success(operation(*args, **kwargs))
    except BancoError as e:
        return OperationResult.failure(e)
