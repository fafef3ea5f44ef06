"""Error taxonomy for contract violations.

Every violation raises exactly one of four concrete kinds. All of them
derive from ContractError so callers can handle contract bugs uniformly.

Key distinction:
- PreconditionError: the caller passed something it was not allowed to
- IllegalStateError: the callee is in a state that forbids the operation
- PostconditionError: the callee could not deliver what it promised
- ContractAssertionError: something "impossible" happened
"""

import builtins
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Discriminator carried by every contract error.

    The value is the kind's public name, so it can be used directly as a
    logging category or compared in tests.
    """
    PRECONDITION = "PreconditionError"
    ILLEGAL_STATE = "IllegalStateError"
    POSTCONDITION = "PostconditionError"
    ASSERTION = "AssertionError"


class ContractError(RuntimeError):
    """Raised when a code contract is violated.

    This indicates a bug in the calling or called code, not a recoverable
    condition. Abstract: only the concrete kinds are ever raised.

    Attributes
    ----------
    kind : ErrorKind
        Fixed per concrete class.
    message : str or None
        The message given at the raise site, if any.
    """

    kind: ErrorKind

    def __init__(self, message: Optional[str] = None) -> None:
        if type(self) is ContractError:
            raise TypeError("ContractError is abstract, raise one of its kinds instead")
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message or ""

    def __repr__(self) -> str:
        if self.message is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self.message!r})"


class PreconditionError(ContractError):
    """Input to a function or method did not meet its stated constraint."""
    kind = ErrorKind.PRECONDITION


class IllegalStateError(ContractError):
    """An object is in a state that does not allow the current operation."""
    kind = ErrorKind.ILLEGAL_STATE


class PostconditionError(ContractError):
    """A function or method could not fulfil its postcondition."""
    kind = ErrorKind.POSTCONDITION


class ContractAssertionError(ContractError, builtins.AssertionError):
    """An assertion failed or an unreachable branch was reached.

    Also a builtin AssertionError, so existing ``except AssertionError``
    handlers keep working.
    """
    kind = ErrorKind.ASSERTION


# Public name of the assertion kind. Not star-exported: it would shadow the builtin.
AssertionError = ContractAssertionError
