"""Boolean contract functions.

The four public functions behave identically apart from the error kind
they raise and their default message. Keeping them separate preserves the
intent of each call site (precondition, invariant, postcondition,
assertion) both in the source and in the raised error.

Python cannot narrow a type from a function that returns None, so after
``requires(x is not None)`` a type checker still sees ``Optional``. Use
the value-returning contracts in ``codecontracts.nullish`` or
``codecontracts.combinators.use_if`` when the narrowing matters statically.
"""

import logging
from typing import Any, Type

from codecontracts.config import DEFAULTS
from codecontracts.errors import (
    ContractAssertionError,
    ContractError,
    IllegalStateError,
    PostconditionError,
    PreconditionError,
)

logger = logging.getLogger(__name__)


def _enforce(condition: Any, message: str, error_type: Type[ContractError]) -> None:
    """Raise ``error_type(message)`` unless ``condition`` is truthy.

    Fail-fast: no recovery, no fallback, no silence.
    """
    if not condition:
        logger.debug("%s raised: %s", error_type.kind.value, message)
        raise error_type(message)


def requires(condition: bool, message: str = DEFAULTS.precondition_message) -> None:
    """Require a precondition of the caller.

    Use it to verify argument values.

    Parameters
    ----------
    condition : bool
        The condition that must hold.
    message : str, optional
        Error message (default "Unmet precondition").

    Raises
    ------
    PreconditionError
        If condition is False.

    Examples
    --------
    >>> def greet(name: str) -> str:
    ...     requires(len(name) > 0, "Name must not be empty")
    ...     return f"Hello {name}"
    """
    _enforce(condition, message, PreconditionError)


def checks(condition: bool, message: str = DEFAULTS.invariant_message) -> None:
    """Check that the object is in a state that allows the current operation.

    Parameters
    ----------
    condition : bool
        The condition that must hold.
    message : str, optional
        Error message (default "Callee invariant violation").

    Raises
    ------
    IllegalStateError
        If condition is False.

    Examples
    --------
    >>> class Socket:
    ...     is_open = False
    ...     def send(self, data):
    ...         checks(self.is_open, "Socket must be open")
    """
    _enforce(condition, message, IllegalStateError)


def ensures(condition: bool, message: str = DEFAULTS.postcondition_message) -> None:
    """Ensure that a function delivered what it promised.

    Parameters
    ----------
    condition : bool
        The condition that must hold.
    message : str, optional
        Error message (default "Unmet postcondition").

    Raises
    ------
    PostconditionError
        If condition is False.

    Examples
    --------
    >>> def save(person):
    ...     repository.insert(person)
    ...     ensures(repository.find(person.id) is not None, "Failed to persist entity")
    """
    _enforce(condition, message, PostconditionError)


def asserts(condition: bool, message: str = DEFAULTS.assertion_message) -> None:
    """Assert a condition that should never be false.

    Raises
    ------
    ContractAssertionError
        If condition is False.
    """
    _enforce(condition, message, ContractAssertionError)
