"""Functions that never return.

``error`` raises in expression position, e.g. ``name = value or error(...)``.
``unreachable`` marks the fallback branch of an exhaustive match.
"""

import logging
from typing import NoReturn, Optional, Type, Union

from codecontracts.base import requires
from codecontracts.config import DEFAULTS
from codecontracts.errors import ContractAssertionError, ContractError, IllegalStateError

logger = logging.getLogger(__name__)


def error(
    kind_or_message: Union[Type[BaseException], str, None] = None,
    message: Optional[str] = None,
) -> NoReturn:
    """Always raise.

    Three call shapes are accepted:

    - ``error()`` raises ``IllegalStateError()``
    - ``error("msg")`` raises ``IllegalStateError("msg")``
    - ``error(SomeError, "msg")`` raises ``SomeError("msg")``; the message
      is optional and any exception class is accepted.

    A string first argument is always a message, never a kind.

    Parameters
    ----------
    kind_or_message : type or str, optional
        Exception class to raise, or the message for an IllegalStateError.
    message : str, optional
        Message when the first argument is an exception class.

    Raises
    ------
    PreconditionError
        If the arguments match none of the call shapes above.

    Examples
    --------
    >>> def load(name: Optional[str]) -> str:
    ...     checked = name or error(PreconditionError, "Name may not be empty")
    ...     return checked if checked.isidentifier() else error("Bad name")
    """
    error_type: Type[BaseException]
    if isinstance(kind_or_message, str):
        requires(message is None, "error() takes a single message when no error type is given")
        error_type = IllegalStateError
        message = kind_or_message
    elif kind_or_message is None:
        error_type = IllegalStateError
    else:
        requires(
            isinstance(kind_or_message, type) and issubclass(kind_or_message, BaseException),
            f"error() expects an exception type or a message, got {type(kind_or_message).__name__}",
        )
        requires(
            kind_or_message is not ContractError,
            "error() needs a concrete error kind, ContractError is abstract",
        )
        error_type = kind_or_message

    logger.debug("error() raising %s: %s", error_type.__name__, message)
    if message is None:
        raise error_type()
    raise error_type(message)


def unreachable(value: NoReturn, message: str = DEFAULTS.unreachable_message) -> NoReturn:
    """Mark a branch that can never run.

    The parameter is typed ``NoReturn``, so a type checker only accepts the
    call once every case of the matched Enum or Literal has been handled.
    Adding a new case without a branch for it becomes a type error. If the
    branch is reached anyway at runtime, a ContractAssertionError is raised.

    Examples
    --------
    >>> class Color(Enum):
    ...     RED = 1
    ...     BLUE = 2
    >>> def hex_code(color: Color) -> str:
    ...     if color is Color.RED:
    ...         return "#f00"
    ...     elif color is Color.BLUE:
    ...         return "#00f"
    ...     else:
    ...         unreachable(color)
    """
    logger.debug("Reached unreachable branch with %r", value)
    raise ContractAssertionError(message)
