"""Value-returning contracts for optional values.

Each function checks its argument with ``is_defined`` through the matching
boolean contract and hands the same object back, typed without ``None``.
"""

from typing import Any, Optional, TypeVar, cast

from codecontracts.base import asserts, checks, ensures, requires
from codecontracts.config import DEFAULTS

T = TypeVar("T")


def is_defined(value: Any) -> bool:
    """Return True unless ``value`` is None.

    Falsy values such as ``""``, ``0`` and ``False`` are defined.
    """
    return value is not None


def requires_non_nullish(value: Optional[T], message: str = DEFAULTS.non_nullish_message) -> T:
    """Require an argument not to be None.

    Parameters
    ----------
    value : T or None
        The value to check.
    message : str, optional
        Error message (default "Value must not be null or undefined").

    Returns
    -------
    T
        ``value`` itself.

    Raises
    ------
    PreconditionError
        If value is None.

    Examples
    --------
    >>> def shout(name: Optional[str]) -> str:
    ...     return requires_non_nullish(name, "Name must be defined").upper()
    """
    requires(is_defined(value), message)
    return cast(T, value)


def checks_non_nullish(value: Optional[T], message: str = DEFAULTS.non_nullish_message) -> T:
    """Check that a piece of object state is not None.

    Raises
    ------
    IllegalStateError
        If value is None.

    Examples
    --------
    >>> class Socket:
    ...     data = None
    ...     def send(self):
    ...         checks_non_nullish(self.data, "Data must be available").flush()
    """
    checks(is_defined(value), message)
    return cast(T, value)


def ensures_non_nullish(value: Optional[T], message: str = DEFAULTS.non_nullish_message) -> T:
    """Ensure that a result is not None before handing it to the caller.

    Raises
    ------
    PostconditionError
        If value is None.
    """
    ensures(is_defined(value), message)
    return cast(T, value)


def asserts_non_nullish(value: Optional[T], message: str = DEFAULTS.non_nullish_message) -> T:
    """Assert that a value which can never be None is not None."""
    asserts(is_defined(value), message)
    return cast(T, value)
