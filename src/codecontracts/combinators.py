"""Bind a type guard to a contract function."""

from typing import Any, Callable, Optional, TypeGuard, TypeVar, cast

from codecontracts.base import requires

U = TypeVar("U")


def use_if(
    predicate: Callable[[Any], TypeGuard[U]],
    contract: Callable[..., None] = requires,
    message: Optional[str] = None,
) -> Callable[[Any], U]:
    """Turn a type guard into a function that validates and narrows.

    Parameters
    ----------
    predicate : callable
        Type guard applied to each value.
    contract : callable, optional
        One of ``requires``, ``checks``, ``ensures`` or ``asserts``
        (default ``requires``). Decides which error kind is raised.
    message : str, optional
        Error message. When omitted the contract's own default is used.

    Returns
    -------
    callable
        Function returning its argument unchanged if ``predicate`` accepts
        it, raising through ``contract`` otherwise.

    Examples
    --------
    >>> as_email = use_if(is_email, checks, "Not an email address")
    >>> email = as_email("type@script.com")
    """

    def validate(value: Any) -> U:
        if message is None:
            contract(predicate(value))
        else:
            contract(predicate(value), message)
        return cast(U, value)

    return validate
