"""`codecontracts` - design by contract for Python.

Small functions that validate preconditions, invariants, postconditions
and impossible states. A violation raises a categorized error; otherwise
the call returns nothing or the validated value.

Key principle:
- requires: the caller broke the contract (PreconditionError)
- checks: the object is in the wrong state (IllegalStateError)
- ensures: the callee broke its promise (PostconditionError)
- asserts / unreachable: a logic defect (ContractAssertionError)
"""

from codecontracts.errors import (
    AssertionError as AssertionError,
    ContractAssertionError,
    ContractError,
    ErrorKind,
    IllegalStateError,
    PostconditionError,
    PreconditionError,
)
from codecontracts.base import asserts, checks, ensures, requires
from codecontracts.nullish import (
    asserts_non_nullish,
    checks_non_nullish,
    ensures_non_nullish,
    is_defined,
    requires_non_nullish,
)
from codecontracts.escape import error, unreachable
from codecontracts.combinators import use_if

__version__ = "1.0.0"

__all__ = [
    "ContractError",
    "ErrorKind",
    "PreconditionError",
    "IllegalStateError",
    "PostconditionError",
    "ContractAssertionError",
    "requires",
    "requires_non_nullish",
    "checks",
    "checks_non_nullish",
    "ensures",
    "ensures_non_nullish",
    "asserts",
    "asserts_non_nullish",
    "is_defined",
    "error",
    "unreachable",
    "use_if",
]
