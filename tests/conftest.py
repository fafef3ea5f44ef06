"""Root-level pytest fixtures for the codecontracts test suite."""

import logging

import pytest

from codecontracts import (
    ContractAssertionError,
    IllegalStateError,
    PostconditionError,
    PreconditionError,
    asserts,
    asserts_non_nullish,
    checks,
    checks_non_nullish,
    ensures,
    ensures_non_nullish,
    requires,
    requires_non_nullish,
)


# =============================================================================
# Contract bindings
# =============================================================================

# (contract, raised kind, default message)
BOOLEAN_CONTRACTS = [
    (requires, PreconditionError, "Unmet precondition"),
    (checks, IllegalStateError, "Callee invariant violation"),
    (ensures, PostconditionError, "Unmet postcondition"),
    (asserts, ContractAssertionError, "Failed Assertion"),
]

NON_NULLISH_CONTRACTS = [
    (requires_non_nullish, PreconditionError),
    (checks_non_nullish, IllegalStateError),
    (ensures_non_nullish, PostconditionError),
    (asserts_non_nullish, ContractAssertionError),
]


@pytest.fixture(params=BOOLEAN_CONTRACTS, ids=lambda c: c[0].__name__)
def boolean_contract(request):
    """Each boolean contract with its error kind and default message."""
    return request.param


@pytest.fixture(params=NON_NULLISH_CONTRACTS, ids=lambda c: c[0].__name__)
def non_nullish_contract(request):
    """Each value-returning contract with its error kind."""
    return request.param


@pytest.fixture
def debug_logs(caplog):
    """Capture DEBUG records from the codecontracts loggers."""
    caplog.set_level(logging.DEBUG, logger="codecontracts")
    return caplog
