"""Tests for the boolean contract functions.

Each contract raises its own kind with its own default message.
"""

import pytest

pytestmark = pytest.mark.unit

from codecontracts import ContractError, ErrorKind, requires


class TestBooleanContracts:
    """Behaviour shared by requires, checks, ensures and asserts."""

    def test_passes_when_condition_met(self, boolean_contract):
        """A true condition returns None."""
        contract, _, _ = boolean_contract
        assert contract(True) is None
        assert contract(True, "Custom message") is None

    def test_raises_default_message(self, boolean_contract):
        """A false condition raises the bound kind with the default message."""
        contract, error_type, default = boolean_contract
        with pytest.raises(error_type) as exc_info:
            contract(False)
        assert type(exc_info.value) is error_type
        assert str(exc_info.value) == default

    def test_raises_custom_message(self, boolean_contract):
        """A supplied message replaces the default."""
        contract, error_type, _ = boolean_contract
        with pytest.raises(error_type) as exc_info:
            contract(False, "Custom message")
        assert exc_info.value.message == "Custom message"

    def test_truthiness_is_evaluated(self, boolean_contract):
        """Any value usable in an if statement is accepted."""
        contract, error_type, _ = boolean_contract
        contract([1])
        with pytest.raises(error_type):
            contract(0)

    def test_repeated_calls_raise_same_error(self, boolean_contract):
        """No hidden state: identical calls give identical outcomes."""
        contract, error_type, _ = boolean_contract
        raised = []
        for _ in range(3):
            with pytest.raises(error_type) as exc_info:
                contract(False, "x")
            raised.append((type(exc_info.value), exc_info.value.message))
        assert raised == [(error_type, "x")] * 3


class TestRequires:
    """Test requires() at a call site."""

    def test_precondition_on_argument(self):
        """Arguments are checked before the function body runs."""

        def greet(name: str) -> str:
            requires(len(name) > 3, "Name must be longer than 3 chars")
            return f"Hello {name}"

        assert greet("Guido") == "Hello Guido"
        with pytest.raises(ContractError, match="longer than 3") as exc_info:
            greet("Al")
        assert exc_info.value.kind is ErrorKind.PRECONDITION


class TestLogging:
    """Violations are logged before they are raised."""

    def test_violation_logged_at_debug(self, boolean_contract, debug_logs):
        """The log record names the kind and the message."""
        contract, error_type, _ = boolean_contract
        with pytest.raises(error_type):
            contract(False, "logged")
        assert f"{error_type.kind.value} raised: logged" in debug_logs.text

    def test_nothing_logged_when_condition_met(self, boolean_contract, debug_logs):
        """Passing contracts are silent."""
        contract, _, _ = boolean_contract
        contract(True)
        assert debug_logs.records == []
