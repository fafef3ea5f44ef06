"""Default messages for every contract function.

This is the single source of truth for the messages raised when a caller
does not supply one. Contract functions bind these values as their
signature defaults; no function defines its own fallback string.

The defaults are part of the public contract: changing one is a breaking
change for callers that match on messages.
"""

from pydantic import BaseModel, ConfigDict, Field


class ContractsBaseModel(BaseModel):
    """Base model for codecontracts configuration schemas.

    Enforces strict validation:
    - No extra fields allowed
    - Validates assignments after initialization
    - Forbids mutations after construction
    """

    model_config = ConfigDict(
        extra='forbid',            # Reject unknown fields
        validate_assignment=True,  # Validate on field mutation
        frozen=True,               # Immutable after construction
    )


class ContractDefaults(ContractsBaseModel):
    """Default message per contract role."""
    precondition_message: str = Field("Unmet precondition", min_length=1)
    invariant_message: str = Field("Callee invariant violation", min_length=1)
    postcondition_message: str = Field("Unmet postcondition", min_length=1)
    assertion_message: str = Field("Failed Assertion", min_length=1)
    non_nullish_message: str = Field("Value must not be null or undefined", min_length=1)
    unreachable_message: str = Field("Reached an unreachable case", min_length=1)


DEFAULTS = ContractDefaults()
