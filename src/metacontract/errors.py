"""Deterministic contract error contracts."""

from __future__ import annotations

from enum import StrEnum

MALFORMED_PAYLOAD_MESSAGE = "Data is not a valid format."
SCHEMA_VIOLATION_MESSAGE = "Data does not follow the required JSON schema."
NO_CONTENT_MESSAGE = "No data inputted"
INVALID_LINK_MESSAGE = "Invalid image link is been used"
PROFANITY_MESSAGE = "Profanity found in the text."
DECODE_FAILURE_PREFIX = "Invalid data structure"


class ContractErrorCode(StrEnum):
    """Stable rejection codes for entry point calls."""

    MALFORMED_PAYLOAD = "malformed_payload"
    SCHEMA_VIOLATION = "schema_violation"
    NO_CONTENT = "no_content"
    POLICY_REJECTION = "policy_rejection"
    DECODE_FAILURE = "decode_failure"


class ContractError(RuntimeError):
    """Rejection with stable deterministic code."""

    def __init__(
        self,
        code: ContractErrorCode,
        message: str,
        *,
        data: dict[str, object] | None = None,
    ) -> None:
        """Create contract rejection.

        Args:
            code: Stable rejection code.
            message: Human-readable message surfaced as the result error string.
            data: Optional structured payload for diagnostics.
        """
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data or {}


def decode_failure(detail: object) -> ContractError:
    """Build a decode rejection embedding the underlying failure.

    Args:
        detail: Underlying decoder error or description.

    Returns:
        Contract error with the decode failure code.
    """
    return ContractError(
        ContractErrorCode.DECODE_FAILURE,
        f"{DECODE_FAILURE_PREFIX}: {detail}",
        data={"detail": str(detail)},
    )
