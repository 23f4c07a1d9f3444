"""Meta contract entry points: execute, mint and clone."""

from __future__ import annotations

import logging

from metacontract.abi import (
    MINT_FIELD_COUNT,
    ArityMismatch,
    DecodedTuple,
    DecodeFailed,
    decode_hex,
    decode_string_tuple,
)
from metacontract.builder import (
    build_attributes_record,
    build_description_record,
    build_echo_record,
    build_mint_records,
)
from metacontract.config import ContractSettings
from metacontract.errors import (
    INVALID_LINK_MESSAGE,
    PROFANITY_MESSAGE,
    ContractError,
    ContractErrorCode,
    decode_failure,
)
from metacontract.policy import evaluate_image_link, evaluate_text
from metacontract.schema import parse_content_payload
from metacontract.types import (
    FinalMetadata,
    MetaContract,
    MetaContractResult,
    Metadata,
    Transaction,
)

_LOGGER = logging.getLogger(__name__)


class MetaContractService:
    """Stateless validator and metadata deriver bound to a policy configuration."""

    def __init__(self, settings: ContractSettings | None = None) -> None:
        """Create service.

        Args:
            settings: Policy configuration; defaults when omitted.
        """
        self._settings = settings or ContractSettings()

    @property
    def settings(self) -> ContractSettings:
        """Return bound policy configuration."""
        return self._settings

    def on_execute(
        self,
        contract: MetaContract,
        metadatas: list[Metadata],
        transaction: Transaction,
    ) -> MetaContractResult:
        """Validate a transaction payload and echo it as one anonymous record.

        Args:
            contract: Contract executed against.
            metadatas: Existing records for the contract; not consulted.
            transaction: Incoming transaction.

        Returns:
            Success with the echo record, or the first rejection.
        """
        try:
            self._admit_payload(transaction.data)
        except ContractError as exc:
            _LOGGER.debug(
                "execute rejected: contract=%s code=%s",
                contract.meta_contract_id,
                exc.code,
            )
            return MetaContractResult.error(exc.message)
        _LOGGER.debug(
            "execute accepted: contract=%s prior_records=%d",
            contract.meta_contract_id,
            len(metadatas),
        )
        return MetaContractResult.ok([build_echo_record(transaction)])

    def _admit_payload(self, raw: str) -> None:
        """Run schema, link and moderation gates in order; first failure wins.

        Raises:
            ContractError: On the first failing gate.
        """
        payload = parse_content_payload(raw)
        if payload.image is not None:
            decision = evaluate_image_link(payload.image, self._settings.links)
            if not decision.allowed:
                raise ContractError(
                    ContractErrorCode.POLICY_REJECTION,
                    INVALID_LINK_MESSAGE,
                    data={"policy_code": decision.code},
                )
        # Absent text needs no moderation.
        if payload.text is not None:
            decision = evaluate_text(payload.text, self._settings.moderation)
            if not decision.allowed:
                raise ContractError(
                    ContractErrorCode.POLICY_REJECTION,
                    PROFANITY_MESSAGE,
                    data={"policy_code": decision.code},
                )

    def on_mint(
        self,
        contract: MetaContract,
        data_key: str,
        token_id: str,
        data: str,
    ) -> MetaContractResult:
        """Derive NFT metadata records from an ABI-encoded mint payload.

        Args:
            contract: Contract owning the minted records.
            data_key: Storage key; not consulted.
            token_id: Token identifier; not consulted.
            data: Empty, or hex text of an ABI `(string,string,string)` tuple.

        Returns:
            Success with name/image/body (when decoded), description and
            attributes records, or a decode rejection with no records.
        """
        try:
            records = self._decode_mint_records(contract, data)
        except ContractError as exc:
            _LOGGER.debug(
                "mint rejected: contract=%s data_key=%s token_id=%s code=%s",
                contract.meta_contract_id,
                data_key,
                token_id,
                exc.code,
            )
            return MetaContractResult.error(exc.message)
        mint_settings = self._settings.mint
        records.append(build_description_record(contract, mint_settings))
        records.append(build_attributes_record(contract, mint_settings))
        _LOGGER.debug(
            "mint accepted: contract=%s token_id=%s records=%d",
            contract.meta_contract_id,
            token_id,
            len(records),
        )
        return MetaContractResult.ok(records)

    def _decode_mint_records(
        self, contract: MetaContract, data: str
    ) -> list[FinalMetadata]:
        """Decode mint data into name/image/body records.

        Returns:
            Decoded records; empty when data is empty or arity differs.

        Raises:
            ContractError: DECODE_FAILURE on hex or ABI decode failure.
        """
        if not data:
            return []
        outcome = decode_string_tuple(decode_hex(data), MINT_FIELD_COUNT)
        match outcome:
            case DecodedTuple(values=values):
                return build_mint_records(contract, values)
            case ArityMismatch(expected=expected, values=values):
                _LOGGER.debug(
                    "mint decode arity mismatch: expected=%d got=%d; skipping records",
                    expected,
                    len(values),
                )
                return []
            case DecodeFailed(reason=reason):
                raise decode_failure(reason)

    def on_clone(self) -> bool:
        """Acknowledge a clone request. No policy applies yet."""
        return True


_DEFAULT_SERVICE = MetaContractService()


def on_execute(
    contract: MetaContract,
    metadatas: list[Metadata],
    transaction: Transaction,
) -> MetaContractResult:
    """Execute entry point with default policy configuration."""
    return _DEFAULT_SERVICE.on_execute(contract, metadatas, transaction)


def on_mint(
    contract: MetaContract,
    data_key: str,
    token_id: str,
    data: str,
) -> MetaContractResult:
    """Mint entry point with default policy configuration."""
    return _DEFAULT_SERVICE.on_mint(contract, data_key, token_id, data)


def on_clone() -> bool:
    """Clone entry point."""
    return _DEFAULT_SERVICE.on_clone()
