"""Deterministic transaction validation and metadata derivation for meta contracts."""

from metacontract.contract import MetaContractService, on_clone, on_execute, on_mint
from metacontract.errors import ContractError, ContractErrorCode
from metacontract.types import (
    LOOSE_FLAG,
    FinalMetadata,
    MetaContract,
    MetaContractResult,
    Metadata,
    OpenSeaAttribute,
    Transaction,
)

__all__ = [
    "LOOSE_FLAG",
    "ContractError",
    "ContractErrorCode",
    "FinalMetadata",
    "MetaContract",
    "MetaContractResult",
    "MetaContractService",
    "Metadata",
    "OpenSeaAttribute",
    "Transaction",
    "on_clone",
    "on_execute",
    "on_mint",
]
