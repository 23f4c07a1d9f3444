"""Host-facing data contracts for meta contract calls."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

# Policy marker owned by the persistence layer. Every derived record carries it.
LOOSE_FLAG = 1


class MetaContract(BaseModel):
    """Contract instance a call executes against."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    token_key: str = ""
    meta_contract_id: str = ""
    public_key: str = ""
    cid: str = ""


class Metadata(BaseModel):
    """Existing metadata record supplied by the host. Forwarded only."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    hash: str = ""
    token_key: str = ""
    data_key: str = ""
    meta_contract_id: str = ""
    token_id: str = ""
    alias: str = ""
    cid: str = ""
    public_key: str = ""
    version: str = ""
    loose: int = LOOSE_FLAG


class Transaction(BaseModel):
    """Incoming transaction. `data` holds the raw payload text."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    hash: str = ""
    method: str = ""
    meta_contract_id: str = ""
    data_key: str = ""
    token_key: str = ""
    data: str = ""
    public_key: str = ""
    alias: str = ""
    timestamp: int = 0
    chain_id: str = ""
    token_address: str = ""
    token_id: str = ""
    version: str = ""
    mcdata: str = ""
    status: int = 0


class FinalMetadata(BaseModel):
    """One derived record handed to the host for persistence."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    public_key: str
    alias: str
    content: str
    loose: int = LOOSE_FLAG
    version: str = ""


class OpenSeaAttribute(BaseModel):
    """Trait/value pair in an NFT attribute list."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    trait_type: str
    value: str


class MetaContractResult(BaseModel):
    """Uniform outcome envelope of every entry point."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    result: bool
    metadatas: tuple[FinalMetadata, ...] = ()
    error_string: str = ""

    @model_validator(mode="after")
    def _check_consistency(self) -> MetaContractResult:
        """Reject envelopes whose flag, records and error text disagree.

        Returns:
            The validated envelope.

        Raises:
            ValueError: If the envelope is internally inconsistent.
        """
        if self.result and self.error_string:
            raise ValueError("successful result must have an empty error_string")
        if not self.result:
            if self.metadatas:
                raise ValueError("failed result must not carry metadatas")
            if not self.error_string:
                raise ValueError("failed result requires an error_string")
        return self

    @classmethod
    def ok(cls, metadatas: list[FinalMetadata] | None = None) -> MetaContractResult:
        """Construct a successful result.

        Args:
            metadatas: Records to hand to the host, in emission order.

        Returns:
            Successful result envelope.
        """
        return cls(result=True, metadatas=tuple(metadatas or ()), error_string="")

    @classmethod
    def error(cls, message: str) -> MetaContractResult:
        """Construct a failed result with no records.

        Args:
            message: Human-readable rejection reason.

        Returns:
            Failed result envelope.
        """
        return cls(result=False, metadatas=(), error_string=message)
