"""Derived metadata record builders."""

from __future__ import annotations

from metacontract.canonical import compact_json
from metacontract.config import MintSettings
from metacontract.types import (
    LOOSE_FLAG,
    FinalMetadata,
    MetaContract,
    OpenSeaAttribute,
    Transaction,
)

MINT_ALIASES = ("name", "image", "body")
DESCRIPTION_ALIAS = "description"
ATTRIBUTES_ALIAS = "attributes"


def build_echo_record(transaction: Transaction) -> FinalMetadata:
    """Build the anonymous record echoing an accepted transaction payload.

    Args:
        transaction: Accepted transaction.

    Returns:
        Record whose content is the payload text, byte-for-byte.
    """
    return FinalMetadata(
        public_key=transaction.public_key,
        alias="",
        content=transaction.data,
        loose=LOOSE_FLAG,
        version=transaction.version,
    )


def _contract_record(contract: MetaContract, alias: str, content: str) -> FinalMetadata:
    return FinalMetadata(
        public_key=contract.public_key,
        alias=alias,
        content=content,
        loose=LOOSE_FLAG,
        version="",
    )


def build_mint_records(
    contract: MetaContract, values: tuple[str, ...]
) -> list[FinalMetadata]:
    """Build name/image/body records from decoded mint values.

    Args:
        contract: Contract owning the minted records.
        values: Decoded values, in name, image, body order.

    Returns:
        One record per alias, in alias order.

    Raises:
        ValueError: If the number of values does not match the aliases.
    """
    if len(values) != len(MINT_ALIASES):
        raise ValueError(
            f"expected {len(MINT_ALIASES)} mint values, got {len(values)}"
        )
    return [
        _contract_record(contract, alias, value)
        for alias, value in zip(MINT_ALIASES, values, strict=True)
    ]


def build_attributes(settings: MintSettings) -> list[OpenSeaAttribute]:
    """Return the fixed attribute list attached to every mint."""
    return [
        OpenSeaAttribute(trait_type="origin", value=settings.platform_name),
        OpenSeaAttribute(trait_type="type", value=settings.topic_type),
    ]


def build_description_record(
    contract: MetaContract, settings: MintSettings
) -> FinalMetadata:
    """Build the constant description record."""
    return _contract_record(contract, DESCRIPTION_ALIAS, settings.description)


def build_attributes_record(
    contract: MetaContract, settings: MintSettings
) -> FinalMetadata:
    """Build the attributes record; content is the compact JSON attribute list."""
    return _contract_record(
        contract, ATTRIBUTES_ALIAS, compact_json(build_attributes(settings))
    )
