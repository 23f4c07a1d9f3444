"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from metacontract.config import ContractSettings, ModerationSettings
from metacontract.contract import MetaContractService
from metacontract.types import MetaContract, Transaction
from tests.unit.helpers import CONTRACT_OWNER, SUBMITTER


@pytest.fixture
def contract() -> MetaContract:
    """Contract owned by CONTRACT_OWNER."""
    return MetaContract(
        token_key="token-key",
        meta_contract_id="w3wall",
        public_key=CONTRACT_OWNER,
        cid="bafy-contract",
    )


@pytest.fixture
def make_transaction() -> Callable[..., Transaction]:
    """Factory for transactions submitted by SUBMITTER."""

    def _make(data: str, *, version: str = "v1") -> Transaction:
        return Transaction(
            hash="tx-hash",
            method="metadata",
            meta_contract_id="w3wall",
            data=data,
            public_key=SUBMITTER,
            version=version,
        )

    return _make


@pytest.fixture
def service() -> MetaContractService:
    """Service with default (empty blocklist) policy."""
    return MetaContractService()


@pytest.fixture
def moderated_service() -> MetaContractService:
    """Service with a configured moderation blocklist."""
    return MetaContractService(
        ContractSettings(moderation=ModerationSettings(blocklist=("darn", "Heck")))
    )
