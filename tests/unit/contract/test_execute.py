"""Unit tests for the execute entry point."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from metacontract.contract import MetaContractService, on_execute
from metacontract.types import MetaContract, Metadata, Transaction
from tests.unit.helpers import SUBMITTER, TRUSTED_IMAGE

MakeTransaction = Callable[..., Transaction]


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw,error",
    [
        ("hello", "Data is not a valid format."),
        ("", "Data is not a valid format."),
        ("[1, 2]", "Data does not follow the required JSON schema."),
        ('"text"', "Data does not follow the required JSON schema."),
        ('{"text": "\\ud800"}', "Data is not a valid format."),
        ("{}", "No data inputted"),
        ('{"body": "x"}', "No data inputted"),
    ],
    ids=[
        "not_json",
        "empty",
        "array",
        "string",
        "lone_surrogate",
        "empty_object",
        "unknown_field",
    ],
)
def test_shape_failures_return_empty_failure(
    service: MetaContractService,
    contract: MetaContract,
    make_transaction: MakeTransaction,
    raw: str,
    error: str,
) -> None:
    """Unparseable or wrongly shaped payloads fail without records."""
    # Act - execute malformed payload
    result = service.on_execute(contract, [], make_transaction(raw))

    # Assert - failure envelope with the fixed reason
    assert result.result is False
    assert result.metadatas == ()
    assert result.error_string == error


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw",
    [
        '{"image": "https://ipfs.io/ipfs/bafy"}',
        '{"image": "https://ipfs.io/ipfs/bafy", "text": "fine"}',
        '{"image": "nftstorage.link/ipfs/x", "text": ""}',
    ],
    ids=["image_only", "with_text", "missing_scheme"],
)
def test_untrusted_image_is_rejected(
    service: MetaContractService,
    contract: MetaContract,
    make_transaction: MakeTransaction,
    raw: str,
) -> None:
    """Untrusted links are rejected regardless of text content."""
    result = service.on_execute(contract, [], make_transaction(raw))
    assert result.result is False
    assert result.metadatas == ()
    assert result.error_string == "Invalid image link is been used"


@pytest.mark.unit
def test_link_rejection_wins_over_moderation(
    moderated_service: MetaContractService,
    contract: MetaContract,
    make_transaction: MakeTransaction,
) -> None:
    """The first failing gate determines the error."""
    raw = '{"image": "https://evil.example/x.png", "text": "darn"}'
    result = moderated_service.on_execute(contract, [], make_transaction(raw))
    assert result.error_string == "Invalid image link is been used"


@pytest.mark.unit
def test_blocked_text_is_rejected(
    moderated_service: MetaContractService,
    contract: MetaContract,
    make_transaction: MakeTransaction,
) -> None:
    """Configured blocklist entries reject the payload."""
    raw = f'{{"image": "{TRUSTED_IMAGE}", "text": "oh darn it"}}'
    result = moderated_service.on_execute(contract, [], make_transaction(raw))
    assert result.result is False
    assert result.metadatas == ()
    assert result.error_string == "Profanity found in the text."


@pytest.mark.unit
def test_blocklist_is_case_sensitive(
    moderated_service: MetaContractService,
    contract: MetaContract,
    make_transaction: MakeTransaction,
) -> None:
    """Different casing passes moderation."""
    result = moderated_service.on_execute(
        contract, [], make_transaction('{"text": "heck yes"}')
    )
    assert result.result is True


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw",
    [
        '{"text": "anything at all, no policy configured"}',
        '{"text": ""}',
        '{"image": ""}',
        f'{{"image": "{TRUSTED_IMAGE}"}}',
        f'{{"image": "{TRUSTED_IMAGE}", "text": "gm"}}',
        '{ "text" : "spaced" ,\n  "extra": [1, 2.50, null] }',
    ],
    ids=[
        "text_only",
        "empty_text",
        "empty_image",
        "image_without_text",
        "image_and_text",
        "formatting",
    ],
)
def test_accepted_payload_is_echoed_verbatim(
    service: MetaContractService,
    contract: MetaContract,
    make_transaction: MakeTransaction,
    raw: str,
) -> None:
    """Success yields exactly one anonymous record echoing the raw payload."""
    # Act - execute accepted payload
    result = service.on_execute(contract, [], make_transaction(raw, version="v3"))

    # Assert - single echo record, byte-identical content
    assert result.result is True
    assert result.error_string == ""
    assert len(result.metadatas) == 1
    record = result.metadatas[0]
    assert record.content == raw
    assert record.public_key == SUBMITTER
    assert record.alias == ""
    assert record.loose == 1
    assert record.version == "v3"


@pytest.mark.unit
def test_image_without_text_does_not_fault(
    service: MetaContractService,
    contract: MetaContract,
    make_transaction: MakeTransaction,
) -> None:
    """An absent text field needs no moderation and never crashes the call."""
    raw = f'{{"image": "{TRUSTED_IMAGE}", "text": 12}}'
    result = service.on_execute(contract, [], make_transaction(raw))
    assert result.result is True
    assert result.metadatas[0].content == raw


@pytest.mark.unit
def test_prior_metadata_does_not_affect_outcome(
    service: MetaContractService,
    contract: MetaContract,
    make_transaction: MakeTransaction,
) -> None:
    """Existing records are forwarded only."""
    transaction = make_transaction('{"text": "hi"}')
    prior = [
        Metadata(alias="name", data_key="k", public_key="0xother", version="v0")
    ]
    assert service.on_execute(contract, prior, transaction) == service.on_execute(
        contract, [], transaction
    )


@pytest.mark.unit
def test_repeated_calls_are_byte_identical(
    contract: MetaContract, make_transaction: MakeTransaction
) -> None:
    """Module-level entry point holds no state between calls."""
    for raw in ('{"text": "hi"}', "nope", '{"image": "http://x"}'):
        transaction = make_transaction(raw)
        first = on_execute(contract, [], transaction)
        second = on_execute(contract, [], transaction)
        assert first.model_dump_json() == second.model_dump_json()
