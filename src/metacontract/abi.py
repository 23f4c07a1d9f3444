"""Adapter over the `eth_abi` decoder for mint payloads.

Mint data arrives as hex text encoding an ABI tuple of strings. Decoding
outcomes are returned as a tagged union so callers decide explicitly what a
wrong-arity tuple means.
"""

from __future__ import annotations

import binascii
from dataclasses import dataclass
from typing import TypeAlias

from eth_abi import decode
from eth_abi.exceptions import DecodingError

from metacontract.errors import decode_failure

MINT_FIELD_COUNT = 3


@dataclass(frozen=True)
class DecodedTuple:
    """Decode succeeded with the expected number of values."""

    values: tuple[str, ...]


@dataclass(frozen=True)
class ArityMismatch:
    """Decode succeeded but produced a different number of values."""

    expected: int
    values: tuple[str, ...]


@dataclass(frozen=True)
class DecodeFailed:
    """Bytes did not decode as the requested tuple."""

    reason: str


DecodeOutcome: TypeAlias = DecodedTuple | ArityMismatch | DecodeFailed


def decode_hex(data: str) -> bytes:
    """Decode strict hex text (no `0x` prefix, no whitespace).

    Args:
        data: Hex-encoded payload.

    Returns:
        Raw bytes.

    Raises:
        ContractError: DECODE_FAILURE with the underlying reason.
    """
    try:
        return binascii.unhexlify(data.encode("ascii"))
    except UnicodeEncodeError:
        raise decode_failure("Invalid character in hex string") from None
    except binascii.Error as exc:
        raise decode_failure(exc) from exc


def _lossy_text(value: bytes) -> str:
    # Invalid UTF-8 sequences become U+FFFD.
    return value.decode("utf-8", errors="replace")


def decode_string_tuple(data: bytes, arity: int = MINT_FIELD_COUNT) -> DecodeOutcome:
    """Decode ABI-encoded bytes as a tuple of strings.

    `string` and `bytes` share one ABI encoding, so each field is read as
    `bytes` and converted to text lossily. Padding bytes are not validated.

    Args:
        data: ABI-encoded bytes.
        arity: Number of string fields in the tuple.

    Returns:
        Tagged outcome; never raises for malformed input.
    """
    try:
        decoded = decode(["bytes"] * arity, data, strict=False)
    except (DecodingError, ValueError, OverflowError) as exc:
        return DecodeFailed(reason=str(exc))
    values = tuple(_lossy_text(value) for value in decoded)
    if len(values) != arity:
        return ArityMismatch(expected=arity, values=values)
    return DecodedTuple(values=values)
