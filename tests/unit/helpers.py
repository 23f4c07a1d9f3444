"""Test-only helpers for unit tests. Not part of the package API."""

from __future__ import annotations

from eth_abi import encode

CONTRACT_OWNER = "0xowner"
SUBMITTER = "0xsubmitter"
TRUSTED_IMAGE = (
    "https://nftstorage.link/ipfs/"
    "bafybeigdyrzt5sfp7udm7hu76uh7y26nf3efuylqabf3oclgtqy55fbzdi"
)


def encode_mint_data(*values: str) -> str:
    """Hex-encode values as an ABI tuple of strings (no 0x prefix).

    Args:
        values: Strings to encode, in tuple order.

    Returns:
        Hex text accepted by the mint entry point.
    """
    return encode(["string"] * len(values), list(values)).hex()


def set_byte(data: str, index: int, value: int) -> str:
    """Return hex data with the byte at index replaced.

    Args:
        data: Hex text without prefix.
        index: Byte offset to overwrite.
        value: New byte value.

    Returns:
        Modified hex text.
    """
    raw = bytearray.fromhex(data)
    raw[index] = value
    return raw.hex()
