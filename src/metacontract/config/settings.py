"""Contract policy settings and loading helpers."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

NFT_STORAGE_PREFIX = "https://nftstorage.link/ipfs/"
DEFAULT_DESCRIPTION = "A subject in w3wall decentralize forum"
DEFAULT_PLATFORM_NAME = "w3wall"
DEFAULT_TOPIC_TYPE = "topic"


class LinkPolicySettings(BaseModel):
    """Trusted content-addressed storage providers for image links."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    trusted_prefixes: tuple[str, ...] = (NFT_STORAGE_PREFIX,)
    allow_empty: bool = True


class ModerationSettings(BaseModel):
    """Ordered blocklist of disallowed substrings. Empty by default."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    blocklist: tuple[str, ...] = ()


class MintSettings(BaseModel):
    """Constant content emitted on every mint."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    description: str = DEFAULT_DESCRIPTION
    platform_name: str = Field(default=DEFAULT_PLATFORM_NAME, min_length=1)
    topic_type: str = Field(default=DEFAULT_TOPIC_TYPE, min_length=1)


class ContractSettings(BaseModel):
    """Root contract policy configuration model."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    links: LinkPolicySettings = LinkPolicySettings()
    moderation: ModerationSettings = ModerationSettings()
    mint: MintSettings = MintSettings()


class ContractConfigError(RuntimeError):
    """Raised when contract config cannot be decoded or validated."""


def load_contract_settings(path: Path) -> ContractSettings:
    """Load contract settings from disk, defaulting when missing.

    `.json` files are parsed as JSON; anything else as YAML. An empty document
    yields defaults.

    Args:
        path: Config file path.

    Returns:
        Parsed settings, or defaults when file does not exist.

    Raises:
        ContractConfigError: If payload decode or validation fails.
    """
    if not path.exists():
        return ContractSettings()
    raw = path.read_text(encoding="utf-8")
    is_json = path.suffix.lower() == ".json"
    try:
        payload = json.loads(raw) if is_json else yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        kind = "JSON" if is_json else "YAML"
        raise ContractConfigError(f"Invalid contract config {kind}: {exc}") from exc
    if payload is None:
        payload = {}
    elif not isinstance(payload, dict):
        raise ContractConfigError(
            "Invalid contract config payload: root must be an object"
        )
    try:
        return ContractSettings.model_validate(payload)
    except ValidationError as exc:
        raise ContractConfigError(f"Invalid contract config payload: {exc}") from exc
