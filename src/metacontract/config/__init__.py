"""Contract policy configuration loading."""

from metacontract.config.settings import (
    DEFAULT_DESCRIPTION,
    DEFAULT_PLATFORM_NAME,
    DEFAULT_TOPIC_TYPE,
    NFT_STORAGE_PREFIX,
    ContractConfigError,
    ContractSettings,
    LinkPolicySettings,
    MintSettings,
    ModerationSettings,
    load_contract_settings,
)

__all__ = [
    "DEFAULT_DESCRIPTION",
    "DEFAULT_PLATFORM_NAME",
    "DEFAULT_TOPIC_TYPE",
    "NFT_STORAGE_PREFIX",
    "ContractConfigError",
    "ContractSettings",
    "LinkPolicySettings",
    "MintSettings",
    "ModerationSettings",
    "load_contract_settings",
]
