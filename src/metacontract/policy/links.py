"""Image link provenance policy."""

from __future__ import annotations

from metacontract.config import LinkPolicySettings
from metacontract.policy.decision import PolicyDecision

_DEFAULT_SETTINGS = LinkPolicySettings()


def is_trusted_link(
    link: str, settings: LinkPolicySettings = _DEFAULT_SETTINGS
) -> bool:
    """Return whether link points at a trusted content-addressed store.

    Exact, case-sensitive prefix match. No normalization is applied.

    Args:
        link: Declared image reference.
        settings: Trusted provider configuration.

    Returns:
        True when the link is empty (and tolerated) or has a trusted prefix.
    """
    if link == "":
        return settings.allow_empty
    return any(link.startswith(prefix) for prefix in settings.trusted_prefixes if prefix)


def evaluate_image_link(
    link: str, settings: LinkPolicySettings = _DEFAULT_SETTINGS
) -> PolicyDecision:
    """Evaluate an image reference against the link provenance policy.

    Args:
        link: Declared image reference.
        settings: Trusted provider configuration.

    Returns:
        Deterministic policy decision.
    """
    if is_trusted_link(link, settings):
        return PolicyDecision(allowed=True)
    return PolicyDecision(
        allowed=False,
        code="image_link_untrusted",
        reason="Image link is not served by a trusted storage provider.",
    )
