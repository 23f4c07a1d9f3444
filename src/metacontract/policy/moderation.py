"""Free-text moderation gate.

The blocklist ships empty: no text is flagged unless a deployment configures
entries. Matching is raw, case-sensitive substring containment.
"""

from __future__ import annotations

from metacontract.config import ModerationSettings
from metacontract.policy.decision import PolicyDecision

_DEFAULT_SETTINGS = ModerationSettings()


def find_blocked_term(
    text: str, settings: ModerationSettings = _DEFAULT_SETTINGS
) -> str | None:
    """Return the first blocklist entry contained in text, if any.

    Args:
        text: Candidate free text.
        settings: Moderation configuration.

    Returns:
        Matching entry in blocklist order, or None when text is clean.
    """
    for term in settings.blocklist:
        if term and term in text:
            return term
    return None


def evaluate_text(
    text: str, settings: ModerationSettings = _DEFAULT_SETTINGS
) -> PolicyDecision:
    """Evaluate free text against the moderation blocklist.

    Args:
        text: Candidate free text.
        settings: Moderation configuration.

    Returns:
        Deterministic policy decision.
    """
    if find_blocked_term(text, settings) is None:
        return PolicyDecision(allowed=True)
    return PolicyDecision(
        allowed=False,
        code="text_moderation_denied",
        reason="Text contains a blocked term.",
    )
