"""Content admission policy package."""

from metacontract.policy.decision import PolicyDecision
from metacontract.policy.links import evaluate_image_link, is_trusted_link
from metacontract.policy.moderation import evaluate_text, find_blocked_term

__all__ = [
    "PolicyDecision",
    "evaluate_image_link",
    "evaluate_text",
    "find_blocked_term",
    "is_trusted_link",
]
