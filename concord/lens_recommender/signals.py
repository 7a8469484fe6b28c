"""
Signal extraction from a single chat message.

Pulls domain tags, friction phrases and intents out of raw text and
blends them into one confidence value.
"""

from typing import List, Sequence, Tuple

from ..utils import dedupe
from .constants import ConfidenceWeight, IntentClass
from .intent import classify_intent
from .models import Signals
from .patterns import DOMAIN_KEYWORDS, FRICTION_PATTERNS


def extract_domain_signals(message: str) -> List[str]:
    """Collect the tags of every domain pattern the message matches."""
    tags = []
    if not message:
        return tags

    for pattern, pattern_tags in DOMAIN_KEYWORDS:
        if pattern.search(message):
            tags.extend(pattern_tags)

    return dedupe(tags)


def extract_friction_signals(message: str) -> Tuple[List[str], float]:
    """
    Find phrases that show the user wants to act.

    Each pattern counts once: its first match is recorded (lowercased)
    and its weight is added to the friction score.

    Returns:
        Tuple of (matched phrases, friction score)
    """
    phrases = []
    score = 0.0
    if not message:
        return phrases, score

    for pattern, weight in FRICTION_PATTERNS:
        match = pattern.search(message)
        if match:
            phrases.append(match.group(0).lower())
            score += weight

    return dedupe(phrases), score


def compute_confidence(
    friction_score: float,
    intent_signals: Sequence[IntentClass],
    domain_signals: Sequence[str]
) -> float:
    """
    Blend friction, intent clarity and domain presence into [0, 1].

    Monotonic in every input: more friction never lowers confidence.
    """
    confidence = friction_score * ConfidenceWeight.FRICTION
    if intent_signals and intent_signals[0] != IntentClass.CHAT_ONLY:
        confidence += ConfidenceWeight.INTENT
    if domain_signals:
        confidence += ConfidenceWeight.DOMAIN
    return max(0.0, min(1.0, confidence))


def extract_signals(message: str) -> Signals:
    """
    Extract all recommendation signals from a message.

    Args:
        message: Raw user message (any length, may be empty)

    Returns:
        Signals with deduplicated domain/friction lists, 1-2 intents
        and a bounded confidence

    Example:
        >>> signals = extract_signals("help me forecast revenue")
        >>> signals.intent_signals
        [<IntentClass.SIMULATE: 'SIMULATE'>]
    """
    message = message or ""

    domain_signals = extract_domain_signals(message)
    friction_signals, friction_score = extract_friction_signals(message)
    intent_signals = classify_intent(message)

    return Signals(
        domain_signals=domain_signals,
        intent_signals=intent_signals,
        friction_signals=friction_signals,
        confidence=compute_confidence(friction_score, intent_signals, domain_signals),
        friction_score=friction_score,
    )
