"""
Intent classifier.

Maps a raw message onto one or two IntentClass values by counting
pattern hits per intent. No learned model: every decision can be traced
back to a row in patterns.INTENT_PATTERNS.
"""

from typing import Dict, List

from ..utils import count_matches
from .constants import IntentClass, MAX_INTENTS, RUNNER_UP_RATIO
from .patterns import INTENT_PATTERNS

_missing = set(IntentClass) - {IntentClass.CHAT_ONLY} - set(INTENT_PATTERNS)
if _missing:
    raise RuntimeError(f"No intent pattern for: {sorted(i.value for i in _missing)}")


def score_intents(message: str) -> Dict[IntentClass, int]:
    """
    Count pattern occurrences for every action intent.

    Args:
        message: Raw user message

    Returns:
        Score per IntentClass (CHAT_ONLY is always 0)

    Example:
        >>> score_intents("plan the steps")[IntentClass.PLAN]
        2
    """
    scores = {intent: 0 for intent in IntentClass}
    for intent, pattern in INTENT_PATTERNS.items():
        scores[intent] += count_matches(pattern, message)
    return scores


def rank_intents(scores: Dict[IntentClass, int]) -> List[IntentClass]:
    """
    Turn per-intent scores into the primary (and maybe secondary) intent.

    The runner-up is kept only when it scores at least half of the top
    intent. Equal scores keep IntentClass declaration order.
    """
    ranked = [
        intent for intent in IntentClass
        if scores.get(intent, 0) > 0
    ]
    ranked.sort(key=lambda intent: -scores[intent])

    if not ranked:
        return [IntentClass.CHAT_ONLY]

    top = ranked[0]
    result = [top]
    for runner_up in ranked[1:MAX_INTENTS]:
        if scores[runner_up] >= scores[top] * RUNNER_UP_RATIO:
            result.append(runner_up)

    return result


def classify_intent(message: str) -> List[IntentClass]:
    """Classify a message into 1-2 intents, primary first."""
    return rank_intents(score_intents(message))
