"""
Anti-spam trigger gate.

Decides whether this turn may show a recommendation at all. Rules are
checked in a fixed order and the first match wins; suppression rules
always come before trigger rules.
"""

import logging
from typing import List, Optional

from .constants import (
    ACTION_INTENTS,
    COOLDOWN_TURNS,
    DISMISSAL_BACKOFF_TURNS,
    DISMISSAL_LIMIT,
    EXPLORATORY_INTENTS,
    NEUTRAL_INTENTS,
    REPEATED_TOPIC_MESSAGES,
    IntentClass,
    Suppression,
    TriggerReason,
    TriggerThreshold,
)
from .models import SessionContext, Signals, TriggerResult
from .signals import extract_domain_signals

logger = logging.getLogger("concord.lens_recommender.triggers")

_unclassified = set(IntentClass) - EXPLORATORY_INTENTS - ACTION_INTENTS - NEUTRAL_INTENTS
if _unclassified:
    raise RuntimeError(
        f"Intent shift rules do not cover: {sorted(i.value for i in _unclassified)}"
    )


def _suppression(session: SessionContext) -> Optional[Suppression]:
    """Return why this turn is suppressed, or None."""
    recs = session.recent_recommendations

    # Max 1 recommendation per COOLDOWN_TURNS user messages
    if any(session.current_turn - r.turn_index < COOLDOWN_TURNS for r in recs):
        return Suppression.COOLDOWN

    # Back off after repeated dismissals
    dismissed = [r for r in recs if r.dismissed]
    if len(dismissed) >= DISMISSAL_LIMIT:
        last_dismissed = max(r.turn_index for r in dismissed)
        if session.current_turn - last_dismissed < DISMISSAL_BACKOFF_TURNS:
            return Suppression.DISMISSALS

    return None


def _is_intent_shift(signals: Signals, session: SessionContext) -> bool:
    if not session.previous_intents:
        return False
    previous = session.previous_intents[-1]
    return previous in EXPLORATORY_INTENTS and signals.primary_intent in ACTION_INTENTS


def _shared_domains(domain_sets: List[List[str]]) -> List[str]:
    if not domain_sets:
        return []
    first, rest = domain_sets[0], domain_sets[1:]
    return [d for d in first if all(d in other for other in rest)]


def _is_repeated_topic(signals: Signals, session: SessionContext) -> bool:
    """Current message and the previous ones all touch a common domain."""
    needed = REPEATED_TOPIC_MESSAGES - 1
    if not signals.domain_signals or len(session.recent_messages) < needed:
        return False

    # Recomputed every call; the session does not cache per-message signals
    history = [extract_domain_signals(m) for m in session.recent_messages[-needed:]]
    return bool(_shared_domains([signals.domain_signals] + history))


def check_triggers(signals: Signals, session: SessionContext) -> TriggerResult:
    """
    Run the trigger decision list.

    Args:
        signals: Signals of the current message
        session: Host-owned session context (read only)

    Returns:
        TriggerResult; when suppressed, suppressed_by says which rule
    """
    suppressed = _suppression(session)
    if suppressed is not None:
        logger.debug(f"[LENS] Turn {session.current_turn} suppressed: {suppressed.value}")
        return TriggerResult(should_recommend=False, suppressed_by=suppressed)

    reason = None
    if _is_intent_shift(signals, session):
        reason = TriggerReason.INTENT_SHIFT
    elif signals.friction_signals and signals.confidence >= TriggerThreshold.EXPLICIT_ASK:
        reason = TriggerReason.EXPLICIT_ASK
    elif signals.confidence >= TriggerThreshold.HIGH_FRICTION:
        reason = TriggerReason.HIGH_FRICTION
    elif _is_repeated_topic(signals, session):
        reason = TriggerReason.REPEATED_TOPIC

    if reason is None:
        return TriggerResult(should_recommend=False)

    logger.debug(f"[LENS] Turn {session.current_turn} triggered: {reason.value}")
    return TriggerResult(should_recommend=True, trigger_reason=reason)
