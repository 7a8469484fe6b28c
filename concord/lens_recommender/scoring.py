"""
Lens scoring model.

Scores every catalog entry against the message signals and the session:

    score = 0.25*domain + 0.25*intent + 0.20*action + 0.10*shadow
            - 0.10*friction - 0.10*spam

Only lenses scoring at least SCORE_THRESHOLD survive, best first.
"""

from typing import Dict, Iterable, List, Sequence, Tuple

from ..utils import dedupe
from .constants import (
    FRICTION_PENALTIES,
    MAX_SCORED_LENSES,
    SCORE_THRESHOLD,
    SHADOW_BOOST,
    SPAM_PENALTY_STEP,
    SPAM_WINDOW_TURNS,
    EntryCost,
    IntentClass,
    ScoreWeight,
)
from .models import LensCatalogEntry, RecentRecommendation, ScoredLens, SessionContext, Signals

# Action verbs each intent asks for
INTENT_ACTIONS: Dict[IntentClass, Tuple[str, ...]] = {
    IntentClass.CHAT_ONLY: (),
    IntentClass.IDEATE: ('draft',),
    IntentClass.STRUCTURE: ('draft', 'plan'),
    IntentClass.PLAN: ('plan',),
    IntentClass.SIMULATE: ('simulate',),
    IntentClass.BUILD: ('draft', 'plan'),
    IntentClass.PUBLISH: ('publish',),
    IntentClass.AUDIT: ('audit', 'legal-check'),
}

_missing = set(IntentClass) - set(INTENT_ACTIONS)
if _missing:
    raise RuntimeError(f"No action mapping for: {sorted(i.value for i in _missing)}")

_missing_costs = set(EntryCost) - set(FRICTION_PENALTIES)
if _missing_costs:
    raise RuntimeError(f"No friction penalty for: {sorted(c.value for c in _missing_costs)}")


def derive_requested_actions(intents: Iterable[IntentClass]) -> List[str]:
    """
    Map intents onto the action verbs they ask for.

    Example:
        >>> derive_requested_actions([IntentClass.BUILD, IntentClass.PLAN])
        ['draft', 'plan']
    """
    actions = []
    for intent in intents:
        actions.extend(INTENT_ACTIONS[intent])
    return dedupe(actions)


def _overlap(wanted: Sequence, offered: Iterable) -> float:
    """Share of `wanted` items that `offered` contains."""
    offered = set(offered)
    if not wanted or not offered:
        return 0.0
    return sum(1 for item in wanted if item in offered) / len(wanted)


def domain_match(domain_signals: Sequence[str], domain_tags: Iterable[str]) -> float:
    return _overlap(domain_signals, domain_tags)


def intent_match(intent_signals: Sequence[IntentClass], intent_tags: Iterable[IntentClass]) -> float:
    return _overlap(intent_signals, intent_tags)


def action_match(requested_actions: Sequence[str], supported_actions: Iterable[str]) -> float:
    return _overlap(requested_actions, supported_actions)


def shadow_boost(lens_id: str, lenses_used: Iterable[str]) -> float:
    """Lenses the user has opened before get a small boost."""
    return SHADOW_BOOST if lens_id in set(lenses_used) else 0.0


def friction_penalty(entry_cost: EntryCost) -> float:
    return FRICTION_PENALTIES[entry_cost]


def spam_penalty(
    lens_id: str,
    recent_recommendations: Iterable[RecentRecommendation],
    current_turn: int
) -> float:
    """Penalize a lens for every time it was shown in the last few turns."""
    recent = sum(
        1 for r in recent_recommendations
        if r.lens_id == lens_id and current_turn - r.turn_index < SPAM_WINDOW_TURNS
    )
    return min(1.0, recent * SPAM_PENALTY_STEP)


def generate_reason(entry: LensCatalogEntry, signals: Signals) -> str:
    """Short, user-facing explanation of why a lens fits."""
    matched_domains = [d for d in signals.domain_signals if d in entry.domain_tags]
    matched_intents = [i for i in signals.intent_signals if i in entry.intent_tags]

    if matched_intents and matched_domains:
        return f"{matched_intents[0].value.lower()} with {matched_domains[0]}"
    if matched_intents:
        return f"supports {matched_intents[0].value.lower()} workflows"
    if matched_domains:
        return f"matches {matched_domains[0]} domain"
    return "relevant to your request"


def score_entry(
    entry: LensCatalogEntry,
    signals: Signals,
    session: SessionContext,
    requested_actions: Sequence[str]
) -> ScoredLens:
    """Score one catalog entry, keeping the factor breakdown."""
    breakdown = {
        'domain': domain_match(signals.domain_signals, entry.domain_tags),
        'intent': intent_match(signals.intent_signals, entry.intent_tags),
        'action': action_match(requested_actions, entry.supported_actions),
        'shadow': shadow_boost(entry.lens_id, session.lenses_used),
        'friction': friction_penalty(entry.entry_cost),
        'spam': spam_penalty(entry.lens_id, session.recent_recommendations, session.current_turn),
    }

    score = (
        ScoreWeight.DOMAIN * breakdown['domain'] +
        ScoreWeight.INTENT * breakdown['intent'] +
        ScoreWeight.ACTION * breakdown['action'] +
        ScoreWeight.SHADOW * breakdown['shadow'] +
        ScoreWeight.FRICTION * breakdown['friction'] +
        ScoreWeight.SPAM * breakdown['spam']
    )

    return ScoredLens(
        lens_id=entry.lens_id,
        name=entry.name,
        score=score,
        reason=generate_reason(entry, signals),
        breakdown=breakdown,
    )


def score_lenses(
    signals: Signals,
    session: SessionContext,
    catalog: Iterable[LensCatalogEntry]
) -> List[ScoredLens]:
    """
    Rank catalog entries for this turn.

    Args:
        signals: Signals of the current message
        session: Host-owned session context (read only)
        catalog: Catalog entries, in tie-break order

    Returns:
        Up to MAX_SCORED_LENSES lenses with score >= SCORE_THRESHOLD,
        highest first; ties keep catalog order
    """
    requested_actions = derive_requested_actions(signals.intent_signals)

    scored = [
        score_entry(entry, signals, session, requested_actions)
        for entry in catalog
    ]
    viable = [lens for lens in scored if lens.score >= SCORE_THRESHOLD]

    # sort() is stable, so equal scores keep catalog order
    viable.sort(key=lambda lens: -lens.score)
    return viable[:MAX_SCORED_LENSES]
