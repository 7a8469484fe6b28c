"""
Integration layer for chat handlers.

The recommender never touches session state; these helpers are what a
chat handler uses to build, advance and serialize it between turns.
Every helper returns a new SessionContext and leaves its input alone.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple

from ..config import lens_recommender as lens_config
from .constants import IntentClass
from .intent import classify_intent
from .models import (
    LensRecommendation,
    RecentRecommendation,
    RecommendationResult,
    ScoredLens,
    SessionContext,
    Signals,
)
from .recommender import LensRecommender

logger = logging.getLogger("concord.lens_recommender.integration")


def create_session_context() -> SessionContext:
    """Empty context for a brand new conversation."""
    return SessionContext()


def advance_session(
    session: SessionContext,
    message: str,
    result: Optional[RecommendationResult] = None,
    max_messages: Optional[int] = None,
    max_intents: Optional[int] = None
) -> SessionContext:
    """
    Produce the session for the next turn.

    Appends the message and its primary intent, records every shown
    recommendation at the current turn and bumps the turn counter.

    Args:
        session: Session the result was computed with
        message: The user message of this turn
        result: What the recommender returned for it (if anything)
        max_messages: Bound on recent_messages (config default if None)
        max_intents: Bound on previous_intents (config default if None)

    Returns:
        A new SessionContext; `session` is not modified
    """
    if max_messages is None:
        max_messages = lens_config.max_recent_messages
    if max_intents is None:
        max_intents = lens_config.max_previous_intents

    if result is not None and result.debug is not None:
        primary = result.debug.signals.primary_intent
    else:
        primary = classify_intent(message or "")[0]

    shown = [
        RecentRecommendation(lens_id=rec.lens_id, turn_index=session.current_turn)
        for rec in (result.recs if result is not None else [])
    ]

    return SessionContext(
        recent_messages=_keep_last(list(session.recent_messages) + [message or ""], max_messages),
        lenses_used=set(session.lenses_used),
        recent_recommendations=[replace(r) for r in session.recent_recommendations] + shown,
        current_turn=session.current_turn + 1,
        previous_intents=_keep_last(list(session.previous_intents) + [primary], max_intents),
    )


def _keep_last(items: List[Any], limit: int) -> List[Any]:
    """Last `limit` items; nothing at all for a limit below 1."""
    return items[-limit:] if limit > 0 else []


def mark_dismissed(session: SessionContext, lens_id: str, turn_index: int) -> SessionContext:
    """Record that the user dismissed a recommendation shown at `turn_index`."""
    found = False
    recs = []
    for r in session.recent_recommendations:
        if r.lens_id == lens_id and r.turn_index == turn_index:
            recs.append(replace(r, dismissed=True))
            found = True
        else:
            recs.append(replace(r))

    if not found:
        recs.append(RecentRecommendation(lens_id=lens_id, turn_index=turn_index, dismissed=True))

    return replace(
        session,
        recent_messages=list(session.recent_messages),
        lenses_used=set(session.lenses_used),
        recent_recommendations=recs,
        previous_intents=list(session.previous_intents),
    )


def mark_opened(session: SessionContext, lens_id: str) -> SessionContext:
    """Record that the user opened a lens."""
    return replace(
        session,
        recent_messages=list(session.recent_messages),
        lenses_used=set(session.lenses_used) | {lens_id},
        recent_recommendations=[replace(r) for r in session.recent_recommendations],
        previous_intents=list(session.previous_intents),
    )


# ================================================================================
# SERIALIZATION
# ================================================================================

def _list(data: Dict[str, Any], key: str) -> List[Any]:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise ValueError(f"'{key}' must be a list")
    return value


def _string(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must hold strings, got {value!r}")
    return value


def _strings(data: Dict[str, Any], key: str) -> List[str]:
    return [_string(item, key) for item in _list(data, key)]


def session_from_dict(data: Optional[Dict[str, Any]]) -> SessionContext:
    """
    Build a SessionContext from its JSON form.

    Raises:
        ValueError: On a malformed session (bad intent, missing fields, ...)
    """
    if not data:
        return create_session_context()
    if not isinstance(data, dict):
        raise ValueError("Session must be an object")

    try:
        return SessionContext(
            recent_messages=_strings(data, 'recent_messages'),
            lenses_used=set(_strings(data, 'lenses_used')),
            recent_recommendations=[
                RecentRecommendation(
                    lens_id=_string(r['lens_id'], 'lens_id'),
                    turn_index=int(r['turn_index']),
                    dismissed=bool(r.get('dismissed', False)),
                )
                for r in _list(data, 'recent_recommendations')
            ],
            current_turn=int(data.get('current_turn', 0)),
            previous_intents=[IntentClass(i) for i in _list(data, 'previous_intents')],
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Malformed session: {e}") from e


def session_to_dict(session: SessionContext) -> Dict[str, Any]:
    return {
        'recent_messages': list(session.recent_messages),
        'lenses_used': sorted(session.lenses_used),
        'recent_recommendations': [
            {'lens_id': r.lens_id, 'turn_index': r.turn_index, 'dismissed': r.dismissed}
            for r in session.recent_recommendations
        ],
        'current_turn': session.current_turn,
        'previous_intents': [i.value for i in session.previous_intents],
    }


def _signals_to_dict(signals: Signals) -> Dict[str, Any]:
    return {
        'domain_signals': list(signals.domain_signals),
        'intent_signals': [i.value for i in signals.intent_signals],
        'friction_signals': list(signals.friction_signals),
        'friction_score': signals.friction_score,
        'confidence': signals.confidence,
    }


def _scored_to_dict(lens: ScoredLens) -> Dict[str, Any]:
    return {
        'lens_id': lens.lens_id,
        'name': lens.name,
        'score': lens.score,
        'reason': lens.reason,
        'breakdown': dict(lens.breakdown),
    }


def _rec_to_dict(rec: LensRecommendation) -> Dict[str, Any]:
    task_seed = None
    if rec.task_seed is not None:
        task_seed = {
            'title': rec.task_seed.title,
            'summary': rec.task_seed.summary,
            'suggested_actions': list(rec.task_seed.suggested_actions),
        }
    return {
        'lens_id': rec.lens_id,
        'name': rec.name,
        'reason': rec.reason,
        'score': rec.score,
        'task_seed': task_seed,
    }


def result_to_dict(result: RecommendationResult) -> Dict[str, Any]:
    """JSON-ready form of a RecommendationResult."""
    data: Dict[str, Any] = {'recs': [_rec_to_dict(r) for r in result.recs]}

    if result.debug is not None:
        trigger = result.debug.trigger
        data['debug'] = {
            'signals': _signals_to_dict(result.debug.signals),
            'trigger': {
                'should_recommend': trigger.should_recommend,
                'trigger_reason': trigger.trigger_reason.value if trigger.trigger_reason else None,
                'suppressed_by': trigger.suppressed_by.value if trigger.suppressed_by else None,
            },
            'scored_lenses': [_scored_to_dict(s) for s in result.debug.scored_lenses],
            'turn_index': result.debug.turn_index,
            'no_candidates': result.debug.no_candidates,
        }

    return data


# ================================================================================
# CHAT HANDLER INTEGRATION
# ================================================================================

_default_recommender = None


def get_default_recommender() -> LensRecommender:
    """
    Get the default global recommender instance.

    Returns:
        Singleton LensRecommender over the default catalog
    """
    global _default_recommender
    if _default_recommender is None:
        _default_recommender = LensRecommender(include_debug=lens_config.debug_payload)
    return _default_recommender


def integrate_with_chat(
    message: str,
    session: SessionContext,
    recommender: Optional[LensRecommender] = None
) -> Tuple[List[LensRecommendation], Optional[str]]:
    """
    Integration function for chat handlers.

    Args:
        message: Current user message
        session: Session of this conversation (read only)
        recommender: Instance of LensRecommender (default one if None)

    Returns:
        Tuple of (recommendations, feedback line to show under the reply)
        - feedback is None when nothing is recommended

    Example:
        >>> recs, feedback = integrate_with_chat(
        ...     "which lens should I use to forecast revenue?",
        ...     create_session_context(),
        ... )
        >>> feedback
        'Try Simulation (simulate with simulation)'
    """
    if recommender is None:
        recommender = get_default_recommender()

    result = recommender.recommend(message, session)

    if not result.recs:
        return [], None

    top = result.recs[0]
    logger.info(f"[LENS] Recommending: {top.lens_id} ({top.score:.2f}) - {top.reason}")
    if len(result.recs) > 1:
        alt_names = [r.lens_id for r in result.recs[1:]]
        logger.info(f"[LENS] Alternatives: {', '.join(alt_names)}")

    return result.recs, f"Try {top.name} ({top.reason})"
