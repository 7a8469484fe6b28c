"""
Main lens recommender orchestrator.

Runs the per-turn pipeline:

    message -> signals -> trigger gate -> scoring -> recommendations

Read only: the session and the catalog are never modified. The host
advances the session after consuming the result.
"""

import logging
from typing import List, Optional

from ..utils import truncate_text
from .catalog import LensCatalog, get_default_catalog
from .constants import (
    DEFAULT_RECOMMENDATIONS,
    MAX_RECOMMENDATIONS,
    TASK_SEED_MAX_ACTIONS,
    TASK_SEED_MAX_TAGS,
    TASK_SEED_TITLE_LENGTH,
)
from .models import (
    LensCatalogEntry,
    LensRecommendation,
    RecommendationDebug,
    RecommendationResult,
    ScoredLens,
    SessionContext,
    Signals,
    TaskSeed,
)
from .patterns import LENS_REQUEST_PATTERN
from .scoring import derive_requested_actions, score_lenses
from .signals import extract_signals
from .triggers import check_triggers

logger = logging.getLogger("concord.lens_recommender")


def is_asking_for_lens(message: str) -> bool:
    """True when the user explicitly asks which lens to use."""
    return bool(message) and bool(LENS_REQUEST_PATTERN.search(message))


def generate_task_seed(
    entry: Optional[LensCatalogEntry],
    message: str,
    signals: Signals
) -> TaskSeed:
    """
    Build the draft a lens opens with if the user accepts.

    Title is the message itself, truncated. The summary cites the domain
    tags this lens matched, falling back to the message's own tags.
    """
    tags = []
    if entry is not None:
        tags = [d for d in signals.domain_signals if d in entry.domain_tags]
    if not tags:
        tags = list(signals.domain_signals)
    tags = tags[:TASK_SEED_MAX_TAGS]

    if tags:
        summary = f"Based on chat context: {', '.join(tags)} discussion"
    else:
        summary = "Based on chat context"

    return TaskSeed(
        title=truncate_text(message, TASK_SEED_TITLE_LENGTH),
        summary=summary,
        suggested_actions=derive_requested_actions(signals.intent_signals)[:TASK_SEED_MAX_ACTIONS],
    )


class LensRecommender:
    """
    Chat lens recommendation engine.

    Holds only immutable configuration (catalog, debug flag), so one
    instance can serve any number of conversations concurrently.
    """

    def __init__(self, catalog: Optional[LensCatalog] = None, include_debug: bool = True):
        """
        Args:
            catalog: Lens catalog to score against (default catalog if None)
            include_debug: Attach the debug bundle to every result
        """
        self.catalog = catalog if catalog is not None else get_default_catalog()
        self.include_debug = include_debug

    def recommend(self, message: str, session: SessionContext) -> RecommendationResult:
        """
        Main entry point for lens recommendation.

        Args:
            message: Current user message
            session: Host-owned session context (read only)

        Returns:
            RecommendationResult with 0-3 recommendations
        """
        message = message or ""

        signals = extract_signals(message)
        trigger = check_triggers(signals, session)

        scored: List[ScoredLens] = []
        recs: List[LensRecommendation] = []

        if trigger.should_recommend:
            scored = score_lenses(signals, session, self.catalog)

            # Max 1 unless the user asks "which lens should I use?"
            max_recs = MAX_RECOMMENDATIONS if is_asking_for_lens(message) else DEFAULT_RECOMMENDATIONS

            recs = [
                LensRecommendation(
                    lens_id=lens.lens_id,
                    name=lens.name,
                    reason=lens.reason,
                    score=lens.score,
                    task_seed=generate_task_seed(self.catalog.get(lens.lens_id), message, signals),
                )
                for lens in scored[:max_recs]
            ]

            if not recs:
                logger.debug(
                    f"[LENS] Turn {session.current_turn}: "
                    f"{trigger.trigger_reason.value} fired but no lens cleared the threshold"
                )
            else:
                logger.debug(
                    f"[LENS] Turn {session.current_turn}: recommending "
                    f"{', '.join(r.lens_id for r in recs)}"
                )

        debug = None
        if self.include_debug:
            debug = RecommendationDebug(
                signals=signals,
                trigger=trigger,
                scored_lenses=scored,
                turn_index=session.current_turn,
                no_candidates=trigger.should_recommend and not scored,
            )

        return RecommendationResult(recs=recs, debug=debug)


def recommend(
    message: str,
    session: SessionContext,
    catalog: Optional[LensCatalog] = None
) -> RecommendationResult:
    """
    Recommend lenses for one chat turn.

    Example:
        >>> session = SessionContext(previous_intents=[IntentClass.IDEATE])
        >>> result = recommend("I need to plan the milestones", session)
        >>> result.debug.trigger.trigger_reason
        <TriggerReason.INTENT_SHIFT: 'intent_shift'>
    """
    return LensRecommender(catalog=catalog).recommend(message, session)
