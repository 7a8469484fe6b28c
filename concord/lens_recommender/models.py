"""
Data models for lens recommendation.

Defines the core data structures passed between the extractor, the
trigger gate, the scoring model and the assembler.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from .constants import (
    AccessScope,
    EntryCost,
    IntentClass,
    Suppression,
    TriggerReason,
)


@dataclass(frozen=True)
class LensCatalogEntry:
    """Static description of a lens the host can hand off to."""

    lens_id: str
    name: str
    domain_tags: Tuple[str, ...]
    intent_tags: Tuple[IntentClass, ...]
    entry_cost: EntryCost
    supported_actions: Tuple[str, ...]
    required_scope: AccessScope
    categories: Tuple[str, ...] = ()
    # Human-readable hints for catalog editors, never scored
    recommended_when: Tuple[str, ...] = ()
    suppress_when: Tuple[str, ...] = ()

    def __repr__(self) -> str:
        return (
            f"LensCatalogEntry(id={self.lens_id}, "
            f"cost={self.entry_cost.value}, "
            f"intents={[i.value for i in self.intent_tags]})"
        )


@dataclass
class Signals:
    """What a single message says about the user's intent."""

    domain_signals: List[str]
    intent_signals: List[IntentClass]  # 1 or 2 entries, primary first
    friction_signals: List[str]
    confidence: float  # 0.0 to 1.0
    friction_score: float = 0.0

    @property
    def primary_intent(self) -> IntentClass:
        return self.intent_signals[0] if self.intent_signals else IntentClass.CHAT_ONLY

    def __repr__(self) -> str:
        return (
            f"Signals(intents={[i.value for i in self.intent_signals]}, "
            f"domains={self.domain_signals}, "
            f"friction={len(self.friction_signals)}, "
            f"conf={self.confidence:.2f})"
        )


@dataclass
class RecentRecommendation:
    """A lens the host showed on an earlier turn."""

    lens_id: str
    turn_index: int
    dismissed: bool = False


@dataclass
class SessionContext:
    """
    Per-conversation state owned by the host.

    The recommender only reads it; the host advances it after each turn.
    """

    recent_messages: List[str] = field(default_factory=list)
    lenses_used: Set[str] = field(default_factory=set)
    recent_recommendations: List[RecentRecommendation] = field(default_factory=list)
    current_turn: int = 0
    previous_intents: List[IntentClass] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"SessionContext(turn={self.current_turn}, "
            f"messages={len(self.recent_messages)}, "
            f"recs={len(self.recent_recommendations)}, "
            f"used={len(self.lenses_used)})"
        )


@dataclass
class TriggerResult:
    """Outcome of the anti-spam trigger gate."""

    should_recommend: bool
    trigger_reason: Optional[TriggerReason] = None
    suppressed_by: Optional[Suppression] = None

    def __repr__(self) -> str:
        reason = self.trigger_reason.value if self.trigger_reason else None
        suppressed = self.suppressed_by.value if self.suppressed_by else None
        return (
            f"TriggerResult(recommend={self.should_recommend}, "
            f"reason={reason}, suppressed={suppressed})"
        )


@dataclass
class ScoredLens:
    """A catalog entry that cleared the score threshold."""

    lens_id: str
    name: str
    score: float
    reason: str
    breakdown: Dict[str, float] = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"ScoredLens(id={self.lens_id}, score={self.score:.3f}, reason={self.reason!r})"


@dataclass
class TaskSeed:
    """Prefilled draft offered when the user accepts a recommendation."""

    title: str
    summary: str
    suggested_actions: List[str] = field(default_factory=list)


@dataclass
class LensRecommendation:
    """A single lens suggestion shown to the user."""

    lens_id: str
    name: str
    reason: str
    score: float
    task_seed: Optional[TaskSeed] = None

    def __repr__(self) -> str:
        return f"LensRecommendation(id={self.lens_id}, score={self.score:.3f})"


@dataclass
class RecommendationDebug:
    """Everything the pipeline looked at, for host-side inspection."""

    signals: Signals
    trigger: TriggerResult
    scored_lenses: List[ScoredLens]
    turn_index: int
    # Gate fired but nothing cleared the threshold
    no_candidates: bool = False


@dataclass
class RecommendationResult:
    """Result of one recommendation pass."""

    recs: List[LensRecommendation]
    debug: Optional[RecommendationDebug] = None

    def __repr__(self) -> str:
        ids = [r.lens_id for r in self.recs]
        reason = None
        if self.debug and self.debug.trigger.trigger_reason:
            reason = self.debug.trigger.trigger_reason.value
        return f"RecommendationResult(recs={ids}, trigger={reason})"
