"""
Concord Chat Lens Recommender
=============================

Decides, turn by turn, whether to suggest a lens to the user, which one
and why. Read only: it never mutates the conversation, the session or
the catalog.

Package Structure:
    constants.py        - Intent vocabulary, weights and thresholds
    models.py           - Data classes and type definitions
    patterns.py         - Domain, friction and intent pattern tables
    catalog.py          - Immutable lens catalog
    data/               - Catalog rows
    intent.py           - Intent classifier
    signals.py          - Signal extraction
    triggers.py         - Anti-spam trigger gate
    scoring.py          - Lens scoring model
    recommender.py      - Main orchestrator
    telemetry.py        - Per-session counters (host owned)
    integration.py      - Session helpers and chat handler glue
"""

from .constants import (
    AccessScope,
    EntryCost,
    IntentClass,
    Suppression,
    TriggerReason,
    SCORE_THRESHOLD,
)
from .models import (
    LensCatalogEntry,
    LensRecommendation,
    RecentRecommendation,
    RecommendationDebug,
    RecommendationResult,
    ScoredLens,
    SessionContext,
    Signals,
    TaskSeed,
    TriggerResult,
)
from .catalog import LensCatalog, get_default_catalog, get_recommender_entry
from .intent import classify_intent
from .signals import extract_signals
from .triggers import check_triggers
from .scoring import score_lenses
from .recommender import LensRecommender, recommend
from .telemetry import (
    SessionTelemetry,
    create_session_telemetry,
    record_recommendation_shown,
    record_lens_opened,
    record_dismissal,
    record_time_to_action,
    summarize_telemetry,
)
from .integration import (
    create_session_context,
    advance_session,
    mark_dismissed,
    mark_opened,
    integrate_with_chat,
)

__all__ = [
    # Vocabulary
    'AccessScope',
    'EntryCost',
    'IntentClass',
    'Suppression',
    'TriggerReason',
    'SCORE_THRESHOLD',

    # Data models
    'LensCatalogEntry',
    'LensRecommendation',
    'RecentRecommendation',
    'RecommendationDebug',
    'RecommendationResult',
    'ScoredLens',
    'SessionContext',
    'Signals',
    'TaskSeed',
    'TriggerResult',

    # Catalog
    'LensCatalog',
    'get_default_catalog',
    'get_recommender_entry',

    # Pipeline stages
    'classify_intent',
    'extract_signals',
    'check_triggers',
    'score_lenses',

    # Main recommender
    'LensRecommender',
    'recommend',

    # Telemetry
    'SessionTelemetry',
    'create_session_telemetry',
    'record_recommendation_shown',
    'record_lens_opened',
    'record_dismissal',
    'record_time_to_action',
    'summarize_telemetry',

    # Integration
    'create_session_context',
    'advance_session',
    'mark_dismissed',
    'mark_opened',
    'integrate_with_chat',
]

__version__ = '1.0.0'
