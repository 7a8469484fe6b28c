"""
Concord Chat Services
=====================
Server-side helpers for the Concord chat interface.

Usage:
    from concord import recommend, SessionContext
    from concord.lens_recommender import advance_session
    from concord.api import create_app
"""

__version__ = "1.0.0"

from .utils import setup_logger, log, truncate_text

from .lens_recommender import (
    # Data classes
    IntentClass, SessionContext, RecommendationResult, LensRecommendation,
    # Recommender
    LensRecommender, recommend,
    # Session helpers
    create_session_context, advance_session,
)

__all__ = [
    '__version__',
    'setup_logger', 'log', 'truncate_text',
    'IntentClass', 'SessionContext', 'RecommendationResult', 'LensRecommendation',
    'LensRecommender', 'recommend',
    'create_session_context', 'advance_session',
]
