"""
Constants and configuration for lens recommendation.

Centralizes the intent vocabulary, scoring weights, thresholds and the
anti-spam windows used by the trigger gate.
"""

from enum import Enum


class IntentClass(str, Enum):
    """
    Closed set of conversational intents.

    Declaration order is the tie-break order used by the classifier.
    """
    CHAT_ONLY = 'CHAT_ONLY'
    IDEATE = 'IDEATE'
    STRUCTURE = 'STRUCTURE'
    PLAN = 'PLAN'
    SIMULATE = 'SIMULATE'
    BUILD = 'BUILD'
    PUBLISH = 'PUBLISH'
    AUDIT = 'AUDIT'


class EntryCost(str, Enum):
    """How much effort it takes a user to get going in a lens."""
    LOW = 'low'
    MED = 'med'
    HIGH = 'high'


class AccessScope(str, Enum):
    """Where a lens operates. Surfaced for host policy checks, never scored."""
    NONE = 'none'
    LOCAL = 'local'
    GLOBAL = 'global'
    MARKET = 'market'


class TriggerReason(str, Enum):
    """Why the trigger gate let a recommendation through."""
    INTENT_SHIFT = 'intent_shift'
    EXPLICIT_ASK = 'explicit_ask'
    HIGH_FRICTION = 'high_friction'
    REPEATED_TOPIC = 'repeated_topic'


class Suppression(str, Enum):
    """Why the trigger gate blocked the turn outright."""
    COOLDOWN = 'cooldown'
    DISMISSALS = 'dismissals'


# Intents a user can drift *from* before we offer a lens
EXPLORATORY_INTENTS = frozenset({
    IntentClass.CHAT_ONLY,
    IntentClass.IDEATE,
})

# Intents that mean the user wants to get something done
ACTION_INTENTS = frozenset({
    IntentClass.PLAN,
    IntentClass.SIMULATE,
    IntentClass.BUILD,
    IntentClass.PUBLISH,
    IntentClass.AUDIT,
})

# Intents that neither start nor finish an intent shift
NEUTRAL_INTENTS = frozenset({
    IntentClass.STRUCTURE,
})


class ScoreWeight:
    """Weights of the linear lens score."""
    DOMAIN = 0.25
    INTENT = 0.25
    ACTION = 0.20
    SHADOW = 0.10
    FRICTION = -0.10
    SPAM = -0.10


class ConfidenceWeight:
    """Weights of the signal confidence blend."""
    FRICTION = 0.4
    INTENT = 0.4
    DOMAIN = 0.2


class TriggerThreshold:
    """Confidence levels the trigger gate fires at."""
    EXPLICIT_ASK = 0.5
    HIGH_FRICTION = 0.7


SCORE_THRESHOLD = 0.25  # Minimum score for a lens to be suggested

FRICTION_PENALTIES = {
    EntryCost.LOW: 0.0,
    EntryCost.MED: 0.3,
    EntryCost.HIGH: 0.6,
}

SHADOW_BOOST = 0.5  # Lens the user already opened before
SPAM_PENALTY_STEP = 0.5  # Per recent recommendation of the same lens

# Anti-spam windows (in turns)
COOLDOWN_TURNS = 3  # At most one recommendation per 3 user messages
DISMISSAL_LIMIT = 2  # Dismissals before backing off
DISMISSAL_BACKOFF_TURNS = 10
SPAM_WINDOW_TURNS = 5
REPEATED_TOPIC_MESSAGES = 3  # Including the current message

# Intent classifier
MAX_INTENTS = 2
RUNNER_UP_RATIO = 0.5

# Output limits
MAX_RECOMMENDATIONS = 3
DEFAULT_RECOMMENDATIONS = 1
MAX_SCORED_LENSES = 3

# Task seeds
TASK_SEED_TITLE_LENGTH = 60
TASK_SEED_MAX_TAGS = 3
TASK_SEED_MAX_ACTIONS = 3
