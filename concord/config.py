"""
Concord Configuration
=====================
Central configuration for the Concord chat services.
"""

import os

# Server Configuration
HOST = os.environ.get("CONCORD_HOST", "127.0.0.1")
PORT = int(os.environ.get("CONCORD_PORT", "5000"))
DEBUG = os.environ.get("CONCORD_DEBUG", "false").lower() == "true"

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class LensRecommenderConfig:
    """How the chat lens recommender is exposed to the host app."""
    # Attach signals/trigger/scores to every result
    debug_payload = os.environ.get("LENS_DEBUG_PAYLOAD", "true").lower() == "true"
    # How many recent user messages the host keeps in a session
    max_recent_messages = int(os.environ.get("LENS_MAX_RECENT_MESSAGES", "10"))
    # How many previous intents the host keeps in a session
    max_previous_intents = int(os.environ.get("LENS_MAX_PREVIOUS_INTENTS", "10"))


lens_recommender = LensRecommenderConfig()
