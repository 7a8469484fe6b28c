#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Concord Lens Recommender - Entry Point
======================================

Starts the Flask server that serves lens recommendations to the chat
frontend. Run with: python run.py

Module Structure:
    concord/
    ├── __init__.py          # Core exports
    ├── config.py            # Environment configuration
    ├── utils.py             # Logging & string helpers
    ├── api.py               # Flask endpoints
    └── lens_recommender/
        ├── signals.py       # Signal extraction
        ├── intent.py        # Intent classification
        ├── triggers.py      # Anti-spam trigger gate
        ├── scoring.py       # Lens scoring
        └── recommender.py   # Orchestrator
"""

from concord import config
from concord.utils import setup_logger

log = setup_logger("concord", config.LOG_LEVEL)


def print_banner():
    """Print startup banner."""
    print("=" * 60)
    print("Concord Lens Recommender")
    print("=" * 60)


def check_recommender():
    """Verify the recommender loads and answers a sample message."""
    print("\nChecking recommender...")

    try:
        from concord.lens_recommender import (
            LensRecommender, create_session_context, get_default_catalog,
        )
        catalog = get_default_catalog()
        print(f"   OK catalog v{catalog.version}: {len(catalog)} lenses")

        recommender = LensRecommender(catalog=catalog)
        result = recommender.recommend(
            "which lens should I use to forecast revenue?",
            create_session_context(),
        )
        if result.recs:
            print(f"   OK recommender working (test: {result.recs[0].lens_id})")
        else:
            print("   OK recommender loaded")
    except (ImportError, ValueError, RuntimeError) as e:
        print(f"   FAILED recommender: {e}")
        return False

    return True


def run_server():
    """Start the Flask server."""
    from concord.api import create_app

    print("\nStarting server...")
    print(f"   Server starting on http://{config.HOST}:{config.PORT}")
    print("   Press CTRL+C to quit")
    print("")

    app = create_app()
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)


def main():
    """Main entry point."""
    print_banner()

    if not check_recommender():
        print("\nRecommender failed to load!")
        print("   Please check your concord package installation.")
        return

    print("\n" + "=" * 60)
    print("Usage Examples:")
    print("   POST /lens/recommend  {\"message\": \"I need to plan the milestones\"}")
    print("   GET  /lens/catalog")
    print("   GET  /health")
    print("=" * 60)

    run_server()


if __name__ == "__main__":
    main()
