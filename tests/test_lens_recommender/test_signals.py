"""
Unit tests for signal extraction.
"""

from concord.lens_recommender.constants import IntentClass
from concord.lens_recommender.signals import (
    compute_confidence,
    extract_domain_signals,
    extract_friction_signals,
    extract_signals,
)


class TestDomainSignals:
    """Test domain tag extraction."""

    def test_every_matching_rule_contributes(self):
        tags = extract_domain_signals("help me forecast revenue")

        assert tags == ['finance', 'budget', 'simulation', 'forecast']

    def test_tags_are_deduplicated(self):
        """A rule matched by several words adds its tags once."""
        tags = extract_domain_signals("check the contract, the license and the patent")

        assert tags == ['legal', 'law', 'compliance']

    def test_no_domain(self):
        assert extract_domain_signals("how was your weekend?") == []
        assert extract_domain_signals("") == []


class TestFrictionSignals:
    """Test friction phrase extraction."""

    def test_phrases_are_lowercased(self):
        phrases, score = extract_friction_signals("I NEED a ROADMAP")

        assert phrases == ['i need', 'roadmap']
        assert abs(score - 1.8) < 1e-9

    def test_each_pattern_counts_once(self):
        phrases, score = extract_friction_signals("plan, plan and plan again")

        assert phrases == ['plan']
        assert abs(score - 0.8) < 1e-9

    def test_no_friction(self):
        assert extract_friction_signals("nice weather today") == ([], 0.0)


class TestConfidence:
    """Test the confidence blend."""

    def test_bounded(self):
        assert compute_confidence(10.0, [IntentClass.BUILD], ['code']) == 1.0
        assert compute_confidence(0.0, [IntentClass.CHAT_ONLY], []) == 0.0

    def test_components(self):
        assert abs(compute_confidence(0.5, [IntentClass.CHAT_ONLY], []) - 0.2) < 1e-9
        assert abs(compute_confidence(0.0, [IntentClass.PLAN], []) - 0.4) < 1e-9
        assert abs(compute_confidence(0.0, [IntentClass.CHAT_ONLY], ['code']) - 0.2) < 1e-9

    def test_monotonic_in_friction(self):
        """More friction never lowers confidence."""
        for intents, domains in [
            ([IntentClass.CHAT_ONLY], []),
            ([IntentClass.PLAN], []),
            ([IntentClass.BUILD], ['code']),
        ]:
            previous = -1.0
            for friction in [0.0, 0.3, 0.8, 1.5, 2.5, 5.0]:
                confidence = compute_confidence(friction, intents, domains)
                assert confidence >= previous
                previous = confidence


class TestExtractSignals:
    """Test the full extraction pass."""

    def test_action_message(self):
        signals = extract_signals("help me forecast revenue")

        assert signals.intent_signals == [IntentClass.SIMULATE]
        assert signals.friction_signals == ['help me', 'forecast', 'revenue']
        assert signals.confidence == 1.0

    def test_casual_message(self):
        signals = extract_signals("hello")

        assert signals.domain_signals == []
        assert signals.intent_signals == [IntentClass.CHAT_ONLY]
        assert signals.friction_signals == []
        assert signals.confidence == 0.0

    def test_empty_message(self):
        signals = extract_signals("")

        assert signals.intent_signals == [IntentClass.CHAT_ONLY]
        assert signals.confidence == 0.0

    def test_friction_without_intent(self):
        signals = extract_signals("I need to think")

        assert signals.intent_signals == [IntentClass.CHAT_ONLY]
        assert abs(signals.confidence - 0.4) < 1e-9

    def test_primary_intent(self):
        signals = extract_signals("let's outline the structure")

        assert signals.primary_intent == IntentClass.STRUCTURE
