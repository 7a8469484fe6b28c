"""
Tests for the host-side session helpers and chat handler glue.
"""

import copy

import pytest
from concord.lens_recommender import LensRecommender, LensCatalog
from concord.lens_recommender.catalog import entry_from_dict, get_recommender_entry
from concord.lens_recommender.constants import IntentClass, Suppression
from concord.lens_recommender.integration import (
    advance_session,
    create_session_context,
    integrate_with_chat,
    mark_dismissed,
    mark_opened,
    result_to_dict,
    session_from_dict,
    session_to_dict,
)
from concord.lens_recommender.models import RecentRecommendation, SessionContext

PLAN_MESSAGE = "I need to plan the steps and milestones for this project"


class TestAdvanceSession:
    """Test how the host moves a session to the next turn."""

    def setup_method(self):
        self.recommender = LensRecommender()

    def test_appends_turn_state(self):
        session = create_session_context()
        result = self.recommender.recommend(PLAN_MESSAGE, session)

        advanced = advance_session(session, PLAN_MESSAGE, result)

        assert advanced.current_turn == 1
        assert advanced.recent_messages == [PLAN_MESSAGE]
        assert advanced.previous_intents == [IntentClass.PLAN]
        assert advanced.recent_recommendations == [RecentRecommendation('paper', 0)]

    def test_input_session_untouched(self):
        session = SessionContext(recent_messages=["hi"], current_turn=3)
        before = copy.deepcopy(session)

        advance_session(session, PLAN_MESSAGE, None)

        assert session == before

    def test_history_is_bounded(self):
        session = SessionContext(recent_messages=["a", "b", "c"])

        advanced = advance_session(session, "d", None, max_messages=3)

        assert advanced.recent_messages == ["b", "c", "d"]

    def test_zero_bound_keeps_nothing(self):
        session = SessionContext(recent_messages=["a", "b", "c"],
                                 previous_intents=[IntentClass.IDEATE])

        advanced = advance_session(session, "d", None, max_messages=0, max_intents=0)

        assert advanced.recent_messages == []
        assert advanced.previous_intents == []

    def test_next_turn_is_in_cooldown(self):
        """A shown recommendation blocks the following turns."""
        session = create_session_context()
        result = self.recommender.recommend(PLAN_MESSAGE, session)
        assert result.recs

        session = advance_session(session, PLAN_MESSAGE, result)
        follow_up = self.recommender.recommend(PLAN_MESSAGE, session)

        assert follow_up.recs == []
        assert follow_up.debug.trigger.suppressed_by == Suppression.COOLDOWN

    def test_conversation_intent_shift(self):
        """Brainstorming, then asking for a plan, surfaces a lens."""
        session = create_session_context()
        first = "let's brainstorm a few ideas"
        result = self.recommender.recommend(first, session)
        assert result.recs == []

        session = advance_session(session, first, result)
        result = self.recommender.recommend(PLAN_MESSAGE, session)

        assert result.recs
        assert result.debug.trigger.trigger_reason.value == 'intent_shift'


class TestMarkers:
    """Test opened/dismissed bookkeeping."""

    def test_mark_dismissed_existing(self):
        session = SessionContext(recent_recommendations=[RecentRecommendation('sim', 2)])

        updated = mark_dismissed(session, 'sim', 2)

        assert updated.recent_recommendations == [RecentRecommendation('sim', 2, dismissed=True)]
        assert session.recent_recommendations[0].dismissed is False

    def test_mark_dismissed_unknown_is_appended(self):
        updated = mark_dismissed(SessionContext(), 'law', 4)

        assert updated.recent_recommendations == [RecentRecommendation('law', 4, dismissed=True)]

    def test_mark_opened(self):
        session = SessionContext(lenses_used={'code'})

        updated = mark_opened(session, 'sim')

        assert updated.lenses_used == {'code', 'sim'}
        assert session.lenses_used == {'code'}


class TestSerialization:
    """Test the JSON forms used by the HTTP layer."""

    def test_session_round_trip(self):
        session = SessionContext(
            recent_messages=["our budget is tight"],
            lenses_used={'finance', 'code'},
            recent_recommendations=[RecentRecommendation('finance', 1, dismissed=True)],
            current_turn=4,
            previous_intents=[IntentClass.IDEATE],
        )

        assert session_from_dict(session_to_dict(session)) == session

    def test_missing_session_is_empty(self):
        assert session_from_dict(None) == SessionContext()

    @pytest.mark.parametrize("data", [
        {'previous_intents': ['DAYDREAM']},
        {'recent_recommendations': [{'turn_index': 1}]},
        {'current_turn': 'soon'},
        ['not', 'a', 'dict'],
        {'lenses_used': [1, 'code']},
        {'recent_messages': 'abc'},
        {'recent_messages': [1]},
        {'recent_recommendations': [{'lens_id': 3, 'turn_index': 1}]},
    ])
    def test_malformed_session(self, data):
        with pytest.raises(ValueError):
            session_from_dict(data)

    def test_result_to_dict(self):
        result = LensRecommender().recommend(PLAN_MESSAGE, SessionContext())

        data = result_to_dict(result)

        assert data['recs'][0]['lens_id'] == 'paper'
        assert data['recs'][0]['task_seed']['suggested_actions'] == ['plan']
        assert data['debug']['trigger']['trigger_reason'] == 'explicit_ask'
        assert data['debug']['signals']['intent_signals'] == ['PLAN']
        assert data['debug']['no_candidates'] is False


class TestCatalog:
    """Test catalog construction."""

    def test_lookup(self):
        entry = get_recommender_entry('law')

        assert entry.name == 'Law'
        assert 'legal-check' in entry.supported_actions
        assert get_recommender_entry('nope') is None

    def test_duplicate_ids_rejected(self):
        row = {'lens_id': 'x', 'name': 'X'}

        with pytest.raises(ValueError):
            LensCatalog([entry_from_dict(row), entry_from_dict(row)])

    def test_unknown_cost_rejected(self):
        with pytest.raises(ValueError):
            entry_from_dict({'lens_id': 'x', 'name': 'X', 'entry_cost': 'free'})

    def test_missing_name_rejected(self):
        with pytest.raises(ValueError):
            entry_from_dict({'lens_id': 'x'})


class TestIntegrateWithChat:
    """Test the chat handler entry point."""

    def test_feedback_line(self):
        recs, feedback = integrate_with_chat(
            "which lens should I use to forecast revenue?",
            create_session_context(),
            LensRecommender(),
        )

        assert recs[0].lens_id == 'sim'
        assert feedback == 'Try Simulation (simulate with simulation)'

    def test_nothing_to_say(self):
        recs, feedback = integrate_with_chat("thanks!", create_session_context(), LensRecommender())

        assert recs == []
        assert feedback is None
