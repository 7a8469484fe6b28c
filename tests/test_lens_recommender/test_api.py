"""
Tests for the Flask lens endpoints.
"""

import pytest
from concord.api import create_app
from concord.lens_recommender import LensRecommender

PLAN_MESSAGE = "I need to plan the steps and milestones for this project"


@pytest.fixture
def client():
    app = create_app(LensRecommender())
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


class TestRecommendEndpoint:
    """Test POST /lens/recommend."""

    def test_recommendation_and_next_session(self, client):
        response = client.post('/lens/recommend', json={
            'message': PLAN_MESSAGE,
            'session': {'previous_intents': ['IDEATE']},
        })

        assert response.status_code == 200
        data = response.get_json()
        assert data['recs'][0]['lens_id'] == 'paper'
        assert data['debug']['trigger']['trigger_reason'] == 'intent_shift'
        assert data['next_session']['current_turn'] == 1
        assert data['next_session']['previous_intents'] == ['IDEATE', 'PLAN']
        assert data['next_session']['recent_recommendations'] == [
            {'lens_id': 'paper', 'turn_index': 0, 'dismissed': False}
        ]

    def test_next_session_is_suppressed(self, client):
        first = client.post('/lens/recommend', json={'message': PLAN_MESSAGE}).get_json()

        second = client.post('/lens/recommend', json={
            'message': PLAN_MESSAGE,
            'session': first['next_session'],
        }).get_json()

        assert second['recs'] == []
        assert second['debug']['trigger']['suppressed_by'] == 'cooldown'

    def test_missing_message(self, client):
        response = client.post('/lens/recommend', json={})

        assert response.status_code == 400
        assert 'error' in response.get_json()

    def test_malformed_session(self, client):
        response = client.post('/lens/recommend', json={
            'message': PLAN_MESSAGE,
            'session': {'previous_intents': ['DAYDREAM']},
        })

        assert response.status_code == 400

    def test_non_string_message(self, client):
        response = client.post('/lens/recommend', json={'message': 42})

        assert response.status_code == 400

    def test_whitespace_message_is_accepted(self, client):
        response = client.post('/lens/recommend', json={'message': '   '})

        assert response.status_code == 200
        assert response.get_json()['recs'] == []

    @pytest.mark.parametrize("session", [
        {'lenses_used': [1, 'code']},
        {'recent_messages': 'abc'},
    ])
    def test_mistyped_session_fields(self, client, session):
        """Wrong element or container types are a client error, not a crash."""
        response = client.post('/lens/recommend', json={
            'message': PLAN_MESSAGE,
            'session': session,
        })

        assert response.status_code == 400
        assert 'error' in response.get_json()


class TestCatalogEndpoint:
    """Test GET /lens/catalog and /health."""

    def test_catalog(self, client):
        data = client.get('/lens/catalog').get_json()

        assert len(data['lenses']) == 12
        assert data['lenses'][0]['lens_id'] == 'paper'
        assert data['version']

    def test_health(self, client):
        data = client.get('/health').get_json()

        assert data['status'] == 'ok'
        assert data['lenses'] == 12


class TestSessionEndpoint:
    """Test POST /lens/session/<action>."""

    def test_dismissed(self, client):
        response = client.post('/lens/session/dismissed', json={
            'session': {'recent_recommendations': [{'lens_id': 'sim', 'turn_index': 2}]},
            'lens_id': 'sim',
            'turn_index': 2,
        })

        assert response.status_code == 200
        recs = response.get_json()['session']['recent_recommendations']
        assert recs == [{'lens_id': 'sim', 'turn_index': 2, 'dismissed': True}]

    def test_opened(self, client):
        response = client.post('/lens/session/opened', json={'lens_id': 'code'})

        assert response.get_json()['session']['lenses_used'] == ['code']

    def test_unknown_action(self, client):
        response = client.post('/lens/session/starred', json={'lens_id': 'code'})

        assert response.status_code == 400

    def test_non_string_lens_id(self, client):
        response = client.post('/lens/session/opened', json={'lens_id': 1})

        assert response.status_code == 400


class TestTelemetryEndpoint:
    """Test POST /lens/telemetry/<event>."""

    def test_opened(self, client):
        response = client.post('/lens/telemetry/opened', json={
            'telemetry': {'recommendations_shown': 1},
            'lens_id': 'sim',
            'turn_index': 3,
        })

        data = response.get_json()
        assert response.status_code == 200
        assert data['telemetry']['opened_lens'] == [{'lens_id': 'sim', 'turn_index': 3}]
        assert data['summary']['open_rate'] == 1.0

    def test_shown_from_scratch(self, client):
        data = client.post('/lens/telemetry/shown', json={}).get_json()

        assert data['telemetry']['recommendations_shown'] == 1

    def test_missing_field(self, client):
        response = client.post('/lens/telemetry/time_to_action', json={})

        assert response.status_code == 400

    def test_unknown_event(self, client):
        response = client.post('/lens/telemetry/clicked', json={})

        assert response.status_code == 400

    def test_telemetry_not_an_object(self, client):
        response = client.post('/lens/telemetry/shown', json={'telemetry': [1]})

        assert response.status_code == 400
        assert 'error' in response.get_json()
