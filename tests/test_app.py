"""
Tests for the Flask API
=======================
Endpoints exercised through app.test_client().
"""

import pytest

from app import create_app, SessionManager
from config_logging import AppConfig, NotFoundError
from grammar_checker import GrammarChecker
from spell_checker import SpellChecker


@pytest.fixture
def app():
    app = create_app(AppConfig(log_to_console=False))
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


class TestHealth:

    def test_health(self, client):
        """Test health."""
        response = client.get('/api/health')
        assert response.status_code == 200
        data = response.get_json()
        assert data['status'] == 'ok'
        assert data['app'] == 'DictationAssist'

    def test_health_reports_checkers(self, client):
        """Test health lists each checker's name, version and enabled flag."""
        checkers = client.get('/api/health').get_json()['checkers']
        assert [c['checker'] for c in checkers] == ['Spelling', 'Grammar']
        assert all(c['enabled'] and c['version'] == '1.0.0' for c in checkers)


class TestSegmentAndCheck:
    """Stateless analysis endpoints."""

    def test_segment(self, client):
        """Test segment."""
        response = client.post('/api/segment', json={'text': 'Dr. Smith arrived. He sat down'})
        assert response.status_code == 200
        data = response.get_json()['data']
        assert len(data['sentences']) == 2
        assert data['allWords'][0]['word'] == 'Dr'

    def test_check(self, client):
        """Test check."""
        response = client.post('/api/check', json={'text': 'Ths is a tst.'})
        data = response.get_json()['data']
        assert [e['word'] for e in data['spelling']] == ['Ths', 'tst']
        assert data['grammar'] == []

    def test_check_with_ignored_words(self, client):
        """Test check with ignored words."""
        response = client.post('/api/check', json={'text': 'Ths is a tst.', 'ignored': ['tst']})
        assert [e['word'] for e in response.get_json()['data']['spelling']] == ['Ths']

    def test_grammar_flags(self, client):
        """Test grammar flags."""
        response = client.post('/api/check', json={'text': 'hello world. This is fine.'})
        grammar = response.get_json()['data']['grammar']
        assert [g['type'] for g in grammar] == ['capitalization']


class TestValidation:
    """Bad requests are 400 with the standard error shape."""

    def test_missing_text(self, client):
        """Test missing text."""
        response = client.post('/api/segment', json={})
        assert response.status_code == 400
        body = response.get_json()
        assert body['success'] is False
        assert body['error']['code'] == 'VALIDATION_ERROR'

    def test_not_json(self, client):
        """Test non-JSON body rejected."""
        response = client.post('/api/segment', data='text', content_type='text/plain')
        assert response.status_code == 400

    def test_text_not_string(self, client):
        """Test text not string."""
        assert client.post('/api/check', json={'text': 42}).status_code == 400

    def test_ignored_not_list(self, client):
        """Test ignored not list."""
        response = client.post('/api/check', json={'text': 'hi', 'ignored': 'tst'})
        assert response.status_code == 400

    def test_text_too_long(self):
        """Test text too long."""
        client = create_app(AppConfig(log_to_console=False, max_text_length=10)).test_client()
        response = client.post('/api/segment', json={'text': 'x' * 11})
        assert response.status_code == 400


class TestCommand:
    """Parse-and-apply endpoint."""

    def test_replace(self, client):
        """Test replace."""
        response = client.post('/api/command', json={
            'text': 'I see the the cat and the cat again',
            'utterance': 'replace the cat with a dog',
        })
        assert response.status_code == 200
        data = response.get_json()['data']
        assert data['command'] == {'type': 'replace', 'target': 'the cat', 'replacement': 'a dog'}
        assert data['result']['newText'] == 'I see the the cat and a dog again'
        assert data['result']['matchCount'] == 2

    def test_target_not_found(self, client):
        """Test target not found."""
        response = client.post('/api/command', json={'text': 'hello world', 'utterance': 'delete xyz'})
        assert response.status_code == 404
        assert response.get_json()['error']['code'] == 'NOT_FOUND'

    def test_non_mutating_command(self, client):
        """Test non-mutating command."""
        response = client.post('/api/command', json={'text': 'hello', 'utterance': 'undo'})
        data = response.get_json()['data']
        assert data['command'] == {'type': 'undo'}
        assert data['result'] is None

    def test_unknown_command(self, client):
        """Test unknown command."""
        response = client.post('/api/command', json={'text': 'hello', 'utterance': 'banana'})
        assert response.get_json()['data']['command'] == {'type': 'unknown'}

    def test_spoken_punctuation_converted(self, client):
        """Test the command endpoint converts spoken punctuation like a session does."""
        response = client.post('/api/command', json={
            'text': 'hi there', 'utterance': 'replace hi with bye period',
        })
        data = response.get_json()['data']
        assert data['command']['replacement'] == 'bye.'
        assert data['result']['newText'] == 'bye. there'


class TestSessions:
    """Session lifecycle."""

    def test_session_flow(self, client):
        """Test session flow."""
        created = client.post('/api/sessions', json={'text': ''})
        assert created.status_code == 201
        session_id = created.get_json()['data']['sessionId']

        client.post(f'/api/sessions/{session_id}/dictate', json={'utterance': 'I like cats period'})
        outcome = client.post(f'/api/sessions/{session_id}/utterance',
                              json={'utterance': 'insert very much after cats'}).get_json()['data']
        assert outcome['success'] is True
        assert outcome['text'] == 'I like cats very much.'

        state = client.get(f'/api/sessions/{session_id}').get_json()['data']
        assert state['text'] == 'I like cats very much.'
        assert state['canUndo'] is True
        assert 'analysis' in state

        assert client.delete(f'/api/sessions/{session_id}').status_code == 200
        assert client.get(f'/api/sessions/{session_id}').status_code == 404

    def test_ignore_word(self, client):
        """Test ignore word."""
        session_id = client.post('/api/sessions', json={'text': 'Ths is a tst.'}).get_json()['data']['sessionId']
        response = client.post(f'/api/sessions/{session_id}/ignore', json={'word': 'tst'})
        assert response.get_json()['data']['ignored'] == ['tst']
        spelling = client.get(f'/api/sessions/{session_id}').get_json()['data']['analysis']['spelling']
        assert [e['word'] for e in spelling] == ['Ths']

    def test_create_without_body(self, client):
        """Test create without body."""
        response = client.post('/api/sessions')
        assert response.status_code == 201
        assert response.get_json()['data']['text'] == ''

    def test_unknown_session(self, client):
        """Test unknown session."""
        response = client.post('/api/sessions/nope/utterance', json={'utterance': 'undo'})
        assert response.status_code == 404

    def test_sessions_isolated_between_apps(self, client):
        """Test sessions isolated between apps."""
        session_id = client.post('/api/sessions').get_json()['data']['sessionId']
        other = create_app(AppConfig(log_to_console=False)).test_client()
        assert other.get(f'/api/sessions/{session_id}').status_code == 404


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class TestSessionManager:
    """Session cap and idle expiry."""

    @pytest.fixture
    def clock(self):
        return FakeClock()

    def make_manager(self, clock, **overrides):
        config = AppConfig(log_to_console=False, **overrides)
        return SessionManager(config, SpellChecker(), GrammarChecker(), clock=clock)

    def test_idle_session_expires(self, clock):
        """Test a session idle past the TTL is gone."""
        manager = self.make_manager(clock, session_ttl=60)
        session = manager.create('hello')
        clock.now = 61
        with pytest.raises(NotFoundError):
            manager.get(session.session_id)
        assert len(manager) == 0

    def test_access_keeps_session_alive(self, clock):
        """Test each lookup restarts the idle timer."""
        manager = self.make_manager(clock, session_ttl=60)
        session = manager.create()
        for now in (40, 80, 120):
            clock.now = now
            assert manager.get(session.session_id) is session

    def test_cap_evicts_least_recently_used(self, clock):
        """Test creating past the cap drops the session used longest ago."""
        manager = self.make_manager(clock, max_sessions=2)
        first = manager.create()
        clock.now = 1
        second = manager.create()
        clock.now = 2
        manager.get(first.session_id)
        clock.now = 3
        third = manager.create()
        assert len(manager) == 2
        assert manager.get(first.session_id) is first
        assert manager.get(third.session_id) is third
        with pytest.raises(NotFoundError):
            manager.get(second.session_id)

    def test_delete_unknown(self, clock):
        """Test deleting a missing session raises NotFoundError."""
        with pytest.raises(NotFoundError):
            self.make_manager(clock).delete('nope')
