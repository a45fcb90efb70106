#!/usr/bin/env python3
"""
DictationAssist - Flask API
===========================
JSON endpoints exposing segmentation, spelling and grammar checks and
voice edit commands to an editor front end.

Stateless endpoints take the document text in every request; session
endpoints keep an EditSession (text, undo history, ignored words) in
memory until they are deleted, sit idle past the configured TTL or
are evicted by the session cap.

Run locally:
    python app.py
"""

import time
import threading
from functools import wraps
from typing import Dict, Any, Optional, List, Callable

from flask import Flask, Blueprint, request, jsonify, g, current_app

from config_logging import (
    AppConfig, StructuredLogger, get_config, get_logger, APP_NAME, VERSION,
    DictationError, ValidationError, NotFoundError, ProcessingError,
)
from text_segmentation import segment_text
from spell_checker import SpellChecker, SessionDictionary
from grammar_checker import GrammarChecker
from edit_commands import MUTATING_COMMAND_TYPES, CapitalizeCommand, parse_edit_command
from edit_executor import apply_edit_command
from spoken_punctuation import process_voice_commands
from edit_session import EditSession

__version__ = "1.0.0"

logger = get_logger('api')

api_blueprint = Blueprint('dictation_api', __name__)

EXTENSION_KEY = 'dictation_assist'


class SessionManager:
    """
    In-memory, lock-guarded registry of edit sessions.

    Sessions idle longer than config.session_ttl are dropped, and creating
    one past config.max_sessions evicts the least recently used.
    """

    def __init__(self, config: AppConfig, spell_checker: SpellChecker, grammar_checker: GrammarChecker,
                 clock: Callable[[], float] = time.monotonic):
        self.config = config
        self.spell_checker = spell_checker
        self.grammar_checker = grammar_checker
        self._clock = clock
        self._sessions: Dict[str, EditSession] = {}
        self._last_used: Dict[str, float] = {}
        self._lock = threading.Lock()

    def _expire(self, now: float):
        stale = [sid for sid, used in self._last_used.items()
                 if now - used > self.config.session_ttl]
        for session_id in stale:
            self._drop(session_id)
            logger.info("Session expired", session_id=session_id)

    def _drop(self, session_id: str) -> Optional[EditSession]:
        self._last_used.pop(session_id, None)
        return self._sessions.pop(session_id, None)

    def create(self, text: str = '') -> EditSession:
        session = EditSession(
            text=text,
            undo_limit=self.config.undo_limit,
            max_suggestions=self.config.max_suggestions,
            spell_checker=self.spell_checker,
            grammar_checker=self.grammar_checker,
        )
        with self._lock:
            now = self._clock()
            self._expire(now)
            while len(self._sessions) >= self.config.max_sessions:
                oldest = min(self._last_used, key=self._last_used.get)
                self._drop(oldest)
                logger.info("Session evicted", session_id=oldest)
            self._sessions[session.session_id] = session
            self._last_used[session.session_id] = now
        logger.info("Session created", session_id=session.session_id)
        return session

    def get(self, session_id: str) -> EditSession:
        with self._lock:
            now = self._clock()
            self._expire(now)
            session = self._sessions.get(session_id)
            if session is not None:
                self._last_used[session_id] = now
        if session is None:
            raise NotFoundError(f"Session not found: {session_id}", target=session_id)
        return session

    def delete(self, session_id: str):
        with self._lock:
            removed = self._drop(session_id)
        if removed is None:
            raise NotFoundError(f"Session not found: {session_id}", target=session_id)
        logger.info("Session deleted", session_id=session_id)

    def __len__(self) -> int:
        with self._lock:
            self._expire(self._clock())
            return len(self._sessions)


class Services:
    """Checkers and sessions shared by every request of one app."""

    def __init__(self, config: AppConfig):
        self.config = config
        self.spell_checker = SpellChecker(max_suggestions=config.max_suggestions)
        self.grammar_checker = GrammarChecker(
            check_terminal_punctuation=config.check_terminal_punctuation
        )
        self.sessions = SessionManager(config, self.spell_checker, self.grammar_checker)


def _services() -> Services:
    return current_app.extensions[EXTENSION_KEY]


# =============================================================================
# STANDARDIZED ERROR HANDLING DECORATOR
# =============================================================================

def handle_api_errors(f):
    """
    Decorator for standardized API error handling.

    DictationError subclasses keep their own code and status; anything
    else becomes a 500 INTERNAL_ERROR.
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        start_time = time.time()
        try:
            result = f(*args, **kwargs)

            elapsed = time.time() - start_time
            if elapsed > 2.0:
                logger.warning(f"Slow API call: {f.__name__} took {elapsed:.1f}s")

            return result

        except DictationError as e:
            if isinstance(e, ProcessingError):
                logger.error(f"Processing error in {f.__name__}: {e}")
            else:
                logger.info(f"{e.code} in {f.__name__}: {e}")
            return jsonify({
                'success': False,
                'error': {
                    'code': e.code,
                    'message': e.message,
                    'details': e.details,
                    'correlation_id': getattr(g, 'correlation_id', 'unknown')
                }
            }), e.status_code
        except Exception as e:
            logger.exception(f"Unexpected error in {f.__name__}: {e}")
            return jsonify({
                'success': False,
                'error': {
                    'code': 'INTERNAL_ERROR',
                    'message': 'An unexpected error occurred',
                    'correlation_id': getattr(g, 'correlation_id', 'unknown')
                }
            }), 500

    return decorated


@api_blueprint.before_request
def assign_correlation_id():
    g.correlation_id = StructuredLogger.new_correlation_id()


# =============================================================================
# REQUEST VALIDATION
# =============================================================================

def _json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def _string_field(data: Dict[str, Any], name: str, required: bool = True,
                  default: str = '') -> str:
    value = data.get(name)
    if value is None:
        if required:
            raise ValidationError(f"'{name}' is required", field=name)
        return default
    if not isinstance(value, str):
        raise ValidationError(f"'{name}' must be a string", field=name)
    limit = _services().config.max_text_length
    if len(value) > limit:
        raise ValidationError(f"'{name}' exceeds {limit} characters", field=name)
    return value


def _word_list(data: Dict[str, Any], name: str) -> List[str]:
    value = data.get(name) or []
    if not isinstance(value, list) or not all(isinstance(w, str) for w in value):
        raise ValidationError(f"'{name}' must be a list of strings", field=name)
    return value


def _check_text(text: str, session: Optional[SessionDictionary] = None) -> Dict[str, Any]:
    services = _services()
    segmented = segment_text(text)
    spelling = services.spell_checker.safe_check(segmented, session=session)
    grammar = services.grammar_checker.safe_check(segmented)
    return {
        'originalText': segmented.original_text,
        'spelling': [e.to_dict() for e in spelling.errors],
        'grammar': [e.to_dict() for e in grammar.errors],
    }


def _session_payload(session: EditSession) -> Dict[str, Any]:
    return {
        'sessionId': session.session_id,
        'text': session.text,
        'canUndo': session.history.can_undo,
        'canRedo': session.history.can_redo,
        'ignored': session.dictionary.words(),
    }


# =============================================================================
# STATELESS ENDPOINTS
# =============================================================================

@api_blueprint.route('/health', methods=['GET'])
@handle_api_errors
def health():
    services = _services()
    return jsonify({
        'success': True,
        'status': 'ok',
        'app': APP_NAME,
        'version': VERSION,
        'sessions': len(services.sessions),
        'checkers': [services.spell_checker.describe(), services.grammar_checker.describe()],
    })


@api_blueprint.route('/segment', methods=['POST'])
@handle_api_errors
def segment():
    text = _string_field(_json_body(), 'text')
    segmented = segment_text(text)
    return jsonify({'success': True, 'data': segmented.to_dict()})


@api_blueprint.route('/check', methods=['POST'])
@handle_api_errors
def check():
    """Spelling and grammar flags for text. Optional 'ignored' words are skipped."""
    data = _json_body()
    text = _string_field(data, 'text')
    ignored = SessionDictionary(_word_list(data, 'ignored'))
    return jsonify({'success': True, 'data': _check_text(text, ignored)})


@api_blueprint.route('/command', methods=['POST'])
@handle_api_errors
def command():
    """
    Parse an utterance (spoken punctuation converted first, as in a
    session) and, for replace/delete/insert/capitalize, apply it.

    Returns 404 when the command's target is not in the text.
    """
    data = _json_body()
    text = _string_field(data, 'text')
    utterance = _string_field(data, 'utterance')

    parsed = parse_edit_command(process_voice_commands(utterance.strip()))
    response: Dict[str, Any] = {'command': parsed.to_dict(), 'result': None}

    if parsed.type in MUTATING_COMMAND_TYPES:
        result = apply_edit_command(text, parsed)
        if result is None:
            if isinstance(parsed, CapitalizeCommand) and parsed.target is None:
                raise NotFoundError("No word to capitalize")
            raise NotFoundError(f'Could not find "{parsed.target}" in the document',
                                target=parsed.target)
        response['result'] = result.to_dict()

    return jsonify({'success': True, 'data': response})


# =============================================================================
# SESSION ENDPOINTS
# =============================================================================

@api_blueprint.route('/sessions', methods=['POST'])
@handle_api_errors
def create_session():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    session = _services().sessions.create(_string_field(data, 'text', required=False))
    return jsonify({'success': True, 'data': _session_payload(session)}), 201


@api_blueprint.route('/sessions/<session_id>', methods=['GET'])
@handle_api_errors
def get_session(session_id):
    session = _services().sessions.get(session_id)
    payload = _session_payload(session)
    payload['analysis'] = session.analyze().to_dict()
    return jsonify({'success': True, 'data': payload})


@api_blueprint.route('/sessions/<session_id>', methods=['DELETE'])
@handle_api_errors
def delete_session(session_id):
    _services().sessions.delete(session_id)
    return jsonify({'success': True})


@api_blueprint.route('/sessions/<session_id>/utterance', methods=['POST'])
@handle_api_errors
def session_utterance(session_id):
    session = _services().sessions.get(session_id)
    data = _json_body()
    utterance = _string_field(data, 'utterance')
    selected = _string_field(data, 'selectedText', required=False) or None
    outcome = session.handle_utterance(utterance, selected_text=selected)
    return jsonify({'success': True, 'data': outcome.to_dict()})


@api_blueprint.route('/sessions/<session_id>/dictate', methods=['POST'])
@handle_api_errors
def session_dictate(session_id):
    session = _services().sessions.get(session_id)
    session.dictate(_string_field(_json_body(), 'utterance'))
    return jsonify({'success': True, 'data': _session_payload(session)})


@api_blueprint.route('/sessions/<session_id>/ignore', methods=['POST'])
@handle_api_errors
def session_ignore(session_id):
    session = _services().sessions.get(session_id)
    word = _string_field(_json_body(), 'word').strip()
    if not word:
        raise ValidationError("'word' must not be empty", field='word')
    session.ignore_word(word)
    return jsonify({'success': True, 'data': _session_payload(session)})


# =============================================================================
# APP FACTORY
# =============================================================================

def create_app(config: Optional[AppConfig] = None) -> Flask:
    """Build the Flask app with the API blueprint mounted at /api."""
    config = config or get_config()
    is_valid, errors = config.validate()
    if not is_valid:
        raise ValueError("Invalid configuration: " + "; ".join(errors))

    app = Flask(__name__)
    app.config['DEBUG'] = config.debug
    app.config['MAX_CONTENT_LENGTH'] = config.max_text_length * 4 + 4096
    app.extensions[EXTENSION_KEY] = Services(config)
    app.register_blueprint(api_blueprint, url_prefix='/api')

    logger.info("App created", version=VERSION, port=config.port)
    return app


if __name__ == '__main__':
    config = get_config()
    print("=" * 60)
    print(f"  {APP_NAME} v{VERSION}")
    print(f"  Starting server at http://{config.host}:{config.port}")
    print("=" * 60)
    create_app(config).run(host=config.host, port=config.port, debug=config.debug)
