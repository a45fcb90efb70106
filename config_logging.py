#!/usr/bin/env python3
"""
DictationAssist Configuration & Logging Module
==============================================
Centralized configuration, structured logging, and error types.

Version: reads from version.json (module v1.0)
"""

import os
import sys
import json
import logging
import uuid
import time
import functools
from datetime import datetime, timezone
from typing import Optional, Dict, Any, Callable
from pathlib import Path
from dataclasses import dataclass, field
from contextlib import contextmanager
import threading

# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================
DEFAULT_PORT = 5060
DEFAULT_MAX_SUGGESTIONS = 5         # Spelling suggestions per flagged word
DEFAULT_UNDO_LIMIT = 20             # Snapshots kept by the undo stack
DEFAULT_MAX_TEXT_LENGTH = 200_000   # Characters accepted per API request
DEFAULT_MAX_SESSIONS = 100          # Live edit sessions kept by the API
DEFAULT_SESSION_TTL = 3600          # Seconds an idle session survives
MAX_SAFE_TEXT_LENGTH = 2_000_000
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024  # 5MB max per log file
LOG_BACKUP_COUNT = 5                # Number of log backup files to keep


# =============================================================================
# VERSION (version.json)
# =============================================================================
def _load_version():
    """Read the app version from version.json next to this module."""
    version_file = Path(__file__).parent / 'version.json'
    if version_file.exists():
        with open(version_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
            return data.get('version', '1.0.0')
    return '1.0.0'

__version__ = _load_version()
VERSION = __version__
APP_NAME = "DictationAssist"


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() == 'true'


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class AppConfig:
    """Application configuration with local-only defaults."""

    # Server settings
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT
    debug: bool = False

    # Text analysis
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS
    check_terminal_punctuation: bool = False  # In-progress dictation is not flagged

    # Editing
    undo_limit: int = DEFAULT_UNDO_LIMIT
    max_text_length: int = DEFAULT_MAX_TEXT_LENGTH

    # Sessions
    max_sessions: int = DEFAULT_MAX_SESSIONS
    session_ttl: float = DEFAULT_SESSION_TTL

    # Paths
    log_dir: Path = field(default_factory=lambda: Path(__file__).parent / 'logs')

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # Options: json, text
    log_to_file: bool = False
    log_to_console: bool = True

    def __post_init__(self):
        """Normalize settings that depend on the environment."""
        if self.log_to_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        # Force debug=False in production environment
        if os.environ.get('DA_ENV', 'development').lower() == 'production':
            self.debug = False
            self.log_level = "WARNING"

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """Build a config from DA_* environment variables."""
        return cls(
            host=os.environ.get('DA_HOST', '127.0.0.1'),
            port=int(os.environ.get('DA_PORT', str(DEFAULT_PORT))),
            debug=_env_flag('DA_DEBUG', 'false'),
            max_suggestions=int(os.environ.get('DA_MAX_SUGGESTIONS', str(DEFAULT_MAX_SUGGESTIONS))),
            check_terminal_punctuation=_env_flag('DA_CHECK_TERMINAL_PUNCTUATION', 'false'),
            undo_limit=int(os.environ.get('DA_UNDO_LIMIT', str(DEFAULT_UNDO_LIMIT))),
            max_text_length=int(os.environ.get('DA_MAX_TEXT_LENGTH', str(DEFAULT_MAX_TEXT_LENGTH))),
            max_sessions=int(os.environ.get('DA_MAX_SESSIONS', str(DEFAULT_MAX_SESSIONS))),
            session_ttl=float(os.environ.get('DA_SESSION_TTL', str(DEFAULT_SESSION_TTL))),
            log_level=os.environ.get('DA_LOG_LEVEL', 'INFO'),
            log_format=os.environ.get('DA_LOG_FORMAT', 'json'),
            log_to_file=_env_flag('DA_LOG_TO_FILE', 'false'),
            log_to_console=_env_flag('DA_LOG_TO_CONSOLE', 'true'),
        )

    def validate(self) -> tuple:
        """Return (is_valid, errors) for values the app cannot run with."""
        errors = []

        if self.debug and os.environ.get('DA_ENV') == 'production':
            errors.append("Debug mode cannot be enabled in production")

        if self.max_suggestions < 1:
            errors.append("max_suggestions must be at least 1")

        if self.undo_limit < 2:
            errors.append("undo_limit must keep at least 2 snapshots")

        if not 0 < self.max_text_length <= MAX_SAFE_TEXT_LENGTH:
            errors.append(f"max_text_length must be between 1 and {MAX_SAFE_TEXT_LENGTH}")

        if self.max_sessions < 1:
            errors.append("max_sessions must be at least 1")

        if self.session_ttl <= 0:
            errors.append("session_ttl must be positive")

        if self.log_format not in ('json', 'text'):
            errors.append(f"Invalid log_format: {self.log_format}. Must be 'json' or 'text'")

        return (len(errors) == 0, errors)


# Global config instance
_config: Optional[AppConfig] = None

def get_config() -> AppConfig:
    """Process-wide configuration, loaded from the environment once."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reset_config():
    """Forget the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None


# =============================================================================
# STRUCTURED LOGGING
# =============================================================================

class StructuredLogger:
    """Logger wrapper that attaches a correlation id and keyword fields to every record."""

    _local = threading.local()

    def __init__(self, name: str, config: Optional[AppConfig] = None):
        self.name = name
        self.config = config or get_config()
        self._setup_logger()

    def _setup_logger(self):
        """Attach console and file handlers according to the config."""
        self.logger = logging.getLogger(self.name)
        self.logger.setLevel(getattr(logging, self.config.log_level.upper(), logging.INFO))
        self.logger.handlers.clear()
        self.logger.propagate = False

        if self.config.log_format == 'json':
            formatter = JsonFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s [%(levelname)s] %(name)s - %(message)s'
            )

        if self.config.log_to_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        # File handler with rotation
        if self.config.log_to_file:
            from logging.handlers import RotatingFileHandler
            log_file = self.config.log_dir / f"{self.name.lower()}.log"
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    @classmethod
    def set_correlation_id(cls, correlation_id: str):
        """Bind a correlation id to the current thread."""
        cls._local.correlation_id = correlation_id

    @classmethod
    def get_correlation_id(cls) -> str:
        """Correlation id of the current thread, or a throwaway one."""
        return getattr(cls._local, 'correlation_id', None) or str(uuid.uuid4())[:8]

    @classmethod
    def new_correlation_id(cls) -> str:
        """Start a new correlation id for the current request thread."""
        correlation_id = str(uuid.uuid4())[:12]
        cls.set_correlation_id(correlation_id)
        return correlation_id

    def _fields(self, **kwargs) -> Dict[str, Any]:
        return {'correlation_id': self.get_correlation_id(), **kwargs}

    def debug(self, message: str, **kwargs):
        self.logger.debug(message, extra=self._fields(**kwargs))

    def info(self, message: str, **kwargs):
        self.logger.info(message, extra=self._fields(**kwargs))

    def warning(self, message: str, **kwargs):
        self.logger.warning(message, extra=self._fields(**kwargs))

    def error(self, message: str, exc_info: bool = False, **kwargs):
        """Log error message with optional exception info."""
        self.logger.error(message, exc_info=exc_info, extra=self._fields(**kwargs))

    def exception(self, message: str, **kwargs):
        """error() with the active traceback attached."""
        self.error(message, exc_info=True, **kwargs)

    @contextmanager
    def log_operation(self, operation: str, **context):
        """Log start, completion (with duration_ms) or failure of a block."""
        start_time = time.time()
        self.debug(f"{operation} started", operation=operation, status='started', **context)
        try:
            yield
            duration_ms = (time.time() - start_time) * 1000
            self.debug(f"{operation} completed", operation=operation, status='completed',
                       duration_ms=round(duration_ms, 2), **context)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            self.error(f"{operation} failed: {e}", operation=operation, status='failed',
                       duration_ms=round(duration_ms, 2), exc_info=True, **context)
            raise


_RESERVED_RECORD_KEYS = frozenset((
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'pathname', 'process', 'processName', 'relativeCreated',
    'stack_info', 'thread', 'threadName', 'exc_info', 'exc_text',
    'message', 'taskName',
))


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        if record.exc_info:
            log_data['traceback'] = self.formatException(record.exc_info)

        # Add extra fields
        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


_loggers: Dict[str, StructuredLogger] = {}
_loggers_lock = threading.Lock()


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance (one per name)."""
    with _loggers_lock:
        logger = _loggers.get(name)
        if logger is None:
            logger = StructuredLogger(name, get_config())
            _loggers[name] = logger
        return logger


# =============================================================================
# ERRORS
# =============================================================================

class DictationError(Exception):
    """Base exception for DictationAssist."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR",
                 status_code: int = 500, details: Optional[Dict] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Error body in the API response shape."""
        return {
            'success': False,
            'error': {
                'code': self.code,
                'message': self.message,
                'details': self.details
            }
        }


class ValidationError(DictationError):
    """Request or argument failed validation."""
    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, code="VALIDATION_ERROR", status_code=400,
                         details={'field': field, **kwargs})


class NotFoundError(DictationError):
    """A command target or session could not be found."""
    def __init__(self, message: str, target: Optional[str] = None, **kwargs):
        super().__init__(message, code="NOT_FOUND", status_code=404,
                         details={'target': target, **kwargs})


class ProcessingError(DictationError):
    """Text processing error."""
    def __init__(self, message: str, stage: Optional[str] = None, **kwargs):
        super().__init__(message, code="PROCESSING_ERROR", status_code=500,
                         details={'stage': stage, **kwargs})


def handle_errors(logger: Optional[StructuredLogger] = None):
    """Translate ValueError/TypeError into ValidationError and anything unexpected into ProcessingError."""
    def decorator(func: Callable):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            _logger = logger or get_logger(func.__module__)
            try:
                return func(*args, **kwargs)
            except DictationError:
                raise
            except (ValueError, TypeError) as e:
                _logger.warning(f"Validation error in {func.__name__}: {e}")
                raise ValidationError(str(e))
            except Exception as e:
                _logger.exception(f"Unexpected error in {func.__name__}: {e}")
                raise ProcessingError(f"An unexpected error occurred: {type(e).__name__}")
        return wrapper
    return decorator
