"""Core utilities package"""

from .config import Settings, settings, get_settings
from .logging import setup_logging, get_logger, get_context_logger
from .errors import (
    ProofmasterError,
    MissingQueryError,
    QueryNotConfiguredError,
    UpstreamProxyError,
    SessionNotFoundError,
    ExerciseNotFoundError,
    ContentNotFoundError,
    NoActiveItemError,
    ValidationError,
    register_error_handlers,
)

__all__ = [
    "Settings",
    "settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "ProofmasterError",
    "MissingQueryError",
    "QueryNotConfiguredError",
    "UpstreamProxyError",
    "SessionNotFoundError",
    "ExerciseNotFoundError",
    "ContentNotFoundError",
    "NoActiveItemError",
    "ValidationError",
    "register_error_handlers",
]
