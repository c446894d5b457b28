"""
Clients package - External API integrations.

Handles communication with:
- Trivia backend: player count and player records
"""

from .trivia_client import (
    TriviaClient,
    FetchError,
    FetchErrorKind,
    ServerConnectionError,
    ApplicationError,
)

__all__ = [
    'TriviaClient',
    'FetchError',
    'FetchErrorKind',
    'ServerConnectionError',
    'ApplicationError',
]
