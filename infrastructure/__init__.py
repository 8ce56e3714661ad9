"""Infrastructure layer - API client and repositories."""
from .api import FaceitClient, HTTPTransport
from .repositories import PlayerRepository

__all__ = [
    'FaceitClient',
    'HTTPTransport',
    'PlayerRepository',
]
