"""Infrastructure API module."""
from .faceit_client import FaceitClient
from .transport import HTTPTransport

__all__ = [
    'FaceitClient',
    'HTTPTransport',
]
