"""Configuration package."""
from .settings import EndpointConfig, Settings, parse_duration, settings

__all__ = [
    'EndpointConfig',
    'Settings',
    'parse_duration',
    'settings',
]
