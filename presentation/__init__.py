"""Presentation layer - User interfaces."""
from .cli import MetricCommand

__all__ = [
    "MetricCommand",
]
