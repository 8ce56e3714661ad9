"""Presentation CLI exports."""
from .metric_command import MetricCommand, build_parser

__all__ = [
    "MetricCommand",
    "build_parser",
]
