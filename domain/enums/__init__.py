"""Domain enumerations."""
from .metric import Metric

__all__ = [
    'Metric',
]
