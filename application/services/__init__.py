"""Application services root exports."""
from .metrics import MetricResult, MetricService, WinLoss

__all__ = [
    "MetricResult",
    "MetricService",
    "WinLoss",
]
