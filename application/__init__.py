"""Application layer - Services and use cases."""
from .services import MetricService
from .use_cases import LookupPlayerUseCase, ReportMetricUseCase

__all__ = [
    'MetricService',
    'LookupPlayerUseCase',
    'ReportMetricUseCase',
]
