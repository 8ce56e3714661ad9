"""Application use cases."""
from .lookup_player import LookupPlayerUseCase, LookupResult
from .report_metric import MetricReport, ReportMetricUseCase

__all__ = [
    'LookupPlayerUseCase',
    'LookupResult',
    'MetricReport',
    'ReportMetricUseCase',
]
