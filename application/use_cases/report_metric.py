"""Use case behind the CLI: look up, persist, derive one metric."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.logging.context import context
from core.logging.logger import get_logger
from domain.entities import PlayerRecord
from domain.enums import Metric
from domain.interfaces import IPlayerRepository
from infrastructure.api import FaceitClient
from application.services.metrics import MetricResult, MetricService
from .lookup_player import LookupPlayerUseCase, LookupResult


@dataclass(frozen=True, slots=True)
class MetricReport:
    lookup: LookupResult
    result: MetricResult
    saved: bool


class ReportMetricUseCase:
    def __init__(
        self,
        client: FaceitClient,
        repository: Optional[IPlayerRepository] = None,
        metrics: Optional[MetricService] = None,
        lookup: Optional[LookupPlayerUseCase] = None,
    ):
        self.client = client
        self.repository = repository
        self.metrics = metrics or MetricService(client)
        self.lookup = lookup or LookupPlayerUseCase(client)
        self._log = get_logger(__name__, service="report")

    def execute(self, nickname: str, game: str, metric: Metric) -> MetricReport:
        with context(nickname=nickname, metric=metric.value):
            found = self.lookup.execute(nickname, game)
            player = found.player
            with context(player_id=player.player_id, game=found.effective_game):
                saved = False
                if self.repository is not None:
                    self.repository.upsert(PlayerRecord.from_details(player))
                    saved = True
                result = self.metrics.compute(metric, player, found.effective_game)
                self._log.success(lambda: f"report-ready {result.render()}")
                return MetricReport(lookup=found, result=result, saved=saved)
