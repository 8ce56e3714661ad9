from __future__ import annotations

import argparse
import contextlib
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional, Sequence, TextIO

import httpx

from config import EndpointConfig, settings
from core.errors import ConfigurationError, StatClockError
from core.logging.logger import get_logger
from domain.enums import Metric
from infrastructure import FaceitClient, PlayerRepository
from application.services.metrics import Clock, MetricService
from application.use_cases import MetricReport, ReportMetricUseCase

EXIT_OK = 0
EXIT_RUNTIME_ERROR = 1
EXIT_CONFIG_ERROR = 2


@dataclass(frozen=True, slots=True)
class RunConfig:
    api_key: str
    nickname: str
    metric: Metric
    endpoint: EndpointConfig
    db_path: Optional[Path]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="statclock",
        description="Print one FACEIT metric for the player named by FACEIT_NICKNAME.",
    )
    parser.add_argument("-metric", "--metric", choices=Metric.choices(), default=None,
                        help=f"metric to print (default: $FACEIT_METRIC or {settings.DEFAULT_METRIC})")
    parser.add_argument("-game", "--game", default=None,
                        help=f"game id (default: $FACEIT_GAME or {settings.DEFAULT_GAME})")
    parser.add_argument("-timeout", "--timeout", default=None,
                        help="per-request timeout, e.g. 30s, 1m, 500ms (default: $FACEIT_TIMEOUT or 60s)")
    parser.add_argument("-api", "--api", default=None,
                        help="Data API base URL (default: $FACEIT_API_URL or the public API)")
    parser.add_argument("-nickname", "--nickname", default=None,
                        help="player nickname (default: $FACEIT_NICKNAME)")
    parser.add_argument("-db", "--db", default=None,
                        help="SQLite file for saved players (default: $STATCLOCK_DB or data/statclock.db)")
    parser.add_argument("-no-save", "--no-save", action="store_true",
                        help="do not record the player locally")
    parser.add_argument("-interactive", "--interactive", action="store_true",
                        help="prompt for the nickname when none is configured")
    return parser


class MetricCommand:
    """Look up one player and print one metric line.

    Exit codes: 0 success, 1 runtime/API error, 2 configuration error.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        prompt: Callable[[str], str] = input,
        http_client: Optional[httpx.Client] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._env = os.environ if environ is None else environ
        self._out = stdout or sys.stdout
        self._err = stderr or sys.stderr
        self._prompt = prompt
        self._http_client = http_client
        self._clock = clock
        self._log = get_logger(__name__, service="cli")

    def run(self, argv: Sequence[str]) -> int:
        args = build_parser().parse_args(list(argv))

        try:
            cfg = self._configure(args)
        except ConfigurationError as e:
            self._log.error(lambda: f"config-error {e}")
            print(f"error: {e}", file=self._err)
            return EXIT_CONFIG_ERROR

        try:
            report = self._report(cfg)
        except StatClockError as e:
            self._log.error(lambda: f"run-failed {type(e).__name__}: {e}")
            print(f"error: {e}", file=self._err)
            return EXIT_RUNTIME_ERROR

        print(report.result.render(), file=self._out)
        return EXIT_OK

    def _configure(self, args: argparse.Namespace) -> RunConfig:
        api_key = self._env.get("FACEIT_API_KEY", "").strip()
        if not api_key:
            raise ConfigurationError("FACEIT_API_KEY environment variable not set")

        nickname = (args.nickname or self._env.get("FACEIT_NICKNAME", "")).strip()
        if not nickname and args.interactive:
            try:
                nickname = self._prompt("Enter FACEIT nickname: ").strip()
            except EOFError:
                nickname = ""
        if not nickname:
            raise ConfigurationError("nickname not set (use -nickname or FACEIT_NICKNAME)")

        raw_metric = args.metric or self._env.get("FACEIT_METRIC", "").strip() or settings.DEFAULT_METRIC
        try:
            metric = Metric.from_string(raw_metric)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        endpoint = EndpointConfig.resolve(api=args.api, timeout=args.timeout, game=args.game, environ=self._env)

        db_path: Optional[Path] = None
        if not args.no_save:
            db_path = Path(args.db or self._env.get("STATCLOCK_DB", "").strip() or settings.DB_PATH)

        return RunConfig(api_key=api_key, nickname=nickname, metric=metric, endpoint=endpoint, db_path=db_path)

    def _report(self, cfg: RunConfig) -> MetricReport:
        self._log.info(lambda: f"run-start metric={cfg.metric.value} game={cfg.endpoint.game} api={cfg.endpoint.base_url}")
        client = FaceitClient(
            cfg.api_key,
            base_url=cfg.endpoint.base_url,
            timeout=cfg.endpoint.timeout,
            http_client=self._http_client,
        )
        with client, contextlib.ExitStack() as stack:
            repository = stack.enter_context(PlayerRepository(cfg.db_path)) if cfg.db_path else None
            metrics = MetricService(client, clock=self._clock)
            use_case = ReportMetricUseCase(client, repository=repository, metrics=metrics)
            return use_case.execute(cfg.nickname, cfg.endpoint.game, cfg.metric)
