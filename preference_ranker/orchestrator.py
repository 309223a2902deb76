"""
Orchestrator for a ranking run.

Coordinates the session and the judge: registers labels, feeds each matchup
to the judge and each verdict back to the session until the ranking is
resolved.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loguru import Logger

from .exceptions import JudgeError, JudgmentLimitError
from .interfaces import Judge
from .logging_config import get_logger
from .models import RankedItem
from .session import RankingSession


@dataclass
class RunConfig:
    """Configuration for a ranking run."""

    progress_every: int = 10  # log progress every N judgments
    max_judgments: int | None = None  # safety cap, None = until resolved

    def __post_init__(self):
        """Validate configuration."""
        if self.progress_every <= 0:
            raise ValueError(f"progress_every must be positive, got {self.progress_every}")
        if self.max_judgments is not None and self.max_judgments <= 0:
            raise ValueError(f"max_judgments must be positive, got {self.max_judgments}")


class Orchestrator:
    """Main orchestrator for a ranking run."""

    def __init__(
        self,
        judge: Judge,
        config: RunConfig | None = None,
        session: RankingSession | None = None,
    ):
        """Initialize orchestrator with its components."""
        self.judge: Judge = judge
        self.config: RunConfig = config or RunConfig()
        self.session: RankingSession = session or RankingSession()

        # Runtime state
        self.judgments: int = 0

        # Setup logger
        self.logger: "Logger" = get_logger("orchestrator")

    def run(self, labels: Iterable[str]) -> list[RankedItem]:
        """Rank a fresh set of labels."""
        self.session.reset(keep_items=False)
        for label in labels:
            _ = self.session.register(label)
        return self._rank()

    def redo(self) -> list[RankedItem]:
        """Rank the same labels again from scratch."""
        self.session.reset(keep_items=True)
        return self._rank()

    def _rank(self) -> list[RankedItem]:
        """Answer matchups until none remain, then read the results."""
        self.logger.info(f"Starting ranking with config: {self.config}")
        self.judgments = 0
        self.session.finish_collecting()

        while True:
            matchup = self.session.request_next_matchup()
            if matchup is None:
                self.logger.info("Selector returned no more matchups")
                break

            if self.config.max_judgments is not None and self.judgments >= self.config.max_judgments:
                raise JudgmentLimitError(
                    f"Ranking not resolved after {self.judgments} judgments - aborting"
                )

            try:
                verdict = self.judge.evaluate_matchup(matchup)
            except JudgeError as e:
                self.logger.error(
                    f"Judge failed on {matchup.first.label!r} vs {matchup.second.label!r}: {e}"
                )
                raise

            self.session.submit_preference(verdict.winner, verdict.loser)
            self.judgments += 1

            if self.judgments % self.config.progress_every == 0:
                self._log_progress()

        results = self.session.request_results()
        self.logger.info(f"Ranking complete: {len(results)} items after {self.judgments} judgments")
        return results

    def _log_progress(self) -> None:
        """Log progress (number of judgments and open matchups)."""
        pending = len(self.session.selector.find_matchups(self.session.graph))
        self.logger.info(f"Progress: {self.judgments} judgments, {pending} matchups pending")
