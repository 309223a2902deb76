"""
Dummy judge implementation for testing.

Provides deterministic and random answers for testing purposes.
"""

import random

from typing_extensions import override

from ..exceptions import ValidationError
from ..interfaces import Judge
from ..models import Matchup, Verdict


class DummyJudge(Judge):
    """
    Dummy judge for testing purposes.

    Deterministic mode prefers the alphabetically smaller label, so a run
    ends in sorted order. Random mode flips a seeded coin.
    """

    def __init__(self, mode: str = "deterministic", seed: int = 42):
        """
        Initialize dummy judge.

        Args:
            mode: "deterministic" or "random"
            seed: Random seed for reproducible results
        """
        if mode not in ("deterministic", "random"):
            raise ValidationError(f"Unknown mode: {mode}")
        self.mode = mode
        self.seed = seed
        self.judge_id = f"dummy_{mode}"
        self._rng = random.Random(seed)

    @override
    def evaluate_matchup(self, matchup: Matchup) -> Verdict:
        """
        Answer a matchup using dummy logic.

        Args:
            matchup: The two items to compare

        Returns:
            Verdict naming the preferred item
        """
        if self.mode == "deterministic":
            # ties go to the older contender
            if matchup.second.label < matchup.first.label:
                winner = matchup.second
            else:
                winner = matchup.first
        else:
            winner = self._rng.choice([matchup.first, matchup.second])

        return Verdict.for_winner(matchup, winner.handle, judge_id=self.judge_id)
