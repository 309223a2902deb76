"""
Simulated judge implementation.

Answers matchups from latent scores with a noise parameter, standing in for
a human whose taste is known in advance.
"""

import random

from typing_extensions import override

from ..interfaces import Judge
from ..logging_config import get_logger
from ..models import Item, Matchup, Verdict


class SimulatedJudge(Judge):
    """
    Simulated judge for testing purposes.

    Prefers the item with the higher noisy ground-truth score.
    """

    def __init__(self, ground_truth: dict[str, float], noise: float = 0.1, seed: int | None = None):
        """
        Initialize simulated judge.

        Args:
            ground_truth: Dict mapping label to true preference score
            noise: Amount of noise to add (0-1, where 1 = full noise)
            seed: Random seed for reproducible results (None = unseeded)
        """
        self.ground_truth = ground_truth
        self.noise = max(0.0, min(1.0, noise))  # Clamp to [0, 1]
        self.judge_id = "simulated"
        self._rng = random.Random(seed)
        self.logger = get_logger("sim_judge")

    def _add_noise(self, score: float) -> float:
        """Add Gaussian noise to score."""
        if self.noise == 0:
            return score

        # Scale noise by score magnitude
        noise_scale = abs(score) * self.noise
        return score + self._rng.gauss(0, noise_scale)

    def _noisy_score(self, item: Item) -> float:
        return self._add_noise(self.ground_truth.get(item.label, 0.0))

    @override
    def evaluate_matchup(self, matchup: Matchup) -> Verdict:
        """
        Answer a matchup using simulated ground truth + noise.

        Ties go to the older contender.
        """
        first_score = self._noisy_score(matchup.first)
        second_score = self._noisy_score(matchup.second)
        winner = matchup.second if second_score > first_score else matchup.first

        self.logger.debug(
            f"{matchup.first.label}={first_score:.3f} vs {matchup.second.label}={second_score:.3f}"
        )
        return Verdict.for_winner(matchup, winner.handle, judge_id=self.judge_id)
