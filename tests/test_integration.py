"""
Integration tests for the preference ranker.

End-to-end runs of the orchestrator with real session and judges.
"""

import pytest
from preference_ranker.exceptions import JudgeError, JudgmentLimitError
from preference_ranker.interfaces import Judge
from preference_ranker.judges import DummyJudge, SimulatedJudge
from preference_ranker.models import Matchup, Verdict
from preference_ranker.orchestrator import Orchestrator, RunConfig
from preference_ranker.session import RankingSession, SessionState


class FailingJudge(Judge):
    """Judge that gives up on the first matchup."""

    def evaluate_matchup(self, matchup: Matchup) -> Verdict:
        raise JudgeError("no answer")


class TestIntegration:
    """Integration tests using all real components."""

    def test_consistent_answers_give_sorted_order(self):
        """A judge preferring smaller labels should produce alphabetical order."""
        # Arrange
        labels = ["pear", "apple", "fig", "banana", "kiwi", "cherry", "date"]
        orchestrator = Orchestrator(judge=DummyJudge(), config=RunConfig(progress_every=1))

        # Act
        results = orchestrator.run(labels)

        # Assert
        assert [r.label for r in results] == sorted(labels)
        assert orchestrator.session.state is SessionState.RESULTS
        assert orchestrator.judgments <= len(labels) * (len(labels) - 1) // 2

    def test_simulated_judge_without_noise_recovers_ground_truth(self):
        # Arrange
        ground_truth = {"crisps": 2.0, "soup": 9.0, "salad": 4.0, "cake": 7.0, "bread": 1.0}
        judge = SimulatedJudge(ground_truth, noise=0.0)
        orchestrator = Orchestrator(judge=judge)

        # Act
        results = orchestrator.run(ground_truth)

        # Assert
        expected = sorted(ground_truth, key=lambda label: ground_truth[label], reverse=True)
        assert [r.label for r in results] == expected

    @pytest.mark.parametrize("seed", range(10))
    def test_noisy_judge_still_ranks_everything(self, seed: int):
        """Inconsistent answers must not lose items."""
        labels = [f"item-{i}" for i in range(12)]
        judge = SimulatedJudge({label: float(i + 1) for i, label in enumerate(labels)}, noise=1.0, seed=seed)

        results = Orchestrator(judge=judge).run(labels)

        assert sorted(r.label for r in results) == sorted(labels)

    def test_redo_ranks_same_items_again(self):
        # Arrange
        session = RankingSession()
        orchestrator = Orchestrator(judge=DummyJudge(), session=session)
        first = orchestrator.run(["b", "c", "a"])

        # Act
        second = orchestrator.redo()

        # Assert
        assert [r.label for r in second] == [r.label for r in first] == ["a", "b", "c"]
        assert session.labels == ["b", "c", "a"]

    def test_run_replaces_previous_items(self):
        orchestrator = Orchestrator(judge=DummyJudge())
        orchestrator.run(["b", "a"])

        results = orchestrator.run(["z", "y", "x"])

        assert [r.label for r in results] == ["x", "y", "z"]

    def test_empty_run(self):
        results = Orchestrator(judge=DummyJudge()).run([])

        assert results == []

    def test_judge_failure_propagates(self):
        orchestrator = Orchestrator(judge=FailingJudge())

        with pytest.raises(JudgeError):
            orchestrator.run(["a", "b"])

    def test_max_judgments_aborts(self):
        orchestrator = Orchestrator(judge=DummyJudge(), config=RunConfig(max_judgments=1))

        with pytest.raises(JudgmentLimitError):
            orchestrator.run(["d", "c", "b", "a"])

    def test_run_config_validation(self):
        with pytest.raises(ValueError):
            RunConfig(progress_every=0)
        with pytest.raises(ValueError):
            RunConfig(max_judgments=0)
