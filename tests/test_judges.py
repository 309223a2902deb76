"""
Tests for judge implementations and the Verdict/Matchup models.

Focus on answer parsing, retry limits and deterministic choices.
"""

import io

import pytest
from preference_ranker.exceptions import JudgeError, ValidationError
from preference_ranker.judges import ConsoleJudge, DummyJudge, SimulatedJudge
from preference_ranker.models import ROOT_ID, Item, Matchup, NodeId, Verdict

APPLES = Item(handle=NodeId(1), label="Apples")
BANANAS = Item(handle=NodeId(2), label="Bananas")


def _matchup(first: Item = APPLES, second: Item = BANANAS) -> Matchup:
    return Matchup(parent=ROOT_ID, first=first, second=second, first_mark=1, second_mark=2)


class TestModels:
    """Test the value objects passed between session and judges."""

    def test_verdict_rejects_same_item(self):
        with pytest.raises(ValidationError):
            Verdict(winner=NodeId(1), loser=NodeId(1))

    def test_verdict_for_winner(self):
        verdict = Verdict.for_winner(_matchup(), BANANAS.handle, judge_id="test")

        assert (verdict.winner, verdict.loser) == (BANANAS.handle, APPLES.handle)
        assert verdict.judge_id == "test"

    def test_opponent_of_outsider_raises(self):
        matchup = _matchup()

        assert matchup.opponent(APPLES.handle) == BANANAS
        assert matchup.contains(BANANAS.handle)
        with pytest.raises(ValidationError):
            matchup.opponent(NodeId(7))


class TestConsoleJudge:
    """Test ConsoleJudge behavior through public interface."""

    def test_answer_b_picks_second_item(self):
        """Invalid answers are re-prompted until a or b arrives."""
        # Arrange
        stdin = io.StringIO("maybe\nB\n")
        stdout = io.StringIO()
        judge = ConsoleJudge(input_stream=stdin, output_stream=stdout)

        # Act
        verdict = judge.evaluate_matchup(_matchup())

        # Assert
        assert verdict.winner == BANANAS.handle
        assert verdict.loser == APPLES.handle
        assert verdict.judge_id == "console"
        output = stdout.getvalue()
        assert "a: Apples\nb: Bananas\n" in output
        assert "Enter a or b" in output
        assert "Bananas > Apples" in output

    def test_answer_a_picks_first_item(self):
        judge = ConsoleJudge(input_stream=io.StringIO(" a \n"), output_stream=io.StringIO())

        verdict = judge.evaluate_matchup(_matchup())

        assert verdict.winner == APPLES.handle

    def test_question_mark_runs_help(self):
        """'?' should call the help hook without counting as an attempt."""
        # Arrange
        calls = list[int]()
        judge = ConsoleJudge(
            input_stream=io.StringIO("?\n?\na\n"),
            output_stream=io.StringIO(),
            max_attempts=1,
            on_help=lambda: calls.append(1),
        )

        # Act
        verdict = judge.evaluate_matchup(_matchup())

        # Assert
        assert len(calls) == 2
        assert verdict.winner == APPLES.handle

    def test_gives_up_after_max_attempts(self):
        judge = ConsoleJudge(
            input_stream=io.StringIO("x\ny\na\n"),
            output_stream=io.StringIO(),
            max_attempts=2,
        )

        with pytest.raises(JudgeError):
            judge.evaluate_matchup(_matchup())

    def test_closed_input_raises(self):
        judge = ConsoleJudge(input_stream=io.StringIO("nope\n"), output_stream=io.StringIO())

        with pytest.raises(JudgeError):
            judge.evaluate_matchup(_matchup())

    def test_max_attempts_must_be_positive(self):
        with pytest.raises(ValueError):
            ConsoleJudge(input_stream=io.StringIO(), max_attempts=0)


class TestDummyJudge:
    """Test DummyJudge behavior through public interface."""

    def test_deterministic_prefers_smaller_label(self):
        judge = DummyJudge()

        assert judge.evaluate_matchup(_matchup(APPLES, BANANAS)).winner == APPLES.handle
        assert judge.evaluate_matchup(_matchup(BANANAS, APPLES)).winner == APPLES.handle

    def test_deterministic_tie_goes_to_first(self):
        twin = Item(handle=NodeId(3), label="Apples")

        verdict = DummyJudge().evaluate_matchup(_matchup(APPLES, twin))

        assert verdict.winner == APPLES.handle

    def test_random_mode_is_reproducible(self):
        matchup = _matchup()
        judge_a = DummyJudge(mode="random", seed=7)
        judge_b = DummyJudge(mode="random", seed=7)

        answers_a = [judge_a.evaluate_matchup(matchup).winner for _ in range(20)]
        answers_b = [judge_b.evaluate_matchup(matchup).winner for _ in range(20)]

        assert answers_a == answers_b
        assert set(answers_a) <= {APPLES.handle, BANANAS.handle}

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValidationError):
            DummyJudge(mode="coin")


class TestSimulatedJudge:
    """Test SimulatedJudge behavior through public interface."""

    def test_zero_noise_follows_ground_truth(self):
        judge = SimulatedJudge({"Apples": 1.0, "Bananas": 5.0}, noise=0.0)

        verdict = judge.evaluate_matchup(_matchup())

        assert verdict.winner == BANANAS.handle
        assert verdict.judge_id == "simulated"

    def test_unknown_labels_score_zero(self):
        judge = SimulatedJudge({"Apples": 2.0}, noise=0.0)

        assert judge.evaluate_matchup(_matchup()).winner == APPLES.handle

    def test_noise_is_clamped(self):
        assert SimulatedJudge({}, noise=3.0).noise == 1.0
        assert SimulatedJudge({}, noise=-1.0).noise == 0.0

    def test_seeded_runs_agree(self):
        truth = {"Apples": 5.0, "Bananas": 4.9}
        matchup = _matchup()

        judge_a = SimulatedJudge(truth, noise=0.5, seed=3)
        judge_b = SimulatedJudge(truth, noise=0.5, seed=3)

        run_a = [judge_a.evaluate_matchup(matchup).winner for _ in range(10)]
        run_b = [judge_b.evaluate_matchup(matchup).winner for _ in range(10)]

        assert run_a == run_b
