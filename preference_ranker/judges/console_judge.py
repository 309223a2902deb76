"""
Console judge implementation.

Asks a human to pick between two items on a text stream.
"""

import sys
from collections.abc import Callable
from typing import TextIO

from typing_extensions import override

from ..exceptions import JudgeError
from ..interfaces import Judge
from ..logging_config import get_logger
from ..models import Matchup, Verdict

HELP_TEXT = "Enter a or b to pick your preference (? shows the current graph)"


class ConsoleJudge(Judge):
    """
    Interactive judge reading answers line by line.

    Accepts "a"/"A" or "b"/"B" for the first or second item, and "?" to run
    the help callback. Anything else is re-prompted.
    """

    def __init__(
        self,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
        max_attempts: int | None = None,
        on_help: Callable[[], None] | None = None,
    ):
        """
        Initialize console judge.

        Args:
            input_stream: Stream answers are read from (default: stdin)
            output_stream: Stream prompts are written to (default: stdout)
            max_attempts: Invalid answers tolerated per matchup (None = re-prompt forever)
            on_help: Called when the user enters "?"
        """
        if max_attempts is not None and max_attempts <= 0:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")
        self.input_stream: TextIO = input_stream if input_stream is not None else sys.stdin
        self.output_stream: TextIO = output_stream if output_stream is not None else sys.stdout
        self.max_attempts: int | None = max_attempts
        self.on_help: Callable[[], None] | None = on_help
        self.judge_id = "console"
        self.logger = get_logger("console_judge")

    def _write(self, text: str) -> None:
        _ = self.output_stream.write(text)
        self.output_stream.flush()

    @override
    def evaluate_matchup(self, matchup: Matchup) -> Verdict:
        """Prompt until a valid answer arrives or attempts run out."""
        self._write(f"a: {matchup.first.label}\nb: {matchup.second.label}\n")

        invalid_answers = 0
        while self.max_attempts is None or invalid_answers < self.max_attempts:
            line = self.input_stream.readline()
            if line == "":
                raise JudgeError("Input closed before the matchup was answered")

            answer = line.strip()
            if answer in ("a", "A"):
                winner, loser = matchup.first, matchup.second
            elif answer in ("b", "B"):
                winner, loser = matchup.second, matchup.first
            elif answer == "?":
                if self.on_help is not None:
                    self.on_help()
                self._write(f"a: {matchup.first.label}\nb: {matchup.second.label}\n")
                continue
            else:
                invalid_answers += 1
                self.logger.debug(f"Invalid answer {answer!r} ({invalid_answers} so far)")
                self._write(f"{HELP_TEXT}\n")
                continue

            self._write(f"{winner.label} > {loser.label}\n\n")
            return Verdict(winner=winner.handle, loser=loser.handle, judge_id=self.judge_id)

        raise JudgeError(f"No valid answer after {self.max_attempts} attempts")
