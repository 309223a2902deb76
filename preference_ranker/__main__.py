"""
CLI entry point for the preference ranker.

Parses arguments, validates config, wires components and runs the
collect -> rank -> results loop on the terminal.
"""

import argparse
import sys
from argparse import Namespace
from pathlib import Path
from typing import TextIO, TypedDict

from prettytable import PrettyTable

from .exceptions import ConfigurationError, JudgeError, JudgmentLimitError
from .fetchers import FileItemFetcher, LineItemFetcher
from .graph_export import to_dot
from .interfaces import ItemFetcher, Judge
from .judges import ConsoleJudge, DummyJudge, SimulatedJudge
from .logging_config import get_logger, setup_logging
from .models import RankedItem
from .orchestrator import Orchestrator, RunConfig
from .session import RankingSession

RESULTS_MENU = (
    "\nPress r to redo with the same items\n"
    "Press s to start over with new items\n"
    "Press q to quit\n"
)


class CLIArgs(TypedDict):
    """Typed representation of parsed CLI arguments."""
    items_file: str | None
    judge_type: str
    noise: float
    seed: int | None
    max_attempts: int | None
    max_judgments: int | None
    progress_every: int
    dot: bool
    log_file: str | None
    debug: bool
    log_level: str


def parse_args(argv: list[str] | None = None) -> Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="preference-ranker",
        description="Preference Ranker - rank items by answering pairwise questions",
    )

    _ = parser.add_argument(
        "--items-file",
        help="Text file with one item per line (default: read items interactively)"
    )
    _ = parser.add_argument(
        "--judge-type",
        choices=["console", "dummy", "simulated"],
        default="console",
        help="Who answers the matchups (default: console)"
    )
    _ = parser.add_argument(
        "--noise",
        type=float,
        default=0.1,
        help="Noise level for simulated judge (0-1, default: 0.1)"
    )
    _ = parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for the simulated judge; makes the dummy judge answer randomly"
    )
    _ = parser.add_argument(
        "--max-attempts",
        type=int,
        help="Invalid answers tolerated per matchup by the console judge (default: unlimited)"
    )
    _ = parser.add_argument(
        "--max-judgments",
        type=int,
        help="Abort if the ranking is not resolved after this many judgments"
    )
    _ = parser.add_argument(
        "--progress-every",
        type=int,
        default=10,
        help="Log progress every N judgments (default: 10)"
    )
    _ = parser.add_argument(
        "--dot",
        action="store_true",
        help="Print the final preference graph in Graphviz DOT format"
    )
    _ = parser.add_argument(
        "--log-file",
        help="Also write INFO logs to this file"
    )
    _ = parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    _ = parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: WARNING)"
    )

    return parser.parse_args(argv)


def args_to_typed(ns: Namespace) -> CLIArgs:
    """Convert argparse Namespace to typed CLIArgs."""
    return CLIArgs(
        items_file=ns.items_file,
        judge_type=ns.judge_type,
        noise=ns.noise,
        seed=ns.seed,
        max_attempts=ns.max_attempts,
        max_judgments=ns.max_judgments,
        progress_every=ns.progress_every,
        dot=ns.dot,
        log_file=ns.log_file,
        debug=ns.debug,
        log_level=ns.log_level,
    )


def validate_config(args: CLIArgs) -> None:
    """Validate configuration parameters."""
    logger = get_logger("validate_config")

    if args["items_file"] is not None:
        items_file = Path(args["items_file"])
        if not items_file.is_file():
            raise ConfigurationError(f"items file does not exist: {items_file}")
        logger.info(f"Items file: {items_file}")
    elif args["judge_type"] != "console":
        raise ConfigurationError(f"--items-file is required with the {args['judge_type']} judge")

    if not (0.0 <= args["noise"] <= 1.0):
        raise ConfigurationError(f"noise must be between 0 and 1, got {args['noise']}")
    if args["max_attempts"] is not None and args["max_attempts"] <= 0:
        raise ConfigurationError(f"max_attempts must be positive, got {args['max_attempts']}")
    if args["max_judgments"] is not None and args["max_judgments"] <= 0:
        raise ConfigurationError(f"max_judgments must be positive, got {args['max_judgments']}")
    if args["progress_every"] <= 0:
        raise ConfigurationError(f"progress_every must be positive, got {args['progress_every']}")


def wire_components(
    args: CLIArgs,
    stdin: TextIO,
    stdout: TextIO,
) -> tuple[ItemFetcher, Judge, RankingSession, RunConfig]:
    """Wire dependency injection components."""
    logger = get_logger("wire_components")

    session = RankingSession()

    logger.info("Creating item fetcher")
    fetcher: ItemFetcher
    if args["items_file"] is not None:
        fetcher = FileItemFetcher(Path(args["items_file"]))
    else:
        fetcher = LineItemFetcher(stdin, prompt_stream=stdout)

    logger.info(f"Creating {args['judge_type']} judge")
    judge: Judge
    if args["judge_type"] == "console":
        def show_graph() -> None:
            _ = stdout.write(to_dot(session.dump_graph()))

        judge = ConsoleJudge(
            input_stream=stdin,
            output_stream=stdout,
            max_attempts=args["max_attempts"],
            on_help=show_graph,
        )
    elif args["judge_type"] == "dummy":
        seed = args["seed"] if args["seed"] is not None else 42
        judge = DummyJudge(mode="random" if args["seed"] is not None else "deterministic", seed=seed)
    elif args["judge_type"] == "simulated":
        # Items listed earlier in the file are the ones the simulated user likes best
        labels = list(fetcher.list_labels())
        ground_truth = {label: float(len(labels) - i) for i, label in enumerate(labels)}
        judge = SimulatedJudge(ground_truth, noise=args["noise"], seed=args["seed"])
        logger.info(f"Simulated judge created with {len(ground_truth)} items, noise={args['noise']}")
    else:
        logger.error(f"Unknown judge type: {args['judge_type']}")
        raise ConfigurationError(f"Unknown judge type: {args['judge_type']}")

    config = RunConfig(
        progress_every=args["progress_every"],
        max_judgments=args["max_judgments"],
    )

    return fetcher, judge, session, config


def format_results(results: list[RankedItem]) -> str:
    """Render the ranking as a table."""
    table = PrettyTable()
    table.field_names = ["Rank", "Item"]
    table.align["Rank"] = "r"
    table.align["Item"] = "l"
    for row in results:
        table.add_row([row.rank, row.label])
    return table.get_string()


def print_results(results: list[RankedItem], stdout: TextIO) -> None:
    _ = stdout.write("Here are the results:\n\n")
    _ = stdout.write(format_results(results) + "\n")


def ask_next_step(stdin: TextIO, stdout: TextIO) -> str:
    """Show the results menu and return "r", "s" or "q"."""
    _ = stdout.write(RESULTS_MENU)
    stdout.flush()
    while True:
        line = stdin.readline()
        if line == "":
            return "q"
        choice = line.strip().lower()
        if choice in ("r", "s", "q"):
            return choice
        _ = stdout.write("Enter r, s or q\n")


def run_cli(args: CLIArgs, stdin: TextIO, stdout: TextIO) -> list[RankedItem]:
    """Wire components and run until the user quits. Returns the last results."""
    logger = get_logger("run_cli")

    fetcher, judge, session, config = wire_components(args, stdin, stdout)
    orchestrator = Orchestrator(judge=judge, config=config, session=session)
    interactive = isinstance(judge, ConsoleJudge)

    if interactive:
        _ = stdout.write("Let's rank some stuff\n")
    results = orchestrator.run(fetcher.list_labels())

    while True:
        print_results(results, stdout)
        if args["dot"]:
            _ = stdout.write(to_dot(session.dump_graph()))
        if not interactive:
            return results

        choice = ask_next_step(stdin, stdout)
        if choice == "q":
            return results
        if choice == "r":
            logger.info("Redoing ranking with the same items")
            results = orchestrator.redo()
        else:
            logger.info("Starting over with new items")
            results = orchestrator.run(LineItemFetcher(stdin, prompt_stream=stdout).list_labels())


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = args_to_typed(parse_args(argv))

    # Setup logging
    setup_logging(level=args["log_level"], debug=args["debug"], log_file=args["log_file"])
    logger = get_logger("main")

    try:
        validate_config(args)
        _ = run_cli(args, sys.stdin, sys.stdout)
    except ConfigurationError as e:
        logger.error(str(e))
        print(f"Error: {e}")
        sys.exit(1)
    except JudgeError as e:
        logger.error(f"Ranking aborted: {e}")
        print(f"\nRanking aborted: {e}")
        sys.exit(1)
    except JudgmentLimitError as e:
        logger.error(str(e))
        print(f"\nRanking aborted: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Ranking interrupted by user")
        print("\nRanking interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
