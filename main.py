"""
TriPeaks Solver - Entry Point

Solves a board snapshot and prints the move list.

Example:
    python main.py                         # Solve the built-in test board
    python main.py board.json --time-budget 2
    python main.py board.json --strategy greedy -v
"""

import sys
import logging
import argparse

from tripeaks.settings import load_settings
from tripeaks.snapshot import SnapshotError, load_board
from tripeaks.solver import (
    SolutionContext,
    TriPeaksSolver,
    create_strategy,
    create_test_board,
    get_strategy_info,
)

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool, log_file: str) -> None:
    """Log to both console and file."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler(log_file, mode='w', encoding='utf-8')  # File output
        ]
    )


def _strategy_help() -> str:
    """One line per registered strategy for --strategy help."""
    lines = [f"{info['name']}: {info['description']}" for info in get_strategy_info()]
    return "Solving strategy (default: from config.json). " + "; ".join(lines)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="TriPeaks Solver - Find a move sequence that clears a TriPeaks board"
    )
    parser.add_argument(
        "board",
        nargs="?",
        help="Board snapshot JSON file (default: built-in test board)"
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=[info["name"] for info in get_strategy_info()],
        help=_strategy_help()
    )
    parser.add_argument(
        "--max-iterations", "-n",
        type=int,
        help="Cap on distinct states visited (default: from config.json)"
    )
    parser.add_argument(
        "--time-budget", "-t",
        type=float,
        help="Time budget in seconds (default: from config.json)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Solve a board and print the result. Returns the exit code."""
    args = parse_args(argv)
    settings = load_settings()
    configure_logging(args.verbose, settings.get("log_file", "solver.log"))

    strategy_name = args.strategy or settings["strategy_name"]
    max_iterations = args.max_iterations if args.max_iterations is not None else settings["max_iterations"]
    time_budget = args.time_budget if args.time_budget is not None else settings["time_budget_sec"]

    if max_iterations <= 0 or time_budget <= 0:
        print(f"error: budgets must be positive (max iterations {max_iterations}, "
              f"time budget {time_budget})", file=sys.stderr)
        return 2

    if args.board:
        try:
            board = load_board(args.board)
        except SnapshotError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
    else:
        logger.info("No board given, using built-in test board")
        board = create_test_board()

    print(board.render())
    print()

    if strategy_name == "dfs":
        solver = TriPeaksSolver()
        solution = solver.solve(board, max_iterations=max_iterations, time_budget=time_budget)
        stats = solver.get_stats()
        stats_line = (f"states visited: {stats.states_visited}, max depth: {stats.max_depth}, "
                      f"{solution.metrics.computation_time_ms:.1f}ms")
    else:
        strategy = create_strategy(strategy_name)
        context = SolutionContext(board=board, timeout_sec=time_budget, max_iterations=max_iterations)
        solution = strategy.solve(context)
        stats_line = (f"states explored: {solution.metrics.states_explored}, "
                      f"{solution.metrics.computation_time_ms:.1f}ms")

    print(solution.format())
    print()
    print(stats_line)

    return 0 if solution.success else 1


if __name__ == "__main__":
    sys.exit(main())
