# cli.py

"""
Command line front end.

    python -m sudokugen list
    python -m sudokugen solve --puzzle classic
    python -m sudokugen generate --puzzle swap --seed 7 --literal
    python -m sudokugen bench --puzzle classic --repeats 10
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from . import puzzles
from .benchmark import benchmark_generate, benchmark_solve
from .board import Board, Literal
from .exceptions import InvalidPattern
from .generator import ChallengeGenerator, GeneratorConfig
from .render import format_grid, format_literal, parse_grid
from .solver import Solver

log = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def _add_source(parser: argparse.ArgumentParser) -> None:
    g = parser.add_mutually_exclusive_group()
    g.add_argument("--puzzle", default="classic", help="Built-in puzzle name (see 'list').")
    g.add_argument("--grid", help="81-symbol grid: '.'/'0' blank, 1-9 fixed, '?' wildcard.")


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _builtin(name: str) -> Optional[Literal]:
    try:
        return puzzles.get_puzzle(name)
    except KeyError as e:
        log.error("%s", e.args[0])
        return None


def _load(args: argparse.Namespace) -> Optional[Board]:
    if args.grid:
        return parse_grid(args.grid)
    literal = _builtin(args.puzzle)
    return Board.from_literal(literal) if literal is not None else None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudokugen",
        description="Solve 9x9 Sudoku and generate uniquely solvable challenges.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("list", help="List built-in puzzles")

    p_solve = subparsers.add_parser("solve", help="Count solutions and show the first")
    _add_source(p_solve)
    p_solve.add_argument("--cutoff", type=_positive_int, default=2, help="Stop counting at this many solutions.")

    p_gen = subparsers.add_parser("generate", help="Resolve wildcards into a unique challenge")
    _add_source(p_gen)
    p_gen.add_argument("--seed", type=int, help="Random seed for reproducibility.")
    p_gen.add_argument("--pool-size", type=_positive_int, default=GeneratorConfig.pool_size,
                       help="Number of pregenerated digit permutations.")
    p_gen.add_argument("--solvable-only", action="store_true",
                       help="Accept any solvable resolution instead of requiring uniqueness.")
    p_gen.add_argument("--literal", action="store_true", help="Also print the result as a literal.")

    p_bench = subparsers.add_parser("bench", help="Time the solver or generator")
    _add_source(p_bench)
    p_bench.add_argument("--repeats", type=_positive_int, default=5)
    p_bench.add_argument("--generate", action="store_true", help="Benchmark generation instead of solving.")
    p_bench.add_argument("--seed", type=int)

    return parser


def cmd_list() -> int:
    for name in puzzles.names():
        try:
            shown = format_grid(Board.from_literal(puzzles.PUZZLES[name]))
        except InvalidPattern:
            shown = "(invalid)"
        print(f"{name:18} {shown}")
    return EXIT_SUCCESS


def cmd_solve(args: argparse.Namespace) -> int:
    board = _load(args)
    if board is None:
        return EXIT_USAGE
    print(board)
    solver = Solver(board, max_solutions=args.cutoff, capture=True)
    count = solver.count()
    if count == 0:
        print("Puzzle has no solution")
        return EXIT_FAILURE
    if count >= args.cutoff:
        print(f"At least {count} solutions; first found:")
    else:
        print(f"{count} solution(s); first found:")
    print(solver.first_solution)
    return EXIT_SUCCESS


def cmd_generate(args: argparse.Namespace) -> int:
    pattern = _load(args)
    if pattern is None:
        return EXIT_USAGE
    print(pattern)
    config = GeneratorConfig(
        seed=args.seed,
        pool_size=args.pool_size,
        require_unique=not args.solvable_only,
    )
    challenge = ChallengeGenerator(config).generate(pattern)
    if challenge is None:
        print("No challenge can be made from this pattern")
        return EXIT_FAILURE
    print("Challenge:")
    print(challenge)
    if args.literal:
        print(format_literal(challenge))
    return EXIT_SUCCESS


def cmd_bench(args: argparse.Namespace) -> int:
    literal = parse_grid(args.grid).to_literal() if args.grid else _builtin(args.puzzle)
    if literal is None:
        return EXIT_USAGE
    name = "grid" if args.grid else args.puzzle
    if args.generate:
        result = benchmark_generate(name, literal, repeats=args.repeats, seed=args.seed)
    else:
        result = benchmark_solve(name, literal, repeats=args.repeats)
    print(result.summary())
    return EXIT_SUCCESS


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return EXIT_USAGE
    try:
        if args.command == "list":
            return cmd_list()
        if args.command == "solve":
            return cmd_solve(args)
        if args.command == "generate":
            return cmd_generate(args)
        return cmd_bench(args)
    except InvalidPattern as e:
        log.error("%s", e)
        return EXIT_USAGE
