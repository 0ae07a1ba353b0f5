# benchmark.py

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .board import Board
from .generator import ChallengeGenerator, GeneratorConfig
from .solver import Solver

log = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    name: str
    runs: int
    count: int  # solutions (solve) or successful generations (generate)
    timings: List[float] = field(default_factory=list)

    @property
    def best(self) -> float:
        return min(self.timings) if self.timings else 0.0

    @property
    def mean(self) -> float:
        return sum(self.timings) / len(self.timings) if self.timings else 0.0

    def summary(self) -> str:
        return (
            f"{self.name}: {self.runs} run(s), result {self.count}, "
            f"best {self.best * 1000:.2f} ms, mean {self.mean * 1000:.2f} ms"
        )


def benchmark_solve(
    name: str,
    literal: Sequence[Sequence[int]],
    repeats: int = 5,
    cutoff: int = 2,
) -> BenchmarkResult:
    assert repeats > 0, "repeats must be positive"
    board = Board.from_literal(literal)
    result = BenchmarkResult(name=name, runs=repeats, count=0)
    for _ in range(repeats):
        solver = Solver(board.copy(), max_solutions=cutoff)
        t0 = time.perf_counter()
        result.count = solver.count()
        result.timings.append(time.perf_counter() - t0)
        log.debug("%s: %d solution(s), %d nodes", name, result.count, solver.nodes)
    return result


def benchmark_generate(
    name: str,
    literal: Sequence[Sequence[int]],
    repeats: int = 5,
    seed: Optional[int] = None,
) -> BenchmarkResult:
    assert repeats > 0, "repeats must be positive"
    pattern = Board.from_literal(literal)
    generator = ChallengeGenerator(GeneratorConfig(seed=seed))
    result = BenchmarkResult(name=name, runs=repeats, count=0)
    for _ in range(repeats):
        t0 = time.perf_counter()
        challenge = generator.generate(pattern)
        result.timings.append(time.perf_counter() - t0)
        if challenge is not None:
            result.count += 1
    return result
