"""Problem registry for algobench.

Each problem is registered under a short key with a zero-argument factory.
The registry is an explicit, ordered mapping; order is the menu numbering.

    sum              — sum of 1..n (iterative vs. Gauss)
    gcd              — greatest common divisor (count-down vs. Euclid)
    product          — ancient Egyptian multiplication
    lightest-worker  — lightest element of a list (brute force vs. single pass)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from algobench.config import Policy
from algobench.errors import InvalidArgumentError, UnknownProblemError
from algobench.problems.base import Problem
from algobench.problems.gcd import GreatestCommonDivisorProblem
from algobench.problems.lightest_worker import LightestWorkerProblem
from algobench.problems.product import ProductProblem
from algobench.problems.sum_to_n import SumProblem

logger = logging.getLogger(__name__)

ProblemFactory = Callable[[], Problem]


@dataclass(frozen=True)
class ProblemEntry:
    """A registry key paired with the factory that builds the problem."""

    key: str
    factory: ProblemFactory


class ProblemRegistry:
    """Ordered key → factory map."""

    def __init__(self) -> None:
        self._entries: dict[str, ProblemEntry] = {}

    def register(self, key: str, factory: ProblemFactory) -> None:
        if key in self._entries:
            raise InvalidArgumentError(f"Problem key already registered: {key}")
        self._entries[key] = ProblemEntry(key=key, factory=factory)

    def keys(self) -> list[str]:
        return list(self._entries)

    def entries(self) -> list[ProblemEntry]:
        return list(self._entries.values())

    def create(self, key: str, policy: Optional[Policy] = None) -> Problem:
        """Build a fresh problem instance for key.

        Raises:
            UnknownProblemError: key is not registered.
            TypeError: the factory returned something that is not a Problem.
        """
        entry = self._entries.get(key)
        if entry is None:
            raise UnknownProblemError(
                f"Unknown problem: {key}. Choose: {', '.join(self._entries) or '(none)'}"
            )
        problem = entry.factory()
        if not isinstance(problem, Problem):
            raise TypeError(f"Factory for '{key}' returned {type(problem).__name__}, not a Problem")
        if policy is not None:
            problem.policy = policy
        return problem

    def load_all(
        self,
        policy: Optional[Policy] = None,
        on_error: Optional[Callable[[str, Exception], None]] = None,
    ) -> dict[str, Problem]:
        """Instantiate every registered problem.

        Each entry loads on its own: a failing factory is logged, reported
        through on_error and skipped, and the rest still load.
        """
        problems: dict[str, Problem] = {}
        for key in self._entries:
            try:
                problems[key] = self.create(key, policy)
            except Exception as e:
                logger.error("Error loading problem '%s': %s", key, e)
                if on_error is not None:
                    on_error(key, e)
        return problems


def default_registry() -> ProblemRegistry:
    """Registry with the built-in problems."""
    registry = ProblemRegistry()
    registry.register("sum", SumProblem)
    registry.register("gcd", GreatestCommonDivisorProblem)
    registry.register("product", ProductProblem)
    registry.register("lightest-worker", LightestWorkerProblem)
    return registry
