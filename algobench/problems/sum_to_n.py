"""Sum of 1..n — iterative loop vs. Gauss's closed form."""

from __future__ import annotations

from typing import Any, Optional

from algobench.config import Policy
from algobench.inputs import Prompter, ask_integer, setup_header
from algobench.models import MethodResult
from algobench.problems.base import Problem, check_integer, is_positive_integer, requires_ready


def iterative_sum(n: int) -> tuple[int, int]:
    """Add 1 + 2 + ... + n one term at a time.

    Returns (sum, iterations).
    """
    total = 0
    iterations = 0
    for i in range(1, n + 1):
        total += i
        iterations += 1
    return total, iterations


def gaussian_sum(n: int) -> int:
    """n(n + 1) / 2 with exact integers."""
    return n * (n + 1) // 2


class SumProblem(Problem):
    name = "Calculate the sum from 1 to n"

    def __init__(self, policy: Optional[Policy] = None) -> None:
        super().__init__(policy)
        self.n: Optional[int] = None

    def description(self) -> str:
        if self.n is None:
            return "Calculate the sum of all numbers from 1 to n (n not set yet)"
        return f"Calculate the sum of all numbers from 1 to {self.n:,}"

    def available_methods(self) -> dict[str, str]:
        return {
            "iterative_sum": "Simply add all numbers together",
            "gaussian_sum_formula": "Use the Gaussian Sum Formula",
        }

    def setup_parameters(self, prompter: Prompter) -> None:
        setup_header(prompter, self.name)
        self.configure(n=ask_integer(prompter, "Enter the value for n: ", "n", self.policy))

    def configure(self, **params: Any) -> None:
        self._reject_unknown(params, ("n",))
        self.n = check_integer("n", params.get("n"))

    def is_ready(self) -> bool:
        return is_positive_integer(self.n)

    def reset(self) -> None:
        self.n = None

    @requires_ready
    def iterative_sum(self) -> MethodResult:
        if self.n > self.policy.iterative_sum_ceiling:
            return MethodResult.refused(
                "iterative_sum",
                f"⚠ WARNING: n too large for iterative solution! "
                f"(limit {self.policy.iterative_sum_ceiling:,})",
            )
        (total, iterations), duration = self.measure(lambda: iterative_sum(self.n))
        return MethodResult(
            method="iterative_sum",
            value=total,
            count=iterations,
            duration=duration,
            notice=f"Start iterative calculation for n = {self.n:,} ...",
        )

    @requires_ready
    def gaussian_sum_formula(self) -> MethodResult:
        total, duration = self.measure(lambda: gaussian_sum(self.n))
        return MethodResult(
            method="gaussian_sum_formula",
            value=total,
            duration=duration,
            notice=f"Start calculation for n = {self.n:,} ...",
        )
