"""Greatest common divisor of two positive integers."""

from __future__ import annotations

from typing import Any, Optional

from algobench.config import Policy
from algobench.inputs import Prompter, ask_integer, setup_header
from algobench.models import MethodResult
from algobench.problems.base import Problem, check_integer, is_positive_integer, requires_ready


def brute_force_gcd(n: int, m: int) -> tuple[int, int]:
    """Count down from min(n, m) and stop at the first common divisor.

    Always terminates since 1 divides everything. Returns (divisor, iterations).
    """
    iterations = 0
    for candidate in range(min(n, m), 0, -1):
        iterations += 1
        if n % candidate == 0 and m % candidate == 0:
            return candidate, iterations
    return 1, iterations


def euclid_gcd(n: int, m: int) -> tuple[int, int]:
    """Euclid's remainder algorithm. Returns (divisor, division steps)."""
    a, b = n, m
    steps = 0
    while b:
        a, b = b, a % b
        steps += 1
    return a, steps


class GreatestCommonDivisorProblem(Problem):
    name = "Find the greatest common divisor of two numbers"

    def __init__(self, policy: Optional[Policy] = None) -> None:
        super().__init__(policy)
        self.n: Optional[int] = None
        self.m: Optional[int] = None

    def description(self) -> str:
        if self.n is None or self.m is None:
            return "Find the greatest common divisor of n and m (n, m not set yet)"
        return f"Find the greatest common divisor of n: {self.n:,} and m: {self.m:,}"

    def available_methods(self) -> dict[str, str]:
        return {
            "simple_check": (
                "Iterate from min(n, m) down to 1 and stop at the first number "
                "dividing both"
            ),
            "euclid": "Euclid's algorithm: replace (n, m) by (m, n mod m) until m is 0",
        }

    def setup_parameters(self, prompter: Prompter) -> None:
        setup_header(prompter, self.name)
        n = ask_integer(prompter, "Enter the value for n: ", "n", self.policy)
        m = ask_integer(prompter, "Enter the value for m: ", "m", self.policy)
        self.configure(n=n, m=m)

    def configure(self, **params: Any) -> None:
        self._reject_unknown(params, ("n", "m"))
        self.n = check_integer("n", params.get("n"))
        self.m = check_integer("m", params.get("m"))

    def is_ready(self) -> bool:
        return is_positive_integer(self.n) and is_positive_integer(self.m)

    def reset(self) -> None:
        self.n = None
        self.m = None

    def _start_notice(self) -> str:
        return f"Start finding greatest common divisor with n = {self.n:,} and m = {self.m:,} ..."

    @requires_ready
    def simple_check(self) -> MethodResult:
        (divisor, iterations), duration = self.measure(lambda: brute_force_gcd(self.n, self.m))
        return MethodResult(
            method="simple_check",
            value=divisor,
            count=iterations,
            duration=duration,
            notice=self._start_notice(),
        )

    @requires_ready
    def euclid(self) -> MethodResult:
        (divisor, steps), duration = self.measure(lambda: euclid_gcd(self.n, self.m))
        return MethodResult(
            method="euclid",
            value=divisor,
            count=steps,
            duration=duration,
            notice=self._start_notice(),
        )
