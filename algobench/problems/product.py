"""Product of two numbers by ancient Egyptian (halve-and-double) multiplication."""

from __future__ import annotations

from typing import Any, Callable, Optional

from algobench.config import Policy
from algobench.inputs import Prompter, ask_integer, setup_header
from algobench.models import MethodResult
from algobench.problems.base import Problem, check_integer, is_positive_integer, requires_ready

StepObserver = Callable[[int, int, int], None]


def egyptian_multiply(n: int, m: int, observer: Optional[StepObserver] = None) -> tuple[int, int]:
    """Multiply n by m using only halving, doubling and addition.

    Invariant after every step: n * m == x * y + p. When x is odd, y is
    added to p; x == 1 finishes right after that addition (x becomes 0)
    instead of halving once more. The observer, if given, sees (x, y, p)
    after each step.

    Returns (product, steps).
    """
    x, y, p = n, m, 0
    steps = 0
    while x >= 1:
        steps += 1
        if x % 2 == 0:
            x //= 2
        else:
            p += y
            if x == 1:
                x = 0
                if observer is not None:
                    observer(x, y, p)
                break
            x = (x - 1) // 2
        y += y
        if observer is not None:
            observer(x, y, p)
    return p, steps


class ProductProblem(Problem):
    name = "Find the product of two numbers without using multiplication"

    def __init__(self, policy: Optional[Policy] = None) -> None:
        super().__init__(policy)
        self.n: Optional[int] = None
        self.m: Optional[int] = None

    def description(self) -> str:
        if self.n is None or self.m is None:
            return "Find the product of n and m (n, m not set yet)"
        return f"Find the product of n: {self.n:,} and m: {self.m:,}"

    def available_methods(self) -> dict[str, str]:
        return {
            "ancient_egyptian_multiplication": (
                "Use the ancient Egyptian multiplication algorithm: halve n, "
                "double m, add m whenever n is odd"
            ),
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

    @requires_ready
    def ancient_egyptian_multiplication(self) -> MethodResult:
        (product, steps), duration = self.measure(lambda: egyptian_multiply(self.n, self.m))
        return MethodResult(
            method="ancient_egyptian_multiplication",
            value=product,
            count=steps,
            duration=duration,
            notice=f"Start finding the product with n = {self.n:,} and m = {self.m:,} ...",
        )
