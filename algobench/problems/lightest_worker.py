"""Find the lightest construction worker in a list of weights."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from algobench.config import Policy
from algobench.errors import InvalidArgumentError
from algobench.formatting import format_list
from algobench.inputs import Prompter, ask_list, setup_header
from algobench.models import MethodResult
from algobench.problems.base import Problem, requires_ready


@dataclass(frozen=True)
class LightestWorker:
    """Position and weight of the first lightest worker.

    index is -1 for an empty list.
    """

    index: int
    weight: int
    comparisons: int

    def as_value(self) -> dict[str, int]:
        return {"index": self.index, "weight": self.weight}


def _is_lightest(weights: Sequence[int], index: int) -> tuple[bool, int]:
    comparisons = 0
    for j, other in enumerate(weights):
        if j == index:
            continue
        comparisons += 1
        if weights[index] > other:
            return False, comparisons
    return True, comparisons


def brute_force_lightest(weights: Sequence[int]) -> LightestWorker:
    """Check each worker against every other; first one nobody undercuts wins."""
    comparisons = 0
    for i in range(len(weights)):
        lightest, made = _is_lightest(weights, i)
        comparisons += made
        if lightest:
            return LightestWorker(index=i, weight=weights[i], comparisons=comparisons)
    return LightestWorker(index=-1, weight=0, comparisons=comparisons)


def single_pass_lightest(weights: Sequence[int]) -> LightestWorker:
    """One scan keeping the first minimum seen."""
    if not weights:
        return LightestWorker(index=-1, weight=0, comparisons=0)
    best = 0
    comparisons = 0
    for i in range(1, len(weights)):
        comparisons += 1
        if weights[i] < weights[best]:
            best = i
    return LightestWorker(index=best, weight=weights[best], comparisons=comparisons)


class LightestWorkerProblem(Problem):
    name = "Find the lightest construction worker"
    list_parameters = ("weights",)

    def __init__(self, policy: Optional[Policy] = None, rng: Optional[random.Random] = None) -> None:
        super().__init__(policy)
        self.rng = rng
        self.weights: Optional[list[int]] = None

    def description(self) -> str:
        if self.weights is None:
            return "Find the lightest construction worker (list not set yet)"
        return f"Find the lightest construction worker from list with length: {len(self.weights):,}"

    def available_methods(self) -> dict[str, str]:
        return {
            "brute_force": "Compare every worker with every other and take the first lightest one",
            "single_pass": "Walk the list once, remembering the lightest worker so far",
        }

    def setup_parameters(self, prompter: Prompter) -> None:
        setup_header(prompter, self.name)
        weights = ask_list(
            prompter, "Enter a value for the list length: ", "weights", self.policy, rng=self.rng
        )
        self.configure(weights=weights)

    def configure(self, **params: Any) -> None:
        self._reject_unknown(params, ("weights",))
        weights = params.get("weights")
        if weights is None:
            self.weights = None
            return
        if not isinstance(weights, (list, tuple)):
            raise InvalidArgumentError(f"weights must be a list of integers, got {weights!r}")
        for w in weights:
            if isinstance(w, bool) or not isinstance(w, int):
                raise InvalidArgumentError(f"weights must contain integers only, got {w!r}")
        self.weights = list(weights)

    def is_ready(self) -> bool:
        return bool(self.weights)

    def reset(self) -> None:
        self.weights = None

    def _run(self, method: str, search) -> MethodResult:
        worker, duration = self.measure(lambda: search(self.weights))
        return MethodResult(
            method=method,
            value=worker.as_value(),
            count=worker.comparisons,
            count_label="Comparisons",
            duration=duration,
            notice=f"Start finding lightest worker in list: {format_list(self.weights)} ...",
            details={"worker": worker},
        )

    @requires_ready
    def brute_force(self) -> MethodResult:
        return self._run("brute_force", brute_force_lightest)

    @requires_ready
    def single_pass(self) -> MethodResult:
        return self._run("single_pass", single_pass_lightest)
