"""Tests for the problem registry."""

import logging

import pytest

from algobench.config import Policy
from algobench.errors import InvalidArgumentError, UnknownProblemError
from algobench.problems import ProblemRegistry, default_registry
from algobench.problems.base import Problem
from algobench.problems.sum_to_n import SumProblem


def test_default_registry_order():
    assert default_registry().keys() == ["sum", "gcd", "product", "lightest-worker"]


def test_every_entry_builds_a_problem():
    registry = default_registry()
    for key in registry.keys():
        problem = registry.create(key)
        assert isinstance(problem, Problem)
        assert problem.name
        assert not problem.is_ready()
        assert problem.available_methods()


def test_create_returns_fresh_instances():
    registry = default_registry()
    first = registry.create("sum")
    first.configure(n=10)
    assert not registry.create("sum").is_ready()


def test_unknown_key():
    with pytest.raises(UnknownProblemError, match="Unknown problem: nope"):
        default_registry().create("nope")


def test_duplicate_key_rejected():
    registry = ProblemRegistry()
    registry.register("sum", SumProblem)
    with pytest.raises(InvalidArgumentError):
        registry.register("sum", SumProblem)


def test_policy_applied_on_create():
    policy = Policy(iterative_sum_ceiling=7)
    assert default_registry().create("sum", policy).policy is policy


def test_factory_must_return_a_problem():
    registry = ProblemRegistry()
    registry.register("bad", lambda: object())
    with pytest.raises(TypeError):
        registry.create("bad")


def test_load_all_skips_failing_entries(caplog):
    def broken():
        raise RuntimeError("constructor exploded")

    registry = ProblemRegistry()
    registry.register("sum", SumProblem)
    registry.register("broken", broken)
    registry.register("not-a-problem", lambda: 42)
    registry.register("sum-again", SumProblem)

    failures = []
    with caplog.at_level(logging.ERROR, logger="algobench.problems"):
        problems = registry.load_all(on_error=lambda key, e: failures.append(key))

    assert list(problems) == ["sum", "sum-again"]
    assert failures == ["broken", "not-a-problem"]
    assert "Error loading problem 'broken'" in caplog.text
