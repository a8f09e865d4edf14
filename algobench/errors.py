"""Exception types raised by algobench.

Not-ready problems and infeasible inputs are reported through
MethodResult statuses instead; only genuine misuse raises.
"""

from __future__ import annotations


class AlgobenchError(Exception):
    """Base class for all algobench errors."""


class InvalidArgumentError(AlgobenchError, ValueError):
    """An argument is outside the range the operation accepts."""


class NegativeDurationError(InvalidArgumentError):
    """A duration would become negative."""


class TimerStateError(AlgobenchError, RuntimeError):
    """Timer.stop() called without a matching start()."""


class ProblemNotReadyError(AlgobenchError):
    """The problem has no valid parameters bound."""


class UnknownProblemError(AlgobenchError, KeyError):
    """No problem registered under the requested key."""

    def __str__(self) -> str:
        return Exception.__str__(self)


class UnknownMethodError(AlgobenchError, KeyError):
    """The problem does not declare the requested method."""

    def __str__(self) -> str:
        return Exception.__str__(self)
