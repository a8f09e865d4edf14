"""Problem base class — the capability set every exercise implements.

A Problem owns its parameters exclusively. It starts unbound (not ready),
becomes ready once configure() or setup_parameters() binds valid values,
and goes back to unbound on reset(). Methods are dispatched by id through
invoke() and return a MethodResult instead of printing.
"""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Optional

from algobench.config import DEFAULT_POLICY, Policy
from algobench.errors import InvalidArgumentError, UnknownMethodError
from algobench.models import DurationValue, MethodResult
from algobench.runner import Timer

if TYPE_CHECKING:
    from algobench.inputs import Prompter


def _method_timer() -> Timer:
    # No GC pass or settle delay here: the benchmark harness already does
    # that around the whole method call.
    return Timer(settle_s=0.0, collect=lambda: None)


def requires_ready(method: Callable[..., MethodResult]) -> Callable[..., MethodResult]:
    """Return a not-ready result instead of running an unconfigured method."""

    @functools.wraps(method)
    def wrapper(self: Problem, *args: Any, **kwargs: Any) -> MethodResult:
        if not self.is_ready():
            return MethodResult.not_ready(method.__name__)
        return method(self, *args, **kwargs)

    return wrapper


def is_positive_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def check_integer(name: str, value: Any) -> Optional[int]:
    """Validate an integer parameter; None means unbound."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    return value


class Problem(ABC):
    """One selectable algorithmic exercise."""

    #: Fixed label shown in menus.
    name: str = ""
    #: Parameters the CLI parses as comma-separated lists.
    list_parameters: tuple[str, ...] = ()

    def __init__(self, policy: Optional[Policy] = None) -> None:
        self.policy = policy or DEFAULT_POLICY
        self.timer_factory: Callable[[], Timer] = _method_timer

    @abstractmethod
    def description(self) -> str:
        """Describe the problem, including bound parameters if any."""

    @abstractmethod
    def available_methods(self) -> dict[str, str]:
        """Method id → description, in menu order."""

    @abstractmethod
    def setup_parameters(self, prompter: Prompter) -> None:
        """Collect parameters interactively and bind them."""

    @abstractmethod
    def configure(self, **params: Any) -> None:
        """Bind parameters directly.

        Raises:
            InvalidArgumentError: unknown parameter name or wrong type.
        """

    @abstractmethod
    def is_ready(self) -> bool:
        """True iff every required parameter holds a valid value."""

    @abstractmethod
    def reset(self) -> None:
        """Unbind all parameters."""

    def invoke(self, method_id: str) -> MethodResult:
        """Run a declared method by id."""
        if method_id not in self.available_methods():
            raise UnknownMethodError(f"{type(self).__name__} has no method '{method_id}'")
        return getattr(self, method_id)()

    def measure(self, fn: Callable[[], Any]) -> tuple[Any, DurationValue]:
        return self.timer_factory().measure(fn)

    def _reject_unknown(self, params: dict[str, Any], allowed: tuple[str, ...]) -> None:
        unknown = sorted(set(params) - set(allowed))
        if unknown:
            raise InvalidArgumentError(
                f"Unknown parameter(s) for {self.name!r}: {', '.join(unknown)}. "
                f"Expected: {', '.join(allowed)}"
            )
