"""Interactive parameter input for problem setup.

Problems never read stdin themselves; they talk to a Prompter. The CLI
passes a ConsolePrompter backed by a Rich Console, tests pass a scripted
one.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol

from rich.console import Console
from rich.markup import escape

from algobench.config import DEFAULT_RANDOM_MAX, DEFAULT_RANDOM_MIN, Policy
from algobench.formatting import format_list


class Prompter(Protocol):
    """Line-oriented question/answer channel."""

    def ask(self, prompt: str) -> str: ...

    def say(self, message: str, style: Optional[str] = None) -> None: ...


class ConsolePrompter:
    """Prompter on top of a Rich Console."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def ask(self, prompt: str) -> str:
        return self.console.input(escape(prompt))

    def say(self, message: str, style: Optional[str] = None) -> None:
        self.console.print(message, style=style, markup=False, highlight=False)


LIST_CONTENT_CHOICES = {
    "1": f"Random integers ({DEFAULT_RANDOM_MIN}-{DEFAULT_RANDOM_MAX})",
    "2": "Random integers (custom range)",
    "3": "Sequential numbers (1, 2, 3, ...)",
    "4": "Sequential numbers (custom start)",
    "5": "Same value repeated",
    "6": "Manual input (space-separated)",
    "7": "Reverse sequential (n, n-1, n-2, ...)",
}


def setup_header(prompter: Prompter, problem_name: str) -> None:
    prompter.say("\n" + "=" * 50)
    prompter.say(f"SETUP: {problem_name}", style="bold")
    prompter.say("=" * 50)


def parse_int(text: str) -> Optional[int]:
    """Parse a whole number; Python digit separators like 1_000 are accepted."""
    try:
        return int(text.strip())
    except ValueError:
        return None


def ask_integer(prompter: Prompter, prompt: str, name: str, policy: Policy) -> Optional[int]:
    """Ask for one integer parameter.

    Returns None (parameter stays unbound) when the answer is not a whole
    number. Warns, but still accepts, values above the big-number threshold.
    """
    text = prompter.ask(prompt)
    value = parse_int(text)
    if value is None:
        prompter.say(f"⚠ '{text.strip()}' is not a whole number, {name} left unset.", style="yellow")
        return None

    prompter.say(f"✓ Parameter set: {name} = {value:,}", style="green")
    if value > policy.big_number_threshold:
        prompter.say("⚠ WARNING: Big Number!", style="yellow")
    return value


def generate_random_list(size: int, low: int, high: int, rng: Optional[random.Random] = None) -> list[int]:
    rng = rng or random.Random()
    if low > high:
        low, high = high, low
    return [rng.randint(low, high) for _ in range(size)]


def generate_sequential_list(size: int, start: int) -> list[int]:
    return list(range(start, start + size))


def generate_reverse_sequential_list(size: int, start: int) -> list[int]:
    return list(range(start, start - size, -1))


def generate_repeated_list(size: int, value: int) -> list[int]:
    return [value] * size


def parse_manual_list(text: str, expected_size: int) -> tuple[list[int], list[str]]:
    """Parse whitespace-separated integers.

    Tokens that are not whole numbers are dropped. Returns the parsed
    numbers and the warnings to show (rejected tokens, count mismatch).
    """
    numbers: list[int] = []
    rejected: list[str] = []
    for token in text.split():
        value = parse_int(token)
        if value is None:
            rejected.append(token)
        else:
            numbers.append(value)

    warnings = []
    if rejected:
        warnings.append(f"⚠ Ignored non-numeric input: {', '.join(rejected)}")
    if len(numbers) != expected_size:
        warnings.append(
            f"⚠ Expected {expected_size} numbers, got {len(numbers)}. Using what was provided."
        )
    return numbers, warnings


def _ask_int_or(prompter: Prompter, prompt: str, default: int) -> int:
    value = parse_int(prompter.ask(prompt))
    if value is None:
        prompter.say(f"Not a number, using {default}.", style="yellow")
        return default
    return value


def ask_list(
    prompter: Prompter,
    prompt: str,
    name: str,
    policy: Policy,
    rng: Optional[random.Random] = None,
) -> list[int]:
    """Ask for a list size and content type, then build the list."""
    size = parse_int(prompter.ask(prompt)) or 0
    if size <= 0:
        prompter.say("Invalid size! Using size 1.", style="yellow")
        size = 1

    prompter.say("\nChoose list content type:")
    for key, label in LIST_CONTENT_CHOICES.items():
        prompter.say(f"{key}. {label}")
    choice = prompter.ask("Choice: ").strip()

    if choice == "1":
        items = generate_random_list(size, DEFAULT_RANDOM_MIN, DEFAULT_RANDOM_MAX, rng)
    elif choice == "2":
        low = _ask_int_or(prompter, "Enter min value: ", DEFAULT_RANDOM_MIN)
        high = _ask_int_or(prompter, "Enter max value: ", DEFAULT_RANDOM_MAX)
        items = generate_random_list(size, low, high, rng)
    elif choice == "3":
        items = generate_sequential_list(size, 1)
    elif choice == "4":
        start = _ask_int_or(prompter, "Enter start value: ", 1)
        items = generate_sequential_list(size, start)
    elif choice == "5":
        value = _ask_int_or(prompter, "Enter value to repeat: ", 1)
        items = generate_repeated_list(size, value)
    elif choice == "6":
        text = prompter.ask(f"Enter {size} numbers separated by spaces: ")
        items, warnings = parse_manual_list(text, size)
        for warning in warnings:
            prompter.say(warning, style="yellow")
    elif choice == "7":
        start = _ask_int_or(prompter, "Enter start value: ", size)
        items = generate_reverse_sequential_list(size, start)
    else:
        prompter.say(
            f"Invalid choice! Using random integers {DEFAULT_RANDOM_MIN}-{DEFAULT_RANDOM_MAX}.",
            style="yellow",
        )
        items = generate_random_list(size, DEFAULT_RANDOM_MIN, DEFAULT_RANDOM_MAX, rng)

    prompter.say(f"✓ Parameter set: {name} = {format_list(items)} (size: {len(items):,})", style="green")

    if len(items) > policy.very_large_list_threshold:
        prompter.say("🐌 WARNING: Very large list! Algorithms will be slow.", style="yellow")
    elif len(items) > policy.large_list_threshold:
        prompter.say("⚠ WARNING: Large list! This might take a while.", style="yellow")

    return items
