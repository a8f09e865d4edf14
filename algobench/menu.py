"""Interactive menu loop.

Main menu: numbered problems (✓ configured / ○ setup required), q quits.
Problem menu: s setup, r reset, 1..n run a method, 0 compare all, b back.
Errors raised while handling a choice are printed and the loop goes on.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.markup import escape

from algobench.config import DEFAULT_BENCHMARK_ITERATIONS, DEFAULT_COMPARE_ITERATIONS
from algobench.errors import AlgobenchError
from algobench.inputs import ConsolePrompter, Prompter, parse_int
from algobench.problems.base import Problem
from algobench.report import render_benchmark, render_ranking, render_result
from algobench.runner import BenchmarkRunner, compare_methods

logger = logging.getLogger(__name__)

INVALID_CHOICE = "Invalid Choice!"


class MenuSession:
    """One interactive session over a fixed list of loaded problems."""

    def __init__(
        self,
        problems: list[Problem],
        console: Console,
        prompter: Optional[Prompter] = None,
        runner: Optional[BenchmarkRunner] = None,
    ) -> None:
        self.problems = problems
        self.console = console
        self.prompter = prompter or ConsolePrompter(console)
        self.runner = runner or BenchmarkRunner(console=console)

    def run(self) -> None:
        self.console.print("[bold]Algorithm test runner started![/bold]")
        self.console.print(f"Found problems: {len(self.problems)}\n")

        while True:
            self._show_main_menu()
            choice = self.prompter.ask("Your choice: ").strip()
            if choice == "q":
                self.console.print("Goodbye!")
                return

            index = parse_int(choice)
            if index is not None and 1 <= index <= len(self.problems):
                self.run_problem(self.problems[index - 1])
            else:
                self.console.print(f"[red]{INVALID_CHOICE}[/red]\n")

    def _show_main_menu(self) -> None:
        self.console.rule("[bold]ALGORITHM TEST RUNNER - MAIN MENU[/bold]")
        self.console.print("Available problems:\n")
        for i, problem in enumerate(self.problems, 1):
            status = "[green]✓[/green]" if problem.is_ready() else "[dim]○[/dim]"
            self.console.print(f"{i}. {status} {escape(problem.name)}")
            self.console.print(f"   {escape(problem.description())}\n")
        self.console.print("q. Quit")
        self.console.rule(style="dim")
        self.console.print("[dim]Legend: ✓ = configured, ○ = setup required[/dim]")

    def run_problem(self, problem: Problem) -> None:
        while True:
            self._show_problem_menu(problem)
            choice = self.prompter.ask("Your choice: ").strip()
            if choice == "b":
                return
            try:
                self._handle_problem_choice(problem, choice)
            except AlgobenchError as e:
                logger.debug("Choice %r failed: %s", choice, e)
                self.console.print(f"[red]Error:[/red] {escape(str(e))}")

    def _handle_problem_choice(self, problem: Problem, choice: str) -> None:
        if choice == "s":
            problem.setup_parameters(self.prompter)
            self._pause()
            return
        if choice == "r":
            problem.reset()
            self.console.print("Problem reset.")
            self._pause()
            return
        if choice == "0":
            if problem.is_ready():
                self.compare_all(problem)
            else:
                self.console.print("[yellow]Run the setup first![/yellow]")
            self._pause()
            return

        methods = list(problem.available_methods())
        index = parse_int(choice)
        if index is None or not 1 <= index <= len(methods):
            self.console.print(f"[red]{INVALID_CHOICE}[/red]\n")
            return
        if problem.is_ready():
            self.run_method(problem, methods[index - 1])
        else:
            self.console.print("[yellow]Run the setup first![/yellow]")
        self._pause()

    def _show_problem_menu(self, problem: Problem) -> None:
        status = "[green]✓ READY[/green]" if problem.is_ready() else "[yellow]○ SETUP REQUIRED[/yellow]"
        self.console.print()
        self.console.rule(f"[bold]PROBLEM: {escape(problem.name)}[/bold] {status}")
        self.console.print(escape(problem.description()))
        self.console.print("s. Setup problem parameters")
        self.console.print("r. Reset problem\n")

        if problem.is_ready():
            self.console.print("Available algorithms:\n")
            for i, (method_id, description) in enumerate(problem.available_methods().items(), 1):
                self.console.print(f"{i}. [green]{escape(method_id)}[/green]")
                self.console.print(f"   {escape(description)}\n")
            self.console.print("0. Compare all algorithms")
        else:
            self.console.print("[yellow]⚠ First run the setup to test algorithms.[/yellow]")

        self.console.print("b. Back to main menu")
        self.console.rule(style="dim")

    def run_method(self, problem: Problem, method_id: str) -> None:
        self.console.rule(f"EXECUTION: {escape(method_id)}")
        mode = self.prompter.ask("Mode: (1) Run once, (2) Benchmark: ").strip()

        if mode == "2":
            iterations = self._ask_iterations("Number of repetitions", DEFAULT_BENCHMARK_ITERATIONS)
            show_details = self.prompter.ask("Show details? (y/n): ").strip().lower() == "y"
            self.console.print(f"Iterations: {iterations}")
            stats = self.runner.run(
                lambda: problem.invoke(method_id),
                iterations,
                show_details=show_details,
                label=method_id,
            )
            render_benchmark(stats, self.console)
        else:
            self.console.print("\n[bold]--- SINGLE EXECUTION ---[/bold]")
            render_result(problem.invoke(method_id), self.console)

    def compare_all(self, problem: Problem) -> None:
        self.console.rule("[bold]COMPARISON OF ALL ALGORITHMS[/bold]")
        iterations = self._ask_iterations("Number of repetitions per algorithm", DEFAULT_COMPARE_ITERATIONS)
        rankings = compare_methods(
            problem,
            iterations,
            self.runner,
            show_details=True,
            on_start=lambda m: self.console.print(f"\nTest: [green]{escape(m)}[/green]..."),
        )
        render_ranking(rankings, self.console)

    def _ask_iterations(self, label: str, default: int) -> int:
        answer = self.prompter.ask(f"{label} (default {default}): ").strip()
        if not answer:
            return default
        value = parse_int(answer)
        return default if value is None else value

    def _pause(self) -> None:
        self.prompter.ask("\nPress Enter to continue...")
