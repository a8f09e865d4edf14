"""CLI for the algobench teaching tool.

Usage:
    python -m algobench menu                                  # Interactive menu
    python -m algobench list                                  # Show problems
    python -m algobench run sum gaussian_sum_formula -p n=100 # Run once
    python -m algobench run gcd euclid -p n=48 -p m=18 -i 10  # Benchmark
    python -m algobench compare sum -p n=100000 -i 3          # Rank all methods
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from algobench.config import (
    BIG_NUMBER_THRESHOLD,
    DEFAULT_COMPARE_ITERATIONS,
    ITERATIVE_SUM_CEILING,
    Policy,
)
from algobench.errors import AlgobenchError
from algobench.inputs import parse_int
from algobench.menu import MenuSession
from algobench.problems import default_registry
from algobench.problems.base import Problem
from algobench.report import render_benchmark, render_problem_table, render_ranking, render_result
from algobench.runner import BenchmarkRunner, compare_methods

app = typer.Typer(
    name="algobench",
    help="Run and benchmark textbook algorithms side by side",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    iterative_ceiling: int = typer.Option(
        ITERATIVE_SUM_CEILING, "--iterative-ceiling", help="Largest n the iterative sum accepts"
    ),
    big_number: int = typer.Option(
        BIG_NUMBER_THRESHOLD, "--big-number", help="Warn for integer parameters above this"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Run and benchmark textbook algorithms side by side."""
    _setup_logging(verbose)
    ctx.obj = Policy(iterative_sum_ceiling=iterative_ceiling, big_number_threshold=big_number)


def _load_problems(policy: Policy) -> dict[str, Problem]:
    def report(key: str, error: Exception) -> None:
        err_console.print(f"[red]Error loading problem '{escape(key)}':[/red] {escape(str(error))}")

    return default_registry().load_all(policy, on_error=report)


def parse_params(problem: Problem, raw: list[str]) -> dict[str, Any]:
    """Turn ['n=10', 'weights=5,3,8'] into keyword arguments for configure().

    Raises:
        typer.BadParameter: entry without '=' or a value that is not an integer.
    """
    params: dict[str, Any] = {}
    for item in raw:
        if "=" not in item:
            raise typer.BadParameter(f"Expected key=value, got '{item}'", param_hint="--param")
        key, value = (part.strip() for part in item.split("=", 1))
        if key in problem.list_parameters:
            numbers = [parse_int(p) for p in value.replace(",", " ").split()]
            if any(n is None for n in numbers):
                raise typer.BadParameter(f"{key} must be integers, got '{value}'", param_hint="--param")
            params[key] = numbers
        else:
            number = parse_int(value)
            if number is None:
                raise typer.BadParameter(f"{key} must be an integer, got '{value}'", param_hint="--param")
            params[key] = number
    return params


def _configured_problem(ctx: typer.Context, problem_key: str, raw_params: list[str]) -> Problem:
    try:
        problem = default_registry().create(problem_key, ctx.obj)
    except AlgobenchError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    try:
        problem.configure(**parse_params(problem, raw_params))
    except AlgobenchError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if not problem.is_ready():
        err_console.print(
            f"[red]Problem not configured![/red] {escape(problem.description())}. "
            "Pass positive values with --param key=value."
        )
        raise typer.Exit(1)
    return problem


@app.command("menu")
def cmd_menu(ctx: typer.Context) -> None:
    """Interactive menu: set up problems, run and compare algorithms."""
    problems = _load_problems(ctx.obj)
    MenuSession(list(problems.values()), console).run()


@app.command("list")
def cmd_list(ctx: typer.Context) -> None:
    """Show available problems and their methods."""
    problems = _load_problems(ctx.obj)
    if not problems:
        console.print("[yellow]No problems found.[/yellow]")
        raise typer.Exit(1)
    render_problem_table(problems, console)


@app.command("run")
def cmd_run(
    ctx: typer.Context,
    problem_key: str = typer.Argument(..., metavar="PROBLEM", help="Problem key (e.g., 'sum')"),
    method: str = typer.Argument(..., help="Method id (e.g., 'iterative_sum')"),
    params: list[str] = typer.Option([], "--param", "-p", help="Parameter as key=value (repeatable)"),
    iterations: Optional[int] = typer.Option(None, "--iterations", "-i", help="Benchmark this many runs"),
    details: bool = typer.Option(False, "--details", "-d", help="Show every benchmark run"),
    json_output: bool = typer.Option(False, "--json", help="Print benchmark stats as JSON"),
) -> None:
    """Run one method once, or benchmark it with --iterations."""
    problem = _configured_problem(ctx, problem_key, params)
    if method not in problem.available_methods():
        err_console.print(
            f"[red]Invalid method: {escape(method)}[/red]. "
            f"Choose: {escape(', '.join(problem.available_methods()))}"
        )
        raise typer.Exit(1)

    if iterations is None:
        render_result(problem.invoke(method), console)
        return

    try:
        stats = BenchmarkRunner(console=console).run(
            lambda: problem.invoke(method), iterations, show_details=details, label=method
        )
    except AlgobenchError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if json_output:
        console.print_json(data=stats.to_dict())
    else:
        render_benchmark(stats, console)


@app.command("compare")
def cmd_compare(
    ctx: typer.Context,
    problem_key: str = typer.Argument(..., metavar="PROBLEM", help="Problem key (e.g., 'sum')"),
    params: list[str] = typer.Option([], "--param", "-p", help="Parameter as key=value (repeatable)"),
    iterations: int = typer.Option(
        DEFAULT_COMPARE_ITERATIONS, "--iterations", "-i", help="Runs per method"
    ),
    details: bool = typer.Option(False, "--details", "-d", help="Show every benchmark run"),
) -> None:
    """Benchmark all methods of a problem and rank them by average time."""
    problem = _configured_problem(ctx, problem_key, params)
    try:
        rankings = compare_methods(
            problem,
            iterations,
            BenchmarkRunner(console=console),
            show_details=details,
            on_start=lambda m: console.print(f"Test: [green]{escape(m)}[/green]..."),
        )
    except AlgobenchError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    render_ranking(rankings, console)


if __name__ == "__main__":
    app()
