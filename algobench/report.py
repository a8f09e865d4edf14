"""algobench report — renders results, benchmark summaries and rankings.

Everything here only formats; nothing is computed that the runner or the
problems have not already produced.
"""

from __future__ import annotations

from typing import Mapping

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from algobench.formatting import format_large_number, format_value
from algobench.models import BenchmarkStats, MethodRanking, MethodResult, ResultStatus
from algobench.problems.base import Problem

_STATUS_STYLES = {
    ResultStatus.NOT_READY: "red",
    ResultStatus.REFUSED: "yellow",
}


def render_result(result: MethodResult, console: Console) -> None:
    """Print a single method run: notice, value, count, time."""
    if not result.ok:
        style = _STATUS_STYLES.get(result.status, "red")
        console.print(f"[{style}]{escape(result.notice)}[/{style}]")
        return

    if result.notice:
        console.print(escape(result.notice))
    console.print("\n[bold]--- Results ---[/bold]")
    console.print(f"{escape(result.label)}: {escape(format_value(result.value))}")
    if result.count is not None:
        console.print(f"{escape(result.count_label)}: {format_large_number(result.count)}")
    if result.duration is not None:
        console.print(f"Time: {result.duration}")


def render_benchmark(stats: BenchmarkStats, console: Console) -> None:
    """Rich summary table for one benchmark."""
    title = f"Benchmark: {stats.label}" if stats.label else "Benchmark results"
    table = Table(title=escape(title), show_header=True, header_style="bold")
    table.add_column("Metric", style="dim", min_width=12)
    table.add_column("Duration", justify="right", min_width=24)

    table.add_row("Iterations", str(stats.iterations))
    table.add_row("Average", str(stats.average))
    table.add_row("Min", f"[green]{stats.minimum}[/green]")
    table.add_row("Max", f"[red]{stats.maximum}[/red]")
    table.add_row("Total", str(stats.total))

    console.print()
    console.print(table)
    console.print()


def render_ranking(rankings: list[MethodRanking], console: Console) -> None:
    """Rank table, fastest average first."""
    if not rankings:
        console.print("[yellow]Nothing to rank.[/yellow]")
        return

    table = Table(title="Results - ranking by speed", show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Method", style="green", min_width=15)
    table.add_column("Description", min_width=30)
    table.add_column("Average", justify="right", min_width=20)

    for ranking in rankings:
        style = "bold" if ranking.rank == 1 else ""
        table.add_row(
            str(ranking.rank),
            escape(ranking.method),
            escape(ranking.description),
            str(ranking.stats.average),
            style=style,
        )

    console.print()
    console.print(table)
    console.print()


def render_problem_table(problems: Mapping[str, Problem], console: Console) -> None:
    """Registered problems with readiness and method count."""
    table = Table(title="Available Problems", show_header=True, header_style="bold")
    table.add_column("Key", style="green", min_width=10)
    table.add_column("Name", min_width=30)
    table.add_column("Methods")
    table.add_column("Status", justify="center")

    for key, problem in problems.items():
        status = "[green]✓[/green]" if problem.is_ready() else "[dim]○[/dim]"
        table.add_row(
            escape(key),
            escape(problem.name),
            escape(", ".join(problem.available_methods())),
            status,
        )

    console.print()
    console.print(table)
    console.print()
