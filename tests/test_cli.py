"""Tests for the Typer CLI and the interactive menu session."""

import io
import json

from rich.console import Console
from typer.testing import CliRunner

from algobench.__main__ import app
from algobench.menu import MenuSession
from algobench.problems import default_registry
from algobench.runner import BenchmarkRunner

runner = CliRunner()


# --- list / run (8 tests) ---

def test_list_shows_problems():
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "sum" in result.output
    assert "lightest-worker" in result.output


def test_run_once_prints_result():
    result = runner.invoke(app, ["run", "sum", "gaussian_sum_formula", "-p", "n=10"])
    assert result.exit_code == 0
    assert "Result: 55" in result.output
    assert "Time:" in result.output


def test_run_iterative_refuses_huge_n():
    result = runner.invoke(app, ["run", "sum", "iterative_sum", "-p", "n=100000000000"])
    assert result.exit_code == 0
    assert "too large" in result.output


def test_global_ceiling_override():
    result = runner.invoke(app, ["--iterative-ceiling", "5", "run", "sum", "iterative_sum", "-p", "n=10"])
    assert result.exit_code == 0
    assert "too large" in result.output


def test_run_benchmark_table():
    result = runner.invoke(app, ["run", "gcd", "euclid", "-p", "n=48", "-p", "m=18", "-i", "2", "-d"])
    assert result.exit_code == 0
    assert "Benchmark: euclid" in result.output
    assert "Run 2:" in result.output
    assert "Average" in result.output


def test_run_benchmark_json():
    result = runner.invoke(app, ["run", "sum", "gaussian_sum_formula", "-p", "n=10", "-i", "3", "--json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["iterations"] == 3
    assert len(data["runs_s"]) == 3


def test_run_list_parameter():
    result = runner.invoke(app, ["run", "lightest-worker", "brute_force", "-p", "weights=5,3,8,3,9"])
    assert result.exit_code == 0
    assert "index: 1, weight: 3" in result.output
    assert "Comparisons: 5" in result.output


def test_run_zero_iterations_fails():
    result = runner.invoke(app, ["run", "sum", "iterative_sum", "-p", "n=10", "-i", "0"])
    assert result.exit_code == 1
    assert "Iterations must be at least 1" in result.output


# --- CLI errors (4 tests) ---

def test_unknown_problem():
    result = runner.invoke(app, ["run", "nope", "x"])
    assert result.exit_code == 1
    assert "Unknown problem" in result.output


def test_unknown_method():
    result = runner.invoke(app, ["run", "sum", "bogus", "-p", "n=10"])
    assert result.exit_code == 1
    assert "Invalid method" in result.output


def test_missing_parameters():
    result = runner.invoke(app, ["run", "sum", "iterative_sum"])
    assert result.exit_code == 1
    assert "Problem not configured" in result.output


def test_malformed_parameter_is_usage_error():
    result = runner.invoke(app, ["run", "sum", "iterative_sum", "-p", "n=abc"])
    assert result.exit_code == 2


# --- compare (2 tests) ---

def test_compare_ranks_methods():
    result = runner.invoke(app, ["compare", "lightest-worker", "-p", "weights=5,3,8,3,9", "-i", "2"])
    assert result.exit_code == 0
    assert "brute_force" in result.output
    assert "single_pass" in result.output
    assert "ranking by speed" in result.output


def test_compare_single_method_problem_fails():
    result = runner.invoke(app, ["compare", "product", "-p", "n=13", "-p", "m=7"])
    assert result.exit_code == 1
    assert "At least 2 methods" in result.output


# --- Interactive menu (3 tests) ---

def _session(answers, prompter_factory, quiet_timer_factory):
    out = io.StringIO()
    console = Console(file=out, width=120)
    problems = list(default_registry().load_all().values())
    prompter = prompter_factory(answers)
    session = MenuSession(
        problems,
        console,
        prompter=prompter,
        runner=BenchmarkRunner(timer_factory=quiet_timer_factory(), console=console, collect=lambda: None),
    )
    return session, out, prompter


def test_menu_setup_run_compare_quit(prompter_factory, quiet_timer_factory):
    answers = [
        "1",        # main menu: sum problem
        "1", "",    # method before setup, press enter
        "s", "10", "",  # setup n = 10, press enter
        "1", "1", "",   # iterative_sum, run once
        "2", "2", "3", "y", "",  # gaussian, benchmark 3 runs with details
        "0", "2", "",   # compare all with 2 runs
        "r", "",        # reset
        "b",
        "q",
    ]
    session, out, prompter = _session(answers, prompter_factory, quiet_timer_factory)
    session.run()

    text = out.getvalue()
    assert "Run the setup first!" in text
    assert "Result: 55" in text
    assert "Benchmark: gaussian_sum_formula" in text
    assert "ranking by speed" in text
    assert "Problem reset." in text
    assert "Goodbye!" in text
    assert not session.problems[0].is_ready()
    assert not prompter.answers


def test_menu_invalid_choices_redisplay(prompter_factory, quiet_timer_factory):
    session, out, _ = _session(["9", "x", "2", "7", "b", "q"], prompter_factory, quiet_timer_factory)
    session.run()
    text = out.getvalue()
    assert text.count("Invalid Choice!") == 3
    assert text.count("MAIN MENU") == 4


def test_menu_bad_iterations_reports_error_and_continues(prompter_factory, quiet_timer_factory):
    answers = ["3", "s", "13", "7", "", "1", "2", "0", "n", "b", "q"]
    session, out, _ = _session(answers, prompter_factory, quiet_timer_factory)
    session.run()
    text = out.getvalue()
    assert "Iterations must be at least 1" in text
    assert "Goodbye!" in text
