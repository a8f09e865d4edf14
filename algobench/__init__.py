"""algobench — run and compare textbook algorithms under one timing harness.

Pick a problem (sum of 1..n, GCD, Egyptian multiplication, lightest
worker), bind its parameters, then run a method once or benchmark it.
Durations are exact decimals, so averages over many runs do not drift.

Usage:
    python -m algobench menu                                  # Interactive menu
    python -m algobench list                                  # Show problems
    python -m algobench run sum iterative_sum -p n=1000 -i 5  # Benchmark one method
    python -m algobench compare gcd -p n=48 -p m=18           # Rank all methods
"""
