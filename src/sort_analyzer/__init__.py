"""Sort Analyzer package initialisation."""

__all__ = [
    "algorithms",
    "benchmarks",
    "core",
    "reporting",
    "shared",
]
