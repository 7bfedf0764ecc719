"""Application services orchestrating domain and core capabilities."""

from .execution import display_summary, main, output_results, run

__all__ = [
    "display_summary",
    "main",
    "output_results",
    "run",
]
