"""
Services layer - application orchestration.
"""

from codecbench.services.harness import BenchmarkHarness, Preparation
from codecbench.services.report import format_line, render_table, write_results

__all__ = [
    'BenchmarkHarness',
    'Preparation',
    'format_line',
    'render_table',
    'write_results',
]
