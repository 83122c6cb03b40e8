"""
Command-line interface for codecbench.
"""

from codecbench.cli.commands import run, write_schema

__all__ = ['run', 'write_schema']
