"""
Demo runner package.

Wires adapters into the domain and runs the demonstrations in order.
"""

from src.runner.main import main, run_demos

__all__ = ["main", "run_demos"]
