"""Console adapters - Standard output implementations."""

from .printer import ConsolePrinter

__all__ = ["ConsolePrinter"]
