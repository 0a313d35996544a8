"""Run a chain of piped commands from an input file to an output file."""

__version__ = "0.1.0"
__all__ = ["__version__"]