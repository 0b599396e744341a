"""topogen command line interface."""

from topogen.cli.main import main

__all__ = ["main"]
