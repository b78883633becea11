"""Guided exercises checked from the command line, with worked examples by topic."""

__version__ = "0.1.0"