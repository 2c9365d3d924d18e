"""Command-line interface module for xmlenum.

This module provides the ``xmlenum`` command that prints the merged tag shape
of the named element across XML files.
"""

from .main import main

__all__ = ["main"]
