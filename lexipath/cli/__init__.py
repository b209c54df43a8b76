"""Command-line interface for LexiPath."""

from lexipath.cli.parser import create_parser

__all__ = ["create_parser"]
