"""
gfront Command-Line Interface
=============================

This package provides the command-line tool for the G front end:

- **gfc**: tokenize or parse a G source file

The tool is a Click-based CLI application; errors are reported through
the shared handler in `gfront.cli.errors`.
"""

__all__ = ["gfc"]
