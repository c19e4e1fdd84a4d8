"""
MiniJava Command-Line Interface
===============================

This package provides command-line tools for the MiniJava toolkit:

- **mjlex**: tokenize a MiniJava source file and print the tokens

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["mjlex"]
