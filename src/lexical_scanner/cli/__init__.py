"""
Lexical Scanner Command-Line Interface
======================================

This package provides the command-line tool for the lexical scanner:

- **lexscan**: tokenize a source file and print the token stream

The tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.

Copyright (c) 2026 Lexical Scanner Contributors
"""

__all__ = ["lexscan"]
