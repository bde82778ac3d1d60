"""
Scanner Configuration
=====================

Settings shared by the scanner session and the command-line tool.
Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied by the CLI on top of either)

Copyright (c) 2026 Lexical Scanner Contributors
"""

from dataclasses import dataclass, field
import os

from lexical_scanner.scanner.keywords import RESERVED_WORDS


@dataclass
class ScannerConfig:
    """
    Configuration for a scan session.

    Attributes:
        reserved_words: Keyword table consulted for completed identifiers
        encoding: Text encoding used when reading source files
        filename: Label used in diagnostics for string input
    """

    reserved_words: frozenset[str] = field(default_factory=lambda: RESERVED_WORDS)
    encoding: str = "utf-8"
    filename: str = "<input>"

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def from_env(cls) -> "ScannerConfig":
        """
        Create ScannerConfig from environment variables.

        Environment variables (all optional):
            LEXSCAN_RESERVED_WORDS: Comma-separated keywords replacing the
                built-in table (e.g. "if,else,while")
            LEXSCAN_ENCODING: Source file encoding (e.g. "latin-1")

        Returns:
            ScannerConfig with values from environment variables
        """
        config = cls()

        if words := os.environ.get("LEXSCAN_RESERVED_WORDS"):
            config.reserved_words = parse_word_list(words)

        if encoding := os.environ.get("LEXSCAN_ENCODING"):
            config.encoding = encoding

        return config


def parse_word_list(text: str) -> frozenset[str]:
    """Split a comma-separated keyword list, ignoring blanks."""
    return frozenset(word.strip() for word in text.split(",") if word.strip())
