"""
Lexer configuration.

Options come from, in increasing priority:
- Default values (defined here)
- Environment variables (LexerOptions.from_env)
- Command line flags (applied by mjlex)
"""

from dataclasses import dataclass
import logging
import os


logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class LexerOptions:
    """
    Lexer configuration options.

    Attributes:
        filename: Source name attached to tokens and diagnostics
        strict_comments: Record a warning when a block comment is never
                         closed. The token stream is the same either way.
        max_errors: Maximum errors kept by the diagnostics collector
    """
    filename: str = "<input>"
    strict_comments: bool = False
    max_errors: int = 100

    @classmethod
    def from_env(cls, **overrides) -> "LexerOptions":
        """
        Create LexerOptions from environment variables.

        Environment variables (all optional):
            MINIJAVA_STRICT_COMMENTS: 1/true/yes/on to warn on open comments
            MINIJAVA_MAX_ERRORS: Error limit for diagnostics (positive integer)

        Keyword arguments override both defaults and environment.
        """
        options = cls()

        if strict := os.environ.get("MINIJAVA_STRICT_COMMENTS"):
            options.strict_comments = strict.strip().lower() in _TRUE_VALUES

        if max_errors := os.environ.get("MINIJAVA_MAX_ERRORS"):
            try:
                limit = int(max_errors)
            except ValueError:
                limit = 0
            if limit >= 1:
                options.max_errors = limit
            else:
                logger.warning(f"Ignoring invalid MINIJAVA_MAX_ERRORS value {max_errors!r}")

        for name, value in overrides.items():
            if not hasattr(options, name):
                raise TypeError(f"unknown lexer option '{name}'")
            setattr(options, name, value)

        return options
