"""
ragsplit Error Classification System.

This module provides the exceptions raised by the chunking engine.

Error Categories:
-----------------
1. Permanent Errors: Failures that won't succeed on retry
   - Invalid chunk size / overlap configuration
   - Malformed separator regular expressions
   - Unknown splitter types

2. Tokenizer Errors: The subword vocabulary could not be loaded

The engine performs no I/O, so there is no retryable category: every error
is local and synchronous, and callers should fix the input or configuration.

Usage:
------
    from ragsplit.errors import ConfigurationError, PatternError

    try:
        chunker = RecursiveCharacterChunker(chunk_size=100, chunk_overlap=100)
    except ConfigurationError as e:
        logger.error(f"Bad splitter configuration: {e}")
        raise
"""

from typing import Any


class RagSplitError(Exception):
    """
    Base exception for all ragsplit errors.

    Attributes:
        message: Human-readable error description
        details: Additional context about the error (optional)
        original_error: The underlying exception that caused this error (optional)
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def __str__(self) -> str:
        base = self.message
        if self.details:
            base += f" | Details: {self.details}"
        if self.original_error:
            base += f" | Caused by: {type(self.original_error).__name__}: {self.original_error}"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "details": self.details,
            "original_error": str(self.original_error) if self.original_error else None
        }


# =============================================================================
# Permanent Errors - Failures that won't succeed on retry
# =============================================================================

class PermanentError(RagSplitError):
    """
    Base class for errors that will not succeed on retry.

    These errors indicate issues that require user intervention,
    typically an invalid splitter configuration.
    """
    pass


class ConfigurationError(PermanentError):
    """
    Raised when a splitter is configured with invalid values.

    Common causes:
    - chunk_size <= 0
    - chunk_overlap < 0
    - chunk_overlap >= chunk_size
    - Unknown splitter type
    """

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


class PatternError(ConfigurationError):
    """
    Raised when a separator regular expression cannot be compiled.

    Attributes:
        pattern: The offending pattern string
    """

    def __init__(
        self,
        pattern: str,
        message: str | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(
            message or f"Invalid separator pattern: {pattern!r}",
            details={"pattern": pattern},
            original_error=original_error,
        )
        self.pattern = pattern


# =============================================================================
# Domain-Specific Errors
# =============================================================================

class TokenizerError(RagSplitError):
    """Raised when the tokenizer vocabulary cannot be loaded."""
    pass
