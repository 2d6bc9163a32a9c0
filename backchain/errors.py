"""
Exceptions for backchain.

Only initialization problems are exceptions. A query that cannot be
proved is not an error: the prover returns None for it.
"""

from typing import Optional


class BackchainError(Exception):
    """Base exception for all backchain errors."""

    def __init__(self, message: str, context: Optional[dict] = None):
        super().__init__(message)
        self.context = context or {}


class KnowledgeBaseError(BackchainError):
    """The knowledge base could not be loaded. No partial KB is returned."""


class ParseError(KnowledgeBaseError):
    """Malformed knowledge-base or query text."""

    def __init__(self, message: str, source: str = "<string>", line: int = 0):
        super().__init__(
            f"{source}:{line}: {message}" if line else f"{source}: {message}",
            context={"source": source, "line": line},
        )
        self.source = source
        self.line = line
