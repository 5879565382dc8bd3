"""
Error types raised while estimating collection memory.

Every error fails a single collection's estimation; the caller decides
whether to skip that collection or abort the run.
"""

from typing import Any, Dict, Optional


class MemoryCalculatorError(Exception):
    """Base error for the memory calculator.

    Args:
        message: Human readable description.
        details: Structured context (collection, field, line, ...).
        original: Underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original = original

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "message": self.message,
            "details": self.details,
            "original": repr(self.original) if self.original else None,
        }


class ConfigurationError(MemoryCalculatorError):
    """Settings are missing or invalid."""


class SchemaError(MemoryCalculatorError):
    """A field's declared type is missing or not in the sizing catalog."""


class MalformedDocumentError(MemoryCalculatorError):
    """A document or field value cannot be priced."""


class EmptyCollectionError(MemoryCalculatorError):
    """No documents were available to compute statistics from."""


class IndexServiceError(MemoryCalculatorError):
    """The indexing service could not be reached or rejected a request."""
