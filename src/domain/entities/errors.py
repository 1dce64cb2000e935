"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ItemNotFoundError(DomainError):
    """Raised when an item cannot be found."""

    def __init__(self, item_id: str, details: Optional[Dict[str, Any]] = None):
        message = f"Item with ID {item_id} not found"
        super().__init__(message, details)


class ItemValidationError(DomainError):
    """Raised when item validation fails."""


class ItemOperationError(DomainError):
    """Raised when an operation on an item fails."""


class ConfigurationError(DomainError):
    """Raised when a service instance cannot be wired from its configuration."""


class ProbeFailure(DomainError):
    """
    Raised by a health probe to report a failing dependency.

    The health aggregator converts it into a failed check result; it never
    leaves the aggregator.
    """


class RequestError(DomainError):
    """
    Failure of a request issued through a test host client.

    Carried on the response object rather than raised, so tests can assert
    on it.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.status_code = status_code
        super().__init__(message, details)
