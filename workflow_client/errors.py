"""Exceptions raised by workflow client operations."""


class WorkflowError(Exception):
    """Base class for failed workflow calls."""


class InvalidHeaderError(WorkflowError):
    """Raised when an identity header is missing or cannot be encoded.

    Always raised before any request is sent.
    """


class ApiError(WorkflowError):
    """Raised when the HTTP transport fails to produce a response."""


class FormatError(WorkflowError):
    """Raised when a body or declared media type is malformed."""
