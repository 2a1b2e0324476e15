"""
Exceptions module.

Contains the exception hierarchy for the discord_notifier package.
All custom exceptions inherit from NotifierError for consistent handling.
"""

from typing import Any, Dict, Optional


class NotifierError(Exception):
    """
    Base exception for all discord_notifier errors.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code.
        context: Additional context information for debugging.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or 'UNKNOWN_ERROR'
        self.context = context or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.context:
            return f'[{self.code}] {self.message} - Context: {self.context}'
        return f'[{self.code}] {self.message}'


# Message-related exceptions

class InvalidMessageTypeError(NotifierError, TypeError):
    """
    Exception raised when a message is not text, an embed or a list of embeds.

    Attributes:
        received_type: Name of the offending type.
    """

    def __init__(
        self,
        message: str,
        received_type: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        ctx = context or {}
        if received_type:
            ctx['received_type'] = received_type
        super().__init__(message, 'INVALID_MESSAGE_TYPE', ctx)
        self.received_type = received_type


class InvalidOverridesError(NotifierError, TypeError):
    """Exception raised when per-call overrides are not a mapping."""

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, 'INVALID_OVERRIDES', context)


# Embed-related exceptions

class EmbedValueError(NotifierError, ValueError):
    """
    Exception raised when an embed attribute has an unusable value.

    Attributes:
        attribute: Name of the embed attribute.
    """

    def __init__(
        self,
        message: str,
        attribute: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        ctx = context or {}
        if attribute:
            ctx['attribute'] = attribute
        super().__init__(message, 'EMBED_VALUE_ERROR', ctx)
        self.attribute = attribute


class EmbedBuilderClosedError(NotifierError):
    """Exception raised when a builder is used after it produced its embed."""

    def __init__(
        self,
        message: str = 'Embed builder is closed; the embed is already built',
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, 'EMBED_BUILDER_CLOSED', context)


# Delivery-related exceptions

class MissingEndpointError(NotifierError):
    """Exception raised when the effective configuration has no webhook URL."""

    def __init__(
        self,
        message: str = 'No webhook URL configured',
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, 'MISSING_ENDPOINT', context)


class TransportError(NotifierError):
    """
    Exception raised when the HTTP transport fails to deliver a payload.

    Attributes:
        uri: Target URI of the failed request.
    """

    def __init__(
        self,
        message: str,
        uri: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        ctx = context or {}
        if uri:
            ctx['uri'] = uri
        super().__init__(message, 'TRANSPORT_ERROR', ctx)
        self.uri = uri
