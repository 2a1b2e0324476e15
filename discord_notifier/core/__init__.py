"""
Core layer module.

Contains domain models, configuration, interfaces, and exception definitions.
"""

from discord_notifier.core.exceptions import (
    EmbedBuilderClosedError,
    EmbedValueError,
    InvalidMessageTypeError,
    InvalidOverridesError,
    MissingEndpointError,
    NotifierError,
    TransportError,
)

__all__ = [
    # Exceptions
    'NotifierError',
    'InvalidMessageTypeError',
    'InvalidOverridesError',
    'EmbedValueError',
    'EmbedBuilderClosedError',
    'MissingEndpointError',
    'TransportError',
]
