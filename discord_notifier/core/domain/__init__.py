"""
Domain module.

Contains the embed value objects and the message variants.
"""

from discord_notifier.core.domain.embed import (
    Embed,
    EmbedAuthor,
    EmbedField,
    EmbedFooter,
    EmbedImage,
    EmbedThumbnail,
)
from discord_notifier.core.domain.message import (
    EmbedListMessage,
    Message,
    SingleEmbedMessage,
    TextMessage,
    to_message,
)

__all__ = [
    # Embed
    'Embed',
    'EmbedAuthor',
    'EmbedField',
    'EmbedFooter',
    'EmbedImage',
    'EmbedThumbnail',
    # Message
    'Message',
    'TextMessage',
    'SingleEmbedMessage',
    'EmbedListMessage',
    'to_message',
]
