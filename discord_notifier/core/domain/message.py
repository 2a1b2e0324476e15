"""
Message module.

Contains the closed set of message shapes the notifier accepts and the
coercion from plain Python values.
"""

from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple, Union

from discord_notifier.core.domain.embed import Embed
from discord_notifier.core.exceptions import InvalidMessageTypeError


@dataclass(frozen=True)
class TextMessage:
    """Plain text message."""
    content: str

    def to_dict(self) -> Dict[str, Any]:
        return {'content': self.content}


@dataclass(frozen=True)
class SingleEmbedMessage:
    """Message carrying one embed."""
    embed: Embed

    def to_dict(self) -> Dict[str, Any]:
        return {'embeds': [self.embed.to_dict()]}


@dataclass(frozen=True)
class EmbedListMessage:
    """Message carrying several embeds, serialized in order."""
    embeds: Tuple[Embed, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {'embeds': [embed.to_dict() for embed in self.embeds]}


Message = Union[TextMessage, SingleEmbedMessage, EmbedListMessage]

MessageInput = Union[str, Embed, Sequence[Embed], Message]


def to_message(value: Any) -> Message:
    """
    Coerce a caller-supplied value into a ``Message``.

    Args:
        value: Text, an ``Embed``, a list/tuple of ``Embed`` or a message.

    Returns:
        The matching message variant.

    Raises:
        InvalidMessageTypeError: For any other value, or a list holding
            something other than embeds.
    """
    if isinstance(value, (TextMessage, SingleEmbedMessage, EmbedListMessage)):
        return value

    if isinstance(value, str):
        return TextMessage(value)

    if isinstance(value, Embed):
        return SingleEmbedMessage(value)

    if isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            if not isinstance(item, Embed):
                raise InvalidMessageTypeError(
                    'Embed list may only contain Embed instances',
                    received_type=type(item).__name__,
                    context={'index': index}
                )
        return EmbedListMessage(tuple(value))

    raise InvalidMessageTypeError(
        'Message must be a string, an Embed or a list of Embeds',
        received_type=type(value).__name__
    )
