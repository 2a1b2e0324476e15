"""
Embed value objects module.

Contains the immutable representation of a rich message attachment.
Reference:
https://discord.com/developers/docs/resources/message#embed-object
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from discord_notifier.core.exceptions import EmbedValueError

MAX_COLOR = 0xFFFFFF


def validate_color(color: int) -> int:
    """Return ``color`` if it is a 24-bit RGB integer."""
    if isinstance(color, bool) or not isinstance(color, int):
        raise EmbedValueError(
            f'Embed color must be an integer, got {type(color).__name__}',
            attribute='color'
        )
    if not 0 <= color <= MAX_COLOR:
        raise EmbedValueError(
            f'Embed color must be within 0x000000..0xFFFFFF, got {color}',
            attribute='color'
        )
    return color


@dataclass(frozen=True)
class EmbedThumbnail:
    """Thumbnail image shown beside the embed."""
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return {'url': self.url}


@dataclass(frozen=True)
class EmbedImage:
    """Large image shown below the embed body."""
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return {'url': self.url}


@dataclass(frozen=True)
class EmbedAuthor:
    """
    Author line shown above the title.

    Attributes:
        name: Author display name.
        url: Link opened when the name is clicked.
        icon_url: Small icon shown before the name.
    """
    name: str
    url: Optional[str] = None
    icon_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'name': self.name}
        if self.url is not None:
            data['url'] = self.url
        if self.icon_url is not None:
            data['icon_url'] = self.icon_url
        return data


@dataclass(frozen=True)
class EmbedFooter:
    """Footer line shown under the embed."""
    text: str
    icon_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'text': self.text}
        if self.icon_url is not None:
            data['icon_url'] = self.icon_url
        return data


@dataclass(frozen=True)
class EmbedField:
    """
    A name/value section of the embed.

    ``inline`` is only serialized when it was given explicitly.
    """
    name: str
    value: str
    inline: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'name': self.name, 'value': self.value}
        if self.inline is not None:
            data['inline'] = self.inline
        return data


@dataclass(frozen=True)
class Embed:
    """
    Immutable rich message attachment.

    Instances are normally produced by ``EmbedBuilder``. Absent attributes are
    left out of the serialized form entirely.

    Attributes:
        title: Embed title.
        description: Main text body.
        url: Link attached to the title.
        color: 24-bit RGB color of the side bar.
        timestamp: Time shown in the footer.
        thumbnail: Thumbnail image.
        image: Large image.
        author: Author line.
        footer: Footer line.
        fields: Name/value sections in insertion order.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    color: Optional[int] = None
    timestamp: Optional[datetime] = None
    thumbnail: Optional[EmbedThumbnail] = None
    image: Optional[EmbedImage] = None
    author: Optional[EmbedAuthor] = None
    footer: Optional[EmbedFooter] = None
    fields: Tuple[EmbedField, ...] = ()

    def __post_init__(self):
        if self.color is not None:
            validate_color(self.color)
        # Accept lists from direct construction, store them immutably
        if not isinstance(self.fields, tuple):
            object.__setattr__(self, 'fields', tuple(self.fields))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the webhook JSON shape, omitting absent attributes."""
        data: Dict[str, Any] = {}

        if self.title is not None:
            data['title'] = self.title
        if self.description is not None:
            data['description'] = self.description
        if self.url is not None:
            data['url'] = self.url
        if self.color is not None:
            data['color'] = self.color
        if self.timestamp is not None:
            data['timestamp'] = _format_timestamp(self.timestamp)
        if self.thumbnail is not None:
            data['thumbnail'] = self.thumbnail.to_dict()
        if self.image is not None:
            data['image'] = self.image.to_dict()
        if self.author is not None:
            data['author'] = self.author.to_dict()
        if self.footer is not None:
            data['footer'] = self.footer.to_dict()
        if self.fields:
            data['fields'] = [f.to_dict() for f in self.fields]

        return data


def _format_timestamp(value: datetime) -> str:
    """ISO-8601 string; naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()
