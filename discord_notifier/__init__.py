"""
discord_notifier - send text and rich embeds to Discord webhooks.

Example:
    >>> import discord_notifier
    >>> def configure(config):
    ...     config.url = 'https://discord.com/api/webhooks/xxx/yyy'
    ...     config.username = 'Deploy Bot'
    >>> discord_notifier.setup(configure)
    >>> discord_notifier.message('Deployment finished')
    >>> embed = discord_notifier.build_embed(
    ...     lambda e: e.title('Deployed').color(0x008000)
    ... )
    >>> discord_notifier.message([embed], {'wait': True})
"""

import logging
from typing import Any, Callable, Mapping, Optional

from discord_notifier.container import Container
from discord_notifier.core.config import ConfigStore, NotifierConfig, NotifierSettings
from discord_notifier.core.domain import Embed, EmbedAuthor, EmbedField, EmbedFooter
from discord_notifier.core.domain.message import MessageInput
from discord_notifier.core.exceptions import (
    EmbedBuilderClosedError,
    EmbedValueError,
    InvalidMessageTypeError,
    InvalidOverridesError,
    MissingEndpointError,
    NotifierError,
    TransportError,
)
from discord_notifier.infrastructure.notification.discord import (
    DiscordNotifier,
    DiscordWebhookClient,
    EmbedBuilder,
    build_embed,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

container = Container()


def setup(mutator: Callable[[NotifierConfig], None]) -> None:
    """Change the process-wide webhook configuration."""
    container.notifier().setup(mutator)


def message(
    msg: MessageInput,
    overrides: Optional[Mapping[str, Any]] = None
) -> bool:
    """Send text, an embed or a list of embeds with the global configuration."""
    return container.notifier().message(msg, overrides)


def endpoint(config: Any = None, **overrides: Any) -> str:
    """Resolve the delivery URI for ``config`` or the global configuration."""
    return container.notifier().endpoint(config, **overrides)


__all__ = [
    'setup',
    'message',
    'endpoint',
    'container',
    'Container',
    # Configuration
    'ConfigStore',
    'NotifierConfig',
    'NotifierSettings',
    # Embeds
    'Embed',
    'EmbedAuthor',
    'EmbedField',
    'EmbedFooter',
    'EmbedBuilder',
    'build_embed',
    # Delivery
    'DiscordNotifier',
    'DiscordWebhookClient',
    # Exceptions
    'NotifierError',
    'InvalidMessageTypeError',
    'InvalidOverridesError',
    'EmbedValueError',
    'EmbedBuilderClosedError',
    'MissingEndpointError',
    'TransportError',
]
