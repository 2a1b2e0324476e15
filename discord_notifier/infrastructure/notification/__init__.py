"""
通知服务模块。

提供各种通知渠道的实现。
"""

from discord_notifier.infrastructure.notification.discord import (
    DiscordNotifier,
    DiscordWebhookClient,
    EmbedBuilder,
)

__all__ = [
    'DiscordWebhookClient',
    'EmbedBuilder',
    'DiscordNotifier',
]
