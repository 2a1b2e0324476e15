"""
Discord 通知模块。

提供 Discord Webhook 集成，包括：
- Webhook 客户端（HTTP 通信）
- Embed 构建器（消息格式化）
- 负载组装与地址解析
- Discord 通知器（串联以上组件）
"""

from discord_notifier.infrastructure.notification.discord.discord_notifier import DiscordNotifier
from discord_notifier.infrastructure.notification.discord.embed_builder import (
    EmbedBuilder,
    build_embed,
)
from discord_notifier.infrastructure.notification.discord.endpoint import resolve_endpoint
from discord_notifier.infrastructure.notification.discord.payload_assembler import (
    EffectiveConfig,
    PayloadAssembler,
    merge_config,
)
from discord_notifier.infrastructure.notification.discord.webhook_client import DiscordWebhookClient

__all__ = [
    'DiscordWebhookClient',
    'EmbedBuilder',
    'build_embed',
    'EffectiveConfig',
    'PayloadAssembler',
    'merge_config',
    'resolve_endpoint',
    'DiscordNotifier',
]
