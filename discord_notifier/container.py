"""
Dependency Injection Container module.

Contains the Container class wiring the configuration store, the HTTP
transport and the notifier.
"""

from dependency_injector import containers, providers

from discord_notifier.core.config import ConfigStore, NotifierSettings
from discord_notifier.infrastructure.notification.discord.discord_notifier import DiscordNotifier
from discord_notifier.infrastructure.notification.discord.payload_assembler import PayloadAssembler
from discord_notifier.infrastructure.notification.discord.webhook_client import DiscordWebhookClient


class Container(containers.DeclarativeContainer):
    """
    依赖注入容器。

    服务层次结构:
    1. Configuration (全局配置存储，初始为空)
    2. Transport (HTTP 发送)
    3. Notifier (负载组装 + 地址解析 + 发送)
    """

    # ===== Configuration =====
    # Environment only; JSON files are read through NotifierSettings.load()
    settings = providers.Singleton(NotifierSettings)
    config_store = providers.Singleton(ConfigStore)

    # ===== Transport =====
    transport = providers.Singleton(
        DiscordWebhookClient,
        timeout=settings.provided.timeout
    )

    # ===== Notifier =====
    payload_assembler = providers.Singleton(
        PayloadAssembler,
        config_store=config_store
    )
    notifier = providers.Singleton(
        DiscordNotifier,
        transport=transport,
        config_store=config_store,
        assembler=payload_assembler
    )
