"""
Discord 通知器模块。

串联负载组装、地址解析与 HTTP 发送。
"""

import json
import logging
from typing import Any, Callable, Mapping, Optional

from discord_notifier.core.config import ConfigStore, NotifierConfig
from discord_notifier.core.domain.message import MessageInput
from discord_notifier.core.interfaces.transport import ITransport

from .endpoint import ConfigLike, resolve_endpoint
from .payload_assembler import PayloadAssembler, merge_config

logger = logging.getLogger(__name__)

JSON_HEADERS = {'Content-Type': 'application/json'}


class DiscordNotifier:
    """
    Discord 通知器。

    流程：校验消息类型 → 组装负载 → 用同一份生效配置解析地址 → 发送。
    发送结果原样返回，异常原样抛出，不做重试。

    Example:
        >>> notifier = DiscordNotifier(DiscordWebhookClient(), ConfigStore())
        >>> notifier.setup(lambda c: setattr(c, 'url', 'https://discord.com/api/webhooks/x/y'))
        >>> notifier.message('部署完成')
        True
    """

    def __init__(
        self,
        transport: ITransport,
        config_store: ConfigStore,
        assembler: Optional[PayloadAssembler] = None
    ):
        """
        初始化通知器。

        Args:
            transport: HTTP 发送实现
            config_store: 全局配置存储
            assembler: 负载组装器（可选，默认基于 config_store 创建）
        """
        self._transport = transport
        self._store = config_store
        self._assembler = assembler or PayloadAssembler(config_store)

    @property
    def config_store(self) -> ConfigStore:
        return self._store

    def setup(self, mutator: Callable[[NotifierConfig], None]) -> None:
        """修改全局配置，参见 ConfigStore.setup。"""
        self._store.setup(mutator)

    def message(
        self,
        msg: MessageInput,
        overrides: Optional[Mapping[str, Any]] = None
    ) -> bool:
        """
        发送消息。

        Args:
            msg: 文本、Embed 或 Embed 列表
            overrides: 单次调用覆盖项，例如 {'username': 'CI', 'wait': True}

        Returns:
            bool: 发送结果

        Raises:
            InvalidMessageTypeError: 消息类型不受支持（不会发出请求）
            MissingEndpointError: 生效配置中没有 URL
            TransportError: 网络错误
        """
        payload, effective = self._assembler.assemble_with_config(msg, overrides)
        uri = resolve_endpoint(effective)
        body = json.dumps(payload)

        result = self._transport.post(uri, body, JSON_HEADERS)

        if result:
            logger.info(f'📨 Discord 消息已发送 ({len(body)} 字节)')
        else:
            logger.warning('⚠️ Discord 消息未送达')
        return result

    def endpoint(
        self,
        config: Optional[ConfigLike] = None,
        **overrides: Any
    ) -> str:
        """
        解析请求地址。

        指定 config 时只使用该配置，不读取全局配置；未指定时使用全局配置。
        两种情况下 overrides 都叠加在基础配置之上。

        Args:
            config: 指定配置（可选，默认使用全局配置）
            **overrides: 覆盖项，例如 url='http://test.com', wait=True

        Returns:
            请求地址
        """
        if config is None:
            base = self._store.snapshot()
        elif isinstance(config, Mapping):
            base = NotifierConfig()
            overrides = {**config, **overrides}
        else:
            base = NotifierConfig(
                url=config.url,
                username=config.username,
                avatar_url=config.avatar_url,
                wait=config.wait
            )

        return resolve_endpoint(merge_config(base, overrides))
