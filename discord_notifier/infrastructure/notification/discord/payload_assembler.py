"""
Discord Webhook 负载组装模块。

负责合并全局配置与单次调用覆盖项，并生成 Webhook JSON 负载。
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from discord_notifier.core.config import ConfigStore, NotifierConfig
from discord_notifier.core.domain.message import MessageInput, to_message
from discord_notifier.core.exceptions import InvalidOverridesError

logger = logging.getLogger(__name__)

# 可被覆盖的配置键
CONFIG_KEYS = ('url', 'username', 'avatar_url', 'wait')

# 写入负载的配置键（wait 只影响请求地址）
PAYLOAD_CONFIG_KEYS = ('url', 'username', 'avatar_url')


@dataclass(frozen=True)
class EffectiveConfig:
    """
    单次调用的生效配置。

    Attributes:
        url: Webhook URL
        username: 显示名称
        avatar_url: 头像 URL
        wait: 是否追加 wait=true 查询参数
        passthrough: 未识别的覆盖项（按覆盖顺序原样写入负载）
    """
    url: Optional[str] = None
    username: Optional[str] = None
    avatar_url: Optional[str] = None
    wait: Optional[bool] = None
    passthrough: Dict[str, Any] = field(default_factory=dict)


def merge_config(
    config: NotifierConfig,
    overrides: Optional[Mapping[str, Any]] = None
) -> EffectiveConfig:
    """
    将覆盖项合并到全局配置上。

    覆盖项中出现的键（即使值为 None）都会替换全局值。

    Args:
        config: 全局配置
        overrides: 单次调用覆盖项（可选）

    Returns:
        EffectiveConfig: 生效配置

    Raises:
        InvalidOverridesError: overrides 不是映射类型
    """
    if overrides is None:
        overrides = {}
    elif not isinstance(overrides, Mapping):
        raise InvalidOverridesError(
            f'Overrides must be a mapping, got {type(overrides).__name__}'
        )

    values = config.model_dump()
    passthrough: Dict[str, Any] = {}

    for key, value in overrides.items():
        if key in CONFIG_KEYS:
            values[key] = value
        else:
            passthrough[key] = value

    return EffectiveConfig(passthrough=passthrough, **values)


class PayloadAssembler:
    """
    Webhook 负载组装器。

    负载结构：
    - content / embeds: 消息内容
    - url / username / avatar_url: 生效配置中存在的项
    - 其余覆盖项: 原样追加

    Example:
        >>> assembler = PayloadAssembler(store)
        >>> assembler.assemble('部署完成', {'username': 'CI'})
        {'content': '部署完成', 'url': '...', 'username': 'CI'}
    """

    def __init__(self, config_store: ConfigStore):
        """
        初始化组装器。

        Args:
            config_store: 全局配置存储
        """
        self._store = config_store

    def assemble(
        self,
        message: MessageInput,
        overrides: Optional[Mapping[str, Any]] = None,
        config: Optional[NotifierConfig] = None
    ) -> Dict[str, Any]:
        """
        组装 JSON 负载。

        Args:
            message: 文本、Embed 或 Embed 列表
            overrides: 单次调用覆盖项（可选）
            config: 代替全局配置的配置（可选）

        Returns:
            可直接 JSON 序列化的字典
        """
        payload, _ = self.assemble_with_config(message, overrides, config)
        return payload

    def assemble_with_config(
        self,
        message: MessageInput,
        overrides: Optional[Mapping[str, Any]] = None,
        config: Optional[NotifierConfig] = None
    ) -> Tuple[Dict[str, Any], EffectiveConfig]:
        """
        组装负载并返回所用的生效配置。

        Returns:
            (负载, 生效配置)

        Raises:
            InvalidMessageTypeError: 消息类型不受支持
            InvalidOverridesError: 覆盖项不是映射类型
        """
        # 先校验消息类型，再读取配置
        msg = to_message(message)
        effective = merge_config(
            config if config is not None else self._store.snapshot(),
            overrides
        )

        payload = msg.to_dict()

        for key in PAYLOAD_CONFIG_KEYS:
            value = getattr(effective, key)
            if value is not None:
                payload[key] = value

        payload.update(effective.passthrough)

        logger.debug(
            f'📦 组装 Webhook 负载: {type(msg).__name__}, '
            f'键: {", ".join(payload)}'
        )
        return payload, effective
