"""
Discord Webhook 地址解析模块。
"""

import logging
from typing import Any, Mapping, Union
from urllib.parse import urlencode, urlsplit, urlunsplit

from discord_notifier.core.config import NotifierConfig
from discord_notifier.core.exceptions import MissingEndpointError
from discord_notifier.infrastructure.notification.discord.payload_assembler import (
    EffectiveConfig,
)

logger = logging.getLogger(__name__)

ConfigLike = Union[EffectiveConfig, NotifierConfig, Mapping[str, Any]]


def resolve_endpoint(config: ConfigLike) -> str:
    """
    根据生效配置生成请求地址。

    wait 为真时追加 wait=true 查询参数，否则原样返回 URL。

    Args:
        config: 生效配置、全局配置或包含 url/wait 的映射

    Returns:
        请求地址

    Raises:
        MissingEndpointError: 未配置 URL
    """
    if isinstance(config, Mapping):
        url = config.get('url')
        wait = config.get('wait')
    else:
        url = config.url
        wait = config.wait

    if not url:
        raise MissingEndpointError()

    if not wait:
        return url

    parts = urlsplit(url)
    wait_query = urlencode({'wait': 'true'})
    query = f'{parts.query}&{wait_query}' if parts.query else wait_query
    endpoint = urlunsplit(parts._replace(query=query))

    logger.debug('🔗 Webhook 地址已追加 wait=true')
    return endpoint
