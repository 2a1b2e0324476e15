"""
Discord Webhook 客户端模块。

提供 Discord Webhook 的 HTTP 通信功能。
"""

import logging
from typing import Mapping

import requests

from discord_notifier.core.exceptions import TransportError
from discord_notifier.core.interfaces.transport import ITransport

logger = logging.getLogger(__name__)


class DiscordWebhookClient(ITransport):
    """
    Discord Webhook 客户端。

    只负责 HTTP 通信，不包含消息格式化逻辑。
    每次调用只发送一次请求，不做重试。

    Example:
        >>> client = DiscordWebhookClient(timeout=5)
        >>> client.post(
        ...     'https://discord.com/api/webhooks/xxx/yyy',
        ...     '{"content": "Hello"}',
        ...     {'Content-Type': 'application/json'}
        ... )
        True
    """

    def __init__(self, timeout: int = 10):
        """
        初始化客户端。

        Args:
            timeout: 请求超时时间（秒），默认 10 秒
        """
        self._timeout = timeout

    @property
    def timeout(self) -> int:
        return self._timeout

    def post(self, uri: str, body: str, headers: Mapping[str, str]) -> bool:
        """
        发送 POST 请求。

        Args:
            uri: 请求地址
            body: JSON 字符串
            headers: 请求头

        Returns:
            bool: 2xx 响应返回 True，其他状态码返回 False

        Raises:
            TransportError: 网络错误或超时
        """
        try:
            response = requests.post(
                uri,
                data=body.encode('utf-8'),
                headers=dict(headers),
                timeout=self._timeout
            )
        except requests.Timeout as e:
            logger.error(f'⏱️ Discord Webhook 超时 ({self._timeout}s)')
            raise TransportError(
                f'Request timeout after {self._timeout}s',
                uri=uri
            ) from e
        except requests.RequestException as e:
            logger.error(f'❌ Discord Webhook 请求失败: {e}')
            raise TransportError(str(e), uri=uri) from e

        if 200 <= response.status_code < 300:
            logger.debug(f'✅ Discord 消息发送成功: {response.status_code}')
            return True

        error_msg = (
            response.text[:200] if response.text
            else f'HTTP {response.status_code}'
        )
        logger.warning(
            f'⚠️ Discord 消息发送失败: {response.status_code}, {error_msg}'
        )
        return False
