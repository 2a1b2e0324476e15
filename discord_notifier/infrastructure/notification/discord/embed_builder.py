"""
Discord Embed 构建器模块。

提供声明式的 Embed 构建功能，构建完成后返回不可变的 Embed 对象。
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from discord_notifier.core.domain.embed import (
    Embed,
    EmbedAuthor,
    EmbedField,
    EmbedFooter,
    EmbedImage,
    EmbedThumbnail,
    validate_color,
)
from discord_notifier.core.exceptions import EmbedBuilderClosedError

logger = logging.getLogger(__name__)


class EmbedBuilder:
    """
    Discord Embed 构建器。

    除 add_field 外，所有设置方法都是后写覆盖；add_field 按调用顺序追加。
    build() 之后构建器关闭，再调用任何方法都会抛出 EmbedBuilderClosedError。

    Example:
        >>> embed = (
        ...     EmbedBuilder()
        ...     .title('部署完成')
        ...     .color(0x008000)
        ...     .add_field(name='版本', value='1.2.0')
        ...     .build()
        ... )

        >>> with EmbedBuilder() as e:
        ...     e.title('部署完成')
        >>> e.embed.title
        '部署完成'
    """

    def __init__(self):
        self._title: Optional[str] = None
        self._description: Optional[str] = None
        self._url: Optional[str] = None
        self._color: Optional[int] = None
        self._timestamp: Optional[datetime] = None
        self._thumbnail: Optional[EmbedThumbnail] = None
        self._image: Optional[EmbedImage] = None
        self._author: Optional[EmbedAuthor] = None
        self._footer: Optional[EmbedFooter] = None
        self._fields: List[EmbedField] = []
        self._embed: Optional[Embed] = None

    def __enter__(self) -> 'EmbedBuilder':
        self._ensure_open()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        # 块内出错时不生成 Embed，异常照常向上抛出
        if exc_type is None:
            self.build()

    @property
    def closed(self) -> bool:
        """构建器是否已生成 Embed。"""
        return self._embed is not None

    @property
    def embed(self) -> Embed:
        """
        已构建的 Embed（仅在 build() 或 with 块结束后可用）。

        Raises:
            RuntimeError: 尚未构建
        """
        if self._embed is None:
            raise RuntimeError('Embed has not been built yet')
        return self._embed

    def _ensure_open(self) -> None:
        if self._embed is not None:
            raise EmbedBuilderClosedError()

    def title(self, title: str) -> 'EmbedBuilder':
        """设置标题。"""
        self._ensure_open()
        self._title = title
        return self

    def description(self, description: str) -> 'EmbedBuilder':
        """设置描述。"""
        self._ensure_open()
        self._description = description
        return self

    def url(self, url: str) -> 'EmbedBuilder':
        """设置标题链接。"""
        self._ensure_open()
        self._url = url
        return self

    def color(self, color: int) -> 'EmbedBuilder':
        """
        设置颜色。

        Args:
            color: 24 位 RGB 整数，例如 0x008000

        Raises:
            EmbedValueError: 颜色不是 0x000000-0xFFFFFF 范围内的整数
        """
        self._ensure_open()
        self._color = validate_color(color)
        return self

    def timestamp(self, timestamp: datetime) -> 'EmbedBuilder':
        """设置时间戳（无时区时按 UTC 处理）。"""
        self._ensure_open()
        self._timestamp = timestamp
        return self

    def thumbnail(self, url: str) -> 'EmbedBuilder':
        """设置缩略图。"""
        self._ensure_open()
        self._thumbnail = EmbedThumbnail(url=url)
        return self

    def image(self, url: str) -> 'EmbedBuilder':
        """设置大图。"""
        self._ensure_open()
        self._image = EmbedImage(url=url)
        return self

    def author(
        self,
        name: str,
        url: Optional[str] = None,
        icon_url: Optional[str] = None
    ) -> 'EmbedBuilder':
        """
        设置作者信息。

        Args:
            name: 作者名称
            url: 作者链接（可选）
            icon_url: 作者图标（可选）
        """
        self._ensure_open()
        self._author = EmbedAuthor(name=name, url=url, icon_url=icon_url)
        return self

    def footer(
        self,
        text: str,
        icon_url: Optional[str] = None
    ) -> 'EmbedBuilder':
        """设置页脚。"""
        self._ensure_open()
        self._footer = EmbedFooter(text=text, icon_url=icon_url)
        return self

    def add_field(
        self,
        name: str,
        value: str,
        inline: Optional[bool] = None
    ) -> 'EmbedBuilder':
        """
        追加一个字段，保持调用顺序。

        Args:
            name: 字段名
            value: 字段值
            inline: 是否并排显示（可选，未指定时不输出）
        """
        self._ensure_open()
        self._fields.append(EmbedField(name=name, value=value, inline=inline))
        return self

    def build(self) -> Embed:
        """
        生成不可变的 Embed 并关闭构建器。

        Returns:
            Embed: 构建结果

        Raises:
            EmbedBuilderClosedError: 构建器已经生成过 Embed
        """
        self._ensure_open()
        self._embed = Embed(
            title=self._title,
            description=self._description,
            url=self._url,
            color=self._color,
            timestamp=self._timestamp,
            thumbnail=self._thumbnail,
            image=self._image,
            author=self._author,
            footer=self._footer,
            fields=tuple(self._fields)
        )
        logger.debug(f'🧱 构建 Embed: {len(self._fields)} 个字段')
        return self._embed


def build_embed(block: Callable[[EmbedBuilder], None]) -> Embed:
    """
    以代码块方式构建 Embed。

    Args:
        block: 接收全新 EmbedBuilder 的回调

    Returns:
        Embed: 回调执行完成后生成的 Embed

    Example:
        >>> def describe(e):
        ...     e.title('部署完成')
        ...     e.add_field(name='环境', value='production')
        >>> embed = build_embed(describe)
    """
    builder = EmbedBuilder()
    block(builder)
    return builder.build()
