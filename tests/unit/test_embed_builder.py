"""
Tests for the embed model and the embed builder.

Tests declarative construction, field ordering, omission of absent
attributes, and immutability after build.
"""

import dataclasses
from datetime import datetime, timezone

import pytest

from tests.fixtures.test_data import EMBED_CONFIG, EXPECTED_FULL_EMBED


class TestEmbedBuilder:
    """Tests for EmbedBuilder."""

    def test_full_embed_serialization(self, full_embed):
        """Test every attribute is serialized in the webhook shape."""
        assert full_embed.to_dict() == EXPECTED_FULL_EMBED

    def test_partial_embed_omits_absent_keys(self):
        """Test an embed with title/description/url has exactly those keys."""
        from discord_notifier.infrastructure.notification.discord.embed_builder import (
            EmbedBuilder
        )

        embed = (
            EmbedBuilder()
            .title(EMBED_CONFIG['title'])
            .description(EMBED_CONFIG['description'])
            .url(EMBED_CONFIG['url'])
            .build()
        )

        assert set(embed.to_dict()) == {'title', 'description', 'url'}

    def test_empty_embed_has_no_fields_key(self):
        """Test an embed without add_field calls omits 'fields'."""
        from discord_notifier.infrastructure.notification.discord.embed_builder import (
            EmbedBuilder
        )

        embed = EmbedBuilder().title('Only title').build()

        assert 'fields' not in embed.to_dict()
        assert embed.fields == ()

    def test_fields_keep_call_order(self):
        """Test add_field calls are serialized in call order."""
        from discord_notifier.infrastructure.notification.discord.embed_builder import (
            build_embed
        )

        def block(e):
            e.add_field(name='B', value='second-name-first-call')
            e.add_field(name='A', value='first-name-second-call')
            e.add_field(name='C', value='third')

        embed = build_embed(block)

        assert [f['name'] for f in embed.to_dict()['fields']] == ['B', 'A', 'C']

    def test_setters_are_last_write_wins(self):
        """Test repeated setters keep the last value."""
        from discord_notifier.infrastructure.notification.discord.embed_builder import (
            EmbedBuilder
        )

        embed = (
            EmbedBuilder()
            .title('first')
            .title('second')
            .author(name='Old')
            .author(name='New', url='http://new.example')
            .build()
        )

        assert embed.title == 'second'
        assert embed.to_dict()['author'] == {
            'name': 'New',
            'url': 'http://new.example'
        }

    def test_color_serialized_as_integer(self):
        """Test color stays a raw integer."""
        from discord_notifier.infrastructure.notification.discord.embed_builder import (
            EmbedBuilder
        )

        embed = EmbedBuilder().color(0xFF0000).build()

        assert embed.to_dict()['color'] == 16711680

    @pytest.mark.parametrize('color', [-1, 0x1000000, '0x008000', True])
    def test_invalid_color_rejected(self, color):
        """Test colors outside the 24-bit range or of the wrong type."""
        from discord_notifier.core.exceptions import EmbedValueError
        from discord_notifier.infrastructure.notification.discord.embed_builder import (
            EmbedBuilder
        )

        with pytest.raises(EmbedValueError):
            EmbedBuilder().color(color)

    def test_optional_nested_keys(self):
        """Test icon URLs, inline flags, image and timestamp."""
        from discord_notifier.infrastructure.notification.discord.embed_builder import (
            EmbedBuilder
        )

        embed = (
            EmbedBuilder()
            .author(name='Bot', icon_url='http://icon.example/a.png')
            .footer(text='footer', icon_url='http://icon.example/f.png')
            .image(url='http://image.example/big.png')
            .timestamp(datetime(2024, 1, 2, 3, 4, 5))
            .add_field(name='Inline', value='yes', inline=True)
            .add_field(name='Plain', value='no')
            .build()
        )
        data = embed.to_dict()

        assert data['author'] == {
            'name': 'Bot',
            'icon_url': 'http://icon.example/a.png'
        }
        assert data['footer'] == {
            'text': 'footer',
            'icon_url': 'http://icon.example/f.png'
        }
        assert data['image'] == {'url': 'http://image.example/big.png'}
        assert data['timestamp'] == '2024-01-02T03:04:05+00:00'
        assert data['fields'] == [
            {'name': 'Inline', 'value': 'yes', 'inline': True},
            {'name': 'Plain', 'value': 'no'}
        ]

    def test_aware_timestamp_keeps_offset(self):
        """Test timezone-aware timestamps are serialized unchanged."""
        from discord_notifier.infrastructure.notification.discord.embed_builder import (
            EmbedBuilder
        )

        moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        embed = EmbedBuilder().timestamp(moment).build()

        assert embed.to_dict()['timestamp'] == moment.isoformat()


class TestEmbedBuilderLifecycle:
    """Tests for builder closing and embed immutability."""

    def test_setter_after_build_raises(self):
        """Test no operation is accepted after build()."""
        from discord_notifier.core.exceptions import EmbedBuilderClosedError
        from discord_notifier.infrastructure.notification.discord.embed_builder import (
            EmbedBuilder
        )

        builder = EmbedBuilder()
        builder.title('done').build()

        assert builder.closed
        with pytest.raises(EmbedBuilderClosedError):
            builder.add_field(name='late', value='field')
        with pytest.raises(EmbedBuilderClosedError):
            builder.build()

    def test_block_builder_cannot_be_reused(self):
        """Test a builder leaked from a block is closed after the block."""
        from discord_notifier.core.exceptions import EmbedBuilderClosedError
        from discord_notifier.infrastructure.notification.discord.embed_builder import (
            build_embed
        )

        leaked = []
        build_embed(leaked.append)

        with pytest.raises(EmbedBuilderClosedError):
            leaked[0].title('too late')

    def test_context_manager(self):
        """Test the with-statement form builds on exit."""
        from discord_notifier.infrastructure.notification.discord.embed_builder import (
            EmbedBuilder
        )

        with EmbedBuilder() as e:
            e.title('Context')
            e.add_field(name='k', value='v')

        assert e.embed.to_dict() == {
            'title': 'Context',
            'fields': [{'name': 'k', 'value': 'v'}]
        }

    def test_context_manager_error_skips_build(self):
        """Test an exception inside the with block leaves nothing built."""
        from discord_notifier.infrastructure.notification.discord.embed_builder import (
            EmbedBuilder
        )

        builder = EmbedBuilder()
        with pytest.raises(KeyError):
            with builder as e:
                e.title('broken')
                raise KeyError('boom')

        assert not builder.closed
        with pytest.raises(RuntimeError):
            builder.embed

    def test_embed_is_frozen(self, full_embed):
        """Test the built embed cannot be modified."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            full_embed.title = 'changed'
        assert isinstance(full_embed.fields, tuple)

    def test_build_embed_exported_at_package_level(self):
        """Test the block helper is available from the package root."""
        import discord_notifier

        embed = discord_notifier.build_embed(lambda e: e.title('Block').color(0x008000))

        assert isinstance(embed, discord_notifier.Embed)
        assert embed.to_dict() == {'title': 'Block', 'color': 0x008000}
