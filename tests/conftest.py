"""
Test configuration and fixtures for discord_notifier tests.

This module provides:
- Pytest fixtures for configuration stores and notifiers
- Builders for the embeds used across the test modules
- Mock objects for the HTTP transport
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tests.fixtures.test_data import (  # noqa: E402
    configure_defaults,
    describe_full_embed,
)


# ==================== Configuration Fixtures ====================

@pytest.fixture
def config_store():
    """Empty configuration store."""
    from discord_notifier.core.config import ConfigStore
    return ConfigStore()


@pytest.fixture
def configured_store(config_store):
    """Configuration store with the default test settings applied."""
    config_store.setup(configure_defaults)
    return config_store


# ==================== Embed Fixtures ====================

@pytest.fixture
def full_embed():
    """Embed with every attribute set."""
    from discord_notifier.infrastructure.notification.discord.embed_builder import (
        build_embed
    )
    return build_embed(describe_full_embed)


# ==================== Mock Fixtures ====================

@pytest.fixture
def mock_transport():
    """Mock HTTP transport that reports successful delivery."""
    from discord_notifier.core.interfaces.transport import ITransport

    mock = MagicMock(spec=ITransport)
    mock.post.return_value = True
    return mock


@pytest.fixture
def notifier(mock_transport, configured_store):
    """DiscordNotifier using a mock transport and the default settings."""
    from discord_notifier.infrastructure.notification.discord.discord_notifier import (
        DiscordNotifier
    )
    return DiscordNotifier(transport=mock_transport, config_store=configured_store)


@pytest.fixture
def global_notifier(mock_transport):
    """
    Module-level API backed by a mock transport.

    The global configuration is cleared afterwards.
    """
    import discord_notifier

    container = discord_notifier.container
    container.config_store().reset()
    container.notifier.reset()
    with container.transport.override(mock_transport):
        yield discord_notifier
    container.notifier.reset()
    container.config_store().reset()
