"""
Configuration module.

Contains the Pydantic-based connection configuration, the process-wide
configuration store and the environment/JSON settings loader.
"""

import json
import logging
import os
import threading
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class NotifierConfig(BaseModel):
    """Webhook connection defaults. Every field is absent until set."""

    model_config = ConfigDict(validate_assignment=True)

    url: Optional[str] = None
    username: Optional[str] = None
    avatar_url: Optional[str] = None
    wait: Optional[bool] = None


class ConfigStore:
    """
    Holder of the default connection configuration.

    The configuration is only changed through ``setup``. The mutator works on
    a copy which is committed once it returns, so concurrent readers see
    either the previous or the new configuration, never a mix of both.

    Example:
        >>> store = ConfigStore()
        >>> def configure(config):
        ...     config.url = 'https://discord.com/api/webhooks/1/abc'
        ...     config.username = 'Deploy Bot'
        >>> store.setup(configure)
        >>> store.snapshot().username
        'Deploy Bot'
    """

    def __init__(self, config: Optional[NotifierConfig] = None):
        # Reentrant: a mutator may read the store while setup holds the lock
        self._lock = threading.RLock()
        self._config = config.model_copy() if config else NotifierConfig()

    def setup(self, mutator: Callable[[NotifierConfig], None]) -> None:
        """
        Apply a mutator to the stored configuration.

        Fields the mutator leaves alone keep their values; assigning ``None``
        clears a field. If the mutator raises, nothing is committed.

        Args:
            mutator: Callable receiving a mutable configuration.
        """
        with self._lock:
            draft = self._config.model_copy()
            mutator(draft)
            changed = [
                name for name in NotifierConfig.model_fields
                if getattr(draft, name) != getattr(self._config, name)
            ]
            self._config = draft.model_copy()

        if changed:
            logger.info(f'🔧 Webhook configuration updated: {", ".join(changed)}')

    def snapshot(self) -> NotifierConfig:
        """Return a detached copy of the current configuration."""
        with self._lock:
            return self._config.model_copy()

    def reset(self) -> None:
        """Clear every field."""
        with self._lock:
            self._config = NotifierConfig()


class NotifierSettings(BaseSettings):
    """
    Settings loaded from the environment or a JSON file.

    Environment variables use the ``DISCORD_NOTIFIER_`` prefix, e.g.
    ``DISCORD_NOTIFIER_URL`` or ``DISCORD_NOTIFIER_WAIT=true``.
    """

    url: Optional[str] = None
    username: Optional[str] = None
    avatar_url: Optional[str] = None
    wait: Optional[bool] = None
    # Transport timeout in seconds
    timeout: int = Field(default=10, ge=1, le=120)

    model_config = SettingsConfigDict(
        env_prefix='DISCORD_NOTIFIER_',
        extra='ignore'
    )

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> 'NotifierSettings':
        """
        Load settings from a JSON file, falling back to the environment.

        Keys the notifier does not know are ignored, so the file may be shared
        with the host application.
        """
        if config_path is None:
            config_path = os.getenv(
                'DISCORD_NOTIFIER_CONFIG_PATH', 'discord_notifier.json'
            )

        if os.path.exists(config_path):
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = json.load(f)
            logger.debug(f'📄 Loaded notifier settings from {config_path}')
            return cls(**config_data)

        return cls()

    def to_config(self) -> NotifierConfig:
        """Return the connection part of the settings."""
        return NotifierConfig(
            url=self.url,
            username=self.username,
            avatar_url=self.avatar_url,
            wait=self.wait
        )

    def apply(self, store: ConfigStore) -> None:
        """Push every value that is set into ``store``."""
        values = self.to_config().model_dump(exclude_none=True)

        def _mutate(config: NotifierConfig) -> None:
            for key, value in values.items():
                setattr(config, key, value)

        store.setup(_mutate)
