"""
Interfaces module.

Contains abstract base classes defining the contracts for external
collaborators.
"""

from discord_notifier.core.interfaces.transport import ITransport

__all__ = [
    'ITransport',
]
