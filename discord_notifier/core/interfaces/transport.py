"""
Transport interface module.

Contains the abstract contract for delivering a serialized payload over HTTP.
"""

from abc import ABC, abstractmethod
from typing import Mapping


class ITransport(ABC):
    """
    HTTP delivery contract.

    Implementations perform a single POST and report whether the remote
    endpoint accepted the payload. Network failures are raised as
    ``TransportError``; the response body is never inspected.
    """

    @abstractmethod
    def post(self, uri: str, body: str, headers: Mapping[str, str]) -> bool:
        """
        POST ``body`` to ``uri``.

        Args:
            uri: Fully resolved endpoint URI.
            body: JSON-encoded payload.
            headers: Request headers.

        Returns:
            True if the payload was delivered, False otherwise.
        """
        pass
