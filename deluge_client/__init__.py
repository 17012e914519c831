"""
Deluge Client - Talk to Deluge's Web UI over JSON-RPC.

Provides a small synchronous client for logging in, adding magnet links,
listing torrents, reading file lists and removing torrents.
"""

from .client import DelugeClient
from .exceptions import (
    AuthenticationError,
    DelugeClientError,
    ResponseParseError,
    RpcError,
    TransportError,
)
from .models import Torrent

__version__ = "0.1.0"
__all__ = [
    "DelugeClient",
    "Torrent",
    "DelugeClientError",
    "TransportError",
    "ResponseParseError",
    "RpcError",
    "AuthenticationError",
]
