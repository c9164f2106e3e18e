"""Game server transports."""

from torusbot.net.base import GameProtocolError, Transport
from torusbot.net.client import GameClient
from torusbot.net.scripted import ScriptedTransport

__all__ = [
    "GameClient",
    "GameProtocolError",
    "ScriptedTransport",
    "Transport",
]
