"""Transports — HTTP (request/response) and WebSocket (request/response + push)."""

from zksync_client.transport.base import Subscription, Transport
from zksync_client.transport.http import HTTPTransport
from zksync_client.transport.ws import WSTransport

__all__ = ["HTTPTransport", "Subscription", "Transport", "WSTransport"]
