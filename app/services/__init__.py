"""
Services package.

This package provides the datagram socket client and its socket factories.
"""

from .datagram import (
    DatagramClientError,
    DatagramSocketClient,
    DatagramSocketFactory,
    DefaultDatagramSocketFactory,
)

__all__ = [
    'DatagramClientError',
    'DatagramSocketClient',
    'DatagramSocketFactory',
    'DefaultDatagramSocketFactory',
]
