"""
Datagram socket client with a pluggable socket factory.

This module provides the basic open/close lifecycle shared by UDP-based
clients. Sockets are always obtained from a DatagramSocketFactory, so
callers can substitute their own socket creation (proxies, test doubles)
without touching client code.
"""

import logging
import socket
from abc import ABC, abstractmethod
from typing import Optional, Tuple
from config.settings import Settings

logger = logging.getLogger(__name__)

Address = Tuple[str, int]


class DatagramClientError(RuntimeError):
    """Raised when a datagram operation needs an open socket and there is none."""


class DatagramSocketFactory(ABC):
    """Creates the sockets used by DatagramSocketClient."""

    @abstractmethod
    def create_datagram_socket(self, host: Optional[str] = None, port: Optional[int] = None) -> socket.socket:
        """
        Create a datagram socket.

        Without arguments the socket is bound on the local host at the first
        available port. With host and port it is attached to that endpoint.
        """


class DefaultDatagramSocketFactory(DatagramSocketFactory):
    """
    UDP socket factory backed by the standard socket module.

    Example:
        >>> factory = DefaultDatagramSocketFactory()
        >>> sock = factory.create_datagram_socket("time.example.org", 123)
        >>> sock.getpeername()
        ('203.0.113.5', 123)
    """

    def create_datagram_socket(self, host: Optional[str] = None, port: Optional[int] = None) -> socket.socket:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            if host is None:
                sock.bind(("", 0))
            else:
                sock.connect((host, port))
        except OSError:
            sock.close()
            raise
        return sock


class DatagramSocketClient:
    """
    Base class for clients talking over a single datagram socket.

    Handles opening and closing the socket, the default timeout and the
    charset used for text payloads. Subclasses should reach the socket
    through `datagram_socket` rather than creating their own.

    Attributes:
        default_timeout (float | None): Timeout in seconds applied on open,
            None for blocking sockets
        charset_name (str): Encoding used by send_text/receive_text

    Example:
        >>> with DatagramSocketClient() as client:
        ...     client.open("127.0.0.1", 9999)
        ...     client.send_text("ping")
        # Socket closed when the block exits

    Note:
        - close() is safe to call repeatedly or before open()
        - Call close() before calling open() again, otherwise the previous
          socket is closed for you
    """

    def __init__(self, factory: Optional[DatagramSocketFactory] = None) -> None:
        self._socket: Optional[socket.socket] = None
        self._is_open = False
        self._socket_factory = factory or DefaultDatagramSocketFactory()
        self._charset_name = Settings.CHARSET_NAME
        self.default_timeout = Settings.DATAGRAM_TIMEOUT

    @property
    def datagram_socket(self) -> Optional[socket.socket]:
        """The currently open socket, or None."""
        return self._socket

    @property
    def socket_factory(self) -> DatagramSocketFactory:
        return self._socket_factory

    @property
    def charset_name(self) -> str:
        return self._charset_name

    @charset_name.setter
    def charset_name(self, charset_name: str) -> None:
        self._charset_name = charset_name

    def open(self, host: Optional[str] = None, port: Optional[int] = None) -> None:
        """
        Open a datagram socket through the configured factory.

        Without arguments the socket is bound on the local host at the first
        available port; with host and port it is connected to that endpoint.

        Args:
            host: Remote host to attach the socket to
            port: Remote port to attach the socket to

        Returns:
            None

        Raises:
            ValueError: If only one of host and port is given
            OSError: If the socket cannot be created or configured
        """
        if (host is None) != (port is None):
            raise ValueError("host and port must be given together")

        if self._socket is not None:
            logger.warning("Datagram socket already open, closing it before reopening")
            self.close()

        try:
            if host is None:
                sock = self._socket_factory.create_datagram_socket()
            else:
                sock = self._socket_factory.create_datagram_socket(host, port)
        except OSError as e:
            logger.error(f"Failed to open datagram socket ({host or 'local'}:{port or 0}): {e}")
            raise

        try:
            sock.settimeout(self.default_timeout)
        except OSError as e:
            logger.error(f"Failed to set datagram socket timeout: {e}")
            sock.close()
            raise

        self._socket = sock
        self._is_open = True
        logger.debug(f"Datagram socket opened ({host or 'local'}:{port or 0})")

    def close(self) -> None:
        """
        Close the socket used by the client.

        Safe to call when nothing is open. The client is marked closed even
        if the underlying close fails; the failure is logged.
        """
        if self._socket is not None:
            try:
                self._socket.close()
                logger.debug("Datagram socket closed")
            except OSError as e:
                logger.error(f"Error closing datagram socket: {e}")
            finally:
                self._socket = None
        self._is_open = False

    def is_open(self) -> bool:
        """Return True if the client currently holds an open socket."""
        return self._is_open

    def set_datagram_socket_factory(self, factory: Optional[DatagramSocketFactory]) -> None:
        """
        Set the factory used for future open() calls.

        Passing None restores the default UDP factory.
        """
        self._socket_factory = factory or DefaultDatagramSocketFactory()

    def _require_socket(self) -> socket.socket:
        if self._socket is None:
            raise DatagramClientError("Datagram socket is not open. Call open() first.")
        return self._socket

    def send(self, data: bytes, address: Optional[Address] = None) -> int:
        """
        Send one datagram.

        Args:
            data: Payload bytes
            address: Destination (host, port); omit for a connected socket

        Returns:
            Number of bytes sent
        """
        sock = self._require_socket()
        if address is None:
            return sock.send(data)
        return sock.sendto(data, address)

    def receive(self, size: int) -> Tuple[bytes, Address]:
        """
        Receive one datagram of at most `size` bytes.

        Returns:
            Tuple of payload bytes and sender address

        Raises:
            DatagramClientError: If the client is not open
            socket.timeout: If default_timeout elapses first
        """
        return self._require_socket().recvfrom(size)

    def send_text(self, text: str, address: Optional[Address] = None) -> int:
        return self.send(text.encode(self._charset_name), address)

    def receive_text(self, size: int) -> Tuple[str, Address]:
        data, sender = self.receive(size)
        return data.decode(self._charset_name), sender

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
