"""Transport interface.

This is the (small) contract that transport implementations should follow.
The logger facade only ever talks to a :class:`Transport`, never to a
broker client library directly.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Union

from ..errors import Error


# Transport agnostic exceptions

class TransportError(Error):
    """Base class for all transport-layer errors."""


class TransportConnectionError(TransportError):
    """The broker is unreachable, or rejected the credentials."""


class DeclarationError(TransportError):
    """A queue could not be declared: conflicting properties, or a closed channel."""


class PublishError(TransportError):
    """A message could not be handed to the broker client."""


class ConsumeError(TransportError):
    """A consumer could not be registered with, or cancelled on, the broker."""


class NotConnectedError(TransportError):
    """An operation was attempted outside the connected state."""


class CloseError(TransportError):
    """Releasing the channel and/or the connection failed."""

    def __init__(self, errors: List[BaseException]):
        self.errors = list(errors)
        text = '; '.join(repr(error) for error in self.errors)
        super().__init__(f"close failed: {text}")


class State(enum.Enum):
    UNCONNECTED = "unconnected"
    CONNECTED = "connected"
    CLOSED = "closed"


Handler = Callable[[bytes], Any]
Body = Union[bytes, str]


class Transport(ABC):
    """Minimal contract for a broker transport.

    A transport moves from ``UNCONNECTED`` to ``CONNECTED`` via
    :meth:`open`, and from ``CONNECTED`` to ``CLOSED`` via :meth:`close`.
    Neither transition can be reversed; reconnecting means constructing a
    new transport.
    """

    state = State.UNCONNECTED

    @abstractmethod
    def open(self) -> None:
        """Establish the connection and its single channel."""

    @abstractmethod
    def close(self) -> None:
        """Release the channel, then the connection."""

    @abstractmethod
    def declare_queue(
        self,
        name: str,
        durable: bool = True,
        auto_delete: bool = False,
        exclusive: bool = False,
        no_wait: bool = False,
        arguments: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Idempotently ensure a queue exists with the given properties."""

    @abstractmethod
    def publish(self, queue: str, exchange: str, body: Body) -> None:
        """Send *body* to *exchange* with *queue* as the routing key."""

    @abstractmethod
    def consume(self, queue: str, handler: Handler):
        """Subscribe to *queue*, invoking *handler* with each message body."""

    @property
    def is_open(self) -> bool:
        """Whether the transport is currently connected."""
        return self.state is State.CONNECTED

    def _require_open(self, operation: str) -> None:
        if self.state is not State.CONNECTED:
            raise NotConnectedError(f"{operation}: transport is {self.state.value}")

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
