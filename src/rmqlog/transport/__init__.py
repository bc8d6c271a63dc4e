"""Transport layer implementations."""

from .base import (
    CloseError,
    ConsumeError,
    DeclarationError,
    NotConnectedError,
    PublishError,
    State,
    Transport,
    TransportConnectionError,
    TransportError,
)
from .consumer import Consumer
from .rabbitmq import RabbitMQ, connect
