""" Structured logging over RabbitMQ. A :class:`Logger` turns minimal log
    requests into complete, timestamped records and publishes them to a
    durable queue, where downstream services pick them up.
"""

__version__ = '0.3.0'

# Utility components.

from . import json
from . import log

# Submodules used by multiple other components.

from .errors import Error
from . import transport
from . import record
from . import orders

# Primary public-facing interfaces.

from .transport import RabbitMQ, connect
from .record import Level, LogRecord, LogRequest, SerializationError, ValidationError
from .orders import Order, OrderRelay
from .logger import Logger

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
