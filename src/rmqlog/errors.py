"""Root of the rmqlog exception hierarchy."""


class Error(Exception):
    """Base class for every exception raised by rmqlog."""
