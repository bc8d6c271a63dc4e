"""Background consume loop.

A :class:`Consumer` is created by a transport's ``consume()`` method. The
broker acknowledges each delivery as soon as the transport receives it,
before the handler runs; a handler failure therefore loses the message
(at-most-once delivery).
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import Optional

from .base import Handler

logger = logging.getLogger(__name__)


class Consumer:
    """Invoke a handler for each message body received on one queue.

    A single daemon thread alternates between pumping broker I/O through
    the owning transport and handing received bodies to the handler, one
    at a time, in delivery order. The handler never runs while the
    transport lock is held, so it may itself publish through the same
    transport.
    """

    poll_interval = 0.1

    def __init__(self, transport, queue_name: str, handler: Handler, poll_interval: Optional[float] = None):
        self.transport = transport
        self.queue = queue_name
        self.handler = handler
        self.consumer_tag: Optional[str] = None

        if poll_interval is not None:
            self.poll_interval = float(poll_interval)

        self._inbox: queue.Queue = queue.Queue()
        self._stopping = threading.Event()
        self.thread = threading.Thread(target=self.run, name=f"rmqlog-consume-{queue_name}")
        self.thread.daemon = True

    def start(self, consumer_tag: str) -> None:
        self.consumer_tag = consumer_tag
        self.thread.start()
        logger.info("Consuming from %s (tag %s)", self.queue, consumer_tag)

    def cancel(self) -> None:
        """Stop the consume loop and cancel the broker-side consumer, if
        the transport is still open."""

        if self._stopping.is_set():
            return

        self._stopping.set()
        self.transport._cancel(self)

    def join(self, timeout: Optional[float] = None) -> None:
        if self.thread.is_alive() and self.thread is not threading.current_thread():
            self.thread.join(timeout)

    def is_alive(self) -> bool:
        return self.thread.is_alive()

    def _stop(self) -> None:
        """Stop the loop without talking to the broker; used by the
        transport while it is closing."""

        self._stopping.set()

    def _on_message(self, _channel, _method, _properties, body: bytes) -> None:
        self._inbox.put(body)

    def run(self) -> None:
        while not self._stopping.is_set():
            try:
                alive = self.transport._pump()
            except Exception:
                logger.exception("Consumer for %s lost its connection", self.queue)
                break

            if not alive:
                break

            if self._drain() == 0:
                self._stopping.wait(self.poll_interval)

        # Anything already received was acknowledged on receipt; hand it
        # over rather than drop it on the floor.
        self._drain()
        logger.info("Stopped consuming from %s", self.queue)

    def _drain(self) -> int:
        count = 0

        while True:
            try:
                body = self._inbox.get_nowait()
            except queue.Empty:
                break

            count += 1
            logger.debug("Received message on %s: %d bytes", self.queue, len(body))

            try:
                self.handler(body)
            except Exception:
                logger.exception("Handler failed for a message from %s; message dropped", self.queue)

        return count
