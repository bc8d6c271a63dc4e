""" The :class:`Logger` is the user-facing half of rmqlog: one method per
    severity level, plus the two order notifications, each of which ends
    in a single publish on the transport it was given.
"""

import logging

from . import orders
from . import record
from .transport import PublishError

log = logging.getLogger(__name__)


class Logger:
    """ Publish log records to the *queue* on the given *transport*. The
        *function_name* is stamped into every record; the *api_endpoint* is
        used for any record whose request names no endpoint of its own.

        The log queue is declared when the :class:`Logger` is created, and
        a failure to declare it is raised from the constructor. The
        optional *order_queue* and *relay_queue* are not declared here; if
        they need declaring, that is up to the caller.

        Nothing is retried. Every method raises whatever went wrong,
        leaving it to the caller to decide whether a lost log record
        matters.
    """

    def __init__(self, transport, queue, function_name, api_endpoint, order_queue=None, relay_queue=None):

        if not queue:
            raise ValueError('a log queue name is required')
        if not function_name:
            raise ValueError('a function name is required')
        if not api_endpoint:
            raise ValueError('a default API endpoint is required')

        transport.declare_queue(queue, durable=True, auto_delete=True, exclusive=False, no_wait=False, arguments={})

        self.transport = transport
        self.queue = queue
        self.function_name = function_name
        self.api_endpoint = api_endpoint
        self.order_queue = order_queue or ''
        self.relay_queue = relay_queue or ''


    def __repr__(self):
        return '<Logger %s -> %s>' % (self.function_name, self.queue)


    def __enter__(self):
        return self


    def __exit__(self, *exc_info):
        self.close()


    def info(self, request):
        """ Publish an informational record. Returns the :class:`LogRecord`
            that was sent.
        """

        return self._log(request, record.Level.INFO)


    def warn(self, request):
        return self._log(request, record.Level.WARNING)

    warning = warn


    def error(self, request):
        """ Publish an error record; the request payload is required.
        """

        return self._log(request, record.Level.ERROR)


    def critical(self, request):
        """ Publish a critical record; the request payload is required.
        """

        return self._log(request, record.Level.CRITICAL)


    def _log(self, request, level):

        full = record.build(request, level, self.api_endpoint, self.function_name)
        self.transport.publish(self.queue, '', full.encode())
        return full


    def order_notification(self, order):
        """ Publish an :class:`rmqlog.orders.Order` (or a mapping with the
            same fields) to the order queue.
        """

        order = orders.Order.coerce(order)
        self._notify(self.order_queue, 'order', order.encode())


    def send_order_relay(self, batch):
        """ Publish an :class:`rmqlog.orders.OrderRelay` (or a mapping with
            an ``order_ids`` list) to the relay queue.
        """

        batch = orders.OrderRelay.coerce(batch)
        self._notify(self.relay_queue, 'order relay', batch.encode())


    def _notify(self, queue, description, body):

        if not queue:
            log.error('No %s queue configured; notification dropped', description)
            raise PublishError('no %s queue configured' % (description))

        self.transport.publish(queue, '', body)


    def close(self):
        """ Close the underlying transport. Any other component sharing
            that transport loses it too.
        """

        self.transport.close()


# end of class Logger


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
