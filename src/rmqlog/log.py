""" Logging setup for applications embedding :mod:`rmqlog`. The library
    only ever creates module-level loggers; nothing here runs on import.
"""

import logging
import sys

log_format = '%(asctime)s - %(levelname)s - [PID:%(process)d] - %(name)s - %(message)s'


def setup(level=logging.INFO, stream=None):
    """ Install a single stream handler on the root logger, using a format
        that tags each line with the process ID. The *stream* defaults to
        stdout, which is what container log collectors expect. The pika
        logger is held to WARNING; at INFO it reports every frame.

        Calling this again does not add a second handler: the one already
        installed is returned, with its stream swapped if a different one
        was requested, and the root level updated.
    """

    if stream is None:
        stream = sys.stdout

    root = logging.getLogger()
    root.setLevel(level)
    logging.getLogger('pika').setLevel(logging.WARNING)

    for handler in root.handlers:
        if getattr(handler, '_rmqlog', False):
            if handler.stream is not stream:
                handler.setStream(stream)
            return handler

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(log_format))
    handler._rmqlog = True
    root.addHandler(handler)

    return handler


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
