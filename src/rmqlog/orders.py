""" Order notifications. These are published as-is to their own queues,
    without the enrichment or validation applied to log records.
"""

import dataclasses
import typing

from . import json


@dataclasses.dataclass
class Order:
    """ A free-text order description for a merchant.
    """

    order_text: str = ''
    merchant_id: str = ''

    @classmethod
    def coerce(cls, order):
        if isinstance(order, cls):
            return order
        return cls(**order)


    def encode(self):
        return json.dumps(dataclasses.asdict(self))



@dataclasses.dataclass
class OrderRelay:
    """ A batch of order identifiers to be relayed to the CRM.
    """

    order_ids: typing.List[str] = dataclasses.field(default_factory=list)

    @classmethod
    def coerce(cls, batch):
        if isinstance(batch, cls):
            return batch
        return cls(order_ids=list(batch['order_ids']))


    def encode(self):
        return json.dumps(dataclasses.asdict(self))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
