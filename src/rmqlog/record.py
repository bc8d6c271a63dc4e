""" Log record construction. A :class:`LogRequest` is the minimal, partly
    filled description a caller hands in; :func:`build` resolves it into a
    complete, validated :class:`LogRecord`, which is what goes on the wire
    as a JSON object.
"""

import dataclasses
import datetime
import enum

from . import json
from .errors import Error


class RecordError(Error):
    """ Base class for failures to turn a request into a record.
    """


class ValidationError(RecordError):
    """ A required field is missing or invalid. The *reason* attribute
        names the offending field: one of ``error_code``,
        ``client_message``, ``request_payload``, or ``error_level``; it is
        ``request`` when the request itself names fields that do not exist.
    """

    def __init__(self, reason, message):
        self.reason = reason
        RecordError.__init__(self, message)


class SerializationError(RecordError):
    """ The request payload could not be converted to text.
    """


class Level(str, enum.Enum):
    INFO = 'info'
    WARNING = 'warning'
    ERROR = 'error'
    CRITICAL = 'critical'


# Levels for which the originating request payload must be recorded.

payload_required = frozenset((Level.ERROR, Level.CRITICAL))

default_status = 200



class Payload:
    """ The request payload attached to a log record can be raw bytes,
        text, or any structured value that can be expressed as JSON.
        :func:`Payload.of` picks the matching variant exactly once; after
        that, :func:`text` is the only thing anyone needs to call.
    """

    def __init__(self, value):
        self.value = value


    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self.value)


    @staticmethod
    def of(value):
        if isinstance(value, Payload):
            return value
        if value is None:
            return TextPayload('')
        if isinstance(value, (bytes, bytearray, memoryview)):
            return BytesPayload(bytes(value))
        if isinstance(value, str):
            return TextPayload(value)

        return StructuredPayload(value)


    def text(self):
        raise NotImplementedError('subclasses must implement text()')


# end of class Payload



class BytesPayload(Payload):

    def text(self):
        return self.value.decode('utf-8', errors='replace')


class TextPayload(Payload):

    def text(self):
        return self.value


class StructuredPayload(Payload):
    """ Any value other than bytes or a string is serialized as JSON when
        the payload is created, so that an unserializable value fails
        before anything else is done with the request.
    """

    def __init__(self, value):
        Payload.__init__(self, value)

        try:
            encoded = json.dumps(value)
        except json.errors as e:
            raise SerializationError('cannot serialize request payload of type %s: %s' % (type(value).__name__, e)) from e

        self._text = encoded.decode('utf-8')


    def text(self):
        return self._text


# end of class StructuredPayload



@dataclasses.dataclass
class LogRequest:
    """ What the caller supplies. Everything not listed here (timestamp,
        level, function name) is filled in by :func:`build`; the
        endpoint and status code fall back to defaults when left empty.
    """

    error_code: int = 0
    client_message_uz: str = ''
    client_message_ru: str = ''
    error_message: str = ''
    details_uz: str = ''
    details_ru: str = ''
    api_endpoint: str = ''
    method: str = ''
    status_code: int = 0
    request_payload: object = None
    event_type: str = ''
    response_data: str = ''
    merchant_api_key: str = ''

    @classmethod
    def coerce(cls, request):
        """ Accept either a :class:`LogRequest` or a mapping of its fields.
        """

        if isinstance(request, cls):
            return request

        try:
            return cls(**request)
        except TypeError as e:
            raise ValidationError('request', 'not a valid log request: %s' % (e,)) from e



# Fields left out of the wire form when empty.

optional = ('details_uz', 'details_ru', 'response_data', 'merchant_api_key')


@dataclasses.dataclass(frozen=True)
class LogRecord:
    """ A fully resolved log record, immutable once built. The field names
        are the JSON keys used on the wire.
    """

    timestamp: datetime.datetime
    error_level: Level
    error_code: int
    client_message_uz: str
    client_message_ru: str
    error_message: str
    api_endpoint: str
    method: str
    function_name: str
    status_code: int
    request_payload: str
    event_type: str
    details_uz: str = ''
    details_ru: str = ''
    response_data: str = ''
    merchant_api_key: str = ''

    def to_dict(self):
        fields = dict()

        for field in dataclasses.fields(self):
            value = getattr(self, field.name)

            if field.name in optional and value == '':
                continue

            fields[field.name] = value

        fields['timestamp'] = self.timestamp.isoformat()
        fields['error_level'] = Level(self.error_level).value
        return fields


    def encode(self):
        """ Return the JSON encoding of this record, as bytes.
        """

        return json.dumps(self.to_dict())


    @classmethod
    def decode(cls, data):
        """ Parse a record previously produced by :func:`encode`.
        """

        fields = json.loads(data)

        for name in optional:
            fields.setdefault(name, '')

        fields['timestamp'] = datetime.datetime.fromisoformat(fields['timestamp'])
        fields['error_level'] = Level(fields['error_level'])
        return cls(**fields)


# end of class LogRecord



def build(request, level, default_endpoint, function_name, now=None):
    """ Turn a :class:`LogRequest` (or a mapping of its fields) into a
        validated :class:`LogRecord` at the given severity *level*. The
        *default_endpoint* is used when the request names no API endpoint;
        *function_name* is stamped into the record as-is. The timestamp is
        the current UTC time unless *now* is provided.

        Raises :class:`SerializationError` if the request payload cannot be
        converted to text, and :class:`ValidationError` if a required field
        is missing.
    """

    request = LogRequest.coerce(request)

    try:
        level = Level(level)
    except ValueError:
        raise ValidationError('error_level', 'invalid error level: %r' % (level,))

    try:
        error_code = int(request.error_code)
    except (TypeError, ValueError):
        raise ValidationError('error_code', 'error_code must be an integer: %r' % (request.error_code,))

    payload = Payload.of(request.request_payload).text()

    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)

    record = LogRecord(
        timestamp=now,
        error_level=level,
        error_code=error_code,
        client_message_uz=request.client_message_uz,
        client_message_ru=request.client_message_ru,
        error_message=request.error_message,
        details_uz=request.details_uz,
        details_ru=request.details_ru,
        api_endpoint=request.api_endpoint or default_endpoint,
        method=request.method,
        function_name=function_name,
        status_code=request.status_code or default_status,
        request_payload=payload,
        event_type=request.event_type,
        response_data=request.response_data,
        merchant_api_key=request.merchant_api_key,
    )

    validate(record)
    return record



def validate(record):
    """ Raise :class:`ValidationError` if *record* is missing a required
        field. The request payload is only required at the error and
        critical levels.
    """

    try:
        level = Level(record.error_level)
    except ValueError:
        raise ValidationError('error_level', 'invalid error level: %r' % (record.error_level,))

    if record.error_code == 0:
        raise ValidationError('error_code', 'error_code is required')

    if record.client_message_uz == '' and record.client_message_ru == '':
        raise ValidationError('client_message', 'at least one client message (uz or ru) is required')

    if level in payload_required and record.request_payload == '':
        raise ValidationError('request_payload', 'request payload is required for the %s level' % (level.value,))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
