''' JSON encoding for log records, order payloads, and structured request
    payloads. The fastest installed library is used: msgspec, then orjson,
    then the standard library.

    :func:`dumps` always returns bytes, which is what goes into a message
    body. :data:`errors` is the tuple of exceptions the selected backend
    raises for a value it cannot encode.
'''

# Which backend is picked is settled once, at import time; the order
# above is fastest first, and only the winner is imported, so a slower
# library that happens to be installed is never loaded.

msgspec = None
orjson = None
json = None

try:
    import msgspec
except ImportError:
    pass

if msgspec is None:
    try:
        import orjson
    except ImportError:
        pass

if msgspec is None and orjson is None:
    import json


def _stdlib_dumps(value):
    return json.dumps(value, ensure_ascii=False).encode('utf-8')


errors = (TypeError, ValueError, OverflowError)

if msgspec is not None:
    encoder = msgspec.json.Encoder()
    decoder = msgspec.json.Decoder()
    dumps = encoder.encode
    loads = decoder.decode

    # Some unencodable values raise msgspec's own exception types.
    errors = errors + (msgspec.EncodeError, msgspec.DecodeError)

elif orjson is not None:
    dumps = orjson.dumps
    loads = orjson.loads
else:
    dumps = _stdlib_dumps
    loads = json.loads

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
