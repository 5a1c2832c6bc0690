from __future__ import annotations

import base64
import datetime
import decimal
import json
import uuid
from typing import Any


# Longer strings are not cursors we have generated
MAX_CURSOR_LENGTH = 4096


class CursorJSONEncoder(json.JSONEncoder):
    """ JSON encoder for cursor values: tags the types that JSON does not have

    Tagged values are single-key objects: `{"$dt": "2024-01-01T00:00:00"}`.
    Tuples are tagged too: JSON would turn them into lists.
    """

    def encode(self, o: Any) -> str:
        return super().encode(_tag_tuples(o))

    def default(self, o: Any) -> Any:
        # `datetime` is a `date`: check it first
        if isinstance(o, datetime.datetime):
            return {'$dt': o.isoformat()}
        elif isinstance(o, datetime.date):
            return {'$date': o.isoformat()}
        elif isinstance(o, datetime.time):
            return {'$time': o.isoformat()}
        elif isinstance(o, decimal.Decimal):
            return {'$dec': str(o)}
        elif isinstance(o, uuid.UUID):
            return {'$uuid': str(o)}
        else:
            return super().default(o)


# Tag => decoder
TAGGED_TYPES = {
    '$dt': datetime.datetime.fromisoformat,
    '$date': datetime.date.fromisoformat,
    '$time': datetime.time.fromisoformat,
    '$dec': decimal.Decimal,
    '$uuid': uuid.UUID,
    '$tuple': tuple,
}


def cursor_object_hook(obj: dict) -> Any:
    """ JSON object hook: restore tagged values """
    if len(obj) == 1:
        (tag, value), = obj.items()
        decoder = TAGGED_TYPES.get(tag)
        if decoder is not None:
            if tag == '$tuple':
                if not isinstance(value, list):
                    raise ValueError(f'Malformed cursor: bad "{tag}" value')
            elif not isinstance(value, str):
                raise ValueError(f'Malformed cursor: bad "{tag}" value')

            try:
                return decoder(value)
            except (ValueError, TypeError, ArithmeticError) as e:  # decimal.InvalidOperation is an ArithmeticError
                raise ValueError(f'Malformed cursor: bad "{tag}" value') from e
    return obj


def encode_opaque_cursor(prefix: str, data: dict) -> str:
    """ Encode a dict of data as an opaque cursor. Give it a nice prefix so that the user sees what's up """
    return prefix + ':' + base64.b85encode(json.dumps(data, cls=CursorJSONEncoder).encode()).decode()


def decode_opaque_cursor(expected_prefix: str, cursor: str) -> dict:
    """ Decode an opaque cursor into a data dict

    Raises:
        ValueError: all sorts of errors related to bad cursor
    """
    if len(cursor) > MAX_CURSOR_LENGTH:
        raise ValueError('Malformed cursor: too long')

    try:
        prefix, data_encoded = cursor.split(':', 1)
    except ValueError:
        raise ValueError(f'Malformed cursor: {cursor!r}')

    if prefix != expected_prefix:
        raise ValueError(f'Unexpected cursor type: {prefix!r}')

    try:
        data = json.loads(base64.b85decode(data_encoded), object_hook=cursor_object_hook)
    except RecursionError:
        raise ValueError('Malformed cursor: nested too deep')
    except (ValueError, TypeError) as e:  # binascii.Error, json.decoder.JSONDecodeError are ValueErrors
        if str(e).startswith('Malformed cursor: '):
            raise
        raise ValueError(f'Malformed cursor: {e}') from e

    if not isinstance(data, dict):
        raise ValueError('Malformed cursor: not an object')
    return data


def _tag_tuples(value: Any) -> Any:
    """ Replace tuples with tagged objects, recursively """
    if isinstance(value, tuple):
        return {'$tuple': [_tag_tuples(v) for v in value]}
    elif isinstance(value, list):
        return [_tag_tuples(v) for v in value]
    elif isinstance(value, dict):
        return {k: _tag_tuples(v) for k, v in value.items()}
    else:
        return value
