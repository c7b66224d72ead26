"""JSON form of events.

The output is meant for logs and storage, so nothing is escaped beyond what
JSON requires: player names keep their <, > and & as well as non-ASCII
characters.
"""
from datetime import datetime
import json

from logevents import EVENT_TYPES, Get5EventParams

# get5 params that are written even when empty
GET5_ALWAYS = ('victim', 'attacker')


def _plain(value):
    if isinstance(value, Get5EventParams):
        defaults = Get5EventParams()
        return dict((k, v) for k, v, d in zip(value._fields, value, defaults)
                    if v != d or k in GET5_ALWAYS)
    if hasattr(value, '_asdict'):
        return dict(value._asdict())
    return value


def to_dict(event):
    """Plain dict of an event: time, type and then its fields in order."""
    data = {'time': event.time.isoformat(), 'type': event.type}
    for name, value in zip(event._fields[1:], event[1:]):
        data[name] = _plain(value)
    return data


def to_text(event):
    return json.dumps(to_dict(event), ensure_ascii=False,
                      separators=(',', ':'))


def from_dict(data):
    """Rebuild an event from the output of to_dict.

    Raises ValueError for an unknown type or a missing field.
    """
    if not isinstance(data, dict):
        raise ValueError('Expected an object, got %s' % type(data).__name__)
    try:
        cls = EVENT_TYPES[data['type']]
    except (KeyError, TypeError):
        raise ValueError('Unknown event type %r' % data.get('type'))
    values = [datetime.fromisoformat(data['time'])]
    for name in cls._fields[1:]:
        if name not in data:
            raise ValueError('%s is missing %r' % (cls.__name__, name))
        value = data[name]
        if name in cls.nested:
            value = cls.nested[name](**value)
        values.append(value)
    return cls(*values)


def from_text(text):
    return from_dict(json.loads(text))
