"""Decoder for the params object of get5 match plugin events.

get5 logs its events as ``get5_event: {...}``.  The outer line is matched by
a recognizer in logparser; the params object is a second grammar and is
decoded here with the json module.
"""
import json

from logevents import Get5EventParams

INT_FIELDS = ('map_number', 'team1_score', 'team1_series_score',
              'team2_score', 'team2_series_score', 'headshot', 'reason',
              'site')


def decode_params(text):
    """Decode a params JSON object into Get5EventParams.

    Missing keys keep their zero value and unknown keys are ignored.
    Raises ValueError when text is not a JSON object or a known key holds
    a value of the wrong type.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError('params is a %s, not an object' % type(data).__name__)

    fields = {}
    for name in Get5EventParams._fields:
        if name not in data or data[name] is None:
            continue
        value = data[name]
        if name in INT_FIELDS:
            # bool is an int subclass but not a number here
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError('%s must be an integer, got %r' % (name, value))
        elif not isinstance(value, str):
            raise ValueError('%s must be a string, got %r' % (name, value))
        fields[name] = value
    return Get5EventParams(**fields)
