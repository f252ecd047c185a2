# -*- coding:utf-8 -*-

import datetime
from .errors import PushIDError, TimestampOverflowError, \
    LengthInvariantError, SuffixOverflowError, InvalidPushIDError
from .generator import PushID, PUSH_CHARS, PUSHID_LENGTH, TIMESTAMP_LENGTH, \
    encode_timestamp, increment


__version = (0, 1, 0)
__version__ = version = '.'.join(map(str, __version))

'''
Push ID: 20 chars, sorts lexicographically by creation time.

    | 8 chars timestamp (ms, UTC) | 12 chars random |

Two ids made in the same millisecond by one generator share the
timestamp chars, and the second one's random chars are the first
one's plus one.
'''

__all__ = [
    'PushID', 'PUSH_CHARS', 'generate', 'timestamp_of', 'datetime_of',
    'is_valid', 'encode_timestamp', 'increment', 'PushIDError',
    'TimestampOverflowError', 'LengthInvariantError', 'SuffixOverflowError',
    'InvalidPushIDError',
]

_CHAR_INDEX = {c: i for i, c in enumerate(PUSH_CHARS)}
_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

_default = PushID()


def generate():
    return _default.next()


def is_valid(pushid):
    return (isinstance(pushid, str) and len(pushid) == PUSHID_LENGTH and
            all(c in _CHAR_INDEX for c in pushid))


def timestamp_of(pushid):
    """Milliseconds since the epoch encoded in the first 8 chars."""
    if not is_valid(pushid):
        raise InvalidPushIDError(pushid)

    timestamp = 0
    for c in pushid[:TIMESTAMP_LENGTH]:
        timestamp = timestamp * len(PUSH_CHARS) + _CHAR_INDEX[c]

    return timestamp


def datetime_of(pushid):
    return _EPOCH + datetime.timedelta(milliseconds=timestamp_of(pushid))
