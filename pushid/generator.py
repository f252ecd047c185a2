# -*- coding:utf-8 -*-

import math
import time
import random
import logging
import threading

from .errors import TimestampOverflowError, LengthInvariantError, \
    SuffixOverflowError

# +---------------------------+-------------------------------+
# |         timestamp         |            random             |
# |  48 bits : 8 chars (ms)   |  72 bits : 12 chars           |
# +---------------------------+-------------------------------+

# Modeled after base64 web-safe chars, but ordered by ASCII.
PUSH_CHARS = '-0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz'

TIMESTAMP_LENGTH = 8
SUFFIX_LENGTH = 12
PUSHID_LENGTH = TIMESTAMP_LENGTH + SUFFIX_LENGTH

BASE = len(PUSH_CHARS)
MAX_DIGIT = BASE - 1

# How many times to sleep for a millisecond before giving up on an
# exhausted suffix.
MAX_CLOCK_WAITS = 10

logger = logging.getLogger('pushid')


def now_millis():
    return int(time.time() * 1000)


def encode_timestamp(timestamp):
    """Encode milliseconds into 8 chars, most significant first."""
    if timestamp < 0:
        logger.error("Timestamp {0} is negative".format(timestamp))
        raise TimestampOverflowError(timestamp)

    chars = [''] * TIMESTAMP_LENGTH
    remaining = timestamp

    for i in range(TIMESTAMP_LENGTH - 1, -1, -1):
        remaining, digit = divmod(remaining, BASE)
        chars[i] = PUSH_CHARS[digit]

    if remaining != 0:
        logger.error(
            "Timestamp {0} does not fit in {1} chars".format(
                timestamp, TIMESTAMP_LENGTH)
        )
        raise TimestampOverflowError(timestamp)

    return ''.join(chars)


def increment(suffix):
    """
    Add one to the suffix as a base-64 number, index 0 most significant.

    Returns a new list, or None when every digit is already at the maximum.
    """
    result = list(suffix)
    i = len(result) - 1

    while i >= 0 and result[i] == MAX_DIGIT:
        result[i] = 0
        i -= 1

    if i < 0:
        return None

    result[i] += 1
    return result


class PushID:
    def __init__(self, clock=None, rand=None, lock=None, sleep=None):
        self._clock = now_millis if clock is None else clock
        self._rand = random.Random() if rand is None else rand
        self._lock = threading.Lock() if lock is None else lock
        self._sleep = time.sleep if sleep is None else sleep
        self.lasttime = None
        self.lastrand = [0] * SUFFIX_LENGTH

    def random_suffix(self):
        return [int(math.floor(self._rand.random() * BASE))
                for _ in range(SUFFIX_LENGTH)]

    def _wait_next_millis(self, lasttime):
        for _ in range(MAX_CLOCK_WAITS):
            self._sleep(1.0 / 1000.0)
            now = self._clock()
            if now != lasttime:
                return now

        logger.error(
            "Random suffix exhausted at {0} and clock did not advance".format(
                lasttime)
        )
        raise SuffixOverflowError(lasttime)

    def next(self):
        with self._lock:
            now = self._clock()
            suffix = None

            if now == self.lasttime:
                suffix = increment(self.lastrand)

                if suffix is None:
                    logger.warning(
                        "Random suffix exhausted at {0}, "
                        "waiting for next millisecond".format(now)
                    )
                    now = self._wait_next_millis(now)

            timestamp = encode_timestamp(now)

            if suffix is None:
                suffix = self.random_suffix()

            pushid = timestamp + ''.join(PUSH_CHARS[c] for c in suffix)

            if len(pushid) != PUSHID_LENGTH:
                logger.error(
                    "Push ID {0!r} has length {1}".format(pushid, len(pushid))
                )
                raise LengthInvariantError(len(pushid))

            self.lasttime = now
            self.lastrand = suffix

            return pushid
