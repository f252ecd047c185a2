# -*- coding:utf-8 -*-


class PushIDError(Exception):
    pass


class TimestampOverflowError(PushIDError):
    def __init__(self, timestamp):
        self.timestamp = timestamp
        super().__init__(
            "Timestamp {0} cannot be encoded in 48 bits".format(timestamp)
        )


class LengthInvariantError(PushIDError):
    def __init__(self, length):
        self.length = length
        super().__init__("Length should be 20, got {0}".format(length))


class SuffixOverflowError(PushIDError):
    def __init__(self, timestamp):
        self.timestamp = timestamp
        super().__init__(
            "Random suffix exhausted at timestamp {0}".format(timestamp)
        )


class InvalidPushIDError(PushIDError):
    def __init__(self, value):
        self.value = value
        super().__init__("{0!r} is not a valid push id".format(value))
