# -*- coding:utf-8 -*-

import pytest


class FakeClock:
    """Returns the given millisecond values in order, then repeats the last."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def __call__(self):
        index = min(self.calls, len(self.values) - 1)
        self.calls += 1
        return self.values[index]


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


class SleepRecorder:
    def __init__(self):
        self.slept = []

    def __call__(self, seconds):
        self.slept.append(seconds)


@pytest.fixture
def sleeper():
    return SleepRecorder()


# Largest float below 1.0 maps every digit to 63.
ALL_MAX = FixedRandom(1.0 - 1e-12)
ALL_ZERO = FixedRandom(0.0)
