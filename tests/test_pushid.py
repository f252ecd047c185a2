# -*- coding:utf-8 -*-

import datetime
import threading

import gevent
import gevent.lock
import gevent.pool
import pytest

import pushid
from pushid import PushID
from conftest import FakeClock, ALL_ZERO


class TestModuleGenerate:
    def test_generate(self):
        first = pushid.generate()
        second = pushid.generate()
        assert pushid.is_valid(first)
        assert second > first

    def test_version(self):
        assert pushid.__version__ == pushid.version


class TestDecode:
    def test_timestamp_of(self):
        gen = PushID(clock=FakeClock(1700000000123))
        assert pushid.timestamp_of(gen.next()) == 1700000000123

    def test_timestamp_of_zero(self):
        assert pushid.timestamp_of('-' * 20) == 0

    def test_datetime_of(self):
        gen = PushID(clock=FakeClock(1700000000123))
        dt = pushid.datetime_of(gen.next())
        assert dt == datetime.datetime(2023, 11, 14, 22, 13, 20, 123000,
                                       tzinfo=datetime.timezone.utc)

    def test_invalid(self):
        for value in ['', '-' * 19, '-' * 21, '-' * 19 + '+', None, 12]:
            assert not pushid.is_valid(value)
            with pytest.raises(pushid.InvalidPushIDError):
                pushid.timestamp_of(value)

    def test_errors_share_base(self):
        for error in [pushid.TimestampOverflowError, pushid.InvalidPushIDError,
                      pushid.LengthInvariantError, pushid.SuffixOverflowError]:
            assert issubclass(error, pushid.PushIDError)


class TestConcurrency:
    def test_threads_frozen_clock(self):
        gen = PushID(clock=FakeClock(1700000000000))
        results = []
        results_lock = threading.Lock()

        def worker():
            ids = [gen.next() for _ in range(200)]
            with results_lock:
                results.extend(ids)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 1600
        assert len(set(results)) == 1600

    def test_greenlets_yield_inside_clock(self):
        def clock():
            gevent.sleep(0)
            return 0

        gen = PushID(clock=clock, rand=ALL_ZERO, lock=gevent.lock.Semaphore())
        pool = gevent.pool.Pool(20)
        ids = pool.map(lambda _: gen.next(), range(100))

        assert len(set(ids)) == 100
        assert max(ids) == '-' * 18 + '0Y'
