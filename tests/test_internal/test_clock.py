"""Tests for the clock and the scoped now override."""

import asyncio
import contextvars
from datetime import UTC, datetime, timedelta, timezone
from threading import Thread

import pytest

from date_and_time import (
    Date,
    SystemClock,
    Time,
    now_instant,
    now_key,
    override_now,
    with_override,
)
from date_and_time._internal.clock import to_utc

FIXED = datetime(2024, 3, 15, 14, 30, 15, tzinfo=UTC)
OTHER = datetime(2001, 9, 9, 1, 46, 40, tzinfo=UTC)


def _fixed():
    return FIXED


def _other():
    return OTHER


def test_system_clock_is_utc():
    assert SystemClock().now().utcoffset() == timedelta(0)


def test_real_clock_without_override():
    before = datetime.now(UTC)
    result = now_instant()
    after = datetime.now(UTC)

    assert result.utcoffset() == timedelta(0)
    assert before - timedelta(seconds=1) <= result <= after + timedelta(seconds=1)


def test_no_override_bound_by_default():
    assert now_key.get() is None


class TestToUtc:
    def test_aware(self):
        instant = datetime(2024, 3, 20, 23, 0, tzinfo=timezone(timedelta(hours=-2)))
        assert to_utc(instant) == datetime(2024, 3, 21, 1, 0, tzinfo=UTC)
        assert to_utc(instant).tzinfo is UTC

    def test_naive_is_local(self):
        local = datetime(2024, 3, 20, 14, 30)
        assert to_utc(local) == local.astimezone(UTC)

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            to_utc("2024-03-20")  # type: ignore[arg-type]


class TestOverrideScope:
    def test_fixed_instant(self):
        with override_now(_fixed):
            assert now_instant() == FIXED
            assert Date.today() == Date.from_values(2024, 3, 15)
            assert Time.now() == Time.from_values(14, 30, 15)

    def test_result_is_converted_to_utc(self):
        shifted = FIXED.astimezone(timezone(timedelta(hours=9)))
        with override_now(lambda: shifted):
            result = now_instant()
        assert result == FIXED
        assert result.tzinfo is UTC

    def test_provider_called_on_every_read(self, clock):
        with override_now(clock.now):
            now_instant()
            now_instant()
        assert clock.calls == 2

    def test_restored_on_exit(self):
        with override_now(_fixed):
            pass
        assert now_key.get() is None
        assert abs(now_instant() - datetime.now(UTC)) < timedelta(seconds=5)

    def test_restored_after_exception(self):
        with pytest.raises(RuntimeError), override_now(_fixed):
            raise RuntimeError("boom")
        assert now_key.get() is None

    def test_nested_scopes(self):
        with override_now(_fixed):
            with override_now(_other):
                assert now_instant() == OTHER
            assert now_instant() == FIXED
        assert now_key.get() is None

    def test_yields_provider(self):
        with override_now(_fixed) as provider:
            assert provider is _fixed


class TestWithOverride:
    def test_returns_body_result(self):
        assert with_override(_fixed, Date.today) == Date.from_values(2024, 3, 15)

    def test_restored_after_body_raises(self):
        def body():
            raise ValueError("bad")

        with pytest.raises(ValueError):
            with_override(_fixed, body)
        assert now_key.get() is None

    def test_composes_with_context_manager(self):
        with override_now(_other):
            assert with_override(_fixed, now_instant) == FIXED
            assert now_instant() == OTHER


class TestThreadIsolation:
    def test_new_thread_sees_real_clock(self):
        seen = []

        with override_now(_fixed):
            worker = Thread(target=lambda: seen.append(now_key.get()))
            worker.start()
            worker.join()

        assert seen == [None]

    def test_copied_context_carries_override(self):
        seen = []

        with override_now(_fixed):
            ctx = contextvars.copy_context()

        worker = Thread(target=lambda: seen.append(ctx.run(now_instant)))
        worker.start()
        worker.join()

        assert seen == [FIXED]
        assert now_key.get() is None

    def test_override_in_thread_does_not_leak(self):
        def work():
            with override_now(_other):
                pass

        with override_now(_fixed):
            worker = Thread(target=work)
            worker.start()
            worker.join()
            assert now_instant() == FIXED


class TestTaskIsolation:
    async def test_child_task_inherits_override(self):
        with override_now(_fixed):
            child = asyncio.create_task(self._read_now())
        # The parent's scope has already closed; the task keeps its copy.
        assert await child == FIXED
        assert now_key.get() is None

    async def test_override_in_task_does_not_leak_to_parent(self):
        async def child():
            with override_now(_other):
                await asyncio.sleep(0)
                return now_instant()

        assert await asyncio.create_task(child()) == OTHER
        assert now_key.get() is None

    async def test_concurrent_tasks_are_independent(self):
        async def pinned(provider):
            with override_now(provider):
                await asyncio.sleep(0)
                first = Date.today()
                await asyncio.sleep(0)
                return first, Date.today()

        async def unpinned():
            await asyncio.sleep(0)
            return now_key.get()

        fixed, other, bare = await asyncio.gather(pinned(_fixed), pinned(_other), unpinned())

        assert fixed == (Date.from_values(2024, 3, 15),) * 2
        assert other == (Date.from_values(2001, 9, 9),) * 2
        assert bare is None

    @staticmethod
    async def _read_now():
        await asyncio.sleep(0)
        return now_instant()
