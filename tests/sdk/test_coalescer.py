import asyncio

import pytest

from petsave import Coalescer


async def wait_until(predicate, attempts: int = 100) -> None:
    for _ in range(attempts):
        if predicate():
            return
        await asyncio.sleep(0)
    raise AssertionError("condition never became true")


class Producer:
    """Counts invocations and blocks until released."""

    def __init__(self, fail_with: Exception | None = None) -> None:
        self.calls = 0
        self.release = asyncio.Event()
        self.fail_with = fail_with

    async def __call__(self) -> dict[str, int]:
        self.calls += 1
        await self.release.wait()
        if self.fail_with is not None:
            raise self.fail_with
        return {"execution": self.calls}


class TestCoalescer:
    @pytest.mark.anyio
    async def test_concurrent_callers_share_one_execution(self):
        producer = Producer()
        coalescer = Coalescer(producer)

        tasks = [asyncio.create_task(coalescer.execute()) for _ in range(5)]
        await wait_until(lambda: producer.calls == 1)
        await asyncio.sleep(0)
        assert coalescer.is_running

        producer.release.set()
        results = await asyncio.gather(*tasks)

        assert producer.calls == 1
        assert coalescer.executions == 1
        assert all(result is results[0] for result in results)
        assert results[0] == {"execution": 1}

    @pytest.mark.anyio
    async def test_concurrent_callers_share_the_same_error(self):
        producer = Producer(fail_with=RuntimeError("boom"))
        coalescer = Coalescer(producer)

        tasks = [asyncio.create_task(coalescer.execute()) for _ in range(3)]
        await wait_until(lambda: producer.calls == 1)
        producer.release.set()
        results = await asyncio.gather(*tasks, return_exceptions=True)

        assert producer.calls == 1
        assert all(isinstance(result, RuntimeError) for result in results)
        assert all(result is results[0] for result in results)

    @pytest.mark.anyio
    async def test_returns_to_idle_before_first_caller_resumes(self):
        producer = Producer()
        coalescer = Coalescer(producer)
        producer.release.set()

        await coalescer.execute()

        assert not coalescer.is_running

    @pytest.mark.anyio
    async def test_idle_reentry_starts_a_new_execution(self):
        producer = Producer()
        producer.release.set()
        coalescer = Coalescer(producer)

        first = await coalescer.execute()
        second = await coalescer.execute()

        assert producer.calls == 2
        assert coalescer.executions == 2
        assert first == {"execution": 1}
        assert second == {"execution": 2}

    @pytest.mark.anyio
    async def test_caller_after_completion_starts_new_execution(self):
        # A caller arriving once the slot is released does not reuse the
        # value that was just produced.
        producer = Producer()
        coalescer = Coalescer(producer)

        first = asyncio.create_task(coalescer.execute())
        await wait_until(lambda: producer.calls == 1)
        producer.release.set()
        first_result = await first

        late_result = await coalescer.execute()

        assert producer.calls == 2
        assert late_result is not first_result

    @pytest.mark.anyio
    async def test_error_does_not_stick(self):
        producer = Producer(fail_with=ValueError("first attempt"))
        producer.release.set()
        coalescer = Coalescer(producer)

        with pytest.raises(ValueError, match="first attempt"):
            await coalescer.execute()

        producer.fail_with = None
        assert await coalescer.execute() == {"execution": 2}

    @pytest.mark.anyio
    async def test_cancelled_waiter_does_not_cancel_execution(self):
        producer = Producer()
        coalescer = Coalescer(producer)

        cancelled = asyncio.create_task(coalescer.execute())
        survivor = asyncio.create_task(coalescer.execute())
        await wait_until(lambda: producer.calls == 1)

        cancelled.cancel()
        with pytest.raises(asyncio.CancelledError):
            await cancelled

        assert coalescer.is_running
        producer.release.set()

        assert await survivor == {"execution": 1}
        assert producer.calls == 1
