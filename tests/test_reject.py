"""Tests for allow_reject."""

import asyncio
import gc

import pytest
from asyncflow import allow_reject


class TestAllowReject:
    @pytest.mark.asyncio
    async def test_returns_same_future(self):
        future = asyncio.get_running_loop().create_future()
        assert allow_reject(future) is future
        future.set_result(None)

    @pytest.mark.asyncio
    async def test_value_unchanged(self):
        future = asyncio.get_running_loop().create_future()
        wrapped = allow_reject(future)
        future.set_result("ok")
        assert await wrapped == "ok"
        assert await wrapped == "ok"

    @pytest.mark.asyncio
    async def test_failure_unchanged_for_every_consumer(self):
        async def broken():
            raise ValueError("broken")

        wrapped = allow_reject(broken())
        for _ in range(2):
            with pytest.raises(ValueError, match="broken"):
                await wrapped

    @pytest.mark.asyncio
    async def test_concurrent_consumers(self):
        future = allow_reject(asyncio.get_running_loop().create_future())
        first = asyncio.ensure_future(future)
        second = asyncio.ensure_future(asyncio.wait_for(future, 1))
        future.set_exception(RuntimeError("shared"))
        results = await asyncio.gather(first, second, return_exceptions=True)
        assert all(isinstance(r, RuntimeError) for r in results)

    @pytest.mark.asyncio
    async def test_unobserved_failure_not_reported(self):
        reported = []
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(lambda loop, context: reported.append(context))
        try:
            future = allow_reject(loop.create_future())
            future.set_exception(RuntimeError("ignored"))
            await asyncio.sleep(0)
            del future
            gc.collect()
            assert reported == []
        finally:
            loop.set_exception_handler(None)

    @pytest.mark.asyncio
    async def test_cancelled(self):
        future = allow_reject(asyncio.get_running_loop().create_future())
        future.cancel()
        with pytest.raises(asyncio.CancelledError):
            await future
