"""
목적:
- 독립적인 비동기 호출을 동시에 실행하고 함께 정리하는 유틸을 제공한다.

설명:
- 하나가 실패하거나 호출자가 취소되면 남은 작업을 취소하고 종료까지 기다린다.
- 취소된 형제 작업의 예외는 원래 예외를 가리지 않는다.

디자인 패턴:
- 구조적 동시성(Structured Concurrency) 헬퍼.

참조:
- src_py/smart_search/embedding/resolver.py
- src_py/smart_search/search/service.py
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from typing import Any


async def gather_or_cancel(*awaitables: Awaitable[Any]) -> list[Any]:
    """모든 작업을 동시에 실행하고, 실패 시 나머지를 취소한다."""
    tasks = [asyncio.ensure_future(awaitable) for awaitable in awaitables]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        await cancel_pending(*tasks)
        raise


async def cancel_pending(*tasks: asyncio.Future[Any]) -> None:
    """완료되지 않은 작업을 취소하고 모두 종료될 때까지 기다린다."""
    for task in tasks:
        if not task.done():
            task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)
