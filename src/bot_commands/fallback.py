"""순서가 있는 대체 전략 실행 모듈."""

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Strategy = Callable[[], Awaitable[T | None]]


async def first_success(strategies: Iterable[Strategy[T]]) -> T | None:
    """전략을 순서대로 실행해 처음으로 값을 돌려준 결과를 반환한다.

    전략이 None을 반환하거나 예외를 던지면 다음 전략으로 넘어간다.
    값을 얻으면 나머지 전략은 실행하지 않는다.

    Args:
        strategies: 인자 없이 호출하는 비동기 함수 목록

    Returns:
        첫 번째 결과 또는 모든 전략이 실패하면 None
    """
    for strategy in strategies:
        try:
            result = await strategy()
        except Exception as e:
            name = getattr(strategy, "__name__", repr(strategy))
            logger.warning(f"Strategy {name} failed: {e!r}")
            continue
        if result is not None:
            return result
    return None
