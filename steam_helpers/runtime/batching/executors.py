"""Sequential, throttled batch execution.

Only one task is ever in flight: task ``i + 1`` is started after the result
of task ``i`` has been observed, so results come back in task order. A fixed
pause separates consecutive tasks. The first failure aborts the whole run.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from time import perf_counter
from typing import Any, TypeVar

from ...core.exceptions import InvalidArgumentError
from .definitions import BatchPlan, BatchPolicy, BatchResult
from .telemetry import log_batch_completed, log_batch_error, log_batch_execution_complete

T = TypeVar("T")


async def run_series(
    tasks: Sequence[Callable[[], Awaitable[T]]],
    delay: float = 0.0,
) -> list[T]:
    """Run zero-argument async tasks one at a time, in order.

    Args:
        tasks: Task factories; each is called only when its turn comes
        delay: Seconds to sleep between consecutive tasks (not after the last)

    Returns:
        Results, index-aligned with ``tasks``

    Raises:
        InvalidArgumentError: If delay is negative
        Exception: Whatever the first failing task raised; remaining tasks
            are not started and earlier results are dropped
    """
    if delay < 0:
        raise InvalidArgumentError(f"delay must be non-negative, got {delay!r}", argument="delay")

    results: list[T] = []
    last = len(tasks) - 1
    for i, task in enumerate(tasks):
        results.append(await task())
        if delay and i < last:
            await asyncio.sleep(delay)
    return results


class SeriesExecutor:
    """Executes batch plans in strict sequence under a fixed-delay policy."""

    def __init__(self, policy: BatchPolicy) -> None:
        self._policy = policy

    async def execute(
        self,
        *,
        plans: Sequence[BatchPlan],
        fetch_batch: Callable[[BatchPlan], Awaitable[Any]],
    ) -> BatchResult:
        """Execute batch plans and collect their results.

        Args:
            plans: Batch plans to execute, in order
            fetch_batch: Async function fetching and parsing one batch

        Returns:
            BatchResult whose ``results`` are index-aligned with ``plans``
        """
        start = perf_counter()

        def make_task(plan: BatchPlan) -> Callable[[], Awaitable[Any]]:
            async def task() -> Any:
                batch_start = perf_counter()
                try:
                    data = await fetch_batch(plan)
                except Exception as e:
                    log_batch_error(
                        endpoint_id=plan.endpoint_id,
                        batch_index=plan.batch_index,
                        error_type=type(e).__name__,
                        error_message=str(e),
                    )
                    raise
                log_batch_completed(
                    endpoint_id=plan.endpoint_id,
                    batch_index=plan.batch_index,
                    batch_size=len(plan.ids),
                    latency_ms=(perf_counter() - batch_start) * 1000.0,
                )
                return data

            return task

        results = await run_series([make_task(plan) for plan in plans], self._policy.delay)

        result = BatchResult(
            results=results,
            batches_used=len(results),
            delays_applied=max(len(results) - 1, 0) if self._policy.delay else 0,
            total_ids=sum(len(plan.ids) for plan in plans),
        )

        log_batch_execution_complete(
            endpoint_id=plans[0].endpoint_id if plans else "unknown",
            result=result,
            total_latency_ms=(perf_counter() - start) * 1000.0,
        )

        return result
