"""Sequential batching layer for multi-identifier endpoints.

Architecture:
    The batching layer consists of:
    - definitions.py: Batch metadata structures (BatchPolicy, BatchPlan, BatchResult)
    - planners.py: Deduplication and partitioning of identifier lists
    - executors.py: Strictly sequential, fixed-delay execution of batches
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import DEFAULT_BATCH_SIZE, BatchPlan, BatchPolicy, BatchResult
from .executors import SeriesExecutor, run_series
from .planners import BatchPlanner

__all__ = [
    "DEFAULT_BATCH_SIZE",
    "BatchPolicy",
    "BatchPlan",
    "BatchResult",
    "BatchPlanner",
    "SeriesExecutor",
    "run_series",
]
