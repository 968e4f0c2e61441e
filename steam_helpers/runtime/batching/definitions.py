"""Batching metadata definitions and policy structures.

This module defines the data structures used to describe how a list of
identifiers is split into sequential, throttled requests.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Any

from ...core.exceptions import InvalidArgumentError

DEFAULT_BATCH_SIZE = 20


@dataclass(frozen=True)
class BatchPolicy:
    """Batching policy for an endpoint that accepts many identifiers per call.

    Attributes:
        chunk_size: Maximum number of identifiers per request
        delay: Fixed pause in seconds between consecutive requests
    """

    chunk_size: int = DEFAULT_BATCH_SIZE
    delay: float = 0.0

    def __post_init__(self) -> None:
        """Validate batch policy configuration."""
        if (
            isinstance(self.chunk_size, bool)
            or not isinstance(self.chunk_size, int)
            or self.chunk_size <= 0
        ):
            raise InvalidArgumentError(
                f"chunk_size must be a positive integer, got {self.chunk_size!r}",
                argument="chunk_size",
            )
        if self.delay < 0:
            raise InvalidArgumentError(
                f"delay must be non-negative, got {self.delay!r}", argument="delay"
            )


@dataclass(frozen=True)
class BatchPlan:
    """Plan for a single batch.

    Attributes:
        ids: Identifiers fetched by this batch, in first-occurrence order
        batch_index: Zero-based index of this batch in the overall plan
        endpoint_id: Endpoint the batch is issued against
    """

    ids: tuple[Hashable, ...]
    batch_index: int = 0
    endpoint_id: str = "unknown"


@dataclass
class BatchResult:
    """Result of sequential batch execution.

    Attributes:
        results: Per-batch results, index-aligned with the executed plans
        batches_used: Number of batches that were fetched
        delays_applied: Number of inter-batch pauses taken
        total_ids: Total number of identifiers covered by the plans
    """

    results: list[Any] = field(default_factory=list)
    batches_used: int = 0
    delays_applied: int = 0
    total_ids: int = 0
