"""Batch planning logic for splitting identifier lists into requests."""

from __future__ import annotations

from collections.abc import Hashable, Iterable

from ...utils.sequences import KeySpec, chunk, dedupe
from .definitions import BatchPlan, BatchPolicy
from .telemetry import log_batch_plan


class BatchPlanner:
    """Plans batches for endpoints that accept several identifiers per call.

    The planner removes duplicate identifiers (first occurrence wins) and
    partitions what is left into groups of at most ``policy.chunk_size``.
    """

    def __init__(self, policy: BatchPolicy, endpoint_id: str = "unknown") -> None:
        self._policy = policy
        self._endpoint_id = endpoint_id

    def plan(self, ids: Iterable[Hashable], key: KeySpec = None) -> list[BatchPlan]:
        """Plan batches for a list of identifiers.

        Args:
            ids: Identifiers requested by the caller, possibly repeated
            key: Optional key derivation used to detect duplicates

        Returns:
            List of batch plans; empty when no identifiers were given
        """
        requested = list(ids)
        unique = dedupe(requested, key)
        plans = [
            BatchPlan(ids=tuple(group), batch_index=i, endpoint_id=self._endpoint_id)
            for i, group in enumerate(chunk(unique, self._policy.chunk_size))
        ]

        log_batch_plan(
            endpoint_id=self._endpoint_id,
            total_batches=len(plans),
            requested_ids=len(requested),
            unique_ids=len(unique),
            chunk_size=self._policy.chunk_size,
        )

        return plans
