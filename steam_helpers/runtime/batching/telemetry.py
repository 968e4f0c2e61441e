"""Structured logging for batching operations.

This module provides telemetry hooks for batching operations, emitting
structured logs for observability.
"""

from __future__ import annotations

import logging

from .definitions import BatchResult

logger = logging.getLogger(__name__)


def log_batch_plan(
    *,
    endpoint_id: str,
    total_batches: int,
    requested_ids: int,
    unique_ids: int,
    chunk_size: int,
) -> None:
    """Log batch plan creation.

    Args:
        endpoint_id: Endpoint identifier
        total_batches: Total number of batches planned
        requested_ids: Number of identifiers supplied by the caller
        unique_ids: Number of identifiers left after deduplication
        chunk_size: Maximum identifiers per batch
    """
    logger.info(
        "batch_plan_created",
        extra={
            "endpoint_id": endpoint_id,
            "total_batches": total_batches,
            "requested_ids": requested_ids,
            "unique_ids": unique_ids,
            "chunk_size": chunk_size,
        },
    )


def log_batch_completed(
    *,
    endpoint_id: str,
    batch_index: int,
    batch_size: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single batch."""
    logger.info(
        "batch_completed",
        extra={
            "endpoint_id": endpoint_id,
            "batch_index": batch_index,
            "batch_size": batch_size,
            "latency_ms": latency_ms,
        },
    )


def log_batch_execution_complete(
    *,
    endpoint_id: str,
    result: BatchResult,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of batch execution."""
    logger.info(
        "batch_execution_complete",
        extra={
            "endpoint_id": endpoint_id,
            "batches_used": result.batches_used,
            "delays_applied": result.delays_applied,
            "total_ids": result.total_ids,
            "total_latency_ms": total_latency_ms,
        },
    )


def log_batch_error(
    *,
    endpoint_id: str,
    batch_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log batch execution error.

    Args:
        endpoint_id: Endpoint identifier
        batch_index: Zero-based index of the batch that failed
        error_type: Type of error (e.g., "TransportError", "NotFoundError")
        error_message: Error message
    """
    logger.error(
        "batch_error",
        extra={
            "endpoint_id": endpoint_id,
            "batch_index": batch_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
