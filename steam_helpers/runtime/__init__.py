"""Runtime layer: REST plumbing and sequential batching."""
