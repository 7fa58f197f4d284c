"""Application layer: ports, use cases and state."""
