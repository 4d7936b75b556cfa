"""Application layer: ports and the line formatting use case."""
