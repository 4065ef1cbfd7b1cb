"""API layer - serialized views of demonstration results."""
