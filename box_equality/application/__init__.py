"""Application layer - demonstration use cases for Box Equality."""
