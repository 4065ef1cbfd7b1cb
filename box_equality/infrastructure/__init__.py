"""Infrastructure layer - adapters and cross-cutting concerns for Box Equality."""
