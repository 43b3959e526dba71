"""Domain layer: events, handler tag and ports."""
