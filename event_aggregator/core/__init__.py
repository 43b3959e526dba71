"""Core layer: configuration, enums, errors and the composition root."""
