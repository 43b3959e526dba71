"""Test suite for the event aggregator.

Test structure:
- unit/: Unit tests - each component in isolation
- integration/: Integration tests - aggregator, auto-wiring and container together
"""
