"""Test suite for Gatekeeper.

Test structure follows the test pyramid:
- unit/: Unit tests - Domain logic, handlers and adapters in isolation
- integration/: Integration tests - SQLite-backed store and end-to-end flows
"""
