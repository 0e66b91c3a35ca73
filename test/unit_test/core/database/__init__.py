"""Unit tests for the centralized database layer.

Entity defaults, the generic repository contract (mocked session) and the
aggregate queries (in-memory SQLite).
"""
