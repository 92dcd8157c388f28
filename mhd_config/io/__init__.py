"""Persisted artifacts: path helpers, schemas and writers."""
