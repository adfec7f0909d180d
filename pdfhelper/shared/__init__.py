"""Shared utilities: logging, errors, ids, types."""
