"""Standalone CLI command groups."""
