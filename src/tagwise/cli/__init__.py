"""Command-line interface for tagwise."""
