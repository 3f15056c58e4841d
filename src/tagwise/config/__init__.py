"""
Configuration management module for tagwise.

Handles application settings, environment variables and database
configuration.
"""

from __future__ import annotations

__all__: list[str] = []
