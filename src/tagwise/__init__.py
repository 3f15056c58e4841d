"""
tagwise - Article tagging service.

Articles carry free-text, comma-separated tags that are normalized into
shared Tag records through an explicit Tagging join table. Tags can be
browsed as a weighted tag cloud or used to look up articles.
"""

from __future__ import annotations

__version__ = "0.3.0"
__author__ = "tagwise"
__email__ = "noreply@tagwise.dev"
__license__ = "MIT"

__all__ = ["__version__", "__author__", "__email__", "__license__"]
