"""
Service layer for tagwise.

Tag normalization, tag display, tag cloud weighting and article
operations.
"""

from __future__ import annotations

from tagwise.services.article_service import ArticleService
from tagwise.services.tag_cloud import TagCloudService, weigh
from tagwise.services.tag_formatter import display_string, render_tag_links, tag_links
from tagwise.services.tag_normalization import (
    TagNormalizationService,
    parse_tag_names,
    split_tag_string,
)

__all__ = [
    "ArticleService",
    "TagCloudService",
    "TagNormalizationService",
    "display_string",
    "parse_tag_names",
    "render_tag_links",
    "split_tag_string",
    "tag_links",
    "weigh",
]
