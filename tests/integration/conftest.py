"""
Shared fixtures for integration tests.

Integration tests run against the in-memory SQLite database provided by
the root ``db_session`` fixture.
"""

from __future__ import annotations

import pytest

from tagwise.services.article_service import ArticleService
from tagwise.services.tag_cloud import TagCloudService
from tagwise.services.tag_normalization import TagNormalizationService

API_PREFIX = "/api/v1"
SIZE_CLASSES = ["css1", "css2", "css3", "css4"]


@pytest.fixture
def normalizer() -> TagNormalizationService:
    return TagNormalizationService(max_length=50)


@pytest.fixture
def article_service(normalizer: TagNormalizationService) -> ArticleService:
    return ArticleService(normalizer=normalizer, base_path=API_PREFIX)


@pytest.fixture
def tag_cloud_service() -> TagCloudService:
    return TagCloudService(SIZE_CLASSES, base_path=API_PREFIX)
