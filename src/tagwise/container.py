"""
Dependency Injection Container for tagwise.

Centralizes construction of repositories and services so the API and the
CLI wire them the same way:

- Repository factories return a new instance each call (transient)
- Services are cached via ``cached_property`` and built from settings
- ``reset()`` drops cached services, e.g. between tests

Usage
-----
    >>> from tagwise.container import container
    >>> service = container.article_service
    >>> cloud = container.tag_cloud_service
"""

from __future__ import annotations

from functools import cached_property
from typing import Optional

from tagwise.config.settings import Settings, settings as default_settings
from tagwise.repositories import ArticleRepository, TaggingRepository, TagRepository
from tagwise.services.article_service import ArticleService
from tagwise.services.tag_cloud import TagCloudService
from tagwise.services.tag_normalization import TagNormalizationService


class Container:
    """
    Dependency injection container for tagwise.

    Examples
    --------
        >>> container = Container()
        >>> container.create_tag_repository() is container.create_tag_repository()
        False
        >>> container.article_service is container.article_service
        True
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or default_settings

    # -------------------------------------------------------------------------
    # Repository Factory Methods (Transient - new instance per call)
    # -------------------------------------------------------------------------

    def create_article_repository(self) -> ArticleRepository:
        """Create a new ArticleRepository instance."""
        return ArticleRepository()

    def create_tag_repository(self) -> TagRepository:
        """Create a new TagRepository instance."""
        return TagRepository()

    def create_tagging_repository(self) -> TaggingRepository:
        """Create a new TaggingRepository instance."""
        return TaggingRepository()

    # -------------------------------------------------------------------------
    # Singleton Services (cached)
    # -------------------------------------------------------------------------

    @cached_property
    def tag_normalization_service(self) -> TagNormalizationService:
        """Normalizer enforcing the configured tag name length."""
        return TagNormalizationService(
            max_length=self.settings.tag_name_max_length,
            tag_repository=self.create_tag_repository(),
            tagging_repository=self.create_tagging_repository(),
        )

    @cached_property
    def article_service(self) -> ArticleService:
        """Article service whose tag links point at the API lookup route."""
        return ArticleService(
            normalizer=self.tag_normalization_service,
            base_path=self.settings.api_prefix,
            article_repository=self.create_article_repository(),
        )

    @cached_property
    def tag_cloud_service(self) -> TagCloudService:
        """Tag cloud service using the configured size classes."""
        return TagCloudService(
            size_classes=self.settings.tag_cloud_size_classes,
            base_path=self.settings.api_prefix,
            tag_repository=self.create_tag_repository(),
        )

    def reset(self) -> None:
        """Drop cached services so they are rebuilt on next access."""
        for name in ("tag_normalization_service", "article_service", "tag_cloud_service"):
            self.__dict__.pop(name, None)


# Global container instance
container = Container()
