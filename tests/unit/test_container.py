"""
Unit tests for the tagwise DI container.
"""

from __future__ import annotations

from tagwise.config.settings import Settings
from tagwise.container import Container, container
from tagwise.repositories import ArticleRepository, TaggingRepository, TagRepository
from tagwise.services import ArticleService, TagCloudService, TagNormalizationService


class TestRepositoryFactories:
    """Repository factories are transient."""

    def test_factories_return_correct_types(self):
        c = Container()
        assert isinstance(c.create_article_repository(), ArticleRepository)
        assert isinstance(c.create_tag_repository(), TagRepository)
        assert isinstance(c.create_tagging_repository(), TaggingRepository)

    def test_new_instance_per_call(self):
        c = Container()
        assert c.create_tag_repository() is not c.create_tag_repository()


class TestServices:
    """Services are cached and configured from settings."""

    def test_services_are_singletons(self):
        c = Container()
        assert c.article_service is c.article_service
        assert c.tag_cloud_service is c.tag_cloud_service

    def test_services_use_settings(self):
        c = Container(
            Settings(
                tag_name_max_length=12,
                tag_cloud_size_classes=["s", "m", "l"],
                api_prefix="/v2",
            )
        )

        assert isinstance(c.tag_normalization_service, TagNormalizationService)
        assert c.tag_normalization_service.max_length == 12
        assert isinstance(c.tag_cloud_service, TagCloudService)
        assert c.tag_cloud_service.size_classes == ["s", "m", "l"]
        assert isinstance(c.article_service, ArticleService)
        assert c.article_service.base_path == "/v2"
        assert c.article_service.normalizer is c.tag_normalization_service

    def test_reset_rebuilds_services(self):
        c = Container()
        before = c.article_service
        c.reset()
        assert c.article_service is not before

    def test_global_container(self):
        assert isinstance(container, Container)
