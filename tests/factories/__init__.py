"""Test data factories built with factory_boy."""

from tests.factories.article_factory import ArticleCreateFactory, ArticleFactory
from tests.factories.tag_factory import TagCountFactory, TagFactory

__all__ = [
    "ArticleCreateFactory",
    "ArticleFactory",
    "TagCountFactory",
    "TagFactory",
]
