"""
Factory for Article models using factory_boy.
"""

from __future__ import annotations

from datetime import timezone

import factory
from factory import Faker

from tagwise.models.article import Article, ArticleCreate


class ArticleCreateFactory(factory.Factory):
    """Factory for ArticleCreate models."""

    class Meta:
        model = ArticleCreate

    author = Faker("name")
    content = Faker("paragraph", nb_sentences=3)
    all_tags = factory.LazyFunction(lambda: "ruby, rails")


class ArticleFactory(factory.Factory):
    """Factory for full Article read models."""

    class Meta:
        model = Article

    id = factory.Sequence(lambda n: n + 1)
    author = Faker("name")
    content = Faker("paragraph", nb_sentences=3)
    created_at = Faker("date_time", tzinfo=timezone.utc)
    all_tags = ""
