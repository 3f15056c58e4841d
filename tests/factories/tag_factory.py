"""
Factory for Tag models using factory_boy.
"""

from __future__ import annotations

from datetime import timezone

import factory
from factory import Faker

from tagwise.models.tag import Tag, TagCount


class TagFactory(factory.Factory):
    """Factory for stored Tag models."""

    class Meta:
        model = Tag

    id = factory.Sequence(lambda n: n + 1)
    name = factory.Sequence(lambda n: f"tag-{n}")
    created_at = Faker("date_time", tzinfo=timezone.utc)


class TagCountFactory(factory.Factory):
    """Factory for TagCount models."""

    class Meta:
        model = TagCount

    name = factory.Sequence(lambda n: f"tag-{n}")
    count = Faker("random_int", min=0, max=100)
