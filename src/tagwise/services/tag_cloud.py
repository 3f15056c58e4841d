"""
Tag cloud weighting.

Each tag is assigned one of N ordered size classes (small to large) by
min-max scaling its usage count against the most used tag:

    ratio  = count / max_count            (0 for every tag when max is 0)
    bucket = round_half_up(ratio * (N - 1)), clamped to [0, N - 1]

Rounding is half-up, so ``1.5 -> 2`` and ``2.5 -> 3``; with counts
``{a: 10, b: 5, c: 1}`` and four classes, ``b`` lands in bucket 2.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from tagwise.models.tag import TagCloudEntry, TagCount
from tagwise.repositories.tag_repository import TagRepository
from tagwise.services.tag_formatter import tag_href

logger = logging.getLogger(__name__)

T = TypeVar("T")


def round_half_up(value: float) -> int:
    """Round a non-negative value to the nearest int, ties going up."""
    return int(math.floor(value + 0.5))


def bucket_index(count: int, max_count: int, num_classes: int) -> int:
    """
    Size-class index for *count* given the largest count in the set.

    A zero *max_count* maps every tag to bucket 0 instead of dividing.
    """
    if num_classes < 1:
        raise ValueError("num_classes must be at least 1")
    ratio = count / max_count if max_count > 0 else 0.0
    index = round_half_up(ratio * (num_classes - 1))
    return min(max(index, 0), num_classes - 1)


def weigh(
    items: Sequence[T],
    size_classes: Sequence[str],
    count: Callable[[T], int] = lambda item: item.count,  # type: ignore[attr-defined]
) -> List[Tuple[T, str, int]]:
    """
    Assign a size class to every item.

    Parameters
    ----------
    items : Sequence[T]
        Tags annotated with usage counts, in display order.
    size_classes : Sequence[str]
        Ordered labels from smallest to largest.
    count : Callable[[T], int]
        Extracts the usage count of an item (default: ``item.count``).

    Returns
    -------
    list[tuple[T, str, int]]
        ``(item, size_class, bucket)`` for every item, in input order.
        An empty *items* yields an empty list.

    Raises
    ------
    ValueError
        If *size_classes* is empty.

    Examples
    --------
    >>> tags = [TagCount(name="a", count=10), TagCount(name="b", count=5)]
    >>> [(t.name, c) for t, c, _ in weigh(tags, ["css1", "css2", "css3", "css4"])]
    [('a', 'css4'), ('b', 'css3')]
    """
    if not size_classes:
        raise ValueError("At least one size class is required")
    if not items:
        return []

    max_count = max(count(item) for item in items)
    weighted: List[Tuple[T, str, int]] = []
    for item in items:
        index = bucket_index(count(item), max_count, len(size_classes))
        weighted.append((item, size_classes[index], index))
    return weighted


class TagCloudService:
    """Builds the tag cloud from stored usage counts."""

    def __init__(
        self,
        size_classes: Sequence[str],
        base_path: str = "",
        tag_repository: Optional[TagRepository] = None,
    ) -> None:
        self.size_classes = list(size_classes)
        self.base_path = base_path
        self.tag_repository = tag_repository or TagRepository()

    def entries(self, tag_counts: Sequence[TagCount]) -> List[TagCloudEntry]:
        """Weigh *tag_counts* and wrap the result as cloud entries."""
        return [
            TagCloudEntry(
                name=tag.name,
                count=tag.count,
                size_class=size_class,
                bucket=bucket,
                href=tag_href(tag.name, base_path=self.base_path),
            )
            for tag, size_class, bucket in weigh(tag_counts, self.size_classes)
        ]

    async def build(
        self, session: AsyncSession, include_unused: bool = False
    ) -> List[TagCloudEntry]:
        """Load tags with counts (alphabetical) and weigh them."""
        tag_counts = await self.tag_repository.get_tag_counts(
            session, include_unused=include_unused
        )
        logger.debug("Building tag cloud from %d tag(s)", len(tag_counts))
        return self.entries(tag_counts)
