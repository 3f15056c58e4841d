"""
Tag Normalization Service for article tag assignment.

Free-text tag input (``"ruby, , Rails ,ruby"``) is turned into an ordered
list of canonical tag names and then into Tag rows attached to an article.

Parsing is pure (no I/O):

1. Split on ``,``
2. Strip leading/trailing whitespace from each fragment
3. Drop empty fragments (trailing comma, double comma, blank input)
4. Collapse exact duplicates, keeping the first occurrence
5. Reject names that are too long or contain control/format characters

Matching is exact and case-sensitive: ``"Ruby"`` and ``"ruby"`` are two
different tags.
"""

from __future__ import annotations

import logging
import unicodedata
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from tagwise.db.models import Article as ArticleDB
from tagwise.db.models import Tag as TagDB
from tagwise.exceptions import ValidationError
from tagwise.repositories.tag_repository import TagRepository
from tagwise.repositories.tagging_repository import TaggingRepository

logger = logging.getLogger(__name__)

TAG_DELIMITER = ","

# Unicode categories rejected inside a tag name: control (newline, tab,
# NUL...) and format characters (zero-width space, BOM...)
_DISALLOWED_CATEGORIES: frozenset[str] = frozenset({"Cc", "Cf"})


def split_tag_string(raw: Optional[str]) -> List[str]:
    """
    Split *raw* on commas and return the trimmed, non-empty fragments.

    Duplicates are kept; this is the shared splitting rule used on both
    the write side (normalizer) and the read side (formatter).

    Examples
    --------
    >>> split_tag_string(" ruby,, Rails ,")
    ['ruby', 'Rails']
    """
    if not raw:
        return []
    fragments = (fragment.strip() for fragment in raw.split(TAG_DELIMITER))
    return [fragment for fragment in fragments if fragment]


def validate_tag_name(name: str, *, max_length: int) -> str:
    """
    Check a single trimmed tag name against the storage policy.

    Raises
    ------
    ValidationError
        If the name exceeds *max_length* or contains a control or
        format character.
    """
    if len(name) > max_length:
        raise ValidationError(
            f"Tag name exceeds {max_length} characters: {name[:20]}...",
            field_name="all_tags",
            invalid_value=name,
        )
    if any(unicodedata.category(ch) in _DISALLOWED_CATEGORIES for ch in name):
        raise ValidationError(
            f"Tag name contains disallowed characters: {name!r}",
            field_name="all_tags",
            invalid_value=name,
        )
    return name


def parse_tag_names(raw: Optional[str], *, max_length: int) -> List[str]:
    """
    Parse free-text tag input into an ordered list of unique tag names.

    Parameters
    ----------
    raw : str | None
        Comma-separated tag text as submitted by the user.
    max_length : int
        Longest accepted tag name.

    Returns
    -------
    list[str]
        Trimmed, non-empty, de-duplicated names in first-occurrence order.
        Empty or delimiter-only input yields ``[]``.

    Raises
    ------
    ValidationError
        If any name is too long or contains disallowed characters.

    Examples
    --------
    >>> parse_tag_names("ruby, , Rails ,ruby", max_length=50)
    ['ruby', 'Rails']
    """
    names: List[str] = []
    seen: set[str] = set()
    for name in split_tag_string(raw):
        validate_tag_name(name, max_length=max_length)
        if name in seen:
            continue
        seen.add(name)
        names.append(name)
    return names


class TagNormalizationService:
    """
    Resolves tag text to Tag rows and attaches them to articles.

    Every name goes through :meth:`TagRepository.find_or_create`, an
    insert-or-fetch on the unique ``tags.name`` index, so two requests
    introducing the same new tag never create two rows.
    """

    def __init__(
        self,
        max_length: int,
        tag_repository: Optional[TagRepository] = None,
        tagging_repository: Optional[TaggingRepository] = None,
    ) -> None:
        self.max_length = max_length
        self.tag_repository = tag_repository or TagRepository()
        self.tagging_repository = tagging_repository or TaggingRepository()

    def parse(self, raw: Optional[str]) -> List[str]:
        """Parse *raw* with this service's length limit."""
        return parse_tag_names(raw, max_length=self.max_length)

    async def resolve(self, session: AsyncSession, raw: Optional[str]) -> List[TagDB]:
        """
        Return the Tag rows for *raw*, creating any that do not exist yet.

        Tags come back in the order their names first appear in *raw*.
        """
        names = self.parse(raw)
        tags: List[TagDB] = []
        for name in names:
            tags.append(await self.tag_repository.find_or_create(session, name))
        return tags

    async def assign(
        self, session: AsyncSession, article: ArticleDB, raw: Optional[str]
    ) -> List[TagDB]:
        """
        Replace the tags of *article* with the tags named in *raw*.

        Validation happens before any write. Previous associations that
        are not listed in *raw* are removed; nothing is merged.
        """
        tags = await self.resolve(session, raw)
        await self.tagging_repository.replace_article_tags(
            session, article.id, [tag.id for tag in tags]
        )
        logger.debug(
            "Assigned %d tag(s) to article %s: %s",
            len(tags),
            article.id,
            [tag.name for tag in tags],
        )
        return tags
