"""
Tag display helpers.

Read-side mirror of the normalizer: renders an article's tags as the
``all_tags`` display string and as one lookup link per tag. Splitting uses
the same trim/empty-filter rule as the write side.
"""

from __future__ import annotations

from html import escape
from typing import Iterable, List, Protocol
from urllib.parse import quote

from tagwise.models.tag import TagLink
from tagwise.services.tag_normalization import split_tag_string

DISPLAY_SEPARATOR = ", "


class _Named(Protocol):
    name: str


def display_string(tags: Iterable[_Named]) -> str:
    """
    Join tag names with ``", "`` in the order given.

    Callers pass tags in stored association order (tagging position),
    which is the order the user typed them.

    Examples
    --------
    >>> display_string([Tag(name="ruby"), Tag(name="Rails")])
    'ruby, Rails'
    """
    return DISPLAY_SEPARATOR.join(tag.name for tag in tags)


def tag_href(name: str, *, base_path: str = "") -> str:
    """
    Lookup target for articles tagged *name*.

    Names made only of dots are sent as ``%2E`` so they are not read as
    ``.`` or ``..`` path segments.
    """
    segment = quote(name, safe="")
    if not segment.strip("."):
        segment = segment.replace(".", "%2E")
    return f"{base_path}/tags/{segment}/articles"


def split_display_string(tag_string: str) -> List[str]:
    """Names in a display string, using the normalizer's splitting rule."""
    return split_tag_string(tag_string)


def tag_links(tag_string: str, *, base_path: str = "") -> List[TagLink]:
    """
    Split a display string back into names and build one link per name.

    Parameters
    ----------
    tag_string : str
        A display string as produced by :func:`display_string`.
    base_path : str
        Prefix of the lookup route, e.g. ``"/api/v1"``.

    Returns
    -------
    list[TagLink]
        Links in the order the names appear; empty names are skipped.
    """
    return [
        TagLink(name=name, href=tag_href(name, base_path=base_path))
        for name in split_display_string(tag_string)
    ]


def render_tag_links(links: Iterable[TagLink]) -> str:
    """Render links as HTML anchors joined with ``", "``."""
    return DISPLAY_SEPARATOR.join(
        f'<a href="{escape(link.href)}">{escape(link.name)}</a>' for link in links
    )
