"""Tag API schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from tagwise.models.tag import TagCloudEntry


class TagCloudResponse(BaseModel):
    """Response wrapper for the tag cloud.

    Entries are alphabetical by tag name; ``size_classes`` lists the labels
    from smallest to largest so clients can map them to styles.
    """

    data: List[TagCloudEntry] = Field(default_factory=list)
    size_classes: List[str]
