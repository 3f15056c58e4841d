"""Tag cloud and tagged-article lookup endpoints.

Route Order: ``/tags/cloud`` MUST be defined before ``/tags/{tag}/articles``.
The lookup uses a path converter so tag names containing ``/`` still match.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from tagwise.api.deps import get_article_service, get_db, get_tag_cloud_service
from tagwise.api.routers.responses import LIST_ERRORS
from tagwise.api.schemas.articles import ArticleListResponse
from tagwise.api.schemas.responses import PaginationMeta
from tagwise.api.schemas.tags import TagCloudResponse
from tagwise.services.article_service import ArticleService
from tagwise.services.tag_cloud import TagCloudService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/tags/cloud", response_model=TagCloudResponse, responses=LIST_ERRORS)
async def tag_cloud(
    session: AsyncSession = Depends(get_db),
    service: TagCloudService = Depends(get_tag_cloud_service),
    include_unused: bool = Query(
        False, description="Also list tags no article references (count 0)"
    ),
) -> TagCloudResponse:
    """Every tag with its usage count and size class, alphabetical."""
    entries = await service.build(session, include_unused=include_unused)
    return TagCloudResponse(data=entries, size_classes=service.size_classes)


@router.get(
    "/tags/{tag:path}/articles",
    response_model=ArticleListResponse,
    responses=LIST_ERRORS,
)
async def tagged_articles(
    tag: str = Path(..., description="Exact tag name"),
    session: AsyncSession = Depends(get_db),
    service: ArticleService = Depends(get_article_service),
    limit: int = Query(20, ge=1, le=100, description="Items per page"),
    offset: int = Query(0, ge=0, description="Pagination offset"),
) -> ArticleListResponse:
    """
    Articles carrying *tag*, newest first.

    An unknown tag is not an error: the list is simply empty.
    """
    articles, total = await service.list_articles(
        session, tag=tag, skip=offset, limit=limit
    )
    if total == 0:
        logger.debug("No articles tagged %r", tag)
    return ArticleListResponse(
        data=[service.to_schema(article) for article in articles],
        pagination=PaginationMeta(
            total=total,
            limit=limit,
            offset=offset,
            has_more=(offset + limit) < total,
        ),
    )
