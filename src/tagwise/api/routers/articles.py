"""Article list, create and detail endpoints.

``GET /articles`` is the index: all articles newest first, or only those
carrying ``?tag=`` when given. Creating an article resolves its
comma-separated ``all_tags`` into shared Tag rows in the same transaction.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from tagwise.api.deps import get_article_service, get_db
from tagwise.api.routers.responses import CREATE_ERRORS, GET_ITEM_ERRORS, LIST_ERRORS
from tagwise.api.schemas.articles import ArticleListResponse, ArticleResponse
from tagwise.api.schemas.responses import PaginationMeta
from tagwise.exceptions import NotFoundError
from tagwise.models.article import ArticleCreate
from tagwise.services.article_service import ArticleService

router = APIRouter()


@router.get("/articles", response_model=ArticleListResponse, responses=LIST_ERRORS)
async def list_articles(
    session: AsyncSession = Depends(get_db),
    service: ArticleService = Depends(get_article_service),
    tag: Optional[str] = Query(
        None, max_length=255, description="Only articles carrying this tag"
    ),
    limit: int = Query(20, ge=1, le=100, description="Items per page"),
    offset: int = Query(0, ge=0, description="Pagination offset"),
) -> ArticleListResponse:
    """List articles newest first, optionally filtered by tag name."""
    articles, total = await service.list_articles(
        session, tag=tag, skip=offset, limit=limit
    )
    return ArticleListResponse(
        data=[service.to_schema(article) for article in articles],
        pagination=PaginationMeta(
            total=total,
            limit=limit,
            offset=offset,
            has_more=(offset + limit) < total,
        ),
    )


@router.post(
    "/articles",
    response_model=ArticleResponse,
    status_code=status.HTTP_201_CREATED,
    responses=CREATE_ERRORS,
)
async def create_article(
    article_in: ArticleCreate,
    session: AsyncSession = Depends(get_db),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create an article and attach the tags named in ``all_tags``."""
    article = await service.create_article(session, article_in)
    return ArticleResponse(data=service.to_schema(article))


@router.get(
    "/articles/{article_id}",
    response_model=ArticleResponse,
    responses=GET_ITEM_ERRORS,
)
async def get_article(
    article_id: int = Path(..., ge=1, description="Article identifier"),
    session: AsyncSession = Depends(get_db),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Get one article with its tags."""
    article = await service.get_article(session, article_id)
    if article is None:
        raise NotFoundError(
            resource_type="Article",
            identifier=str(article_id),
            hint="List articles at /articles to find valid identifiers.",
        )
    return ArticleResponse(data=service.to_schema(article))
