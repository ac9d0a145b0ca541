import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.schemas.blog import Post
from app.schemas.pages import NotFound, StaticPaths
from app.services.pages_service import PagesService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/posts", response_model=List[Post])
async def list_posts(service: PagesService = Depends(deps.get_pages_service)):
    """Get all published posts."""
    try:
        page = await service.list_page()
        return page.posts
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=Post)
async def get_post(
    slug: str,
    service: PagesService = Depends(deps.get_pages_service),
):
    """Get a single post by slug, with its full contents."""
    try:
        page = await service.detail_page(slug)
        if isinstance(page, NotFound):
            raise HTTPException(status_code=404, detail="Post not found")
        return page.post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/paths", response_model=StaticPaths)
async def get_paths(service: PagesService = Depends(deps.get_pages_service)):
    """Slugs that the static export prerenders."""
    try:
        return await service.static_paths()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing paths: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve paths")
