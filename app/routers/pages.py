import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse

from app import dependencies as deps
from app import views
from app.schemas.pages import NotFound
from app.services.pages_service import PagesService
from app.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def list_page(
    service: PagesService = Depends(deps.get_pages_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    """Render every published post, newest first."""
    try:
        page = await service.list_page()
        return HTMLResponse(
            views.render_list_page(page.posts, site_title=current_settings.SITE_TITLE)
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error rendering post list: {e}")
        raise HTTPException(status_code=500, detail="Failed to render posts")


@router.get("/post", response_class=HTMLResponse)
async def detail_page_without_slug(
    service: PagesService = Depends(deps.get_pages_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    return await _render_detail(None, service, current_settings)


@router.get("/post/{slug}", response_class=HTMLResponse)
async def detail_page(
    slug: str,
    service: PagesService = Depends(deps.get_pages_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    """Render a single post by slug, redirecting to /404 when it is missing."""
    return await _render_detail(slug, service, current_settings)


async def _render_detail(
    slug: str | None, service: PagesService, current_settings: Settings
):
    try:
        page = await service.detail_page(slug)
        if isinstance(page, NotFound):
            return RedirectResponse(page.redirect, status_code=307)
        return HTMLResponse(
            views.render_post_page(page.post, site_title=current_settings.SITE_TITLE)
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error rendering post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to render post")


@router.get("/404", response_class=HTMLResponse)
def not_found_page(current_settings: Settings = Depends(deps.get_settings)):
    return HTMLResponse(
        views.render_not_found(site_title=current_settings.SITE_TITLE),
        status_code=404,
    )
