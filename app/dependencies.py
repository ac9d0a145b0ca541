from fastapi import Depends

from app.db.notion import get_notion
from app.repos.posts_repo import NotionPostsRepo
from app.services.pages_service import PagesService
from app.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_repo(
    notion=Depends(get_notion),
    current_settings: Settings = Depends(get_settings),
):
    return NotionPostsRepo(
        notion,
        current_settings.NOTION_DATABASE_ID,
        slug_requires_published=current_settings.SLUG_QUERY_REQUIRES_PUBLISHED,
    )


def get_pages_service(repo=Depends(get_posts_repo)):
    return PagesService(repo=repo)
