import asyncio
import logging
import sys

from notion_client import AsyncClient

from app.repos.posts_repo import NotionPostsRepo
from app.services.pages_service import PagesService
from app.services.site_builder import build_site
from app.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


async def main():
    async with AsyncClient(auth=settings.NOTION_TOKEN) as client:
        repo = NotionPostsRepo(
            client,
            settings.NOTION_DATABASE_ID,
            slug_requires_published=settings.SLUG_QUERY_REQUIRES_PUBLISHED,
        )
        await build_site(
            PagesService(repo), settings.build_path, site_title=settings.SITE_TITLE
        )


if __name__ == "__main__":
    try:
        asyncio.run(main())
        logger.info("Build completed successfully.")
    except Exception as e:
        logger.error(f"Build failed: {e}", exc_info=True)
        sys.exit(1)
