import logging
from typing import Optional, Union

from app.schemas.pages import DetailPage, ListPage, NotFound, StaticPaths

logger = logging.getLogger(__name__)


class PagesService:
    def __init__(self, repo):
        self.repo = repo

    async def list_page(self) -> ListPage:
        posts = await self.repo.list_posts()
        return ListPage(posts=posts)

    async def detail_page(self, slug: Optional[str]) -> Union[DetailPage, NotFound]:
        if not slug:
            return NotFound()

        posts = await self.repo.list_posts(slug)
        if not posts:
            return NotFound()
        if len(posts) > 1:
            # No dedup; whichever row Notion returned first wins
            logger.warning(
                f"{len(posts)} posts share slug '{slug}', using {posts[0].id}"
            )

        post = posts[0]
        contents = await self.repo.get_post_contents(post)
        return DetailPage(post=post.model_copy(update={"contents": contents}))

    async def static_paths(self) -> StaticPaths:
        posts = await self.repo.list_posts()
        return StaticPaths(paths=[post.slug for post in posts if post.slug])
