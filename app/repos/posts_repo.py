import asyncio
import logging
from typing import List, Optional

from app.schemas.blog import Content, Post
from app.services.content_normalizer import normalize_blocks
from app.services.post_assembler import assemble_post

logger = logging.getLogger(__name__)

PUBLISHED_FILTER = {"property": "published", "checkbox": {"equals": True}}
NEWEST_FIRST = [{"timestamp": "created_time", "direction": "descending"}]


class NotionPostsRepo:
    def __init__(
        self,
        client,
        database_id: Optional[str],
        slug_requires_published: bool = False,
    ):
        self.client = client
        self.database_id = database_id or ""
        self.slug_requires_published = slug_requires_published
        if not self.database_id:
            logger.warning("NOTION_DATABASE_ID is empty, queries will use ''")

    async def list_posts(self, slug: Optional[str] = None) -> List[Post]:
        rows = await self._query_rows(slug)
        block_lists = await asyncio.gather(
            *(self._list_child_blocks(row.get("id")) for row in rows)
        )

        posts = []
        for row, blocks in zip(rows, block_lists):
            post = assemble_post(row, normalize_blocks(blocks))
            if post:
                posts.append(post)
        logger.debug(f"Assembled {len(posts)} of {len(rows)} rows (slug={slug})")
        return posts

    async def get_post_contents(self, post: Post) -> List[Content]:
        blocks = await self._list_child_blocks(post.id)
        return normalize_blocks(blocks)

    async def _query_rows(self, slug: Optional[str]) -> List[dict]:
        response = await self.client.databases.query(**self._build_query(slug))
        return list(response.get("results", []))

    def _build_query(self, slug: Optional[str]) -> dict:
        if slug is None:
            return {
                "database_id": self.database_id,
                "filter": {"and": [PUBLISHED_FILTER]},
                "sorts": NEWEST_FIRST,
            }

        slug_filter = {"property": "slug", "multi_select": {"contains": slug}}
        if self.slug_requires_published:
            return {
                "database_id": self.database_id,
                "filter": {"and": [slug_filter, PUBLISHED_FILTER]},
            }
        return {"database_id": self.database_id, "filter": slug_filter}

    async def _list_child_blocks(self, block_id: str) -> List[dict]:
        # First page only
        response = await self.client.blocks.children.list(block_id=block_id)
        return list(response.get("results", []))
