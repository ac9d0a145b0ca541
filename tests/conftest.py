import asyncio
from types import SimpleNamespace

from app.schemas.pages import DetailPage, ListPage, NotFound, StaticPaths


def make_row(
    row_id: str,
    title: str | None = None,
    slug: str | None = None,
    created: str | None = None,
    edited: str | None = None,
    published: bool = True,
) -> dict:
    """Build a Notion database row shaped like the query API returns it."""
    return {
        "object": "page",
        "id": row_id,
        "created_time": created,
        "last_edited_time": edited,
        "properties": {
            "name": {
                "type": "title",
                "title": [{"plain_text": title}] if title is not None else [],
            },
            "slug": {
                "type": "multi_select",
                "multi_select": [{"name": slug}] if slug is not None else [],
            },
            "published": {"type": "checkbox", "checkbox": published},
        },
    }


def make_block(block_type: str, text: str | None = None, **extra) -> dict:
    payload = {"rich_text": [{"plain_text": text}] if text is not None else []}
    payload.update(extra)
    return {"object": "block", "type": block_type, block_type: payload}


def _filter_clauses(query_filter: dict) -> list:
    if not query_filter:
        return []
    return query_filter.get("and", [query_filter])


def _row_matches(row: dict, clause: dict) -> bool:
    prop = (row.get("properties") or {}).get(clause.get("property"), {})
    if "checkbox" in clause:
        return prop.get("checkbox") == clause["checkbox"]["equals"]
    if "multi_select" in clause:
        names = [opt.get("name") for opt in prop.get("multi_select") or []]
        return clause["multi_select"]["contains"] in names
    return True


class FakeNotionClient:
    """
    Minimal in-memory stand-in for notion_client.AsyncClient.
    Records every call in order; `delays` slows down individual block fetches
    and `fail_on` makes them raise.
    """

    def __init__(self, rows, blocks_by_id=None, delays=None, fail_on=()):
        self.rows = rows
        self.blocks_by_id = blocks_by_id or {}
        self.delays = delays or {}
        self.fail_on = set(fail_on)
        self.calls = []
        self.databases = SimpleNamespace(query=self._query)
        self.blocks = SimpleNamespace(
            children=SimpleNamespace(list=self._list_children)
        )

    async def _query(self, **kwargs):
        self.calls.append(("databases.query", kwargs))
        clauses = _filter_clauses(kwargs.get("filter"))
        results = [
            row
            for row in self.rows
            if all(_row_matches(row, clause) for clause in clauses)
        ]
        return {"object": "list", "results": results, "has_more": False}

    async def _list_children(self, block_id):
        self.calls.append(("blocks.children.list", block_id))
        await asyncio.sleep(self.delays.get(block_id, 0))
        if block_id in self.fail_on:
            raise RuntimeError(f"upstream failure for {block_id}")
        return {
            "object": "list",
            "results": list(self.blocks_by_id.get(block_id, [])),
            "has_more": False,
        }

    def block_fetches(self):
        return [arg for name, arg in self.calls if name == "blocks.children.list"]


class FakeRepo:
    """
    Minimal repo stand-in used in page controller tests.
    """

    def __init__(self, posts, contents_by_id=None):
        self.posts = posts
        self.contents_by_id = contents_by_id or {}
        self.calls = []

    async def list_posts(self, slug=None):
        self.calls.append(("list_posts", slug))
        if slug is None:
            return list(self.posts)
        return [post for post in self.posts if post.slug == slug]

    async def get_post_contents(self, post):
        self.calls.append(("get_post_contents", post.id))
        return list(self.contents_by_id.get(post.id, []))


class FakePagesService:
    """
    Minimal page controller stand-in for router tests.
    """

    def __init__(self, posts=None, detail=None, paths=None):
        self.posts = posts or []
        self.detail = detail
        self.paths = paths or []
        self.detail_calls = []

    async def list_page(self):
        return ListPage(posts=self.posts)

    async def detail_page(self, slug):
        self.detail_calls.append(slug)
        if self.detail is None:
            return NotFound()
        return DetailPage(post=self.detail)

    async def static_paths(self):
        return StaticPaths(paths=self.paths)
