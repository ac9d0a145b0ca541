from notion_client import AsyncClient

from app.settings import settings


async def get_notion():
    """
    Open a Notion API client for the duration of one request.
    Called at runtime to avoid import-time clients.
    """
    client = AsyncClient(auth=settings.NOTION_TOKEN)
    try:
        yield client
    finally:
        await client.aclose()
