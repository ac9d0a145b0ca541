import logging

from fastapi import FastAPI

from app.routers import pages, posts
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.SITE_TITLE, description="Blog rendered from Notion")

app.include_router(posts.router)
app.include_router(pages.router)


@app.get("/health")
async def health():
    return {"message": "Blog is running"}
