from typing import List

from pydantic import BaseModel, Field

from app.schemas.blog import Post


class ListPage(BaseModel):
    posts: List[Post] = Field(default_factory=list)


class DetailPage(BaseModel):
    post: Post


class NotFound(BaseModel):
    redirect: str = "/404"


class StaticPaths(BaseModel):
    paths: List[str] = Field(default_factory=list)
    # Slugs missing from `paths` are still rendered on first request
    fallback: str = "blocking"
