from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field

TEXT_CONTENT_TYPES = ("paragraph", "quote", "heading_2", "heading_3")


class TextContent(BaseModel):
    type: Literal["paragraph", "quote", "heading_2", "heading_3"]
    text: Optional[str] = None


class CodeContent(BaseModel):
    type: Literal["code"]
    text: Optional[str] = None
    language: Optional[str] = None


Content = Annotated[Union[TextContent, CodeContent], Field(discriminator="type")]


class Post(BaseModel):
    id: str
    title: Optional[str] = None
    slug: Optional[str] = None
    createdTs: Optional[str] = None
    lastEditedTs: Optional[str] = None
    contents: List[Content] = Field(default_factory=list)
