from datetime import datetime
from pathlib import Path
from typing import List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.schemas.blog import Post
from app.settings import settings

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


def format_timestamp(value: Optional[str]) -> str:
    """Render an ISO-8601 timestamp for display; unparsable values pass through."""
    if not value:
        return ""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return parsed.strftime(TIMESTAMP_FORMAT)


def _jinja_env() -> Environment:
    template_dir = Path(__file__).parent / "templates"
    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml"]),
    )
    env.filters["format_timestamp"] = format_timestamp
    return env


env = _jinja_env()


def render_list_page(posts: List[Post], site_title: Optional[str] = None) -> str:
    return env.get_template("index.html").render(
        posts=posts, site_title=site_title or settings.SITE_TITLE
    )


def render_post_page(post: Post, site_title: Optional[str] = None) -> str:
    return env.get_template("post.html").render(
        post=post, site_title=site_title or settings.SITE_TITLE
    )


def render_not_found(site_title: Optional[str] = None) -> str:
    return env.get_template("404.html").render(
        site_title=site_title or settings.SITE_TITLE
    )
