from typing import List, Optional

from app.schemas.blog import Content, Post


def assemble_post(row: dict, contents: List[Content]) -> Optional[Post]:
    """
    Build a Post from a Notion database row and its normalized contents.
    Rows without a properties mapping are rejected with None; any property
    of the wrong shape becomes None on the Post.
    """
    properties = row.get("properties")
    if not isinstance(properties, dict):
        return None

    return Post(
        id=row["id"],
        title=_extract_title(properties),
        slug=_extract_slug(properties),
        createdTs=_string_or_none(row.get("created_time")),
        lastEditedTs=_string_or_none(row.get("last_edited_time")),
        contents=list(contents),
    )


def _extract_title(properties: dict) -> Optional[str]:
    entry = _first_entry(properties.get("name"), "title")
    if entry is None:
        return None
    return _string_or_none(entry.get("plain_text"))


def _extract_slug(properties: dict) -> Optional[str]:
    option = _first_entry(properties.get("slug"), "multi_select")
    if option is None:
        return None
    return _string_or_none(option.get("name"))


def _first_entry(prop, kind: str) -> Optional[dict]:
    """First entry of a list-valued property of the given kind, else None."""
    if not isinstance(prop, dict) or prop.get("type") != kind:
        return None
    entries = prop.get(kind)
    if not isinstance(entries, list) or not entries:
        return None
    entry = entries[0]
    return entry if isinstance(entry, dict) else None


def _string_or_none(value) -> Optional[str]:
    return value if isinstance(value, str) else None
