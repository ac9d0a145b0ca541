from typing import Iterable, List, Optional

from app.schemas.blog import TEXT_CONTENT_TYPES, CodeContent, Content, TextContent


def normalize_block(block: dict) -> Optional[Content]:
    """Map one Notion block onto a Content value, or None for unsupported types."""
    if not isinstance(block, dict):
        return None
    block_type = block.get("type")
    if block_type in TEXT_CONTENT_TYPES:
        return TextContent(type=block_type, text=_first_plain_text(block, block_type))
    if block_type == "code":
        return CodeContent(
            type="code",
            text=_first_plain_text(block, "code"),
            language=_string_or_none(_payload(block, "code").get("language")),
        )
    return None


def normalize_blocks(blocks: Iterable[dict]) -> List[Content]:
    contents = []
    for block in blocks:
        content = normalize_block(block)
        if content is not None:
            contents.append(content)
    return contents


def _payload(block: dict, block_type: str) -> dict:
    payload = block.get(block_type)
    return payload if isinstance(payload, dict) else {}


def _first_plain_text(block: dict, block_type: str) -> Optional[str]:
    runs = _payload(block, block_type).get("rich_text")
    if not isinstance(runs, list) or not runs or not isinstance(runs[0], dict):
        return None
    return _string_or_none(runs[0].get("plain_text"))


def _string_or_none(value) -> Optional[str]:
    return value if isinstance(value, str) else None
