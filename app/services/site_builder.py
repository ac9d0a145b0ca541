import logging
from pathlib import Path
from typing import List, Optional

from app import views
from app.schemas.pages import NotFound

logger = logging.getLogger(__name__)


async def build_site(
    service, out_dir: Path, site_title: Optional[str] = None
) -> List[Path]:
    """
    Prerender the list page, one page per static path and the 404 page
    into out_dir. Returns the files written, in write order.
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []

    list_page = await service.list_page()
    written.append(
        _write(
            out_dir / "index.html",
            views.render_list_page(list_page.posts, site_title=site_title),
        )
    )

    static_paths = await service.static_paths()
    for slug in static_paths.paths:
        target = _post_target(out_dir, slug)
        if target is None:
            logger.warning(f"Skipping post '{slug}', slug is not a single path segment")
            continue
        page = await service.detail_page(slug)
        if isinstance(page, NotFound):
            logger.warning(f"Skipping post '{slug}', it disappeared during the build")
            continue
        html = views.render_post_page(page.post, site_title=site_title)
        written.append(_write(target, html))

    written.append(
        _write(out_dir / "404.html", views.render_not_found(site_title=site_title))
    )
    logger.info(f"Wrote {len(written)} pages to {out_dir}")
    return written


def _post_target(out_dir: Path, slug: str) -> Optional[Path]:
    """out_dir/post/<slug>/index.html, or None when slug would leave that layout."""
    if "/" in slug or "\\" in slug:
        return None
    post_root = (out_dir / "post").resolve()
    target = out_dir / "post" / slug / "index.html"
    if target.resolve().parent.parent != post_root:
        return None
    return target


def _write(path: Path, html: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
    logger.debug(f"Wrote {path}")
    return path
