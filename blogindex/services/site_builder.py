import json
import logging
import urllib.parse
from pathlib import Path
from typing import List

from blogindex.schemas.blog import TagSummary
from blogindex.services.tag_index import TagIndexService

logger = logging.getLogger(__name__)


def write_tag_pages(service: TagIndexService, output_dir: str | Path) -> List[Path]:
    """
    Write the tag listing to ``output_dir/tags.json`` and one JSON route file
    per tag into ``output_dir/tags``. Pages left over from an earlier build are
    removed. Returns the written paths, listing first.
    """
    output_dir = Path(output_dir)
    tags_dir = output_dir / "tags"
    tags_dir.mkdir(parents=True, exist_ok=True)

    pages = service.tag_pages()
    summaries = [
        TagSummary(tag=page.tag, path=page.path, count=len(page.posts)).model_dump()
        for page in pages
    ]

    for stale in tags_dir.glob("*.json"):
        stale.unlink()

    index_path = output_dir / "tags.json"
    index_path.write_text(json.dumps(summaries, indent=2), encoding="utf-8")
    written = [index_path]

    for page in pages:
        page_path = tags_dir / f"{urllib.parse.quote(page.tag, safe='')}.json"
        page_path.write_text(page.model_dump_json(indent=2), encoding="utf-8")
        logger.debug(f"Wrote {page_path} ({len(page.posts)} posts)")
        written.append(page_path)

    logger.info(f"Wrote {len(pages)} tag pages to {tags_dir}")
    return written
