import datetime
import logging
from typing import List, Optional

import frontmatter

from blogindex.schemas.blog import Post
from blogindex.services.content_parser import ContentParser
from blogindex.settings import settings

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo, parser=None, prefix: str | None = None):
        self.repo = repo
        self.parser = parser or ContentParser(getattr(repo, "db", None))
        self.prefix = settings.POSTS_PREFIX if prefix is None else prefix

    def list_posts(self) -> List[Post]:
        posts = []
        for doc in self.repo.list_post_docs():
            slug = _slug_from_path(doc.get("path", doc.get("_id", "")), self.prefix)
            post_data = parse_post_data(
                doc, slug, parser=self.parser, prefix=self.prefix
            )
            if post_data:
                posts.append(Post(**post_data))
        logger.debug(f"Loaded {len(posts)} posts")
        return posts


def parse_post_data(doc: dict, slug: str, *, parser, prefix: str) -> Optional[dict]:
    """Parse frontmatter and return standardized post data"""
    try:
        markdown = parser.get_markdown_content(doc)
        if not markdown:
            logger.warning(f"No markdown content found for post {slug}")
            return None

        parsed = frontmatter.loads(markdown)
        metadata = parsed.metadata or {}

        return {
            "url": str(metadata.get("url") or f"/{prefix}{slug}"),
            "slug": slug,
            "title": _derive_title(metadata, slug),
            "description": _optional_str(metadata.get("description")),
            "tags": _normalize_tags(metadata.get("tags")),
            "added": _convert_date(metadata.get("added")),
        }
    except Exception as e:
        logger.warning(f"Failed to parse post {slug}: {e}")
        return None


def _slug_from_path(path: str, prefix: str) -> str:
    slug = path.removeprefix(prefix).removesuffix(".md")
    if slug == "index" or slug.endswith("/index"):
        slug = slug.removesuffix("index").rstrip("/")
    return slug


def _derive_title(metadata: dict, slug: str) -> str:
    if metadata.get("title"):
        return str(metadata["title"])
    clean_slug = slug.rsplit("/", 1)[-1]
    clean_slug = clean_slug.replace("-", " ").replace("_", " ")
    return clean_slug.title()


def _normalize_tags(value) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None and str(item)]
    return [str(value)]


def _optional_str(value) -> Optional[str]:
    return None if value is None else str(value)


def _convert_date(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if value is None:
        return None
    return str(value)
