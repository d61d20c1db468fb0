import datetime
import logging
import urllib.parse
from typing import Dict, Iterable, List, Optional

from blogindex.schemas.blog import Post, TagPage, TagSummary
from blogindex.settings import settings

logger = logging.getLogger(__name__)

# Posts with a missing or unparsable ``added`` sort after every dated post.
MIN_ADDED = datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)


def parse_added(value) -> datetime.datetime:
    """Turn an ``added`` frontmatter value into an aware datetime for ordering."""
    if value is None or value == "":
        return MIN_ADDED

    if isinstance(value, datetime.datetime):
        parsed = value
    elif isinstance(value, datetime.date):
        parsed = datetime.datetime.combine(value, datetime.time.min)
    else:
        text = str(value).strip()
        if text.endswith(("Z", "z")):
            text = f"{text[:-1]}+00:00"
        try:
            parsed = datetime.datetime.fromisoformat(text)
        except ValueError:
            logger.warning(f"Unparsable added date {value!r}, sorting it last")
            return MIN_ADDED

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed


def build_tag_index(posts: Iterable[Post], dedupe: bool = False) -> Dict[str, List[Post]]:
    """
    Bucket posts by every tag they carry, most recently added first.

    Ties keep the order posts were encountered in. With ``dedupe`` a tag
    repeated on the same post only adds that post once.
    """
    index: Dict[str, List[Post]] = {}
    added_at: Dict[int, datetime.datetime] = {}

    for post in posts:
        tags = post.tags or []
        if dedupe:
            tags = list(dict.fromkeys(tags))
        if not tags:
            continue
        added_at[id(post)] = parse_added(post.added)
        for tag in tags:
            index.setdefault(tag, []).append(post)

    for bucket in index.values():
        bucket.sort(key=lambda p: added_at[id(p)], reverse=True)
    return index


def tag_path(tag: str) -> str:
    return f"{settings.TAGS_ROUTE_PREFIX}{urllib.parse.quote(tag, safe='')}"


class TagIndexService:
    def __init__(self, posts_service, dedupe: bool | None = None):
        self.posts_service = posts_service
        self.dedupe = settings.DEDUPE_TAGS if dedupe is None else dedupe

    def build(self) -> Dict[str, List[Post]]:
        posts = self.posts_service.list_posts()
        index = build_tag_index(posts, dedupe=self.dedupe)
        logger.info(f"Built tag index: {len(index)} tags from {len(posts)} posts")
        return index

    def list_tags(self) -> List[TagSummary]:
        index = self.build()
        return [
            TagSummary(tag=tag, path=tag_path(tag), count=len(index[tag]))
            for tag in sorted(index)
        ]

    def get_tag(self, tag: str) -> Optional[TagPage]:
        posts = self.build().get(tag)
        if not posts:
            return None
        return TagPage(tag=tag, path=tag_path(tag), posts=posts)

    def tag_pages(self) -> List[TagPage]:
        index = self.build()
        return [
            TagPage(tag=tag, path=tag_path(tag), posts=index[tag]) for tag in sorted(index)
        ]
